"""Demo registry.

Each demo exposes `run() -> list[str]`; `run_all` collects their lines by name.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional

from . import prototype_demo, proxy_demo, singleton_demo

logger = logging.getLogger(__name__)

DEMOS: Dict[str, Callable[[], List[str]]] = {
    "prototype": prototype_demo.run,
    "singleton": singleton_demo.run,
    "proxy": proxy_demo.run,
}


def run_all(names: Optional[Iterable[str]] = None) -> Dict[str, List[str]]:
    """Run the selected demos (all by default) in registry order.

    Raises:
        ValueError: If a requested demo name is unknown.
    """
    selected = list(DEMOS) if names is None else list(names)
    unknown = [name for name in selected if name not in DEMOS]
    if unknown:
        raise ValueError(f"Unknown demo(s): {', '.join(unknown)}. Available: {', '.join(DEMOS)}")

    results: Dict[str, List[str]] = {}
    for name in selected:
        logger.info(f"Running {name} demo")
        results[name] = DEMOS[name]()
    return results


__all__ = ["DEMOS", "run_all"]
