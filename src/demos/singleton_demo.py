"""Singleton walkthrough: one frozen counter for the whole process."""

import logging
from typing import List

from src.core.exceptions import SingletonViolation
from src.core.patterns import SingletonCounter, get_instance, plain_counter

logger = logging.getLogger(__name__)


def run() -> List[str]:
    """Run the singleton demo and return its output lines."""
    lines: List[str] = []

    counter = get_instance()
    lines.append(f"Start count: {counter.get_count()}")
    lines.append(f"increment -> {counter.increment()}")
    lines.append(f"increment -> {counter.increment()}")
    lines.append(f"decrement -> {counter.decrement()}")

    try:
        SingletonCounter()
    except SingletonViolation as e:
        lines.append(f"Second construction failed: {e.message}")

    same = get_instance()
    lines.append(f"get_instance() returns the same handle: {same is counter}")
    lines.append(f"increment via second reference -> {same.increment()}")
    lines.append(f"count seen by first reference: {counter.get_count()}")

    # Frozen handle: the assignment is ignored
    counter.decrement = lambda: "decrement function called"
    lines.append(f"decrement after overwrite attempt -> {counter.decrement()}")

    alt = plain_counter()
    alt.increment = lambda: -1
    lines.append(f"plain frozen counter increment -> {alt.increment()}")

    logger.debug(f"Singleton demo produced {len(lines)} lines")
    return lines
