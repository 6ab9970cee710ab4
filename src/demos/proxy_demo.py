"""Proxy walkthrough: logging and validating access to a person record."""

import logging
from typing import Any, Dict, List

from src.proxy import (
    logging_policy,
    passthrough_policy,
    person_validation_policy,
    wrap,
)

logger = logging.getLogger(__name__)


def make_person() -> Dict[str, Any]:
    return {"name": "John Doe", "age": 42, "nationality": "American"}


def run() -> List[str]:
    """Run the proxy demo and return its output lines."""
    lines: List[str] = []
    person = make_person()

    plain = wrap(person, passthrough_policy())
    lines.append(f"Passthrough read of name: {plain.get('name')}")

    logged = wrap(person, logging_policy())
    lines.append(logged.get("name").message)
    lines.append(logged.set("age", 33).message)

    validated = wrap(person, person_validation_policy())
    lines.append(validated.get("nonExistentProperty").message)
    lines.append(validated.set("age", "23").message)
    lines.append(validated.set("name", "Thanos").message)
    lines.append(f"Final person: {person}")

    logger.debug(f"Proxy demo produced {len(lines)} lines")
    return lines
