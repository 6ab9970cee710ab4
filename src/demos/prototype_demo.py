"""Prototype walkthrough: dogs sharing one behavior table."""

import logging
from typing import List

from src.constants import BARK_MESSAGE, FLY_MESSAGE, PLAY_MESSAGE
from src.core.exceptions import PropertyNotFound
from src.prototype import (
    BehaviorRegistry,
    add_method,
    create_from,
    delegation_chain,
    instantiate,
    invoke,
)

logger = logging.getLogger(__name__)


def run() -> List[str]:
    """Run the prototype demo and return its output lines."""
    registry = BehaviorRegistry()
    lines: List[str] = []

    dog = registry.create_species("Dog", {"bark": lambda self: BARK_MESSAGE})
    daisy = instantiate(dog, name="Daisy")
    max_ = instantiate(dog, name="Max")
    spot = instantiate(dog, name="Spot")

    lines.append(f"Dog shared methods: {sorted(dog.methods)}")
    lines.append(f"{daisy.name} says {invoke(daisy, 'bark')}")
    lines.append(f"Daisy, Max and Spot share one table: {daisy.shared is max_.shared is spot.shared}")

    # Methods added after the instances exist are visible to all of them
    add_method(dog, "play", lambda self: PLAY_MESSAGE)
    lines.append(f"{max_.name}: {max_.play()}")
    lines.append(f"{spot.name}: {invoke(spot, 'play')}")

    super_dog = registry.create_species(
        "SuperDog", {"fly": lambda self: FLY_MESSAGE}, parent=dog
    )
    hero = instantiate(super_dog, name="Daisy")
    lines.append(f"SuperDog chain: {' -> '.join(delegation_chain(super_dog))}")
    lines.append(f"{hero.name} (SuperDog) barks: {hero.bark()}")
    lines.append(f"{hero.name} (SuperDog) flies: {hero.fly()}")

    try:
        invoke(daisy, "fly")
    except PropertyNotFound as e:
        lines.append(f"Plain Dog cannot fly: {e.message}")

    pet = create_from(dog)
    lines.append(f"Pet with no own data barks: {pet.bark()}")

    logger.debug(f"Prototype demo produced {len(lines)} lines")
    return lines
