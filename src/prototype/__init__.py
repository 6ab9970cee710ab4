"""Prototype pattern: shared behavior tables and delegating instances."""

from .behavior import (
    BehaviorRegistry,
    Instance,
    RESERVED_MEMBERS,
    SharedBehavior,
    add_method,
    create_from,
    create_species,
    delegation_chain,
    get_member,
    get_registry,
    instantiate,
    invoke,
)

__all__ = [
    "BehaviorRegistry",
    "Instance",
    "RESERVED_MEMBERS",
    "SharedBehavior",
    "add_method",
    "create_from",
    "create_species",
    "delegation_chain",
    "get_member",
    "get_registry",
    "instantiate",
    "invoke",
]
