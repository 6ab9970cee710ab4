"""Core patterns module.

Provides the freezing helpers and the singleton counter.
"""

from .frozen import FrozenMixin, FrozenNamespace
from .singleton import (
    CounterState,
    SingletonCounter,
    get_instance,
    plain_counter,
    reset_instance,
)

__all__ = [
    "FrozenMixin",
    "FrozenNamespace",
    "CounterState",
    "SingletonCounter",
    "get_instance",
    "plain_counter",
    "reset_instance",
]
