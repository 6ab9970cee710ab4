"""Thread-safe singleton counter.

This module provides the process-wide counter handle. The handle is created
once (lazily, with double-checked locking), frozen after construction, and
exposed through `get_instance()`. Constructing a second handle directly
raises SingletonViolation.

The counter value itself lives in a separate CounterState cell. Freezing the
handle only fixes the handle's own attributes; the cell keeps counting.
"""

import logging
import threading
from typing import ClassVar, Optional

from src.config import get_config
from src.core.exceptions import SingletonViolation

from .frozen import FrozenMixin, FrozenNamespace

logger = logging.getLogger(__name__)


class CounterState:
    """Mutable counter cell guarded by a lock.

    This is the only concurrency-sensitive state in the package: every
    read-modify-write goes through `add()` under `_lock`.
    """

    def __init__(self, start: int = 0):
        self._value = start
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        return self._value

    def add(self, delta: int) -> int:
        """Add delta to the counter and return the new value."""
        with self._lock:
            self._value += delta
            return self._value


class SingletonCounter(FrozenMixin):
    """Process-wide counter that can only be constructed once.

    Usage:
        counter = SingletonCounter.get_instance()
        counter.increment()

        SingletonCounter()  # raises SingletonViolation

    Note:
        Use `get_instance()` rather than calling the class. The first direct
        construction is allowed and registers the handle, every later one
        fails.
    """

    _instance: ClassVar[Optional["SingletonCounter"]] = None
    _lock: ClassVar[threading.RLock] = threading.RLock()

    def __init__(self) -> None:
        cls = type(self)
        with cls._lock:
            if cls._instance is not None:
                logger.error(f"Rejected second construction of {cls.__name__}")
                raise SingletonViolation(cls.__name__)
            self._state = CounterState(get_config().counter_start)
            # Publish only a frozen handle
            self.freeze()
            cls._instance = self
        logger.debug(f"{cls.__name__} created with count={self._state.value}")

    def get_count(self) -> int:
        """Return the current count."""
        return self._state.value

    def increment(self) -> int:
        """Increment the shared counter and return the new value."""
        return self._state.add(1)

    def decrement(self) -> int:
        """Decrement the shared counter and return the new value."""
        return self._state.add(-1)

    @classmethod
    def get_instance(cls) -> "SingletonCounter":
        """Get the singleton handle, creating it on first call.

        Returns:
            The frozen singleton handle.
        """
        if cls._instance is None:
            with cls._lock:
                # Double-check after acquiring lock
                if cls._instance is None:
                    cls()
        return cls._instance  # type: ignore

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the handle and its counter state (for testing).

        Warning:
            Handles obtained before the reset keep pointing at the old
            state; only new `get_instance()` calls see the fresh counter.
        """
        with cls._lock:
            cls._instance = None


def get_instance() -> SingletonCounter:
    """Get the process-wide counter handle."""
    return SingletonCounter.get_instance()


def reset_instance() -> None:
    """Reset the process-wide counter handle (for testing)."""
    SingletonCounter.reset_instance()


def plain_counter(start: int = 0) -> FrozenNamespace:
    """Build the "just use a frozen object" alternative to SingletonCounter.

    Returns a frozen namespace whose functions close over their own
    CounterState. Sharing it module-wide gives the same single-state
    behavior without any construction guard.

    Args:
        start: Initial counter value.

    Returns:
        A FrozenNamespace with increment, decrement and get_count.
    """
    state = CounterState(start)

    def increment() -> int:
        return state.add(1)

    def decrement() -> int:
        return state.add(-1)

    def get_count() -> int:
        return state.value

    return FrozenNamespace(
        increment=increment,
        decrement=decrement,
        get_count=get_count,
    )
