"""Freezable objects.

A frozen object keeps its own attribute set: later assignments and deletions
are ignored (and logged) instead of replacing what was there.
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class FrozenMixin:
    """Mixin that lets an object freeze its own attribute set.

    Usage:
        class Settings(FrozenMixin):
            def __init__(self):
                self.name = "demo"
                self.freeze()

        settings = Settings()
        settings.name = "other"   # ignored, logs a warning
        assert settings.name == "demo"

    Note:
        Only the object's own slots are frozen. Objects reachable from those
        slots (closures, lists, state cells) stay mutable.
    """

    _frozen: bool = False

    def freeze(self) -> "FrozenMixin":
        """Freeze this object and return it."""
        object.__setattr__(self, "_frozen", True)
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def __setattr__(self, name: str, value: Any) -> None:
        if self._frozen:
            logger.warning(
                f"Ignored assignment to '{name}' on frozen {type(self).__name__}"
            )
            return
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if self._frozen:
            logger.warning(
                f"Ignored deletion of '{name}' on frozen {type(self).__name__}"
            )
            return
        super().__delattr__(name)


class FrozenNamespace(FrozenMixin):
    """Plain attribute bag that is frozen as soon as it is built."""

    def __init__(self, **attributes: Any) -> None:
        for name, value in attributes.items():
            setattr(self, name, value)
        self.freeze()

    def __repr__(self) -> str:
        names = ", ".join(k for k in vars(self) if not k.startswith("_"))
        return f"FrozenNamespace({names})"
