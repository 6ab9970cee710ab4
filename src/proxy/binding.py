"""Property interception over a key/value target.

A ProxyBinding mediates every read and write on a target mapping through an
InterceptionPolicy. A policy has two optional hooks:

    on_get(target, key) -> Any
    on_set(target, key, value) -> Any

When a hook is missing the binding falls through to the target directly.
The binding never copies the target; the caller keeps ownership of it.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, MutableMapping, Optional

logger = logging.getLogger(__name__)

GetHook = Callable[[MutableMapping[str, Any], str], Any]
SetHook = Callable[[MutableMapping[str, Any], str, Any], Any]


@dataclass(frozen=True)
class InterceptionPolicy:
    """Pair of optional read/write interceptors.

    Attributes:
        on_get: Called instead of reading the target. Its return value is
            handed back to the caller.
        on_set: Called instead of writing the target. It decides whether
            the write is applied.
        name: Label used in logs and reprs.
    """
    on_get: Optional[GetHook] = None
    on_set: Optional[SetHook] = None
    name: str = "policy"


class ProxyBinding:
    """Stand-in for a target mapping that routes access through a policy."""

    def __init__(
        self,
        target: MutableMapping[str, Any],
        policy: Optional[InterceptionPolicy] = None,
    ):
        self._target = target
        self._policy = policy or InterceptionPolicy(name="passthrough")

    @property
    def target(self) -> MutableMapping[str, Any]:
        return self._target

    @property
    def policy(self) -> InterceptionPolicy:
        return self._policy

    def get(self, key: str) -> Any:
        """Read `key` through the policy.

        Returns:
            The on_get result when the policy intercepts reads, otherwise
            the raw target value.

        Raises:
            KeyError: If there is no on_get hook and the key is missing.
        """
        if self._policy.on_get is not None:
            return self._policy.on_get(self._target, key)
        return self._target[key]

    def set(self, key: str, value: Any) -> Any:
        """Write `key` through the policy.

        Returns:
            The on_set result when the policy intercepts writes, otherwise
            None after writing the target unconditionally.
        """
        if self._policy.on_set is not None:
            return self._policy.on_set(self._target, key, value)
        self._target[key] = value
        return None

    def __repr__(self) -> str:
        return f"ProxyBinding(policy={self._policy.name!r}, keys={list(self._target)})"


def wrap(
    target: MutableMapping[str, Any],
    policy: Optional[InterceptionPolicy] = None,
) -> ProxyBinding:
    """Bind `target` to `policy`. No policy means plain passthrough."""
    binding = ProxyBinding(target, policy)
    logger.debug(f"Wrapped target with {binding.policy.name} policy")
    return binding
