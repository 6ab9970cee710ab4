"""Shared-behavior delegation.

A SharedBehavior is a named table of methods shared by reference across many
Instance values. Tables may point at a parent table, and member lookup walks
instance data first and then the chain of tables, one parent at a time.

Tables are kept in a BehaviorRegistry so that species can be found by name.
"""

import logging
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Union

from src.core.exceptions import PropertyNotFound

logger = logging.getLogger(__name__)

Behavior = Callable[..., Any]

_MISSING = object()

# Names taken by Instance itself; attribute access could never reach them
RESERVED_MEMBERS = frozenset({"shared", "own_data", "set_own", "has_own"})


def _check_member_name(name: str) -> None:
    if name in RESERVED_MEMBERS:
        raise ValueError(
            f"'{name}' is reserved by Instance; choose another member name"
        )


class SharedBehavior:
    """Method table shared by every instance of one species.

    Attributes:
        name: Species name (e.g. "Dog")
        methods: Mapping of method name to implementation. Each
            implementation receives the calling Instance as first argument.
        parent: Optional table consulted when a member is not found here.
    """

    def __init__(
        self,
        name: str,
        methods: Optional[Mapping[str, Behavior]] = None,
        parent: Optional["SharedBehavior"] = None,
    ):
        self.name = name
        self.methods: Dict[str, Behavior] = dict(methods or {})
        for member in self.methods:
            _check_member_name(member)
        self.parent: Optional[SharedBehavior] = None
        if parent is not None:
            self.set_parent(parent)

    def add_method(self, name: str, fn: Behavior) -> None:
        """Add or replace a method on this table.

        The change is visible immediately to every instance delegating to
        this table or to a descendant of it.

        Raises:
            ValueError: If `name` is one of RESERVED_MEMBERS.
        """
        _check_member_name(name)
        self.methods[name] = fn
        logger.debug(f"Added method '{name}' to species {self.name}")

    def set_parent(self, parent: Optional["SharedBehavior"]) -> None:
        """Point this table at a new parent.

        Raises:
            ValueError: If the new parent would create a delegation cycle.
        """
        node = parent
        while node is not None:
            if node is self:
                raise ValueError(
                    f"Cannot delegate {self.name} to {parent.name}: cycle detected"
                )
            node = node.parent
        self.parent = parent

    def chain(self) -> Iterator["SharedBehavior"]:
        """Yield this table and then each ancestor, nearest first."""
        node: Optional[SharedBehavior] = self
        while node is not None:
            yield node
            node = node.parent

    def find(self, name: str, default: Any = None) -> Any:
        """Find a member on this table or the nearest ancestor defining it."""
        for table in self.chain():
            if name in table.methods:
                return table.methods[name]
        return default

    def __contains__(self, name: str) -> bool:
        return self.find(name, _MISSING) is not _MISSING

    def __repr__(self) -> str:
        parent = self.parent.name if self.parent else None
        return f"SharedBehavior(name={self.name!r}, methods={sorted(self.methods)}, parent={parent!r})"


def delegation_chain(shared: SharedBehavior) -> List[str]:
    """Return species names from `shared` up to the root table."""
    return [table.name for table in shared.chain()]


class Instance:
    """Object holding only its own data plus a reference to shared behavior.

    Own data is looked up first; missing members are delegated to the shared
    table and its ancestors. Attribute access (`dog.bark()`) is a shortcut
    for `get_member` with the instance bound as first argument.

    The names in RESERVED_MEMBERS belong to Instance itself and are rejected
    as own data or table members.
    """

    __slots__ = ("_own", "_shared")

    def __init__(self, shared: Optional[SharedBehavior] = None, **own_data: Any):
        for member in own_data:
            _check_member_name(member)
        object.__setattr__(self, "_own", dict(own_data))
        object.__setattr__(self, "_shared", shared)

    @property
    def shared(self) -> Optional[SharedBehavior]:
        return self._shared

    @property
    def own_data(self) -> Dict[str, Any]:
        """Copy of this instance's own data."""
        return dict(self._own)

    def set_own(self, name: str, value: Any) -> None:
        """Set a value in this instance's own data.

        Raises:
            ValueError: If `name` is one of RESERVED_MEMBERS.
        """
        _check_member_name(name)
        self._own[name] = value

    def has_own(self, name: str) -> bool:
        return name in self._own

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        member = get_member(self, name)
        if name not in self._own and callable(member):
            return lambda *args, **kwargs: member(self, *args, **kwargs)
        return member

    def __setattr__(self, name: str, value: Any) -> None:
        self.set_own(name, value)

    def __repr__(self) -> str:
        species = self._shared.name if self._shared else None
        return f"Instance(species={species!r}, own={self._own!r})"


class BehaviorRegistry:
    """Arena of shared behavior tables, addressable by species name."""

    def __init__(self):
        self._species: Dict[str, SharedBehavior] = {}

    def create_species(
        self,
        name: str,
        shared_methods: Optional[Mapping[str, Behavior]] = None,
        parent: Optional[Union[SharedBehavior, str]] = None,
    ) -> SharedBehavior:
        """Create and register a species table.

        Registering an existing name replaces the registry entry. Instances
        already bound to the old table keep it.
        """
        if isinstance(parent, str):
            parent = self.get(parent)
        shared = SharedBehavior(name, shared_methods, parent)
        if name in self._species:
            logger.debug(f"Replacing species {name} in registry")
        self._species[name] = shared
        logger.debug(
            f"Created species {name} with methods {sorted(shared.methods)}"
            + (f" extending {parent.name}" if parent else "")
        )
        return shared

    def get(self, name: str) -> SharedBehavior:
        """Get a registered species table.

        Raises:
            KeyError: If no species with this name is registered.
        """
        if name not in self._species:
            raise KeyError(f"Unknown species: {name}")
        return self._species[name]

    def names(self) -> List[str]:
        return list(self._species)

    def clear(self) -> None:
        self._species.clear()

    def __contains__(self, name: str) -> bool:
        return name in self._species

    def __len__(self) -> int:
        return len(self._species)


# Module-level default registry
_registry = BehaviorRegistry()


def get_registry() -> BehaviorRegistry:
    """Get the default species registry."""
    return _registry


def create_species(
    name: str,
    shared_methods: Optional[Mapping[str, Behavior]] = None,
    parent: Optional[Union[SharedBehavior, str]] = None,
) -> SharedBehavior:
    """Create a species table in the default registry."""
    return _registry.create_species(name, shared_methods, parent)


def instantiate(shared: SharedBehavior, **own_data: Any) -> Instance:
    """Create an instance delegating to `shared`."""
    return Instance(shared, **own_data)


def create_from(shared: SharedBehavior) -> Instance:
    """Create an instance with no own data whose only source of members is `shared`."""
    return Instance(shared)


def add_method(shared: SharedBehavior, name: str, fn: Behavior) -> None:
    """Add a method to `shared`, visible to all existing instances."""
    shared.add_method(name, fn)


def get_member(instance: Instance, name: str) -> Any:
    """Resolve a member by own data first, then the delegation chain.

    Raises:
        PropertyNotFound: If no table in the chain defines the member.
    """
    if instance.has_own(name):
        return instance._own[name]

    shared = instance.shared
    if shared is not None:
        member = shared.find(name, _MISSING)
        if member is not _MISSING:
            return member

    chain = delegation_chain(shared) if shared is not None else []
    raise PropertyNotFound(name, chain)


def invoke(instance: Instance, method_name: str, *args: Any, **kwargs: Any) -> Any:
    """Call a member on `instance`.

    Methods from a shared table receive the instance as first argument.
    Callables stored in own data are called as they are.

    Raises:
        PropertyNotFound: If the member is not defined anywhere.
        TypeError: If the resolved member is not callable.
    """
    member = get_member(instance, method_name)
    if not callable(member):
        raise TypeError(f"'{method_name}' is not callable on {instance!r}")
    if instance.has_own(method_name):
        return member(*args, **kwargs)
    return member(instance, *args, **kwargs)
