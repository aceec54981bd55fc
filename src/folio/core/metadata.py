"""Layered, read-only metadata scopes."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterator, Optional

from pydantic_core import core_schema


class Metadata(Mapping):
    """Ordered key/value scope with read fallback to a parent scope.

    Local entries are copied when the scope is built and are never mutated
    afterwards. Lookups check the local entries first, then the parent. The
    parent can be another ``Metadata`` or any mapping (the engine's global
    metadata dictionary); it is only ever read.

    Example::

        root = Metadata({"Title": "Home"})
        child = root.with_overrides({"Title": "About", "Draft": True})
        child["Title"]   # "About"
        root["Title"]    # "Home"
    """

    __slots__ = ("_items", "_parent")

    def __init__(
        self,
        items: Optional[Mapping] = None,
        parent: Optional[Mapping] = None,
    ) -> None:
        """Initialize the scope.

        Args:
            items: Local entries, copied at construction time
            parent: Optional scope consulted for keys missing locally
        """
        self._items = MappingProxyType(dict(items or {}))
        self._parent = parent

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        # Validated by type only, never copied or coerced
        return core_schema.is_instance_schema(cls)

    @property
    def parent(self) -> Optional[Mapping]:
        """Scope consulted for keys that are not set locally."""
        return self._parent

    @property
    def local(self) -> Mapping:
        """Read-only view of the entries set on this scope only."""
        return self._items

    def __getitem__(self, key: str) -> Any:
        if key in self._items:
            return self._items[key]
        if self._parent is not None:
            return self._parent[key]
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if key in self._items:
            return True
        return self._parent is not None and key in self._parent

    def __iter__(self) -> Iterator[str]:
        yield from self._items
        if self._parent is not None:
            for key in self._parent:
                if key not in self._items:
                    yield key

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __hash__(self) -> int:
        # Equal scopes expose the same keys; values may be unhashable
        return hash(frozenset(self))

    def __repr__(self) -> str:
        return f"Metadata({dict(self)!r})"

    def with_overrides(self, overrides: Optional[Mapping] = None) -> "Metadata":
        """Create a child scope layering ``overrides`` in front of this one.

        Args:
            overrides: Entries that shadow this scope's values

        Returns:
            New metadata whose parent is this scope
        """
        return Metadata(overrides, parent=self)
