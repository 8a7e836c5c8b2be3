"""Dense component storage keyed by identifiers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from arbordesk.ids import Id

_LOG = logging.getLogger(__name__)

T = TypeVar("T")


def _fresh(item: T | None, default: Callable[[], T] | None) -> T:
    if item is not None:
        return item
    if default is None:
        raise ValueError("No item given and no default factory configured")
    return default()


class Entity:
    """A list of live identifiers with a never-reused counter."""

    def __init__(self) -> None:
        self.ids: list[Id] = []
        self._next = 0

    def add(self) -> Id:
        result = Id(self._next)
        self._next += 1
        self.ids.append(result)
        return result

    def remove(self, ident: Id) -> None:
        self.ids = [i for i in self.ids if i != ident]

    def clear(self) -> None:
        self.ids.clear()

    def __iter__(self) -> Iterator[Id]:
        return iter(self.ids)

    def __len__(self) -> int:
        return len(self.ids)

    def __contains__(self, ident: object) -> bool:
        return ident in self.ids


class UniqueComponent(Generic[T]):
    """At most one item per parent identifier, stored densely."""

    def __init__(self, default: Callable[[], T] | None = None) -> None:
        self._default = default
        self.items: list[T] = []
        self.parents: dict[Id, int] = {}
        self.owners: list[Id] = []

    def add(self, parent: Id, item: T | None = None) -> None:
        if parent in self.parents:
            raise ValueError(f"Parent {parent} already has a component")
        self.parents[parent] = len(self.items)
        self.items.append(_fresh(item, self._default))
        self.owners.append(parent)
        self.check()

    def remove(self, parent: Id) -> None:
        idx = self.parents[parent]
        last = len(self.items) - 1
        moved = self.owners[last]
        _LOG.debug("Deleting %s at %d, moving %s", parent, idx, moved)
        self.items[idx] = self.items[last]
        self.owners[idx] = moved
        self.items.pop()
        self.owners.pop()
        self.parents[moved] = idx
        del self.parents[parent]
        self.check()

    def check(self) -> None:
        """Raise RuntimeError if the internal mappings disagree."""
        if len(self.items) != len(self.parents):
            raise RuntimeError(f"Size mismatch parents {len(self.items)} ./. {len(self.parents)}")
        if len(self.items) != len(self.owners):
            raise RuntimeError(f"Size mismatch indices {len(self.items)} ./. {len(self.owners)}")
        for idx, owner in enumerate(self.owners):
            if self.parents.get(owner) != idx:
                raise RuntimeError(f"Round trip broken {idx}")

    def clear(self) -> None:
        self.items.clear()
        self.parents.clear()
        self.owners.clear()

    def __getitem__(self, parent: Id) -> T:
        return self.items[self.parents[parent]]

    def __setitem__(self, parent: Id, item: T) -> None:
        self.items[self.parents[parent]] = item

    def __contains__(self, parent: object) -> bool:
        return parent in self.parents

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Id]:
        return iter(list(self.owners))


class ManyComponent(Generic[T]):
    """Any number of items per parent, each with its own identifier."""

    def __init__(self, default: Callable[[], T] | None = None) -> None:
        self._default = default
        self._next = 0
        self.items: list[T] = []
        self.idents: list[Id] = []
        self.owners: list[Id] = []
        self.lookup: dict[Id, int] = {}
        self._children: dict[Id, list[Id]] = {}

    def add(self, parent: Id, item: T | None = None) -> Id:
        value = _fresh(item, self._default)
        result = Id(self._next)
        self._next += 1
        self.lookup[result] = len(self.items)
        self._children.setdefault(parent, []).append(result)
        self.owners.append(parent)
        self.idents.append(result)
        self.items.append(value)
        return result

    def children(self, parent: Id) -> list[Id]:
        return list(self._children.get(parent, ()))

    def remove(self, ident: Id) -> None:
        idx = self.lookup[ident]
        last = len(self.items) - 1
        parent = self.owners[idx]
        self.items[idx] = self.items[last]
        self.items.pop()
        self._children[parent] = [c for c in self._children[parent] if c != ident]
        self.idents[idx] = self.idents[last]
        self.owners[idx] = self.owners[last]
        self.lookup[self.idents[last]] = idx
        self.idents.pop()
        self.owners.pop()
        del self.lookup[ident]

    def remove_children(self, parent: Id) -> None:
        for child in self.children(parent):
            self.remove(child)

    def clear(self) -> None:
        self.items.clear()
        self.idents.clear()
        self.owners.clear()
        self.lookup.clear()
        self._children.clear()

    def __getitem__(self, ident: Id) -> T:
        return self.items[self.lookup[ident]]

    def __setitem__(self, ident: Id, item: T) -> None:
        self.items[self.lookup[ident]] = item

    def __contains__(self, ident: object) -> bool:
        return ident in self.lookup

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Id]:
        return iter(list(self.idents))


Key = tuple[Id, Id]


class JoinComponent(Generic[T]):
    """One item per pair of identifiers."""

    def __init__(self, default: Callable[[], T] | None = None) -> None:
        self._default = default
        self.items: list[T] = []
        self.owners: list[Key] = []
        self.parents: dict[Key, int] = {}

    def add(self, first: Id, second: Id, item: T | None = None) -> None:
        key = (first, second)
        if key in self.parents:
            raise ValueError(f"Pair {key} already has a component")
        self.parents[key] = len(self.items)
        self.owners.append(key)
        self.items.append(_fresh(item, self._default))

    def remove(self, key: Key) -> None:
        idx = self.parents[key]
        last = len(self.items) - 1
        moved = self.owners[last]
        self.items[idx] = self.items[last]
        self.owners[idx] = moved
        self.items.pop()
        self.owners.pop()
        self.parents[moved] = idx
        del self.parents[key]

    def remove_by_first(self, ident: Id) -> None:
        for key in [k for k in self.parents if k[0] == ident]:
            self.remove(key)

    def remove_by_second(self, ident: Id) -> None:
        for key in [k for k in self.parents if k[1] == ident]:
            self.remove(key)

    def clear(self) -> None:
        self.items.clear()
        self.owners.clear()
        self.parents.clear()

    def __getitem__(self, key: Key) -> T:
        return self.items[self.parents[key]]

    def __setitem__(self, key: Key, item: T) -> None:
        self.items[self.parents[key]] = item

    def __contains__(self, key: object) -> bool:
        return key in self.parents

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Key]:
        return iter(list(self.owners))