"""Mapping that creates a fresh default value the first time a key is read."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class DefaultMap(Generic[K, V]):
    """Key -> value mapping with a per-instance default factory.

    ``get(key)`` stores and returns ``factory()`` on first access, then the
    same object on every later access, so containers can be appended to in
    place.  Unlike :class:`collections.defaultdict`, membership tests and
    :meth:`peek` never insert.
    """

    __slots__ = ("_data", "_factory")

    def __init__(self, factory: Callable[[], V]) -> None:
        self._factory = factory
        self._data: dict[K, V] = {}

    def get(self, key: K) -> V:
        try:
            return self._data[key]
        except KeyError:
            value = self._data[key] = self._factory()
            return value

    __getitem__ = get

    def peek(self, key: K) -> V | None:
        """Return the stored value without creating one."""
        return self._data.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


def list_map() -> DefaultMap[K, list[V]]:
    """A :class:`DefaultMap` whose values default to empty lists."""
    return DefaultMap(list)
