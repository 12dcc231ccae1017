"""
Equality-keyed stores of (key, value) pairs.

A store keeps at most one entry per key and remembers the order in which keys
were first inserted. ``AssociationList`` only needs ``==`` on its keys, so it
accepts unhashable outcomes such as lists or floats produced by closures.
``HashedStore`` is an opt-in for hashable keys with the same interface and
constant-time lookup.
"""

from __future__ import annotations

from typing import (
    Callable,
    Dict,
    Generic,
    Iterator,
    List,
    Optional,
    Protocol,
    Tuple,
    TypeVar,
)

K = TypeVar("K")
V = TypeVar("V")


class KeyedStore(Protocol[K, V]):
    def find(self, key: K) -> Optional[int]: ...

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]: ...

    def insert(self, key: K, value: V) -> Optional[V]: ...

    def merge(self, key: K, value: V, combine: Callable[[V, V], V]) -> V: ...

    def items(self) -> List[Tuple[K, V]]: ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[Tuple[K, V]]: ...


class AssociationList(Generic[K, V]):
    """
    Ordered list of (key, value) pairs searched by equality.

    Every operation is a linear scan.
    """

    def __init__(self) -> None:
        self._pairs: List[Tuple[K, V]] = []

    def find(self, key: K) -> Optional[int]:
        """Return the position of ``key``, or None when absent."""
        for i, (k, _v) in enumerate(self._pairs):
            if k == key:
                return i
        return None

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        i = self.find(key)
        if i is None:
            return default
        return self._pairs[i][1]

    def insert(self, key: K, value: V) -> Optional[V]:
        """
        Set the value for ``key``.

        An existing entry is replaced where it stands, so the key keeps its
        first-occurrence position. Returns the previous value, if any.
        """
        i = self.find(key)
        if i is None:
            self._pairs.append((key, value))
            return None
        previous = self._pairs[i][1]
        self._pairs[i] = (self._pairs[i][0], value)
        return previous

    def merge(self, key: K, value: V, combine: Callable[[V, V], V]) -> V:
        """Insert ``value`` or combine it with the value already stored for ``key``."""
        i = self.find(key)
        if i is None:
            self._pairs.append((key, value))
            return value
        merged = combine(self._pairs[i][1], value)
        self._pairs[i] = (self._pairs[i][0], merged)
        return merged

    def items(self) -> List[Tuple[K, V]]:
        return list(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        return iter(list(self._pairs))


class HashedStore(Generic[K, V]):
    """
    Dict-backed store for hashable keys.

    Insertion order of the underlying dict gives the same first-occurrence
    ordering as ``AssociationList``. Unhashable keys raise ``TypeError``.
    """

    def __init__(self) -> None:
        self._data: Dict[K, V] = {}
        self._positions: Dict[K, int] = {}

    def find(self, key: K) -> Optional[int]:
        try:
            return self._positions.get(key)
        except TypeError:
            # Unhashable keys can never have been stored.
            return None

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        try:
            return self._data.get(key, default)
        except TypeError:
            return default

    def insert(self, key: K, value: V) -> Optional[V]:
        previous = self._data.get(key)
        if key not in self._data:
            self._positions[key] = len(self._data)
        self._data[key] = value
        return previous

    def merge(self, key: K, value: V, combine: Callable[[V, V], V]) -> V:
        if key in self._data:
            value = combine(self._data[key], value)
        else:
            self._positions[key] = len(self._data)
        self._data[key] = value
        return value

    def items(self) -> List[Tuple[K, V]]:
        return list(self._data.items())

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        return iter(self.items())


StoreFactory = Callable[[], KeyedStore]
