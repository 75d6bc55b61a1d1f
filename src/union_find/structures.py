"""Union-find contract and the helpers shared by its implementations."""

from __future__ import annotations

import operator
from collections import defaultdict
from typing import Dict, FrozenSet, List, Protocol, runtime_checkable


class IndexOutOfRangeError(IndexError, ValueError):
    """Raised when a point identifier falls outside ``[0, size - 1]``."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"index {index} is out of bounds for {size} points")
        self.index = index
        self.size = size


@runtime_checkable
class UnionFind(Protocol):
    """Dynamic connectivity over a fixed universe of points ``0..N-1``."""

    def union(self, p: int, q: int) -> None:
        """Merge the groups containing `p` and `q`."""

    def connected(self, p: int, q: int) -> bool:
        """Return whether `p` and `q` are in the same group."""

    def find(self, p: int) -> int:
        """Return the component identifier of `p`."""

    def count(self) -> int:
        """Return the number of distinct groups."""


def check_size(size: int) -> int:
    if isinstance(size, bool):
        raise ValueError("size must be an integer, got bool")
    try:
        value = operator.index(size)
    except TypeError:
        raise ValueError(f"size must be an integer, got {type(size).__name__}") from None
    if value <= 0:
        raise ValueError("size must be positive")
    return value


def check_index(index: int, size: int) -> int:
    """Return `index` as a plain int, rejecting anything outside ``[0, size - 1]``."""

    if isinstance(index, bool):
        raise TypeError("point index must be an integer, got bool")
    try:
        value = operator.index(index)
    except TypeError:
        raise TypeError(f"point index must be an integer, got {type(index).__name__}") from None
    if value < 0 or value >= size:
        raise IndexOutOfRangeError(value, size)
    return value


def components(structure: UnionFind, size: int) -> Dict[int, List[int]]:
    """Group points ``0..size-1`` by component identifier."""

    groups: Dict[int, List[int]] = defaultdict(list)
    for point in range(size):
        groups[structure.find(point)].append(point)
    return dict(groups)


def partition(structure: UnionFind, size: int) -> FrozenSet[FrozenSet[int]]:
    """Return the partition induced by `structure`, independent of identifier values."""

    return frozenset(frozenset(members) for members in components(structure, size).values())


__all__ = [
    "IndexOutOfRangeError",
    "UnionFind",
    "check_index",
    "check_size",
    "components",
    "partition",
]
