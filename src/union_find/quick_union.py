"""Lazy union-find over a forest of parent pointers."""

from __future__ import annotations

from typing import ClassVar, Dict

import numpy as np

from .structures import check_index, check_size


class QuickUnion:
    """Union-find where each group is a tree and the root identifies it.

    `union` only relinks one root, but both operations walk to the root
    first. Nothing keeps the trees short: unions applied in increasing or
    decreasing order build a chain and `find` degrades to O(N).
    """

    complexity: ClassVar[Dict[str, str]] = {
        "initialize": "O(N)",
        "union": "O(N)",
        "find": "O(N)",
        "process N points": "O(N^2)",
    }

    def __init__(self, size: int) -> None:
        self._n = check_size(size)
        self._parent = np.arange(self._n, dtype=np.intp)
        self._count = self._n

    @property
    def size(self) -> int:
        return self._n

    def find(self, p: int) -> int:
        p = check_index(p, self._n)
        parent = self._parent
        while p != parent[p]:
            p = int(parent[p])
        return p

    def union(self, p: int, q: int) -> None:
        check_index(p, self._n)
        check_index(q, self._n)

        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return
        self._parent[root_p] = root_q
        self._count -= 1

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def count(self) -> int:
        return self._count
