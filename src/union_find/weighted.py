"""Weighted quick-union with path compression."""

from __future__ import annotations

from typing import ClassVar, Dict

import numpy as np

from .structures import check_index, check_size


class WeightedQuickUnion:
    """Union-find that balances trees by size and flattens them while searching.

    Two refinements over :class:`~union_find.quick_union.QuickUnion`:

    * `union` tracks the size of every tree and always hangs the smaller
      tree under the root of the larger one. On equal sizes q's root goes
      under p's root. Tree height stays logarithmic.
    * `find` points every node it visits at its grandparent, halving the
      path to the root on each walk.

    Sizes are only maintained for roots; the entry of a node that has been
    attached under another root is stale.
    """

    complexity: ClassVar[Dict[str, str]] = {
        "initialize": "O(N)",
        "union": "O(lgN)",
        "find": "O(lgN)",
        "connected": "O(lgN)",
    }

    def __init__(self, size: int) -> None:
        self._n = check_size(size)
        self._parent = np.arange(self._n, dtype=np.intp)
        self._size = np.ones(self._n, dtype=np.intp)
        self._count = self._n

    @property
    def size(self) -> int:
        return self._n

    def find(self, p: int) -> int:
        p = check_index(p, self._n)
        parent = self._parent
        while p != parent[p]:
            parent[p] = parent[parent[p]]
            p = int(parent[p])
        return p

    def union(self, p: int, q: int) -> None:
        check_index(p, self._n)
        check_index(q, self._n)

        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return

        if self._size[root_p] < self._size[root_q]:
            self._parent[root_p] = root_q
            self._size[root_q] += self._size[root_p]
        else:
            self._parent[root_q] = root_p
            self._size[root_p] += self._size[root_q]
        self._count -= 1

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def count(self) -> int:
        return self._count
