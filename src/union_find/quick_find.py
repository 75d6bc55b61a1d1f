"""Eager union-find: every point stores its component id directly."""

from __future__ import annotations

from typing import ClassVar, Dict

import numpy as np

from .structures import check_index, check_size


class QuickFind:
    """Union-find keeping a component id per point.

    `find` is a single array read. `union` relabels the whole of p's group
    with q's id, which costs a full pass over the array, so processing N
    unions is quadratic.

    With `count_every_union` set, `count` drops on every `union` call, even
    when both points were already connected.
    """

    complexity: ClassVar[Dict[str, str]] = {
        "initialize": "O(N)",
        "union": "O(N)",
        "find": "O(1)",
        "process N points": "O(N^2)",
    }

    def __init__(self, size: int, count_every_union: bool = False) -> None:
        self._n = check_size(size)
        self.count_every_union = count_every_union
        self._id = np.arange(self._n, dtype=np.intp)
        self._count = self._n

    @property
    def size(self) -> int:
        return self._n

    def find(self, p: int) -> int:
        p = check_index(p, self._n)
        return int(self._id[p])

    def union(self, p: int, q: int) -> None:
        pid = self.find(p)
        qid = self.find(q)

        # p's group takes q's id; the scan runs even when pid == qid.
        self._id[self._id == pid] = qid

        if pid != qid or self.count_every_union:
            self._count -= 1

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def count(self) -> int:
        return self._count
