import operator
from typing import Iterable, List

from .errors import EmptyStructure, IndexOutOfRange, InvalidRange


class LazySegmentTree:
    """Sum segment tree supporting range assignment with lazy propagation.

    The leaf row is padded to a power of two so that a node at height ``h``
    always spans ``2 ** h`` elements. ``lazy[i]`` holds a pending assignment
    for the children of internal node ``i``, or ``None`` when there is none.
    """

    def __init__(self, values: Iterable):
        values = list(values)
        if not values:
            raise EmptyStructure()
        self._size = len(values)
        self.capacity = 1
        while self.capacity < self._size:
            self.capacity <<= 1
        self.height = self.capacity.bit_length() - 1

        self.tree = [0] * self.capacity + values + [0] * (self.capacity - self._size)
        self.lazy = [None] * self.capacity
        self.build()

    def build(self):
        for idx in range(self.capacity - 1, 0, -1):
            self._refresh(idx)

    def _refresh(self, idx: int):
        self.tree[idx] = self.tree[idx << 1] + self.tree[(idx << 1) + 1]

    def _apply(self, idx: int, value, span: int):
        self.tree[idx] = value * span
        if idx < self.capacity:
            self.lazy[idx] = value

    def _push(self, leaf: int):
        """Push pending assignments down the path from the root to ``leaf``."""
        for h in range(self.height, 0, -1):
            idx = leaf >> h
            value = self.lazy[idx]
            if value is None:
                continue
            span = 1 << (h - 1)
            self._apply(idx << 1, value, span)
            self._apply((idx << 1) + 1, value, span)
            self.lazy[idx] = None

    def _rebuild(self, leaf: int):
        """Recompute the ancestors of ``leaf``, honouring pending assignments."""
        idx = leaf >> 1
        span = 2
        while idx >= 1:
            if self.lazy[idx] is None:
                self._refresh(idx)
            else:
                self.tree[idx] = self.lazy[idx] * span
            idx >>= 1
            span <<= 1

    def _check_index(self, idx) -> int:
        idx = operator.index(idx)
        if not 0 <= idx < self._size:
            raise IndexOutOfRange(idx, self._size)
        return idx

    def _check_range(self, left, right):
        left = self._check_index(left)
        right = self._check_index(right)
        if left > right:
            raise InvalidRange(left, right)
        return left + self.capacity, right + self.capacity

    def assign(self, left: int, right: int, value):
        """Set every element in [left, right] to ``value``."""
        if value is None:
            raise ValueError("None cannot be assigned, it marks an empty lazy tag")
        left_leaf, right_leaf = self._check_range(left, right)
        self._push(left_leaf)
        self._push(right_leaf)

        lo, hi, span = left_leaf, right_leaf, 1
        while lo <= hi:
            if lo & 1:
                self._apply(lo, value, span)
                lo += 1
            if not hi & 1:
                self._apply(hi, value, span)
                hi -= 1
            lo >>= 1
            hi >>= 1
            span <<= 1

        self._rebuild(left_leaf)
        self._rebuild(right_leaf)

    def query(self, left: int, right: int):
        """Returns arr[left] + ... + arr[right]."""
        lo, hi = self._check_range(left, right)
        self._push(lo)
        self._push(hi)

        res = 0
        while lo <= hi:
            if lo & 1:
                res += self.tree[lo]
                lo += 1
            if not hi & 1:
                res += self.tree[hi]
                hi -= 1
            lo >>= 1
            hi >>= 1
        return res

    def __getitem__(self, idx: int):
        leaf = self._check_index(idx) + self.capacity
        self._push(leaf)
        return self.tree[leaf]

    def __len__(self) -> int:
        return self._size

    @property
    def total(self):
        return self.tree[1]

    def values(self) -> List:
        return [self[i] for i in range(self._size)]

    def __repr__(self):
        return f"{type(self).__name__}({self.values()})"
