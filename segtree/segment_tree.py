import operator
from typing import Any, Callable, Iterable, List

from .errors import EmptyStructure, IndexOutOfRange, InvalidRange


class SegmentTree:
    """Array-backed segment tree over a fixed-length sequence.

    Leaves live at ``tree[size:2 * size]`` in element order and every internal
    node ``i`` in ``[1, size)`` holds ``operation(tree[2i], tree[2i + 1])``.
    ``operation`` must be associative and ``identity`` neutral for it.

    Note that ``update`` is additive: it combines a delta into the stored
    leaf instead of replacing it.
    """

    def __init__(self, values: Iterable, identity: Any, operation: Callable[[Any, Any], Any]):
        values = list(values)
        if not values:
            raise EmptyStructure()
        self._size = len(values)
        self.identity = identity
        self.operation = operation
        # Python list for fast single-element access; slot 0 is never read
        self.tree = [identity] * self._size + values
        self.build()

    @property
    def size(self) -> int:
        return self._size

    def build(self):
        """Recompute every internal node from its children, bottom-up."""
        tree = self.tree
        for idx in range(self._size - 1, 0, -1):
            left = idx << 1
            tree[idx] = self.operation(tree[left], tree[left + 1])

    def _check_index(self, idx) -> int:
        idx = operator.index(idx)
        if not 0 <= idx < self._size:
            raise IndexOutOfRange(idx, self._size)
        return idx

    def update(self, idx: int, delta: Any):
        """Combine ``delta`` into the element at ``idx`` (for sums: arr[idx] += delta)."""
        idx = self._check_index(idx) + self._size
        tree = self.tree
        tree[idx] = self.operation(tree[idx], delta)
        idx >>= 1
        while idx >= 1:
            left = idx << 1
            tree[idx] = self.operation(tree[left], tree[left + 1])
            idx >>= 1

    def query(self, left: int, right: int) -> Any:
        """Returns arr[left] op ... op arr[right], both ends inclusive."""
        left = self._check_index(left)
        right = self._check_index(right)
        if left > right:
            raise InvalidRange(left, right)

        left += self._size
        right += self._size
        tree = self.tree
        # Separate accumulators keep the fold ordered for non-commutative operations
        res_left = self.identity
        res_right = self.identity
        while left <= right:
            if left & 1:
                res_left = self.operation(res_left, tree[left])
                left += 1
            if not right & 1:
                res_right = self.operation(tree[right], res_right)
                right -= 1
            left >>= 1
            right >>= 1
        return self.operation(res_left, res_right)

    def __getitem__(self, idx: int) -> Any:
        return self.tree[self._size + self._check_index(idx)]

    def __len__(self) -> int:
        return self._size

    @property
    def total(self) -> Any:
        return self.query(0, self._size - 1)

    def values(self) -> List[Any]:
        """Get the current leaf values, in element order."""
        return self.tree[self._size:]

    def __repr__(self):
        return f"{type(self).__name__}({self.values()})"


class SumSegmentTree(SegmentTree):

    def __init__(self, values: Iterable):
        super().__init__(values, identity=0, operation=operator.add)

    def sum(self, start: int, end: int):
        """Returns arr[start] + ... + arr[end]."""
        return super().query(start, end)


class MinSegmentTree(SegmentTree):

    def __init__(self, values: Iterable):
        super().__init__(values, identity=float("inf"), operation=min)

    def min(self, start: int, end: int):
        return super().query(start, end)


class MaxSegmentTree(SegmentTree):

    def __init__(self, values: Iterable):
        super().__init__(values, identity=float("-inf"), operation=max)

    def max(self, start: int, end: int):
        return super().query(start, end)
