from .errors import SegmentTreeError, IndexOutOfRange, InvalidRange, EmptyStructure
from .segment_tree import SegmentTree, SumSegmentTree, MinSegmentTree, MaxSegmentTree
from .lazy import LazySegmentTree
