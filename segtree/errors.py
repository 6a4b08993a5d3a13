class SegmentTreeError(Exception):
    """Base class for all segment tree errors."""


class IndexOutOfRange(SegmentTreeError, IndexError):
    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"index {index} out of range for tree of size {size}")


class InvalidRange(SegmentTreeError, ValueError):
    def __init__(self, left: int, right: int):
        self.left = left
        self.right = right
        super().__init__(f"invalid range [{left}, {right}]: left must not exceed right")


class EmptyStructure(SegmentTreeError, ValueError):
    def __init__(self):
        super().__init__("cannot build a segment tree over an empty sequence")
