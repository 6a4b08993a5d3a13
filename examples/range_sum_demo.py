import sys
import os

# Add the project root to the path so we can import segtree
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from segtree import SumSegmentTree, MinSegmentTree, InvalidRange, IndexOutOfRange

def main():
    tree = SumSegmentTree([1, 2, 3, 4, 5])
    print(f"Tree: {tree}")
    print(f"sum(1, 3) = {tree.sum(1, 3)}")

    # update adds to the stored value, it does not replace it
    tree.update(2, 10)
    print(f"After update(2, 10): {tree}")
    print(f"sum(1, 3) = {tree.sum(1, 3)}, total = {tree.total}")

    # Replacing a value means passing the difference
    tree.update(2, 3 - tree[2])
    print(f"After restoring index 2: {tree}")

    try:
        tree.query(3, 1)
    except InvalidRange as e:
        print(f"Rejected: {e}")
    try:
        tree.update(5, 1)
    except IndexOutOfRange as e:
        print(f"Rejected: {e}")

    mins = MinSegmentTree([7, 3, 9, 1, 6])
    print(f"min(0, 2) = {mins.min(0, 2)}, min(2, 4) = {mins.min(2, 4)}")

if __name__ == "__main__":
    main()
