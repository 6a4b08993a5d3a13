import sys
import os

# Add the project root to the path so we can import segtree
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from segtree import LazySegmentTree

def main():
    n = 8
    tree = LazySegmentTree(range(n))
    print(f"Initial: {tree}, total = {tree.total}")

    for left, right, value in [(5, 6, 1), (0, 6, 2), (4, 5, 3)]:
        tree.assign(left, right, value)
        print(f"assign({left}, {right}, {value}) -> {tree.values()}")

    print(f"query(0, {n - 1}) = {tree.query(0, n - 1)}")

if __name__ == "__main__":
    main()
