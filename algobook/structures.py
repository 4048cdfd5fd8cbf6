"""Classic data structures: disjoint sets, range queries, trees and tries."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

# Result of a sparse-table query over an empty range.
EMPTY_MIN = 2**63 - 1


class DisjointUnion:
    """Disjoint sets over ``0..n-1`` tracking set sizes and value sums."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._sums = [0] * n
        self._sizes = [1] * n

    def find(self, x: int) -> int:
        """Return the representative of the set containing ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def combine(self, x: int, y: int) -> None:
        """Merge the sets of ``x`` and ``y``; the larger root survives."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return
        if self._sizes[x] < self._sizes[y]:
            x, y = y, x
        self._parent[y] = x
        self._sizes[x] += self._sizes[y]
        self._sums[x] += self._sums[y]

    def size(self, x: int) -> int:
        """Number of elements in the set containing ``x``."""
        return self._sizes[self.find(x)]

    def update(self, x: int, v: int) -> None:
        """Add ``v`` to the value of the set containing ``x``."""
        self._sums[self.find(x)] += v

    def sum(self, x: int) -> int:
        """Sum of the values of the set containing ``x``."""
        return self._sums[self.find(x)]


class Fenwick:
    """Binary indexed tree over ``n`` zero-initialised entries."""

    def __init__(self, n: int) -> None:
        self._data = [0] * (n + 1)

    def prefix_sum(self, i: int) -> int:
        """Sum of entries ``0..i`` inclusive."""
        total = 0
        i += 1
        while i > 0:
            total += self._data[i]
            i -= i & -i
        return total

    def update(self, i: int, v: int) -> None:
        """Add ``v`` to entry ``i``."""
        i += 1
        while i < len(self._data):
            self._data[i] += v
            i += i & -i


class IntervalTree:
    """Unbalanced interval tree supporting insertion and point stabbing."""

    def __init__(self) -> None:
        self._intervals: list[tuple[int, int]] = []
        self._max: list[int] = []
        self._left: list[int | None] = []
        self._right: list[int | None] = []
        self._root: int | None = None

    def insert(self, interval: tuple[int, int]) -> None:
        """Insert the closed interval ``(low, high)``."""
        low, high = interval
        parent: int | None = None
        node = self._root
        go_left = True
        while node is not None:
            parent = node
            if high > self._max[node]:
                self._max[node] = high
            if low < self._intervals[node][0]:
                node, go_left = self._left[node], True
            else:
                node, go_left = self._right[node], False
        index = len(self._intervals)
        if parent is None:
            self._root = index
        elif go_left:
            self._left[parent] = index
        else:
            self._right[parent] = index
        self._intervals.append((low, high))
        self._max.append(high)
        self._left.append(None)
        self._right.append(None)

    def search(self, point: int) -> list[tuple[int, int]]:
        """Return all stored intervals containing ``point``."""
        if self._root is None:
            return []
        found = []
        queue = deque([self._root])
        while queue:
            node = queue.popleft()
            low, high = self._intervals[node]
            if low <= point <= high:
                found.append((low, high))
            left, right = self._left[node], self._right[node]
            if left is not None and point <= self._max[left]:
                queue.append(left)
            if right is not None and point >= low:
                queue.append(right)
        return found


class KDTree:
    """Unbalanced k-d tree of integer points of dimension ``k``."""

    def __init__(self, k: int = 2) -> None:
        self.k = k
        self._points: list[tuple[int, ...]] = []
        self._left: list[int | None] = []
        self._right: list[int | None] = []
        self._root: int | None = None

    def _check(self, point: Sequence[int]) -> tuple[int, ...]:
        point = tuple(point)
        if len(point) != self.k:
            raise ValueError(f"point must have {self.k} coordinates")
        return point

    def insert(self, point: Sequence[int]) -> None:
        """Insert a point."""
        point = self._check(point)
        index = len(self._points)
        self._points.append(point)
        self._left.append(None)
        self._right.append(None)
        if self._root is None:
            self._root = index
            return
        node, depth = self._root, 0
        while True:
            side = self._left if point[depth] < self._points[node][depth] else self._right
            child = side[node]
            if child is None:
                side[node] = index
                return
            node, depth = child, (depth + 1) % self.k

    def search(self, point: Sequence[int]) -> bool:
        """Return whether ``point`` has been inserted."""
        point = self._check(point)
        node, depth = self._root, 0
        while node is not None:
            stored = self._points[node]
            if stored == point:
                return True
            node = self._left[node] if point[depth] < stored[depth] else self._right[node]
            depth = (depth + 1) % self.k
        return False


class SegmentTree:
    """Iterative segment tree for point assignment and range sums."""

    def __init__(self, values: Sequence[int]) -> None:
        self._n = n = len(values)
        self._nodes = [0] * n + list(values)
        for i in range(n - 1, 0, -1):
            self._nodes[i] = self._nodes[2 * i] + self._nodes[2 * i + 1]

    def update(self, i: int, value: int) -> None:
        """Set entry ``i`` to ``value``."""
        j = i + self._n
        self._nodes[j] = value
        while j > 1:
            self._nodes[j >> 1] = self._nodes[j] + self._nodes[j ^ 1]
            j >>= 1

    def sum(self, start: int, end: int) -> int:
        """Sum of entries in the closed range ``[start, end]``."""
        total = 0
        start += self._n
        end += self._n + 1
        while start < end:
            if start & 1:
                total += self._nodes[start]
                start += 1
            if end & 1:
                end -= 1
                total += self._nodes[end]
            start >>= 1
            end >>= 1
        return total


class SparseTable:
    """Static range-minimum structure with O(1) queries."""

    def __init__(self, values: Sequence[int]) -> None:
        n = len(values)
        self._data = [list(values)]
        for level in range(1, n.bit_length() + 1):
            prev = self._data[-1]
            half = 1 << (level - 1)
            self._data.append(
                [min(prev[j], prev[j + half]) for j in range(n - (1 << level) + 1)]
            )

    def query(self, left: int, right: int) -> int:
        """Minimum over ``[left, right)``; ``EMPTY_MIN`` if the range is empty."""
        if right <= left:
            return EMPTY_MIN
        level = (right - left).bit_length() - 1
        row = self._data[level]
        return min(row[left], row[right - (1 << level)])


class Trie:
    """Trie over an alphabet of ``size`` consecutive characters from ``base``."""

    def __init__(self, base: str = "a", size: int = 26) -> None:
        self.base = base
        self.size = size
        self.children: list[list[int]] = [[-1] * size]
        self.leaves: list[bool] = [False]

    def _index(self, char: str) -> int:
        index = ord(char) - ord(self.base)
        if not 0 <= index < self.size:
            raise ValueError(f"character {char!r} is outside the alphabet")
        return index

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = 0
        for char in word:
            index = self._index(char)
            if self.children[node][index] < 0:
                self.children[node][index] = len(self.children)
                self.children.append([-1] * self.size)
                self.leaves.append(False)
            node = self.children[node][index]
        self.leaves[node] = True

    def find(self, word: str) -> bool:
        """Return whether ``word`` was inserted and not erased."""
        node = 0
        for char in word:
            node = self.children[node][self._index(char)]
            if node < 0:
                return False
        return self.leaves[node]

    def erase(self, word: str) -> None:
        """Remove ``word`` if present; its nodes are kept."""
        node = 0
        for char in word:
            node = self.children[node][self._index(char)]
            if node < 0:
                return
        self.leaves[node] = False