"""Plane geometry: orientation, convex hulls and barycentric weights."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cmp_to_key

COLLINEAR = 0
CLOCKWISE = 1
COUNTERCLOCKWISE = 2

Point = tuple[int, int]


def squared_distance(a: Sequence[int], b: Sequence[int]) -> int:
    """Squared Euclidean distance between two points."""
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


def orientation(p: Sequence[int], q: Sequence[int], r: Sequence[int]) -> int:
    """Turn direction of ``p -> q -> r``: COLLINEAR, CLOCKWISE or COUNTERCLOCKWISE."""
    value = (q[1] - p[1]) * (r[0] - q[0]) - (q[0] - p[0]) * (r[1] - q[1])
    if value == 0:
        return COLLINEAR
    return CLOCKWISE if value > 0 else COUNTERCLOCKWISE


def convex_hull(points: Sequence[Sequence[int]]) -> list[Point]:
    """Convex hull by Graham scan, counterclockwise from the lowest-leftmost point.

    Collinear boundary points are dropped. Returns an empty list when the
    hull is degenerate.
    """
    if not points:
        return []
    pts = [(p[0], p[1]) for p in points]
    start = min(pts, key=lambda p: (p[1], p[0]))

    def compare(a: Point, b: Point) -> int:
        turn = orientation(start, a, b)
        if turn == COLLINEAR:
            da, db = squared_distance(start, a), squared_distance(start, b)
            return (da > db) - (da < db)
        return -1 if turn == COUNTERCLOCKWISE else 1

    pts.remove(start)
    pts = [start] + sorted(pts, key=cmp_to_key(compare))
    filtered = [start]
    i = 1
    while i < len(pts):
        while i < len(pts) - 1 and orientation(start, pts[i], pts[i + 1]) == COLLINEAR:
            i += 1
        filtered.append(pts[i])
        i += 1
    if len(filtered) < 3:
        return []
    stack = filtered[:3]
    for point in filtered[3:]:
        while len(stack) > 1 and orientation(stack[-2], stack[-1], point) != COUNTERCLOCKWISE:
            stack.pop()
        stack.append(point)
    return stack


def _weight(p, v1, v2, v3) -> float:
    """Weight of ``v1`` for ``p``: ratio of distances to the line ``v2 v3``."""
    dx, dy = v2[0] - v3[0], v2[1] - v3[1]
    a, b = dy, -dx
    c = dx * v2[1] - dy * v2[0]
    dv = a * v1[0] + b * v1[1] + c
    dp = a * p[0] + b * p[1] + c
    if dv == 0:
        return 0.0
    return dp / dv


def triangle_weights(
    p: Sequence[float], v1: Sequence[float], v2: Sequence[float], v3: Sequence[float]
) -> tuple[tuple[float, float, float], bool]:
    """Barycentric weights of ``p`` and whether ``p`` lies inside the triangle.

    The weights are only meaningful when ``p`` is inside.
    """
    weights = (_weight(p, v1, v2, v3), _weight(p, v2, v1, v3), _weight(p, v3, v1, v2))
    return weights, all(w >= 0.0 for w in weights)