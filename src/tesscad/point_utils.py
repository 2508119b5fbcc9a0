"""Post-processing helpers for centre sets.

Centre sets are compared with a tolerance of ``EPSILON`` rather than
exact equality, since generated coordinates carry trigonometric
round-off.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

EPSILON = 1e-3

Point2 = Sequence[float]


def sort_points(points: Sequence[Point2]) -> List[Point2]:
    """Return ``points`` stably sorted by ``(y, x)`` ascending."""

    return sorted(points, key=lambda p: (p[1], p[0]))


def row_height(sorted_points: Sequence[Point2]) -> Optional[float]:
    """Return the vertical distance between the first two rows.

    ``sorted_points`` must already be sorted with ``sort_points()``.
    Returns ``None`` when every point lies in a single row (or there are
    fewer than two points).
    """

    for p1, p2 in zip(sorted_points, sorted_points[1:]):
        dy = abs(p2[1] - p1[1])
        if dy > EPSILON:
            return dy
    return None


def triangulated_centers(sorted_points: Sequence[Point2]) -> List[List[float]]:
    """Return centroids of the triangles formed between staggered rows.

    For each pair of horizontally adjacent points in a row, every point of
    the next row up whose x lies strictly between the pair closes a
    triangle; its centroid is emitted.  A single-row input yields ``[]``.
    """

    height = row_height(sorted_points)
    if height is None:
        return []

    result = []
    for p1, p2 in zip(sorted_points, sorted_points[1:]):
        if abs(p2[1] - p1[1]) >= EPSILON:
            continue
        target_y = p1[1] + height
        for p3 in sorted_points:
            if abs(p3[1] - target_y) < EPSILON and p1[0] < p3[0] < p2[0]:
                result.append([(p1[0] + p2[0] + p3[0]) / 3.0,
                               (p1[1] + p2[1] + p3[1]) / 3.0])
    return result


def points_equal(p1: Point2, p2: Point2, tolerance: float = EPSILON) -> bool:
    """Are ``p1`` and ``p2`` the same, coordinate by coordinate, within ``tolerance``?"""

    if len(p1) != len(p2):
        raise ValueError(f'points of different dimension: {p1!r}, {p2!r}')
    return all(abs(a - b) < tolerance for a, b in zip(p1, p2))


def is_point_in_list(point: Point2, points: Sequence[Point2],
                     tolerance: float = EPSILON) -> bool:
    return any(points_equal(point, p, tolerance) for p in points)


def filter_points(points: Sequence[Point2], exclude_list: Sequence[Point2],
                  tolerance: float = EPSILON) -> List[Point2]:
    """Drop every point of ``points`` found in ``exclude_list``, keeping order."""

    return [p for p in points if not is_point_in_list(p, exclude_list, tolerance)]


__all__ = [
    'EPSILON',
    'sort_points',
    'row_height',
    'triangulated_centers',
    'points_equal',
    'is_point_in_list',
    'filter_points',
]
