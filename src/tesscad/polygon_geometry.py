"""Regular hexagon and octagon measures used to space tile centres."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from tesscad.geom import isgoodnum, point

OCTAGON_ROTATION = 22.5


def _check_radius(radius: float) -> None:
    if not isgoodnum(radius) or radius <= 0:
        raise ValueError(f'radius must be a positive number, got {radius!r}')


def hex_offsets(radius: float) -> Tuple[float, float]:
    """Return ``(offset_x, offset_y)`` between adjacent hexagon rows.

    ``offset_x`` is half the centre spacing within a row and
    ``offset_y`` is the vertical distance between staggered rows of
    pointy-top hexagons with circumradius ``radius``.
    """

    _check_radius(radius)
    offset_x = radius * math.cos(math.radians(30))
    offset_y = radius + radius * math.sin(math.radians(30))
    return offset_x, offset_y


def octagon_side_length(radius: float) -> float:
    """Edge length of a regular octagon with circumradius ``radius``."""

    _check_radius(radius)
    return 2.0 * radius * math.sin(math.radians(OCTAGON_ROTATION))


def octagon_segment_length(radius: float) -> float:
    """Axis projection of one diagonal octagon edge."""

    return octagon_side_length(radius) / math.sqrt(2.0)


def octagon_total_width(radius: float) -> float:
    """Flat-to-flat width of the octagon (twice the apothem)."""

    return octagon_side_length(radius) + 2.0 * octagon_segment_length(radius)


def octagon_shift_and_tip(radius: float, rotate: bool = True) -> Tuple[float, float]:
    """Return the ``(shift, tip)`` pair for radial octagon layouts.

    With ``rotate`` the octagon has axis-aligned flat sides, so the span is
    the flat-to-flat width and the tip is one diagonal edge projection.
    Without it the vertices sit on the axes and the tip is how far a
    vertex overshoots the diagonal contact point.
    """

    _check_radius(radius)
    if rotate:
        return octagon_total_width(radius), octagon_segment_length(radius)
    return 2.0 * radius, radius * (2.0 - math.sqrt(2.0))


def octagon_offset(radius: float, rotate: bool = True) -> float:
    """Diagonal row offset for radial octagon layouts."""

    shift, tip = octagon_shift_and_tip(radius, rotate)
    return shift - tip


def polygon_points(center: Sequence[float], radius: float, sides: int,
                   rotation: float = 0.0) -> List[list]:
    """Return the closed outline of a regular polygon.

    Vertices start at ``rotation`` degrees and advance counter-clockwise;
    the first vertex is repeated at the end.
    """

    _check_radius(radius)
    if not isinstance(sides, int) or sides < 3:
        raise ValueError(f'a polygon needs at least three sides, got {sides!r}')
    cx, cy = center[0], center[1]
    step = 360.0 / sides
    pts = []
    for k in range(sides):
        a = math.radians(rotation + k * step)
        pts.append(point(cx + radius * math.cos(a), cy + radius * math.sin(a)))
    pts.append(point(pts[0]))
    return pts


__all__ = [
    'OCTAGON_ROTATION',
    'hex_offsets',
    'octagon_side_length',
    'octagon_segment_length',
    'octagon_total_width',
    'octagon_shift_and_tip',
    'octagon_offset',
    'polygon_points',
]
