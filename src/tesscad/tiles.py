"""Turn centre sets into drawable tiles.

A tile is the outline polygon drawn around one centre plus the color the
gradient assigns to it.  Tiles can be kept flat or extruded into a
closed triangulated prism.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from tesscad.centers import Shape, as_shape
from tesscad.geom import isgoodnum, polyvertices
from tesscad.geometry_utils import Triangle, make_triangle, to_vec3
from tesscad.gradient import ColorScheme, gradient_color, normalized_coordinates
from tesscad.point_utils import filter_points, sort_points, triangulated_centers
from tesscad.polygon_geometry import OCTAGON_ROTATION, polygon_points

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tile:
    center: Tuple[float, float]
    outline: List[list]
    color: Tuple[float, float, float]


def tile_outline(center: Sequence[float], radius: float,
                 shape: Union[Shape, str] = Shape.HEX, rotate: bool = True,
                 order: int = 1, spacing: float = 0.0) -> List[list]:
    """Return the closed outline drawn for the tile at ``center``.

    The drawn radius shrinks by ``spacing/2`` so neighbouring tiles leave
    a gap of ``spacing``; centre positions are not affected.  Hexagons
    are pointy-top.  Octagons use ``8*order`` facets and are turned by
    22.5 degrees when ``rotate`` is set.
    """

    shape = as_shape(shape)
    if not isgoodnum(spacing) or spacing < 0:
        raise ValueError(f'spacing must be a non-negative number, got {spacing!r}')
    drawn = radius - spacing / 2.0
    if drawn <= 0:
        raise ValueError(f'spacing {spacing} leaves nothing of radius {radius}')
    if shape is Shape.HEX:
        return polygon_points(center, drawn, 6, rotation=90.0)
    if isinstance(order, bool) or not isinstance(order, int) or order < 1:
        raise ValueError(f'order must be an integer >= 1, got {order!r}')
    rotation = OCTAGON_ROTATION if rotate else 0.0
    return polygon_points(center, drawn, 8 * order, rotation=rotation)


def layout_tiles(centers: Sequence[Sequence[float]], radius: float,
                 shape: Union[Shape, str] = Shape.HEX, rotate: bool = True,
                 order: int = 1, spacing: float = 0.0,
                 color_scheme: Optional[Union[ColorScheme, str]] = None) -> List[Tile]:
    """Build one colored tile per centre."""

    tiles = []
    for c, (nx, ny) in zip(centers, normalized_coordinates(centers)):
        outline = tile_outline(c, radius, shape, rotate, order, spacing)
        color = tuple(gradient_color(nx, ny, color_scheme))
        tiles.append(Tile(center=(c[0], c[1]), outline=outline, color=color))
    logger.debug('built %d tiles', len(tiles))
    return tiles


def secondary_centers(centers: Sequence[Sequence[float]]) -> List[List[float]]:
    """Return interstitial centres between staggered rows of ``centers``.

    Derived centres that coincide with an existing centre are dropped.
    """

    derived = triangulated_centers(sort_points(centers))
    if not derived:
        logger.info('centre set has a single row, no secondary centres')
        return []
    return filter_points(derived, centers)


def extrude_tile(tile: Tile, height: float) -> List[Triangle]:
    """Extrude a tile outline along +z into a closed prism.

    Caps are fanned from the tile centre, so outlines must be convex.
    """

    if not isgoodnum(height) or height <= 0:
        raise ValueError(f'extrusion height must be positive, got {height!r}')

    ring = [to_vec3(p) for p in polyvertices(tile.outline)]
    cx, cy = tile.center
    bottom_c = (float(cx), float(cy), 0.0)
    top_c = (float(cx), float(cy), float(height))

    tris = []
    count = len(ring)
    for k in range(count):
        a = ring[k]
        b = ring[(k + 1) % count]
        at = (a[0], a[1], a[2] + height)
        bt = (b[0], b[1], b[2] + height)
        outward = ((a[0] + b[0]) / 2.0 - cx, (a[1] + b[1]) / 2.0 - cy, 0.0)
        for tri in (make_triangle(bottom_c, a, b, (0.0, 0.0, -1.0)),
                    make_triangle(top_c, at, bt, (0.0, 0.0, 1.0)),
                    make_triangle(a, b, bt, outward),
                    make_triangle(a, bt, at, outward)):
            if tri is not None:
                tris.append(tri)
    return tris


__all__ = [
    'Tile',
    'tile_outline',
    'layout_tiles',
    'secondary_centers',
    'extrude_tile',
]
