## tile centre generators for tessCAD
## Copyright (c) 2026 tessCAD contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Centre-point generators for hexagon and octagon tessellations.

Two layouts are supported:

- *radial* ("levels") layouts grow a rosette outward from the origin.
  The central row holds ``2*levels - 1`` tiles; each further row is
  shifted diagonally by one ring offset and mirrored below the x axis.
- *grid* layouts place ``n`` columns by ``m`` rows of tiles.

All generators return a flat list of ``[x, y]`` pairs and never
mutate their inputs.  Callers holding keyword-style options resolve
them once with ``layout_from_options()`` and hand the resulting
``Radial``, ``Grid`` or ``Explicit`` layout to ``generate_centers()``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from tesscad.geom import isgoodnum
from tesscad.polygon_geometry import hex_offsets, octagon_offset, octagon_total_width

logger = logging.getLogger(__name__)

Center = List[float]


class Shape(str, Enum):
    HEX = 'hex'
    OCTAGON = 'octagon'


@dataclass(frozen=True)
class Radial:
    """Rosette layout grown ``levels`` rings out from the origin."""

    levels: int


@dataclass(frozen=True)
class Grid:
    """Rectangular layout of ``n`` columns by ``m`` rows."""

    n: int
    m: int


@dataclass(frozen=True)
class Explicit:
    """Caller-supplied centre points, used as given."""

    points: Tuple[Tuple[float, float], ...]


Layout = Union[Radial, Grid, Explicit]


def as_shape(shape: Union[Shape, str]) -> Shape:
    try:
        return Shape(shape)
    except ValueError:
        raise ValueError(f'unknown tile shape {shape!r}') from None


def _check_count(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f'{name} must be an integer >= 1, got {value!r}')


def _expand_rows(rows: Sequence[Tuple[Tuple[float, float], int]],
                 step: float) -> List[Center]:
    # rows with a non-positive count contribute nothing
    pts: List[Center] = []
    for (x0, y0), count in rows:
        pts.extend([x0 + k * step, y0] for k in range(count))
    return pts


def _radial_centers(levels: int, offset_x: float, offset_y: float,
                    ring_bound: int) -> List[Center]:
    step = 2.0 * offset_x
    beginning_n = 2 * levels - 1
    dx = -(levels - 1) * offset_x * 2

    upper = [((dx + offset_x * i, offset_y * i), beginning_n - i)
             for i in range(1, ring_bound + 1)]
    lower = [((x0, -y0), count) for (x0, y0), count in upper]

    rows = [((dx, 0.0), beginning_n)] + upper + lower
    return _expand_rows(rows, step)


def generate_hex_centers_radial(radius: float, levels: int) -> List[Center]:
    """Return centres of a hexagonal rosette with ``levels`` rings.

    Order is the central row, then the rows above the x axis from the
    centre out, then their mirror images below it.
    """

    _check_count('levels', levels)
    offset_x, offset_y = hex_offsets(radius)
    beginning_n = 2 * levels - 1
    pts = _radial_centers(levels, offset_x, offset_y, beginning_n - levels)
    logger.debug('radial hex layout: %d levels, %d centers', levels, len(pts))
    return pts


def generate_octagon_centers_radial(radius: float, levels: int,
                                    rotate: bool = True) -> List[Center]:
    """Return centres of a radial octagon layout with ``levels`` rings.

    Rows step diagonally by ``octagon_offset()`` in both x and y.  Ring
    indices run up to ``2*levels``; rows whose count drops to zero or
    below are empty.
    """

    _check_count('levels', levels)
    offset = octagon_offset(radius, rotate)
    pts = _radial_centers(levels, offset, offset, 2 * levels)
    logger.debug('radial octagon layout: %d levels, %d centers', levels, len(pts))
    return pts


def generate_grid_centers(radius: float, n: int, m: int,
                          shape: Union[Shape, str] = Shape.HEX,
                          rotate: bool = True) -> List[Center]:
    """Return ``n*m`` centres of a rectangular grid.

    Iteration is ``i`` (column) outer and ``j`` (row) inner.  Hexagon
    rows with odd ``j`` are shifted by half a step in x.  Octagon
    centres sit on a square lattice of one flat-to-flat width;
    ``rotate`` only affects how the tiles are drawn.
    """

    _check_count('n', n)
    _check_count('m', m)
    shape = as_shape(shape)

    pts: List[Center] = []
    if shape is Shape.HEX:
        offset_x, offset_y = hex_offsets(radius)
        step = 2.0 * offset_x
        for i in range(n):
            for j in range(m):
                pts.append([i * step + (j % 2) * (step / 2.0), j * offset_y])
    else:
        width = octagon_total_width(radius)
        for i in range(n):
            for j in range(m):
                pts.append([i * width, j * width])

    logger.debug('%s grid layout: %dx%d, %d centers', shape.value, n, m, len(pts))
    return pts


def layout_from_options(centers: Optional[Sequence[Sequence[float]]] = None,
                        levels: Optional[int] = None,
                        n: Optional[int] = None,
                        m: Optional[int] = None) -> Optional[Layout]:
    """Resolve keyword layout options into a single layout.

    Explicit ``centers`` win over ``levels``, which win over ``n``/``m``.
    Returns ``None`` (and logs a notice) when no complete selector is
    given.
    """

    if centers is not None:
        pts = []
        for c in centers:
            if len(c) < 2 or not (isgoodnum(c[0]) and isgoodnum(c[1])):
                raise ValueError(f'bad center point: {c!r}')
            pts.append((c[0], c[1]))
        return Explicit(tuple(pts))
    if levels is not None:
        return Radial(levels)
    if n is not None and m is not None:
        return Grid(n, m)
    logger.info('no layout given: pass centers, levels, or both n and m; '
                'nothing to generate')
    return None


def generate_centers(layout: Optional[Layout], radius: float,
                     shape: Union[Shape, str] = Shape.HEX,
                     rotate: bool = True) -> List[Center]:
    """Generate the centre set for ``layout``."""

    shape = as_shape(shape)
    if layout is None:
        logger.info('no layout to generate, returning an empty center set')
        return []
    if isinstance(layout, Explicit):
        return [[x, y] for x, y in layout.points]
    if isinstance(layout, Radial):
        if shape is Shape.HEX:
            return generate_hex_centers_radial(radius, layout.levels)
        return generate_octagon_centers_radial(radius, layout.levels, rotate)
    if isinstance(layout, Grid):
        return generate_grid_centers(radius, layout.n, layout.m, shape, rotate)
    raise ValueError(f'unknown layout {layout!r}')


__all__ = [
    'Shape',
    'Radial',
    'Grid',
    'Explicit',
    'Layout',
    'as_shape',
    'generate_hex_centers_radial',
    'generate_octagon_centers_radial',
    'generate_grid_centers',
    'layout_from_options',
    'generate_centers',
]
