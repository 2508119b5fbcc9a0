## DXF export of tessellation tiles for tessCAD
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

"""
DXF export of tessellation tiles.

Each tile outline is written as a closed LWPOLYLINE carrying the tile's
gradient color as a DXF true color, using the ezdxf library.  Optional
marker points (for example secondary centres) go on their own layer.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence

import ezdxf
from ezdxf.lldxf.const import DXFError

from tesscad.geom import polyvertices
from tesscad.tiles import Tile

logger = logging.getLogger(__name__)

MARKER_LAYER = 'MARKERS'


def dxf_path(output_path: str) -> Path:
    """Return ``output_path`` with a ``.dxf`` extension."""
    path = Path(output_path)
    if path.suffix.lower() == '.dxf':
        return path
    return Path(str(path) + '.dxf')


def color_to_rgb(color: Sequence[float]) -> tuple:
    """Convert a ``[0,1]`` float color to 8-bit RGB, clamping out-of-range values."""
    return tuple(int(round(max(0.0, min(1.0, c)) * 255)) for c in color[:3])


def new_document(layer: str = 'TILES'):
    # setup=False avoids default blocks with SOLID entities that some
    # CAD programs (e.g., FreeCAD) reject
    doc = ezdxf.new(dxfversion='R2010', setup=False)
    doc.header['$MEASUREMENT'] = 1 # metric
    doc.header['$INSUNITS'] = 4 # millimeters
    for name, color in ((layer, 7), (MARKER_LAYER, 4)): # white, aqua
        if not doc.layers.has_entry(name):
            doc.layers.new(name, dxfattribs={'color': color})
    return doc


def draw_tiles(msp, tiles: Iterable[Tile], layer: str = 'TILES') -> int:
    """Add one closed polyline per tile to modelspace ``msp``."""
    count = 0
    for tile in tiles:
        pts = [(p[0], p[1]) for p in polyvertices(tile.outline)]
        entity = msp.add_lwpolyline(pts, close=True,
                                    dxfattribs={'layer': layer})
        entity.rgb = color_to_rgb(tile.color)
        count += 1
    return count


def write_tiles_dxf(tiles: Iterable[Tile], output_path: str, layer: str = 'TILES',
                    markers: Optional[Sequence[Sequence[float]]] = None) -> bool:
    """Export tile outlines to a DXF file.

    Args:
        tiles: tiles from ``tesscad.tiles.layout_tiles``
        output_path: path to the DXF file (``.dxf`` is added if missing)
        layer: DXF layer for the outlines (default 'TILES')
        markers: optional ``[x, y]`` points written as POINT entities on
            the 'MARKERS' layer

    Returns:
        True if export succeeded, False otherwise.
    """
    path = dxf_path(output_path)
    doc = new_document(layer)
    msp = doc.modelspace()

    count = draw_tiles(msp, tiles, layer)
    for m in markers or []:
        msp.add_point((m[0], m[1]), dxfattribs={'layer': MARKER_LAYER})

    try:
        doc.saveas(str(path))
    except (OSError, DXFError) as e:
        logger.error('DXF export error: %s', e)
        return False
    logger.info('wrote %d tiles to %s', count, path)
    return True


__all__ = [
    'MARKER_LAYER',
    'dxf_path',
    'color_to_rgb',
    'new_document',
    'draw_tiles',
    'write_tiles_dxf',
]
