"""Position-dependent tile coloring.

``gradient_color()`` maps a normalized position ``(nx, ny)`` in the
unit square to an RGB triple under one of six named schemes.  Callers
normalize their centre set first with ``normalized_coordinates()``.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

DEFAULT_COLOR = (0.9, 0.9, 0.9)


class ColorScheme(str, Enum):
    SCHEME1 = 'scheme1'
    SCHEME2 = 'scheme2'
    SCHEME3 = 'scheme3'
    SCHEME4 = 'scheme4'
    SCHEME5 = 'scheme5'
    SCHEME6 = 'scheme6'


_SCHEMES = {
    ColorScheme.SCHEME1: lambda x, y: [x, 1 - x, y],
    ColorScheme.SCHEME2: lambda x, y: [1 - y, x, y],
    ColorScheme.SCHEME3: lambda x, y: [y, 1 - y, x],
    ColorScheme.SCHEME4: lambda x, y: [1 - x, x, 1 - y],
    ColorScheme.SCHEME5: lambda x, y: [x, x * y, 1 - x],
    ColorScheme.SCHEME6: lambda x, y: [1 - x * y, y, x],
}


def gradient_color(nx: float, ny: float,
                   scheme: Optional[Union[ColorScheme, str]] = None) -> List[float]:
    """Return the ``[r, g, b]`` color for a normalized position.

    Unknown or missing schemes give flat grey, ``DEFAULT_COLOR``.
    """

    try:
        fn = _SCHEMES[ColorScheme(scheme)]
    except ValueError:
        return list(DEFAULT_COLOR)
    return fn(nx, ny)


def normalized_coordinates(points: Sequence[Sequence[float]]) -> List[Tuple[float, float]]:
    """Rescale ``points`` to the unit square of their bounding box.

    An axis with zero extent (a single row or column) maps to ``0.0``.
    """

    if len(points) == 0:
        return []
    xy = np.asarray([[p[0], p[1]] for p in points], dtype=float)
    lo = xy.min(axis=0)
    extent = xy.max(axis=0) - lo
    safe = np.where(extent > 0, extent, 1.0)
    scaled = np.where(extent > 0, (xy - lo) / safe, 0.0)
    return [(float(x), float(y)) for x, y in scaled]


__all__ = [
    'ColorScheme',
    'DEFAULT_COLOR',
    'gradient_color',
    'normalized_coordinates',
]
