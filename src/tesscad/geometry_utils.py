"""Facets of extruded tiles.

A tile prism is a list of ``Triangle`` facets.  Each facet is wound
counter-clockwise when seen from outside the solid, so its ``normal``
(right-hand rule over ``v0 -> v1 -> v2``) points away from the prism.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from tesscad.geom import cross, epsilon, isgoodnum, mag, sub

Vec3 = Tuple[float, float, float]


@dataclass(frozen=True)
class Triangle:
    """One outward-facing facet of a tile prism."""

    normal: Vec3
    v0: Vec3
    v1: Vec3
    v2: Vec3

    @property
    def vertices(self) -> Tuple[Vec3, Vec3, Vec3]:
        return self.v0, self.v1, self.v2


def to_vec3(p: Sequence[float]) -> Vec3:
    """Lift an outline point or ``[x, y]`` centre to an XYZ tuple.

    Two-component input lies in the drawing plane, ``z = 0``; anything
    past the third component (``w`` of a homogeneous point) is ignored.
    """

    if len(p) < 2 or not all(isgoodnum(c) for c in p[:3]):
        raise ValueError(f"expected an [x, y] or [x, y, z, ...] point, got {p!r}")
    z = p[2] if len(p) > 2 else 0.0
    return float(p[0]), float(p[1]), float(z)


def _unit_normal(v0: Vec3, v1: Vec3, v2: Vec3) -> Optional[Vec3]:
    n = cross(sub(v1, v0), sub(v2, v0))
    length = mag(n)
    if length <= epsilon:
        return None
    return (n[0] / length, n[1] / length, n[2] / length)


def make_triangle(v0: Vec3, v1: Vec3, v2: Vec3, outward: Sequence[float]) -> Optional[Triangle]:
    """Build the facet ``v0, v1, v2`` facing ``outward``.

    The winding is flipped when the vertices as given face away from
    ``outward``.  Collinear or coincident vertices give ``None``.
    """

    normal = _unit_normal(v0, v1, v2)
    if normal is None:
        return None
    if sum(n * o for n, o in zip(normal, outward)) < 0:
        v1, v2 = v2, v1
        normal = (-normal[0], -normal[1], -normal[2])
    return Triangle(normal=normal, v0=v0, v1=v1, v2=v2)


__all__ = [
    "Triangle",
    "Vec3",
    "to_vec3",
    "make_triangle",
]
