"""Pattern configuration loaded from YAML.

A pattern file is a single YAML mapping whose keys mirror the keyword
options of the generators and renderers::

    radius: 5.0
    shape: hex
    levels: 3
    spacing: 0.4
    color_scheme: scheme2

Exactly how the layout is chosen (explicit ``centers``, then ``levels``,
then ``n``/``m``) is decided by ``tesscad.centers.layout_from_options``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from tesscad.centers import Layout, Shape, as_shape, layout_from_options
from tesscad.geom import isgoodnum
from tesscad.gradient import ColorScheme

__all__ = [
    "PatternConfig",
    "config_from_dict",
    "load_pattern_config",
]


@dataclass(frozen=True)
class PatternConfig:
    radius: float
    shape: Shape = Shape.HEX
    levels: Optional[int] = None
    n: Optional[int] = None
    m: Optional[int] = None
    centers: Optional[List[List[float]]] = None
    rotate: bool = True
    order: int = 1
    spacing: float = 0.0
    color_scheme: Optional[ColorScheme] = None
    height: Optional[float] = None
    secondary: bool = False

    def layout(self) -> Optional[Layout]:
        return layout_from_options(self.centers, self.levels, self.n, self.m)

    def override(self, **changes: Any) -> "PatternConfig":
        """Return a copy with every non-``None`` entry of ``changes`` applied."""
        updates = {k: v for k, v in changes.items() if v is not None}
        if not updates:
            return self
        return config_from_dict({**self.to_dict(), **updates})

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


_KEYS = {f.name for f in fields(PatternConfig)}


def _optional_int(data: Dict[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return value


def config_from_dict(data: Dict[str, Any]) -> PatternConfig:
    """Validate a mapping of pattern options and build a ``PatternConfig``."""

    if not isinstance(data, dict):
        raise ValueError(f"pattern configuration must be a mapping, got {type(data).__name__}")
    unknown = sorted(set(data) - _KEYS)
    if unknown:
        raise ValueError(f"unknown pattern option(s): {', '.join(unknown)}")
    radius = data.get("radius")
    if not isgoodnum(radius) or radius <= 0:
        raise ValueError(f"radius must be a positive number, got {radius!r}")

    scheme = data.get("color_scheme")
    if scheme is not None:
        try:
            scheme = ColorScheme(scheme)
        except ValueError:
            raise ValueError(f"unknown color scheme {scheme!r}") from None

    for key in ("spacing", "height"):
        value = data.get(key)
        if value is not None and not isgoodnum(value):
            raise ValueError(f"{key} must be a number, got {value!r}")

    centers = data.get("centers")
    if centers is not None:
        if not isinstance(centers, list) or not all(
                isinstance(c, (list, tuple)) and len(c) >= 2
                and all(isgoodnum(v) for v in c) for c in centers):
            raise ValueError(f"centers must be a list of [x, y] points, got {centers!r}")
        centers = [list(c) for c in centers]

    config = PatternConfig(
        radius=radius,
        shape=as_shape(data.get("shape", Shape.HEX)),
        levels=_optional_int(data, "levels"),
        n=_optional_int(data, "n"),
        m=_optional_int(data, "m"),
        centers=centers,
        color_scheme=scheme,
        order=1 if data.get("order") is None else _optional_int(data, "order"),
    )
    extras = {k: data[k] for k in ("rotate", "spacing", "height", "secondary")
              if data.get(k) is not None}
    for key in ("rotate", "secondary"):
        if key in extras and not isinstance(extras[key], bool):
            raise ValueError(f"{key} must be true or false, got {extras[key]!r}")
    return replace(config, **extras)


def load_pattern_config(path: Path | str) -> PatternConfig:
    """Load a ``PatternConfig`` from the YAML file at ``path``."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"pattern configuration not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp)
    if data is None:
        data = {}
    return config_from_dict(data)
