"""
Tests for DXF export of tiles.
"""

import ezdxf

from tesscad.centers import generate_grid_centers, generate_hex_centers_radial
from tesscad.ezdxf_exporter import (
    MARKER_LAYER,
    color_to_rgb,
    dxf_path,
    write_tiles_dxf,
)
from tesscad.tiles import Tile, layout_tiles, secondary_centers


def test_dxf_path():
    assert str(dxf_path("out/tiles")) == "out/tiles.dxf"
    assert str(dxf_path("tiles.DXF")) == "tiles.DXF"


def test_color_to_rgb():
    assert color_to_rgb((0.0, 1.0, 0.5)) == (0, 255, 128)
    assert color_to_rgb((-0.2, 1.3, 0.8)) == (0, 255, 204)


def test_write_tiles(tmp_path):
    centers = generate_hex_centers_radial(2.0, 2)
    tiles = layout_tiles(centers, 2.0, "hex", spacing=0.2, color_scheme="scheme1")
    out = tmp_path / "rosette.dxf"

    assert write_tiles_dxf(tiles, str(out))
    assert out.exists()

    doc = ezdxf.readfile(str(out))
    polys = doc.modelspace().query("LWPOLYLINE")
    assert len(polys) == len(tiles)
    for entity, tile in zip(polys, tiles):
        assert entity.closed
        assert len(entity) == 6
        assert entity.dxf.layer == "TILES"
        assert tuple(entity.rgb) == color_to_rgb(tile.color)


def test_write_open_outline(tmp_path):
    tile = layout_tiles([[0.0, 0.0]], 1.0, "octagon")[0]
    open_tile = Tile(center=tile.center, outline=tile.outline[:-1], color=tile.color)
    out = tmp_path / "open.dxf"

    assert write_tiles_dxf([tile, open_tile], str(out))

    polys = ezdxf.readfile(str(out)).modelspace().query("LWPOLYLINE")
    assert [len(p) for p in polys] == [8, 8]


def test_write_markers(tmp_path):
    centers = generate_grid_centers(1.0, 3, 2)
    tiles = layout_tiles(centers, 1.0)
    markers = secondary_centers(centers)
    out = tmp_path / "grid"

    assert write_tiles_dxf(tiles, str(out), layer="HEX", markers=markers)

    doc = ezdxf.readfile(str(tmp_path / "grid.dxf"))
    msp = doc.modelspace()
    assert len(msp.query("LWPOLYLINE[layer=='HEX']")) == 6
    assert len(msp.query("POINT")) == len(markers)
    assert all(p.dxf.layer == MARKER_LAYER for p in msp.query("POINT"))


def test_write_failure(tmp_path, caplog):
    tiles = layout_tiles(generate_grid_centers(1.0, 1, 1), 1.0)
    bad = tmp_path / "missing" / "dir" / "tiles.dxf"
    assert not write_tiles_dxf(tiles, str(bad))
    assert "DXF export error" in caplog.text


def test_module_carries_mit_notice():
    import inspect

    import tesscad.ezdxf_exporter as exporter

    source = inspect.getsource(exporter)
    assert source.startswith("## DXF export of tessellation tiles for tessCAD\n")
    assert "Permission is hereby granted, free of charge" in source
    assert "All rights reserved" not in source
