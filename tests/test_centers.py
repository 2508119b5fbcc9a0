"""
Tests for the hexagon and octagon centre generators.
"""

import logging
import math

import pytest

from tesscad.centers import (
    Explicit,
    Grid,
    Radial,
    Shape,
    generate_centers,
    generate_grid_centers,
    generate_hex_centers_radial,
    generate_octagon_centers_radial,
    layout_from_options,
)
from tesscad.point_utils import is_point_in_list


def _is_flat(pts):
    return all(len(p) == 2 and not isinstance(p[0], list) for p in pts)


class TestRadialHex:
    """Tests for the hexagon rosette generator."""

    def test_single_level_is_origin(self):
        pts = generate_hex_centers_radial(2.0, 1)
        assert len(pts) == 1
        assert math.isclose(pts[0][0], 0.0, abs_tol=1e-12)
        assert math.isclose(pts[0][1], 0.0, abs_tol=1e-12)

    def test_two_levels(self):
        r = 1.0
        ox = r * math.cos(math.radians(30))
        pts = generate_hex_centers_radial(r, 2)

        expected = [
            [-2 * ox, 0.0], [0.0, 0.0], [2 * ox, 0.0],
            [-ox, 1.5], [ox, 1.5],
            [-ox, -1.5], [ox, -1.5],
        ]
        assert len(pts) == len(expected)
        for p, e in zip(pts, expected):
            assert p[0] == pytest.approx(e[0], abs=1e-9)
            assert p[1] == pytest.approx(e[1], abs=1e-9)

    @pytest.mark.parametrize("levels", [1, 2, 3, 4, 5, 7])
    def test_count_is_centered_hexagonal_number(self, levels):
        pts = generate_hex_centers_radial(3.0, levels)
        assert len(pts) == 3 * levels * levels - 3 * levels + 1
        assert _is_flat(pts)

    @pytest.mark.parametrize("levels", [1, 2, 4])
    def test_central_row(self, levels):
        pts = generate_hex_centers_radial(1.5, levels)
        central = pts[:2 * levels - 1]
        assert all(p[1] == 0 for p in central)
        # centred on the origin
        assert central[0][0] == pytest.approx(-central[-1][0])

    @pytest.mark.parametrize("levels", [2, 3, 5])
    def test_mirror_symmetry(self, levels):
        pts = generate_hex_centers_radial(2.5, levels)
        for x, y in pts:
            if y > 0:
                assert is_point_in_list([x, -y], pts)

    def test_rows_are_centered(self):
        pts = generate_hex_centers_radial(1.0, 4)
        assert sum(p[0] for p in pts) == pytest.approx(0.0, abs=1e-9)

    def test_upper_rows_precede_lower_rows(self):
        pts = generate_hex_centers_radial(1.0, 3)
        tail = pts[5:]
        half = len(tail) // 2
        assert all(p[1] > 0 for p in tail[:half])
        assert all(p[1] < 0 for p in tail[half:])
        for up, down in zip(tail[:half], tail[half:]):
            assert up[0] == down[0]
            assert up[1] == -down[1]

    def test_neighbours_touch(self):
        r = 2.0
        pts = generate_hex_centers_radial(r, 2)
        # the six outer centres are one flat-to-flat width from the origin
        for p in pts:
            d = math.hypot(p[0], p[1])
            assert d == pytest.approx(0.0, abs=1e-9) or \
                d == pytest.approx(2 * r * math.cos(math.radians(30)))

    def test_invalid_levels(self):
        with pytest.raises(ValueError):
            generate_hex_centers_radial(1.0, 0)
        with pytest.raises(ValueError):
            generate_hex_centers_radial(1.0, 2.5)

    def test_invalid_radius(self):
        with pytest.raises(ValueError):
            generate_hex_centers_radial(0, 2)
        with pytest.raises(ValueError):
            generate_hex_centers_radial(-1.0, 2)


class TestRadialOctagon:
    """Tests for the radial octagon generator."""

    @pytest.mark.parametrize("levels", [1, 2, 3, 4])
    def test_count(self, levels):
        pts = generate_octagon_centers_radial(1.0, levels)
        assert len(pts) == (2 * levels - 1) ** 2
        assert _is_flat(pts)

    def test_diagonal_offset(self):
        r = 2.0
        offset = math.sqrt(2.0) * r * math.cos(math.radians(22.5))
        pts = generate_octagon_centers_radial(r, 2)
        assert [-2 * offset, 0.0] == pytest.approx(pts[0])
        assert [-offset, offset] == pytest.approx(pts[3])

    def test_unrotated_offset(self):
        r = 2.0
        pts = generate_octagon_centers_radial(r, 2, rotate=False)
        assert pts[1][0] - pts[0][0] == pytest.approx(2 * math.sqrt(2.0) * r)

    @pytest.mark.parametrize("rotate", [True, False])
    def test_mirror_symmetry(self, rotate):
        pts = generate_octagon_centers_radial(1.25, 3, rotate)
        for x, y in pts:
            if y > 0:
                assert is_point_in_list([x, -y], pts)

    def test_single_level(self):
        assert generate_octagon_centers_radial(1.0, 1) == [[0.0, 0.0]]


class TestGrid:
    """Tests for rectangular grid layouts."""

    @pytest.mark.parametrize("n,m", [(1, 1), (3, 2), (2, 5), (7, 4)])
    @pytest.mark.parametrize("shape", ["hex", "octagon"])
    def test_count(self, n, m, shape):
        pts = generate_grid_centers(1.0, n, m, shape)
        assert len(pts) == n * m
        assert _is_flat(pts)

    def test_hex_grid_stagger(self):
        r = 1.5
        step = 2 * r * math.cos(math.radians(30))
        pts = generate_grid_centers(radius=r, n=3, m=2, shape=Shape.HEX)

        assert len(pts) == 6
        even = [p for p in pts if p[1] == 0]
        odd = [p for p in pts if p[1] != 0]
        assert len(even) == 3 and len(odd) == 3
        for e, o in zip(even, odd):
            assert o[0] - e[0] == pytest.approx(step / 2)
            assert o[1] == pytest.approx(r * 1.5)

    def test_grid_order_is_column_outer(self):
        pts = generate_grid_centers(1.0, 2, 3, "octagon")
        w = pts[1][1]
        assert pts[0] == [0.0, 0.0]
        assert pts[1] == [0.0, w]
        assert pts[2] == [0.0, 2 * w]
        assert pts[3] == [w, 0.0]

    def test_octagon_grid_ignores_rotate(self):
        a = generate_grid_centers(2.0, 3, 3, "octagon", rotate=True)
        b = generate_grid_centers(2.0, 3, 3, "octagon", rotate=False)
        assert a == b
        assert a[1][1] == pytest.approx(4.0 * math.cos(math.radians(22.5)))

    def test_bad_arguments(self):
        with pytest.raises(ValueError):
            generate_grid_centers(1.0, 0, 2)
        with pytest.raises(ValueError):
            generate_grid_centers(1.0, 2, 0)
        with pytest.raises(ValueError):
            generate_grid_centers(1.0, 2, 2, "pentagon")


class TestLayouts:
    """Tests for keyword option resolution and dispatch."""

    def test_resolution_priority(self):
        assert layout_from_options(centers=[[0, 0]], levels=2, n=1, m=1) == \
            Explicit(((0, 0),))
        assert layout_from_options(levels=2, n=1, m=1) == Radial(2)
        assert layout_from_options(n=3, m=4) == Grid(3, 4)

    def test_missing_layout_is_a_notice(self, caplog):
        caplog.set_level(logging.INFO, logger="tesscad")
        assert layout_from_options() is None
        assert layout_from_options(n=3) is None
        assert "no layout given" in caplog.text

    def test_generate_without_layout(self, caplog):
        caplog.set_level(logging.INFO, logger="tesscad")
        assert generate_centers(None, 1.0) == []
        assert "empty center set" in caplog.text

    def test_dispatch(self):
        assert len(generate_centers(Radial(3), 1.0)) == 19
        assert len(generate_centers(Radial(3), 1.0, "octagon")) == 25
        assert len(generate_centers(Grid(2, 3), 1.0, Shape.OCTAGON)) == 6

    def test_explicit_centers_are_copied(self):
        layout = layout_from_options(centers=[[1.0, 2.0], (3.0, 4.0, 0.0)])
        pts = generate_centers(layout, 1.0)
        assert pts == [[1.0, 2.0], [3.0, 4.0]]

    def test_bad_explicit_center(self):
        with pytest.raises(ValueError):
            layout_from_options(centers=[[1.0]])
        with pytest.raises(ValueError):
            layout_from_options(centers=[["a", 1.0]])
