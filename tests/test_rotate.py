"""Tests for point rotation around a pivot."""

import math

import pytest

from rcu.geom.rotate import Point, rotate_point_copy, rotate_points


class TestSinglePoint:
    def test_quarter_turn(self) -> None:
        p = Point(1, 0)
        out = rotate_points(p, Point(0, 0), math.pi / 2)
        assert out is p
        assert p.x == pytest.approx(0, abs=1e-9)
        assert p.y == pytest.approx(1)

    def test_around_pivot(self) -> None:
        pivot = Point(1, 1)
        p = Point(2, 1)
        rotate_points(p, pivot, math.pi / 2)
        assert p.x == pytest.approx(1)
        assert p.y == pytest.approx(2)
        assert (pivot.x, pivot.y) == (1, 1)

    def test_mapping_point(self) -> None:
        p = {"x": 0, "y": 2}
        rotate_points(p, {"x": 0, "y": 0}, math.pi)
        assert p["x"] == pytest.approx(0, abs=1e-9)
        assert p["y"] == pytest.approx(-2)

    def test_degree_string_angle(self) -> None:
        p = Point(1, 0)
        rotate_points(p, Point(0, 0), "90deg")
        assert p.x == pytest.approx(0, abs=1e-9)
        assert p.y == pytest.approx(1)


class TestNoOp:
    @pytest.mark.parametrize("angle", [0, 0.0, None, "0deg", "abc"])
    def test_zero_angle_keeps_point(self, angle) -> None:
        p = Point(3, 4)
        assert rotate_points(p, Point(0, 0), angle) is p
        assert (p.x, p.y) == (3, 4)

    def test_missing_point(self) -> None:
        assert rotate_points(None, Point(0, 0), 1.0) is None

    def test_zero_angle_leaves_none_entries(self) -> None:
        pts = [None, Point(1, 1)]
        assert rotate_points(pts, Point(0, 0), 0) is pts
        assert pts[0] is None


class TestSequence:
    def test_none_entries_skipped(self) -> None:
        pts = [Point(1, 0), None, Point(0, 1)]
        out = rotate_points(pts, Point(0, 0), math.pi)
        assert out is pts
        assert pts[1] is None
        assert pts[0].x == pytest.approx(-1)
        assert pts[0].y == pytest.approx(0, abs=1e-9)
        assert pts[2].x == pytest.approx(0, abs=1e-9)
        assert pts[2].y == pytest.approx(-1)

    def test_same_snapshot_for_every_point(self) -> None:
        """Every point is rotated with the same angle around the same pivot."""
        pts = [Point(2, 0), Point(0, 2), Point(-2, 0)]
        rotate_points(pts, Point(0, 0), math.pi / 2)
        got = [(round(p.x, 9), round(p.y, 9)) for p in pts]
        assert got == [(0, 2), (-2, 0), (0, -2)]

    def test_empty_list(self) -> None:
        pts: list = []
        assert rotate_points(pts, Point(0, 0), 1.0) is pts


class TestMalformedCoordinates:
    def test_none_coordinate_counts_as_zero(self) -> None:
        p = {"x": None, "y": 1}
        rotate_points(p, {"x": 0, "y": 0}, math.pi / 2)
        assert p["x"] == pytest.approx(-1)
        assert p["y"] == pytest.approx(0, abs=1e-9)

    def test_missing_key_and_none_pivot(self) -> None:
        p = {"y": 2}
        rotate_points(p, None, math.pi)
        assert p["x"] == pytest.approx(0, abs=1e-9)
        assert p["y"] == pytest.approx(-2)


class TestCopyVariant:
    def test_input_point_untouched(self) -> None:
        p = Point(1, 0)
        out = rotate_point_copy(p, Point(0, 0), math.pi / 2)
        assert out is not p
        assert (p.x, p.y) == (1, 0)
        assert out.y == pytest.approx(1)

    def test_copy_from_mapping(self) -> None:
        p = {"x": 1, "y": 0}
        out = rotate_point_copy(p, Point(0, 0), "180deg")
        assert p == {"x": 1, "y": 0}
        assert out.as_tuple() == pytest.approx((-1, 0), abs=1e-9)
