import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from rtree2d.geometry import Point, Rect

coords = st.integers(min_value=-100, max_value=100).map(float)
rect_coords = st.tuples(coords, coords, coords, coords)
point_coords = st.tuples(coords, coords)


def test_from_coords_normalises_corners():
    assert Rect.from_coords(2, 2, 1, 1) == Rect(Point(1.0, 1.0), Point(2.0, 2.0))
    assert Rect.from_coords(3, 1, 1, 4) == Rect(Point(1.0, 1.0), Point(3.0, 4.0))


def test_str_formats():
    assert str(Point(4.5, 4.5)) == "(4.5,4.5)"
    assert str(Rect.from_coords(1, 1, 2, 2)) == "(1,1)-(2,2)"


def test_area():
    assert Rect.from_coords(0, 0, 2, 3).area() == 6.0


def test_touching_rects_intersect():
    a = Rect.from_coords(1, 1, 2, 2)
    b = Rect.from_coords(2, 2, 5, 5)
    assert a.intersects(b)
    assert b.intersects(a)


def test_disjoint_rects_do_not_intersect():
    a = Rect.from_coords(1, 1, 2, 2)
    b = Rect.from_coords(7, 7, 8, 8)
    assert not a.intersects(b)


def test_contains_point_on_boundary():
    r = Rect.from_coords(0, 0, 2, 2)
    assert r.contains_point(Point(2.0, 0.0))
    assert not r.contains_point(Point(2.5, 1.0))


def test_contains_rect():
    outer = Rect.from_coords(0, 0, 10, 10)
    inner = Rect.from_coords(1, 1, 2, 2)
    assert outer.contains_rect(inner)
    assert not inner.contains_rect(outer)


def test_distance_inside_is_zero():
    assert Rect.from_coords(0, 0, 2, 2).distance(Point(1.0, 1.0)) == 0.0


def test_distance_to_edge():
    assert Rect.from_coords(0, 0, 2, 2).distance(Point(5.0, 1.0)) == 3.0


@given(rect_coords, rect_coords)
def test_expanded_covers_both(ca, cb):
    a = Rect.from_coords(*ca)
    b = Rect.from_coords(*cb)
    merged = a.expanded(b)
    assert merged.contains_rect(a)
    assert merged.contains_rect(b)


@given(rect_coords, rect_coords)
def test_expansion_area_matches_expanded(ca, cb):
    a = Rect.from_coords(*ca)
    b = Rect.from_coords(*cb)
    assert a.expansion_area(b) == pytest.approx(a.expanded(b).area() - a.area())
    assert a.expansion_area(b) >= 0


@given(rect_coords)
def test_expansion_by_self_is_zero(ca):
    a = Rect.from_coords(*ca)
    assert a.expansion_area(a) == 0


@given(rect_coords, point_coords)
def test_distance_zero_iff_contained(cr, cp):
    r = Rect.from_coords(*cr)
    p = Point(*cp)
    assert (r.distance(p) == 0.0) == r.contains_point(p)


@given(rect_coords, point_coords)
def test_distance_bounded_by_corner_distance(cr, cp):
    r = Rect.from_coords(*cr)
    p = Point(*cp)
    corner = math.hypot(r.low.x - p.x, r.low.y - p.y)
    assert r.distance(p) <= corner + 1e-9


@given(rect_coords, rect_coords)
def test_intersects_is_symmetric(ca, cb):
    a = Rect.from_coords(*ca)
    b = Rect.from_coords(*cb)
    assert a.intersects(b) == b.intersects(a)