"""Unit tests for Point."""

import math

import pytest

from pathsearch.domain.types import Point


class TestDistance:
    """Test Euclidean distances."""

    def test_distance_diagonal(self):
        """Distance between (1,1) and (2,2) is sqrt(2)."""
        assert Point("A", 1, 1).distance(Point("B", 2, 2)) == math.sqrt(2)

    def test_distance_to_self_is_zero(self):
        """A point is at distance 0 from itself."""
        p = Point("A", 1, 1)
        assert p.distance(p) == 0

    def test_distance_is_symmetric(self):
        """Distance does not depend on direction."""
        p, q = Point("P", -3, 7), Point("Q", 4, -2)
        assert p.distance(q) == pytest.approx(q.distance(p))

    def test_distance_to_origin(self):
        """A 3-4-5 triangle."""
        assert Point("A", 3, 4).distance_to_origin() == 5.0


class TestOrdering:
    """Test origin-distance ordering."""

    def test_closer_to_origin_is_smaller(self):
        """The origin sorts before any other point."""
        origin = Point("Origin", 0, 0)
        other = Point("A", 2, 0)
        assert origin < other
        assert not other < origin

    def test_equal_distance_is_not_smaller(self):
        """Points at the same origin distance are not ordered."""
        p, q = Point("A", 1, 1), Point("B", -1, -1)
        assert not p < q
        assert not q < p

    def test_sorted_by_origin_distance(self):
        """sorted() uses origin distance."""
        points = [Point("far", 5, 5), Point("near", 0, 1), Point("mid", 2, 2)]
        assert [p.label for p in sorted(points)] == ["near", "mid", "far"]


class TestIdentity:
    """Test immutability and formatting."""

    def test_frozen(self):
        """Points cannot be modified once created."""
        p = Point("A", 1, 2)
        with pytest.raises(AttributeError):
            p.x = 5

    def test_str(self):
        """String form matches the graph file point descriptor."""
        assert str(Point("A", 10, 20)) == "A : 10,20"
