"""
Predicate sets ("traits") consumed by the convex hull scan.

A traits bundle tells the scan which point type it handles and provides
the three predicates the Graham/Andrew scan needs: a strict xy order,
a strict left-turn test and an equality test. Any coordinate domain can
plug into the scan by supplying its own bundle.
"""
from abc import ABC, abstractmethod

from geometry import Point, cross


class HullTraits(ABC):
    point_type: type

    @abstractmethod
    def less_xy(self, p, q) -> bool:
        """
        Strict order: p.x < q.x, or equal x and p.y < q.y.
        """

    @abstractmethod
    def left_turn(self, p0, p1, p2) -> bool:
        """
        True iff p0 -> p1 -> p2 is a strict left (counter-clockwise) turn.
        Collinear and right-turning triples give False.
        """

    @abstractmethod
    def equal(self, p, q) -> bool:
        ...


class RationalTraits(HullTraits):
    """
    Exact predicates over geometry.Point with Rational coordinates.
    """
    point_type = Point

    def less_xy(self, p: Point, q: Point) -> bool:
        return p.x < q.x or (p.x == q.x and p.y < q.y)

    def left_turn(self, p0: Point, p1: Point, p2: Point) -> bool:
        return cross(p1 - p0, p2 - p0).positive()

    def equal(self, p: Point, q: Point) -> bool:
        return p.x == q.x and p.y == q.y


class IntegerTraits(HullTraits):
    """
    Predicates over plain (x, y) tuples of Python integers.
    """
    point_type = tuple

    def less_xy(self, p: tuple[int, int], q: tuple[int, int]) -> bool:
        return p[0] < q[0] or (p[0] == q[0] and p[1] < q[1])

    def left_turn(self, p0: tuple[int, int], p1: tuple[int, int], p2: tuple[int, int]) -> bool:
        return (p1[0] - p0[0]) * (p2[1] - p0[1]) - (p2[0] - p0[0]) * (p1[1] - p0[1]) > 0

    def equal(self, p: tuple[int, int], q: tuple[int, int]) -> bool:
        return p[0] == q[0] and p[1] == q[1]
