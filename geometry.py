import numbers

from dataclasses import dataclass
from enum import IntEnum

from rational import Rational


def _as_rational(value) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, numbers.Integral):
        return Rational(value)
    raise TypeError(f'Expected Rational or int, got {type(value).__name__}')


@dataclass(frozen=True)
class Point:
    x: Rational
    y: Rational

    def __post_init__(self):
        object.__setattr__(self, 'x', _as_rational(self.x))
        object.__setattr__(self, 'y', _as_rational(self.y))

    def add(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def subtract(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, s) -> 'Point':
        s = _as_rational(s)
        return Point(s * self.x, s * self.y)

    def divide(self, s) -> 'Point':
        s = _as_rational(s)
        return Point(self.x / s, self.y / s)

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, s):
        if not isinstance(s, (Rational, numbers.Integral)):
            return NotImplemented
        return self.scale(s)

    __rmul__ = __mul__

    def __truediv__(self, s):
        if not isinstance(s, (Rational, numbers.Integral)):
            return NotImplemented
        return self.divide(s)

    def __lt__(self, other):
        return self.x < other.x or (self.x == other.x and self.y < other.y)

    def __str__(self):
        return f'<{self.x}, {self.y}>'


def cross(u: Point, v: Point) -> Rational:
    """
    2D cross product of u and v taken as vectors from the origin.
    """
    return u.x * v.y - v.x * u.y


class Orientation(IntEnum):
    RIGHT_TURN = -1
    COLLINEAR = 0
    LEFT_TURN = 1


def orientation(p: Point, q: Point, r: Point) -> Orientation:
    """
    Turn made when travelling p -> q -> r.
    """
    return Orientation(cross(q - p, r - p).sign())


def collinear(p: Point, q: Point, r: Point) -> bool:
    return cross(q - p, r - p).is_zero()


def midpoint(p: Point, q: Point) -> Point:
    return (p + q) / 2


def squared_distance(p: Point, q: Point) -> Rational:
    d = q - p
    return d.x * d.x + d.y * d.y


def squared_distance_to_segment(p: Point, a: Point, b: Point) -> Rational:
    """
    Squared distance from p to the closed segment [a, b].
    The foot of the perpendicular is clamped to the segment ends.
    """
    ab = b - a
    ap = p - a
    length2 = squared_distance(a, b)
    if length2.is_zero():
        return squared_distance(p, a)

    t = (ap.x * ab.x + ap.y * ab.y) / length2
    if t <= 0:
        return squared_distance(p, a)
    if t >= 1:
        return squared_distance(p, b)
    return squared_distance(p, a + ab * t)
