import logging

from functools import cmp_to_key
from typing import Iterable, Sequence

from traits import HullTraits, RationalTraits

logger = logging.getLogger(__name__)

DEFAULT_TRAITS = RationalTraits()


def _sort_key(traits: HullTraits):
    def cmp(p, q) -> int:
        if traits.less_xy(p, q):
            return -1
        if traits.less_xy(q, p):
            return 1
        return 0
    return cmp_to_key(cmp)


def _scan(points: Iterable, traits: HullTraits) -> list:
    """
    Single monotone chain: pop while the two top points and the incoming one
    do not make a strict left turn. Collinear and duplicate points never survive
    between two chain vertices.
    """
    chain = []
    for p in points:
        while len(chain) >= 2 and not traits.left_turn(chain[-2], chain[-1], p):
            chain.pop()
        chain.append(p)
    return chain


def lower_chain(points: Sequence, traits: HullTraits | None = None) -> list:
    """
    Lower hull from leftmost to rightmost point.
    Assumes input is sorted by traits.less_xy.
    """
    return _scan(points, traits or DEFAULT_TRAITS)


def upper_chain(points: Sequence, traits: HullTraits | None = None) -> list:
    """
    Upper hull from rightmost to leftmost point.
    Assumes input is sorted by traits.less_xy.
    """
    return _scan(reversed(points), traits or DEFAULT_TRAITS)


def graham_andrew(points: Iterable, traits: HullTraits | None = None, out=None):
    """
    Andrew's variant of the Graham scan.

    Sorts the points by traits.less_xy, builds the lower and upper chains and
    appends the hull vertices to `out` counter-clockwise, starting at the
    smallest point. `out` can be anything with an `append` method; a new list
    is used when it is omitted. Returns `out`.

    Time complexity: O(n*log(n)).
    """
    if traits is None:
        traits = DEFAULT_TRAITS
    if out is None:
        out = []

    pts = sorted(points, key=_sort_key(traits))
    if len(pts) <= 1:
        hull = pts
    elif traits.equal(pts[0], pts[-1]):
        # every point is a copy of the same one
        hull = pts[:1]
    else:
        lower = lower_chain(pts, traits)
        upper = upper_chain(pts, traits)
        assert traits.equal(lower[0], upper[-1]) and traits.equal(lower[-1], upper[0])
        hull = lower[:-1] + upper[:-1]

    logger.debug('[graham_andrew] %d points -> %d hull vertices', len(pts), len(hull))
    for p in hull:
        out.append(p)
    return out


convex_hull = graham_andrew


def is_strictly_convex(hull: Sequence, traits: HullTraits | None = None) -> bool:
    """
    Check that every cyclic triple of the hull makes a strict left turn.
    Sequences with fewer than three points are trivially convex.
    """
    if traits is None:
        traits = DEFAULT_TRAITS
    n = len(hull)
    if n < 3:
        return True
    return all(
        traits.left_turn(hull[i], hull[(i + 1) % n], hull[(i + 2) % n])
        for i in range(n)
    )
