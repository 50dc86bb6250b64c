from __future__ import annotations

import math
from enum import StrEnum
from typing import Sequence

from minboundinggeo.config import ABSOLUTE_TOLERANCE, RELATIVE_TOLERANCE
from minboundinggeo.model.geometry_primitives import Point


class Orientation(StrEnum):
    """Turn direction of an ordered triple of points."""
    COUNTERCLOCKWISE = "counterclockwise"
    CLOCKWISE = "clockwise"
    COLLINEAR = "collinear"


def nearly_equal(a: float, b: float, epsilon: float = RELATIVE_TOLERANCE) -> bool:
    """
    Compare two reals using a relative tolerance.

    Values that are both (almost) zero are treated as equal, since relative
    error is meaningless there. NaN is never equal to anything.

    Args:
        a: First value.
        b: Second value.
        epsilon: Relative tolerance.

    Returns:
        True if `a` and `b` are equal within the tolerance.
    """
    if a == b:
        # shortcut, handles infinities
        return True

    abs_a = abs(a)
    abs_b = abs(b)
    diff = abs(a - b)
    total = abs_a + abs_b
    if diff < ABSOLUTE_TOLERANCE or total < ABSOLUTE_TOLERANCE:
        return True

    return diff / total < epsilon


def points_nearly_equal(p: Point, q: Point) -> bool:
    """Coincidence test in the XY plane."""
    return nearly_equal(p.x, q.x) and nearly_equal(p.y, q.y)


def polar_angle(origin: Point, point: Point) -> float:
    """Angle in radians (-pi, pi] of `point` seen from `origin`."""
    return math.atan2(point.y - origin.y, point.x - origin.x)


def ccw(p1: Point, p2: Point, p3: Point) -> float:
    """
    Signed 2D cross product (p2 - p1) x (p3 - p1).

    The two partial products are compared with `nearly_equal` first, so a
    triple that is collinear up to rounding noise yields exactly 0.0.

    Returns:
        Positive for a counter-clockwise turn, negative for a clockwise turn,
        0.0 for collinear points.
    """
    cross1 = (p2.x - p1.x) * (p3.y - p1.y)
    cross2 = (p2.y - p1.y) * (p3.x - p1.x)
    if nearly_equal(cross1, cross2):
        return 0.0
    return cross1 - cross2


def orientation(p1: Point, p2: Point, p3: Point) -> Orientation:
    cross = ccw(p1, p2, p3)
    if cross > 0:
        return Orientation.COUNTERCLOCKWISE
    if cross < 0:
        return Orientation.CLOCKWISE
    return Orientation.COLLINEAR


def is_point_in_convex_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """
    Check whether a point lies inside or on the boundary of a convex polygon.

    The polygon is expected in counter-clockwise order. Degenerate polygons
    with one vertex (a point) or two vertices (a segment) are supported.

    Args:
        point: The point to test.
        polygon: Vertices of the convex polygon.

    Returns:
        True if the point is inside or on the boundary.
    """
    n = len(polygon)
    if n == 0:
        return False
    if n == 1:
        return points_nearly_equal(point, polygon[0])
    if n == 2:
        start, end = polygon
        if orientation(start, end, point) != Orientation.COLLINEAR:
            return False
        # Projection onto the segment must fall between its end points
        along = (end - start).dot(point - start)
        length_sq = (end - start).dot(end - start)
        return (along >= 0 or nearly_equal(along, 0.0)) and (along <= length_sq or nearly_equal(along, length_sq))

    for i in range(n):
        if orientation(polygon[i], polygon[(i + 1) % n], point) == Orientation.CLOCKWISE:
            return False
    return True
