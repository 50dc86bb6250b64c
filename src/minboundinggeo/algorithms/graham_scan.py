"""
Graham Scan
===========
Numerically robust 2D convex hull of points given in 3-component coordinates.

The points are sorted by polar angle around the anchor (lowest y, then lowest
x) and swept once. Accepted boundary points are compacted in place at the
front of the working list; a later point can remove earlier ones when they
turn out to be concave or collinear. Equality and zero tests go through
`nearly_equal`, so degenerate inputs (duplicates, collinear runs) are handled
without exact arithmetic.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Iterator, Sequence, Union, TYPE_CHECKING

import numpy as np

from minboundinggeo.model.geometry_primitives import Point
from minboundinggeo.model.geometry_utils import ccw, nearly_equal, points_nearly_equal, polar_angle

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

PointsLike = Union[Iterable[Point], Sequence[Sequence[float]], "npt.NDArray[np.float64]"]


class HullInvariantError(RuntimeError):
    """The boundary decision produced an outcome outside the decision table."""


class RemovalFlag(Enum):
    """Which point to drop when testing a candidate against the boundary."""
    NONE = 0  # keep everything, accept the candidate
    MID_POINT = 1  # drop the last accepted point and test again
    END_POINT = 2  # drop the candidate


def which_to_remove_from_boundary(p1: Point, p2: Point, p3: Point) -> RemovalFlag:
    """
    Decide what happens when `p3` is appended after the boundary `p1 -> p2`.

    Args:
        p1: Second-to-last accepted point.
        p2: Last accepted point.
        p3: Candidate point.

    Returns:
        The removal decision.
    """
    cross = ccw(p1, p2, p3)
    if cross < 0:
        # Right turn, p2 is concave
        return RemovalFlag.MID_POINT
    if cross > 0:
        return RemovalFlag.NONE
    # Collinear: check for reversal using the dot product of the difference vectors
    dotp = (p3 - p2).dot(p2 - p1)
    if nearly_equal(dotp, 0.0):
        return RemovalFlag.MID_POINT
    if dotp < 0:
        # p3 lies behind p2
        return RemovalFlag.END_POINT
    return RemovalFlag.MID_POINT


def _anchor_index(points: Sequence[Point]) -> int:
    """Index of the point with minimum y; ties broken by minimum x."""
    i_min = 0
    for i in range(1, len(points)):
        current, best = points[i], points[i_min]
        if current.y < best.y or (current.y == best.y and current.x < best.x):
            i_min = i
    return i_min


def _on_same_ray(anchor: Point, p: Point, q: Point) -> bool:
    """True if `q` lies on the ray from `anchor` through `p`, within tolerance."""
    return ccw(anchor, p, q) == 0 and (p - anchor).dot(q - anchor) > 0


def _sort_around_anchor(anchor: Point, others: Sequence[Point]) -> list[Point]:
    """
    Sort points by polar angle around the anchor, nearest first on a common ray.

    `atan2` can differ in the last bit for points on one ray, so an angle
    sort alone may interleave them. Consecutive points that are collinear
    with the anchor and the first point of their run are regrouped by
    distance. A far point on a ray is then never followed by a nearer one.
    """
    by_angle = sorted(others, key=lambda p: (polar_angle(anchor, p), anchor.distance_to(p)))

    ordered: list[Point] = []
    i = 0
    while i < len(by_angle):
        head = by_angle[i]
        j = i + 1
        if not points_nearly_equal(anchor, head):
            while j < len(by_angle) and _on_same_ray(anchor, head, by_angle[j]):
                j += 1
        ordered.extend(sorted(by_angle[i:j], key=anchor.distance_to))
        i = j
    return ordered


def graham_scan_compute(initial_points: Sequence[Point]) -> list[Point]:
    """
    Compute the convex hull of a set of points.

    Only x and y are used; z is carried along. Fewer than two points are
    returned unchanged.

    Args:
        initial_points: Points in any order, duplicates allowed.

    Raises:
        HullInvariantError: If the boundary decision yields an unknown flag.

    Returns:
        Hull vertices in counter-clockwise order, starting at the anchor.
    """
    if len(initial_points) < 2:
        return list(initial_points)

    i_min = _anchor_index(initial_points)
    anchor = initial_points[i_min]

    others = [p for i, p in enumerate(initial_points) if i != i_min]
    points = [anchor, *_sort_around_anchor(anchor, others)]

    m = 0
    for i in range(1, len(points)):
        keep_new_point = True
        if m == 0:
            # Find at least one point not coincident with the anchor
            keep_new_point = not points_nearly_equal(points[0], points[i])
        else:
            while True:
                flag = which_to_remove_from_boundary(points[m - 1], points[m], points[i])
                if flag is RemovalFlag.NONE:
                    break
                elif flag is RemovalFlag.MID_POINT:
                    m -= 1
                    if m == 0:
                        break
                elif flag is RemovalFlag.END_POINT:
                    keep_new_point = False
                    break
                else:
                    raise HullInvariantError(f"Unknown removal flag: {flag!r}")

        if keep_new_point:
            m += 1
            points[m], points[i] = points[i], points[m]

    # points[m] is now the last point of the boundary
    del points[m + 1:]
    logger.debug(f"Hull of {len(initial_points)} points has {len(points)} vertices, anchor at ({anchor.x}, {anchor.y}).")
    return points


def _as_points(points: PointsLike) -> list[Point]:
    if isinstance(points, np.ndarray):
        if points.size == 0:
            return []
        if points.ndim != 2 or points.shape[1] not in (2, 3):
            raise ValueError(f"Expected an array of shape (n, 2) or (n, 3), got {points.shape}.")
        return [Point.from_sequence(row) for row in points]
    return [p if isinstance(p, Point) else Point.from_sequence(p) for p in points]


class GrahamScan:
    """
    Convex hull of a fixed point set.

    The hull is computed once on construction. A different point set needs
    a new instance.
    """
    def __init__(self, points: PointsLike) -> None:
        """
        Args:
            points: Points as `Point` objects, or an (n, 2) / (n, 3) array-like
                of coordinates.
        """
        self._points_raw: tuple[Point, ...] = tuple(_as_points(points))
        self._edge_points: tuple[Point, ...] = tuple(graham_scan_compute(self._points_raw))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(n_points={len(self._points_raw)}, n_edge_points={len(self._edge_points)})"

    def __len__(self) -> int:
        return len(self._edge_points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._edge_points)

    @property
    def points_raw(self) -> tuple[Point, ...]:
        """The input points, in input order."""
        return self._points_raw

    @property
    def edge_points(self) -> tuple[Point, ...]:
        """Hull vertices, counter-clockwise from the anchor."""
        return self._edge_points

    def to_array(self) -> npt.NDArray[np.float64]:
        """Hull vertices as an (n, 3) array."""
        if not self._edge_points:
            return np.empty((0, 3), dtype=np.float64)
        return np.array([p.to_array() for p in self._edge_points], dtype=np.float64)
