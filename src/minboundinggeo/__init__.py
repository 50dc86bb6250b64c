"""
Numerically robust 2D convex hull (Graham scan) of 3-component points.
"""
from minboundinggeo.algorithms.graham_scan import GrahamScan, HullInvariantError, graham_scan_compute
from minboundinggeo.model.geometry_primitives import Point, Vector

__all__ = ["GrahamScan", "HullInvariantError", "Point", "Vector", "graham_scan_compute"]
