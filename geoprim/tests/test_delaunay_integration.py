"""Primitives used as building blocks of a Delaunay triangulation.

scipy's Delaunay provides the triangulation; the primitives must agree
with its empty-circumcircle property and point location.
"""
import math

import numpy as np
import pytest

from geoprim import FloatKernel, Point2, SimpleCircle, SimpleTriangle, points_from_array

spatial = pytest.importorskip('scipy.spatial')


@pytest.fixture
def triangulation():
    rng = np.random.default_rng(3)
    pts = rng.uniform(0.0, 10.0, size=(60, 2))
    return pts, spatial.Delaunay(pts)


def _triangles(pts, dela):
    points = points_from_array(pts)
    return [SimpleTriangle(*(points[int(i)] for i in s)) for s in dela.simplices]


def test_empty_circumcircles(triangulation):
    pts, dela = triangulation
    points = points_from_array(pts)
    for s, tri in zip(dela.simplices, _triangles(pts, dela)):
        assert tri.double_area() > 0
        center = tri.circumcenter()
        r2 = tri.circumradius2()
        members = {int(i) for i in s}
        for k, p in enumerate(points):
            if k in members:
                assert center.distance2(p) == pytest.approx(r2, rel=1e-6)
            else:
                assert center.distance2(p) >= r2 * (1.0 - 1e-6)


def test_circumcircle_as_circle_primitive(triangulation):
    pts, dela = triangulation
    points = points_from_array(pts)
    for s, tri in zip(dela.simplices, _triangles(pts, dela)):
        circle = SimpleCircle(tri.circumcenter(), math.sqrt(tri.circumradius2()) * (1.0 - 1e-6))
        members = {int(i) for i in s}
        inside = [k for k, p in enumerate(points) if k not in members and circle.contains(p)]
        assert inside == []


def test_point_location_matches_find_simplex(triangulation):
    pts, dela = triangulation
    tris = _triangles(pts, dela)
    rng = np.random.default_rng(8)
    for q in rng.uniform(1.0, 9.0, size=(40, 2)):
        idx = int(dela.find_simplex(q))
        if idx < 0:
            continue
        p = Point2(float(q[0]), float(q[1]))
        assert tris[idx].distance2(p, kernel=FloatKernel) == 0.0
        l1, l2, l3 = tris[idx].barycentric_interpolation(p)
        assert min(l1, l2, l3) >= -1e-9
