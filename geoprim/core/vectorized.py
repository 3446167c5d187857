"""Vectorized batch versions of the primitive queries.

Meant for bulk loading a spatial index or screening many candidates at
once. Every function mirrors a scalar method in ``primitives`` and uses the
same arithmetic (fast kernel determinant, clamped projection), so results
agree with the per-object calls up to float rounding.

Array conventions:
    points:  (M, D) float64 arrays, D in {2, 3}
    query:   single point-like of shape (D,)
"""
from __future__ import annotations

import numpy as np

from .exceptions import DimensionError

__all__ = [
    'orient_batch', 'edges_distance2', 'edges_bounding_boxes',
    'triangles_double_areas', 'triangles_distance2', 'circles_distance2',
]


def _as_points(arr, name):
    a = np.asarray(arr, dtype=np.float64)
    if a.ndim != 2 or a.shape[1] not in (2, 3):
        raise DimensionError(f'{name} must have shape (M, 2) or (M, 3), got {a.shape}')
    return a


def orient_batch(a_pts, b_pts, q):
    """Signed side of ``q`` for M directed edges a->b (fast kernel determinant).

    ``q`` is a single point or an (M, D) array with one query per edge.
    Returns (M,) array: positive left, negative right, zero on the line.
    """
    a = _as_points(a_pts, 'a_pts'); b = _as_points(b_pts, 'b_pts'); c = np.asarray(q, dtype=np.float64)
    return (b[:, 0]-a[:, 0])*(c[..., 1]-a[:, 1]) - (b[:, 1]-a[:, 1])*(c[..., 0]-a[:, 0])


def _nearest_on_edges(a, b, q):
    d = b - a
    len2 = np.einsum('ij,ij->i', d, d)
    with np.errstate(divide='ignore', invalid='ignore'):
        s = np.einsum('ij,ij->i', q - a, d) / len2
    # zero-length edges give NaN here; clamp to the end point, which equals the start
    s = np.where(np.isnan(s), 1.0, s)
    s = np.where(s <= 0.0, 0.0, np.where(s >= 1.0, 1.0, s))
    return a + d * s[:, None]


def edges_distance2(from_pts, to_pts, q):
    """Squared distance from ``q`` to each of M segments."""
    a = _as_points(from_pts, 'from_pts'); b = _as_points(to_pts, 'to_pts')
    p = np.asarray(q, dtype=np.float64)
    if a.size == 0:
        return np.empty((0,), dtype=np.float64)
    nn = _nearest_on_edges(a, b, p)
    diff = p - nn
    return np.einsum('ij,ij->i', diff, diff)


def edges_bounding_boxes(from_pts, to_pts):
    """(M, D) lower and upper corner arrays of the segments' MBRs."""
    a = _as_points(from_pts, 'from_pts'); b = _as_points(to_pts, 'to_pts')
    return np.minimum(a, b), np.maximum(a, b)


def triangles_double_areas(v0, v1, v2):
    """Unsigned doubled areas for M 2D triangles."""
    p0 = _as_points(v0, 'v0'); p1 = _as_points(v1, 'v1'); p2 = _as_points(v2, 'v2')
    b = p1 - p0; c = p2 - p0
    return np.abs(b[:, 0]*c[:, 1] - b[:, 1]*c[:, 0])


def triangles_distance2(v0, v1, v2, q):
    """Squared distance from ``q`` to M 2D triangles; zero for triangles containing ``q``.

    Follows the per-object rule: the first edge (in winding order) that has
    ``q`` on its outer side determines the distance.
    """
    p0 = _as_points(v0, 'v0'); p1 = _as_points(v1, 'v1'); p2 = _as_points(v2, 'v2')
    p = np.asarray(q, dtype=np.float64)
    m = p0.shape[0]
    if m == 0:
        return np.empty((0,), dtype=np.float64)
    ccw = orient_batch(p0, p1, p2) >= 0.0
    result = np.zeros(m, dtype=np.float64)
    decided = np.zeros(m, dtype=bool)
    for a, b in ((p0, p1), (p1, p2), (p2, p0)):
        outside = (orient_batch(a, b, p) < 0.0) == ccw
        pick = outside & ~decided
        if np.any(pick):
            result[pick] = edges_distance2(a[pick], b[pick], p)
        decided |= outside
    return result


def circles_distance2(centers, radii, q):
    """Squared distance from ``q`` to M circles; zero inside."""
    c = _as_points(centers, 'centers')
    r = np.asarray(radii, dtype=np.float64)
    p = np.asarray(q, dtype=np.float64)
    diff = p - c
    dist = np.maximum(np.sqrt(np.einsum('ij,ij->i', diff, diff)) - r, 0.0)
    return dist * dist
