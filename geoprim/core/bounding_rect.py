"""Axis-aligned bounding rectangles (MBRs) for the spatial-object contract.

Corners are kept as float64 numpy arrays so that growing and overlap tests
are component-wise array operations, in the same style as the batch bbox
checks used elsewhere in the package.
"""
from __future__ import annotations

from typing import Iterable

import numpy as np

from .exceptions import DimensionError
from .point import as_point, point_class_for

__all__ = ['BoundingRect']


class BoundingRect:
    """Minimal axis-aligned box ``[lower, upper]`` in 2D or 3D."""

    __slots__ = ('lower', 'upper')

    def __init__(self, lower, upper):
        lo = np.asarray(lower, dtype=np.float64).copy()
        hi = np.asarray(upper, dtype=np.float64).copy()
        if lo.shape != hi.shape or lo.ndim != 1:
            raise DimensionError(f'corner shapes differ: {lo.shape} vs {hi.shape}')
        point_class_for(lo.shape[0])
        lo.flags.writeable = False
        hi.flags.writeable = False
        self.lower = lo
        self.upper = hi

    @classmethod
    def from_point(cls, point) -> 'BoundingRect':
        p = as_point(point).as_array()
        return cls(p, p)

    @classmethod
    def from_corners(cls, a, b) -> 'BoundingRect':
        """Smallest box containing both corners, in any order."""
        pa = as_point(a).as_array()
        pb = as_point(b).as_array()
        if pa.shape != pb.shape:
            raise DimensionError('corners have different dimensions')
        return cls(np.minimum(pa, pb), np.maximum(pa, pb))

    @classmethod
    def from_points(cls, points: Iterable) -> 'BoundingRect':
        arr = np.asarray([as_point(p).as_array() for p in points], dtype=np.float64)
        if arr.size == 0:
            raise ValueError('cannot build a bounding rect from no points')
        return cls(arr.min(axis=0), arr.max(axis=0))

    @property
    def dimensions(self) -> int:
        return int(self.lower.shape[0])

    def lower_point(self):
        return point_class_for(self.dimensions).from_array(self.lower)

    def upper_point(self):
        return point_class_for(self.dimensions).from_array(self.upper)

    def add_point(self, point) -> 'BoundingRect':
        """Return a new rect grown to include ``point``."""
        p = self._coords(point)
        return BoundingRect(np.minimum(self.lower, p), np.maximum(self.upper, p))

    def add_rect(self, other: 'BoundingRect') -> 'BoundingRect':
        self._check(other)
        return BoundingRect(np.minimum(self.lower, other.lower), np.maximum(self.upper, other.upper))

    def contains_point(self, point) -> bool:
        p = self._coords(point)
        return bool(np.all(self.lower <= p) and np.all(p <= self.upper))

    def contains_rect(self, other: 'BoundingRect') -> bool:
        self._check(other)
        return bool(np.all(self.lower <= other.lower) and np.all(other.upper <= self.upper))

    def intersects(self, other: 'BoundingRect') -> bool:
        self._check(other)
        return bool(not (np.any(self.upper < other.lower) or np.any(other.upper < self.lower)))

    def center(self):
        return point_class_for(self.dimensions).from_array(0.5 * (self.lower + self.upper))

    def area(self) -> float:
        """Product of the extents (area in 2D, volume in 3D)."""
        return float(np.prod(self.upper - self.lower))

    def distance2(self, point) -> float:
        """Squared distance from ``point`` to the box; zero inside."""
        p = self._coords(point)
        clamped = np.clip(p, self.lower, self.upper)
        d = p - clamped
        return float(np.dot(d, d))

    def _coords(self, point) -> np.ndarray:
        p = as_point(point).as_array()
        if p.shape != self.lower.shape:
            raise DimensionError(f'point has {p.shape[0]} coordinates, rect has {self.dimensions}')
        return p

    def _check(self, other: 'BoundingRect') -> None:
        if other.lower.shape != self.lower.shape:
            raise DimensionError('bounding rects have different dimensions')

    def __eq__(self, other):
        if not isinstance(other, BoundingRect):
            return NotImplemented
        return bool(np.array_equal(self.lower, other.lower) and np.array_equal(self.upper, other.upper))

    def __hash__(self):
        return hash((self.lower.tobytes(), self.upper.tobytes()))

    def __repr__(self):
        return f'BoundingRect(lower={self.lower.tolist()}, upper={self.upper.tolist()})'
