"""Fixed-size point types implementing the vector contract used by the primitives.

Points are immutable, hashable and ordered lexicographically by coordinate,
which is what triangle hashing relies on for its canonical vertex order.
There is one class per dimension rather than a single dynamically sized
container, so mixing 2D and 3D points fails at the first operation.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Tuple, Type, Union

import numpy as np

from .constants import SUPPORTED_DIMENSIONS
from .exceptions import DimensionError

Scalar = Union[int, float]

__all__ = ['Point2', 'Point3', 'Point', 'point_class_for', 'as_point', 'points_from_array']


class _PointOps:
    """Shared behaviour of the concrete point classes.

    Subclasses are frozen dataclasses whose fields are the coordinates in
    axis order; ``dimensions`` is the number of fields.
    """

    dimensions: int = 0
    _axes: Tuple[str, ...] = ()

    # -- construction -------------------------------------------------
    @classmethod
    def from_value(cls, value: Scalar):
        """Point with every coordinate set to ``value``."""
        return cls(*([value] * cls.dimensions))

    @classmethod
    def from_array(cls, values):
        arr = np.asarray(values, dtype=np.float64).ravel()
        if arr.shape[0] != cls.dimensions:
            raise DimensionError(f'{cls.__name__} expects {cls.dimensions} coordinates, got {arr.shape[0]}')
        return cls(*(float(v) for v in arr))

    # -- coordinate access --------------------------------------------
    def __iter__(self) -> Iterator[Scalar]:
        for name in self._axes:
            yield getattr(self, name)

    def __len__(self) -> int:
        return self.dimensions

    def nth(self, index: int) -> Scalar:
        return getattr(self, self._axes[index])

    def with_nth(self, index: int, value: Scalar):
        """Return a copy with coordinate ``index`` replaced."""
        return replace(self, **{self._axes[index]: value})

    def as_array(self) -> np.ndarray:
        return np.array(tuple(self), dtype=np.float64)

    # -- arithmetic ---------------------------------------------------
    def _check(self, other) -> None:
        if type(other) is not type(self):
            raise DimensionError(f'cannot combine {type(self).__name__} with {type(other).__name__}')

    def add(self, other):
        self._check(other)
        return type(self)(*(a + b for a, b in zip(self, other)))

    def sub(self, other):
        self._check(other)
        return type(self)(*(a - b for a, b in zip(self, other)))

    def mul(self, scalar: Scalar):
        return type(self)(*(a * scalar for a in self))

    def dot(self, other) -> Scalar:
        self._check(other)
        return sum(a * b for a, b in zip(self, other))

    def length2(self) -> Scalar:
        return self.dot(self)

    def distance2(self, other) -> Scalar:
        return self.sub(other).length2()

    def lex_compare(self, other) -> int:
        """-1, 0 or 1 comparing coordinates lexicographically."""
        self._check(other)
        for a, b in zip(self, other):
            if a < b:
                return -1
            if a > b:
                return 1
        return 0

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.sub(other)

    def __mul__(self, scalar):
        return self.mul(scalar)

    __rmul__ = __mul__

    def __neg__(self):
        return self.mul(-1)


@dataclass(frozen=True, order=True)
class Point2(_PointOps):
    x: Scalar
    y: Scalar

    dimensions = 2
    _axes = ('x', 'y')


@dataclass(frozen=True, order=True)
class Point3(_PointOps):
    x: Scalar
    y: Scalar
    z: Scalar

    dimensions = 3
    _axes = ('x', 'y', 'z')


Point = Union[Point2, Point3]

_BY_DIM = {2: Point2, 3: Point3}


def point_class_for(dim: int) -> Type[_PointOps]:
    try:
        return _BY_DIM[int(dim)]
    except KeyError:
        raise DimensionError(f'unsupported dimension {dim}; expected one of {SUPPORTED_DIMENSIONS}') from None


def as_point(value) -> Point:
    """Coerce a point, tuple or array-like into a Point2/Point3."""
    if isinstance(value, _PointOps):
        return value
    coords = list(value) if not isinstance(value, np.ndarray) else value.ravel().tolist()
    cls = point_class_for(len(coords))
    return cls(*coords)


def points_from_array(values: Iterable) -> list:
    """Convert an (N, D) array-like into a list of points."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 2:
        raise DimensionError(f'expected a 2D array of points, got shape {arr.shape}')
    cls = point_class_for(arr.shape[1])
    return [cls(*row.tolist()) for row in arr]
