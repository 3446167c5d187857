"""Geometric primitives that can be stored in a spatial index.

Use these objects when only position and extent matter: edges (directed
segments), triangles and circles. Each one implements the spatial-object
contract (``bounding_box``, ``distance2``, ``contains``) consumed by an
R-tree, plus the geometric queries a triangulation needs.

Side-of-line queries take the orientation kernel as an argument::

    >>> from geoprim import Point2, TrivialKernel
    >>> e = SimpleEdge(Point2(0.0, 0.0), Point2(1.0, 1.0))
    >>> e.side_query(Point2(1.0, 0.0), kernel=TrivialKernel).is_on_right_side()
    True

Degenerate input (zero-length edges, collinear triangle vertices) is not
checked by the projection, circumcenter and barycentric routines; they
divide by zero. Validate with ``length2()`` / ``double_area()`` first.
"""
from __future__ import annotations

import abc
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple, Type

from .bounding_rect import BoundingRect
from .constants import ON_LINE_VALUE
from .exceptions import CollinearEdgesError
from .kernels import Kernel, TrivialKernel
from .logging_utils import get_logger
from .point import Point, Point3, as_point

log = get_logger('geoprim.primitives')

__all__ = [
    'SpatialObject', 'EdgeSideInfo', 'EdgeIntersection',
    'SimpleEdge', 'SimpleTriangle', 'SimpleCircle',
]


class SpatialObject(abc.ABC):
    """Capability a spatial index relies on.

    ``contains`` defaults to ``distance2(point) == 0``; subclasses may
    override it with something cheaper.
    """

    @abc.abstractmethod
    def bounding_box(self) -> BoundingRect:
        ...

    @abc.abstractmethod
    def distance2(self, point) -> float:
        ...

    def contains(self, point) -> bool:
        return self.distance2(point) == 0

    def mbr(self) -> BoundingRect:
        return self.bounding_box()


class EdgeSideInfo:
    """Which side of a directed edge a point lies on.

    Wraps the signed value produced by a kernel. Only the sign is
    meaningful; magnitudes from different kernels are not comparable.
    All on-line instances compare equal to each other.
    """

    __slots__ = ('signed_side',)

    def __init__(self, signed_side):
        self.signed_side = signed_side

    @classmethod
    def from_determinant(cls, s) -> 'EdgeSideInfo':
        return cls(s)

    def is_on_left_side(self) -> bool:
        return self.signed_side > 0

    def is_on_right_side(self) -> bool:
        return self.signed_side < 0

    def is_on_left_side_or_on_line(self) -> bool:
        return self.signed_side >= 0

    def is_on_right_side_or_on_line(self) -> bool:
        return self.signed_side <= 0

    def is_on_line(self) -> bool:
        # exact zero, no tolerance
        return abs(self.signed_side) == ON_LINE_VALUE

    def reversed(self) -> 'EdgeSideInfo':
        """Side info of the same point relative to the reversed edge ``b -> a``."""
        return EdgeSideInfo(-self.signed_side)

    def _classification(self) -> int:
        if self.is_on_line():
            return 0
        return -1 if self.is_on_right_side() else 1

    def __eq__(self, other):
        if not isinstance(other, EdgeSideInfo):
            return NotImplemented
        if self.is_on_line() or other.is_on_line():
            return self.is_on_line() and other.is_on_line()
        return self.is_on_right_side() == other.is_on_right_side()

    def __hash__(self):
        return hash(self._classification())

    def __repr__(self):
        return f'EdgeSideInfo(signed_side={self.signed_side!r})'


class EdgeIntersection(Enum):
    """Result of :meth:`SimpleEdge.intersection_kind`."""
    INTERSECTS = 'intersects'
    DOES_NOT_INTERSECT = 'does_not_intersect'
    COLLINEAR = 'collinear'


@dataclass(frozen=True, order=True)
class SimpleEdge(SpatialObject):
    """A directed segment ``from_ -> to`` (``from`` is reserved in Python)."""

    from_: Point
    to: Point

    def __post_init__(self):
        object.__setattr__(self, 'from_', as_point(self.from_))
        object.__setattr__(self, 'to', as_point(self.to))

    def reversed(self) -> 'SimpleEdge':
        return SimpleEdge(self.to, self.from_)

    def length2(self):
        diff = self.from_.sub(self.to)
        return diff.dot(diff)

    def is_projection_on_edge(self, query_point) -> bool:
        """True if the projection of ``query_point`` onto the edge's line lies between the endpoints.

        Works on the unnormalized projection, so there is no division.
        """
        q = as_point(query_point)
        direction = self.to.sub(self.from_)
        s = q.sub(self.from_).dot(direction)
        return 0 <= s <= direction.length2()

    def project_point(self, query_point):
        """Relative position of the projection of ``query_point`` on the edge's line.

        0 maps to ``from_``, 1 maps to ``to``; values outside ``[0, 1]`` lie
        before ``from_`` or behind ``to``. Undefined for zero-length edges.
        """
        q = as_point(query_point)
        direction = self.to.sub(self.from_)
        return q.sub(self.from_).dot(direction) / direction.length2()

    def nearest_point(self, query_point) -> Point:
        q = as_point(query_point)
        if self.length2() == 0:
            # degenerate edge: both endpoints are the nearest point
            return self.from_
        s = self.project_point(q)
        if 0 < s < 1:
            return self.from_.add(self.to.sub(self.from_).mul(s))
        if s <= 0:
            return self.from_
        return self.to

    def projection_distance2(self, query_point):
        """Squared distance to the projection on the infinite line (not clamped to the segment)."""
        q = as_point(query_point)
        s = self.project_point(q)
        p = self.from_.add(self.to.sub(self.from_).mul(s))
        return p.distance2(q)

    def side_query(self, query_point, kernel: Type[Kernel] = TrivialKernel) -> EdgeSideInfo:
        return EdgeSideInfo.from_determinant(kernel.side_query(self, as_point(query_point)))

    def _side_infos(self, other: 'SimpleEdge', kernel: Type[Kernel]):
        other_from = self.side_query(other.from_, kernel)
        other_to = self.side_query(other.to, kernel)
        self_from = other.side_query(self.from_, kernel)
        self_to = other.side_query(self.to, kernel)
        return other_from, other_to, self_from, self_to

    def intersection_kind(self, other: 'SimpleEdge', kernel: Type[Kernel] = TrivialKernel) -> EdgeIntersection:
        """Non-raising intersection test; touching endpoints count as intersecting."""
        other_from, other_to, self_from, self_to = self._side_infos(other, kernel)
        if all(q.is_on_line() for q in (other_from, other_to, self_from, self_to)):
            return EdgeIntersection.COLLINEAR
        if other_from != other_to and self_from != self_to:
            return EdgeIntersection.INTERSECTS
        return EdgeIntersection.DOES_NOT_INTERSECT

    def intersects_edge_non_collinear(self, other: 'SimpleEdge', kernel: Type[Kernel] = TrivialKernel) -> bool:
        """Check whether this edge and ``other`` intersect; touching counts.

        Raises
        ------
        CollinearEdgesError
            If both edges lie on one line. Collinear edges must be handled
            by the caller before calling this.
        """
        kind = self.intersection_kind(other, kernel)
        if kind is EdgeIntersection.COLLINEAR:
            log.debug('collinear edges passed to intersects_edge_non_collinear: %r, %r', self, other)
            raise CollinearEdgesError('intersects_edge_non_collinear: Given edge is collinear.')
        return kind is EdgeIntersection.INTERSECTS

    # spatial object
    def bounding_box(self) -> BoundingRect:
        return BoundingRect.from_corners(self.from_, self.to)

    def distance2(self, point):
        p = as_point(point)
        return p.sub(self.nearest_point(p)).length2()


class SimpleTriangle(SpatialObject):
    """A triangle given by three vertices.

    Equality holds for cyclic rotations of the vertex sequence
    (``(a, b, c) == (b, c, a)``) but not for reflections
    (``(a, b, c) != (a, c, b)``). The hash is taken over the vertices sorted
    lexicographically so rotated copies hash alike.
    """

    __slots__ = ('v0', 'v1', 'v2')

    def __init__(self, v0, v1, v2):
        object.__setattr__(self, 'v0', as_point(v0))
        object.__setattr__(self, 'v1', as_point(v1))
        object.__setattr__(self, 'v2', as_point(v2))

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def vertices(self) -> Tuple[Point, Point, Point]:
        return (self.v0, self.v1, self.v2)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices())

    def edges(self) -> Tuple[SimpleEdge, SimpleEdge, SimpleEdge]:
        """Boundary edges in winding order v0v1, v1v2, v2v0."""
        return (
            SimpleEdge(self.v0, self.v1),
            SimpleEdge(self.v1, self.v2),
            SimpleEdge(self.v2, self.v0),
        )

    def canonical_vertices(self) -> Tuple[Point, Point, Point]:
        """Vertices sorted lexicographically; the form hashing is based on."""
        return tuple(sorted(self.vertices()))

    def signed_double_area(self):
        b = self.v1.sub(self.v0)
        c = self.v2.sub(self.v0)
        return b.nth(0) * c.nth(1) - b.nth(1) * c.nth(0)

    def double_area(self):
        return abs(self.signed_double_area())

    def is_ordered_ccw(self, kernel: Type[Kernel] = TrivialKernel) -> bool:
        return kernel.is_ordered_ccw(self.v0, self.v1, self.v2)

    def nearest_point_on_edge(self, pos) -> Point:
        """Nearest point on the triangle's boundary; earlier edges win ties."""
        p = as_point(pos)
        best = None
        best_d = None
        for edge in self.edges():
            candidate = edge.nearest_point(p)
            d = candidate.distance2(p)
            if best is None or d < best_d:
                best, best_d = candidate, d
        return best

    def circumcenter(self) -> Point:
        """Circumcenter of a 2D triangle. Undefined for collinear vertices."""
        b = self.v1.sub(self.v0)
        c = self.v2.sub(self.v0)
        d = 2 * (b.nth(0) * c.nth(1) - c.nth(0) * b.nth(1))
        len_b = b.dot(b)
        len_c = c.dot(c)
        x = (len_b * c.nth(1) - len_c * b.nth(1)) / d
        y = (-len_b * c.nth(0) + len_c * b.nth(0)) / d
        result = type(self.v0).from_value(0).with_nth(0, x).with_nth(1, y)
        return result.add(self.v0)

    def circumradius2(self):
        return self.circumcenter().distance2(self.v0)

    def barycentric_interpolation(self, coord) -> Point3:
        """Barycentric coordinates ``(l1, l2, l3)`` of ``coord``; they sum to one."""
        q = as_point(coord)
        x, y = q.nth(0), q.nth(1)
        x1, x2, x3 = self.v0.nth(0), self.v1.nth(0), self.v2.nth(0)
        y1, y2, y3 = self.v0.nth(1), self.v1.nth(1), self.v2.nth(1)
        det = (y2 - y3) * (x1 - x3) + (x3 - x2) * (y1 - y3)
        lambda1 = ((y2 - y3) * (x - x3) + (x3 - x2) * (y - y3)) / det
        lambda2 = ((y3 - y1) * (x - x3) + (x1 - x3) * (y - y3)) / det
        lambda3 = 1 - lambda1 - lambda2
        return Point3(lambda1, lambda2, lambda3)

    # spatial object
    def bounding_box(self) -> BoundingRect:
        return BoundingRect.from_corners(self.v0, self.v1).add_point(self.v2)

    def distance2(self, point, kernel: Type[Kernel] = TrivialKernel):
        p = as_point(point)
        ordered_ccw = kernel.is_ordered_ccw(self.v0, self.v1, self.v2)
        for edge in self.edges():
            if edge.side_query(p, kernel).is_on_right_side() == ordered_ccw:
                return edge.distance2(p)
        # inside
        return 0.0

    def __eq__(self, other):
        if not isinstance(other, SimpleTriangle):
            return NotImplemented
        vl = self.vertices()
        vr = other.vertices()
        for index, v in enumerate(vr):
            if v == vl[0]:
                return vl[1] == vr[(index + 1) % 3] and vl[2] == vr[(index + 2) % 3]
        return False

    def __hash__(self):
        return hash(self.canonical_vertices())

    def __repr__(self):
        return f'SimpleTriangle({self.v0!r}, {self.v1!r}, {self.v2!r})'


@dataclass(frozen=True, order=True)
class SimpleCircle(SpatialObject):
    """An n-dimensional circle (sphere in 3D) given by center and radius."""

    center: Point
    radius: float

    def __post_init__(self):
        object.__setattr__(self, 'center', as_point(self.center))

    def bounding_box(self) -> BoundingRect:
        r = type(self.center).from_value(self.radius)
        return BoundingRect.from_corners(self.center.sub(r), self.center.add(r))

    def distance2(self, point):
        d2 = as_point(point).sub(self.center).length2()
        dist = max(math.sqrt(d2) - self.radius, 0.0)
        return dist * dist

    def contains(self, point) -> bool:
        # no square root needed for containment
        d2 = as_point(point).sub(self.center).length2()
        return d2 <= self.radius * self.radius
