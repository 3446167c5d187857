"""Public package API for geoprim.

Geometric primitives (edges, triangles, circles) for spatial indexes and
Delaunay-style triangulations, with pluggable orientation kernels.

Example
-------
    from geoprim import SimpleEdge, Point2, FloatKernel

    e = SimpleEdge(Point2(0.0, 0.0), Point2(1.0, 1.0))
    e.side_query(Point2(1.0, 0.0), kernel=FloatKernel).is_on_right_side()

The modules under ``geoprim.core`` are internal and may change; rely on
this layer for public symbols.
"""
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("geoprim")
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core.constants import ON_LINE_VALUE, CCW_ERRBOUND_A
from .core.exceptions import (
    GeoprimError, PreconditionViolation, CollinearEdgesError,
    DimensionError, UnknownKernelError, SerializationError,
)
from .core.logging_utils import get_logger, configure_logging
from .core.point import Point2, Point3, point_class_for, as_point, points_from_array
from .core.bounding_rect import BoundingRect
from .core.kernels import Kernel, TrivialKernel, FloatKernel, get_kernel, register_kernel
from .core.config import KernelConfig
from .core.primitives import (
    SpatialObject, EdgeSideInfo, EdgeIntersection,
    SimpleEdge, SimpleTriangle, SimpleCircle,
)
from .core import vectorized, io

__all__ = [
    '__version__',
    # points / boxes
    'Point2', 'Point3', 'point_class_for', 'as_point', 'points_from_array', 'BoundingRect',
    # kernels
    'Kernel', 'TrivialKernel', 'FloatKernel', 'get_kernel', 'register_kernel', 'KernelConfig',
    # primitives
    'SpatialObject', 'EdgeSideInfo', 'EdgeIntersection',
    'SimpleEdge', 'SimpleTriangle', 'SimpleCircle',
    # errors
    'GeoprimError', 'PreconditionViolation', 'CollinearEdgesError',
    'DimensionError', 'UnknownKernelError', 'SerializationError',
    # constants / logging
    'ON_LINE_VALUE', 'CCW_ERRBOUND_A', 'get_logger', 'configure_logging',
    # submodules
    'vectorized', 'io',
]
