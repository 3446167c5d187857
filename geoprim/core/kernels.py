"""Orientation kernels: the strategies behind every side-of-line query.

A kernel turns an edge ``a -> b`` and a query point ``q`` into a signed
scalar whose sign tells the side (positive: left, negative: right, zero:
on the line). The primitives never pick a kernel themselves; callers pass
the kernel class they want, e.g. ``edge.side_query(q, kernel=FloatKernel)``.

Two strategies are provided:

``TrivialKernel``
    The plain floating point determinant. Fast, but rounding can flip the
    sign or produce a tiny non-zero value for nearly collinear input.

``FloatKernel``
    Adaptive: evaluates the float determinant first and, when its magnitude
    is within the forward error bound, recomputes it exactly with
    ``fractions.Fraction``. The sign returned is exact for finite input.
"""
from __future__ import annotations

import math
from fractions import Fraction
from typing import Dict, Type

from .constants import CCW_ERRBOUND_A
from .exceptions import DimensionError, UnknownKernelError
from .logging_utils import get_logger

log = get_logger('geoprim.kernels')

__all__ = ['Kernel', 'TrivialKernel', 'FloatKernel', 'KERNELS', 'get_kernel', 'register_kernel']


def _xy(point):
    if point.dimensions != 2:
        raise DimensionError(f'orientation kernels are two dimensional, got a {point.dimensions}D point')
    return point.x, point.y


class Kernel:
    """Kernel contract. Subclasses implement ``orient2d``; use the class itself, not instances."""

    name = 'abstract'

    @classmethod
    def orient2d(cls, a, b, c):
        """Twice the signed area of ``(a, b, c)``; positive when counter-clockwise."""
        raise NotImplementedError

    @classmethod
    def side_query(cls, edge, point):
        """Signed side of ``point`` relative to the directed ``edge``."""
        return cls.orient2d(edge.from_, edge.to, point)

    @classmethod
    def is_ordered_ccw(cls, a, b, c) -> bool:
        """True if ``c`` is on the left of ``a -> b`` or on that line."""
        return cls.orient2d(a, b, c) >= 0


class TrivialKernel(Kernel):
    name = 'trivial'

    @classmethod
    def orient2d(cls, a, b, c):
        ax, ay = _xy(a)
        bx, by = _xy(b)
        cx, cy = _xy(c)
        return (bx - ax) * (cy - ay) - (by - ay) * (cx - ax)


class FloatKernel(Kernel):
    name = 'float'

    @classmethod
    def orient2d(cls, a, b, c):
        ax, ay = _xy(a)
        bx, by = _xy(b)
        cx, cy = _xy(c)
        detleft = (ax - cx) * (by - cy)
        detright = (ay - cy) * (bx - cx)
        det = detleft - detright

        if detleft > 0:
            if detright <= 0:
                return det
            detsum = detleft + detright
        elif detleft < 0:
            if detright >= 0:
                return det
            detsum = -detleft - detright
        else:
            return det

        if not math.isfinite(det):
            return det
        errbound = CCW_ERRBOUND_A * detsum
        if det >= errbound or -det >= errbound:
            return det
        return cls._orient2d_exact(ax, ay, bx, by, cx, cy, det)

    @staticmethod
    def _orient2d_exact(ax, ay, bx, by, cx, cy, approx):
        # float() first: Fraction rejects numpy scalars such as np.float32
        fa = (Fraction(float(ax)), Fraction(float(ay)))
        fb = (Fraction(float(bx)), Fraction(float(by)))
        fc = (Fraction(float(cx)), Fraction(float(cy)))
        exact = (fa[0] - fc[0]) * (fb[1] - fc[1]) - (fa[1] - fc[1]) * (fb[0] - fc[0])
        result = float(exact)
        if result == 0.0 and exact != 0:
            # keep the sign when the exact value underflows
            result = -math.ulp(0.0) if exact < 0 else math.ulp(0.0)
        log.debug('orient2d exact fallback: approx=%r exact=%r', approx, result)
        return result


KERNELS: Dict[str, Type[Kernel]] = {
    TrivialKernel.name: TrivialKernel,
    FloatKernel.name: FloatKernel,
}


def register_kernel(kernel: Type[Kernel]) -> Type[Kernel]:
    """Register a kernel class under its ``name``; usable as a class decorator."""
    KERNELS[kernel.name] = kernel
    return kernel


def get_kernel(name: str) -> Type[Kernel]:
    try:
        return KERNELS[name]
    except KeyError:
        raise UnknownKernelError(f'unknown kernel {name!r}; available: {sorted(KERNELS)}') from None
