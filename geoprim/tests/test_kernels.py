"""Tests for the orientation kernels."""
import logging
from fractions import Fraction

import numpy as np
import pytest

from geoprim import (
    DimensionError, FloatKernel, Kernel, KernelConfig, Point2, Point3, SimpleEdge,
    TrivialKernel, UnknownKernelError, get_kernel, register_kernel,
)


def _exact_orient(a, b, c):
    ax, ay, bx, by, cx, cy = (Fraction(v) for v in (a.x, a.y, b.x, b.y, c.x, c.y))
    return (bx - ax) * (cy - ay) - (by - ay) * (cx - ax)


def _sign(v):
    return (v > 0) - (v < 0)


@pytest.mark.parametrize('kernel', [TrivialKernel, FloatKernel])
class TestContract:
    """Behaviour shared by every kernel."""

    def test_orient2d_sign(self, kernel):
        a, b = Point2(0.0, 0.0), Point2(1.0, 0.0)
        assert kernel.orient2d(a, b, Point2(0.0, 1.0)) > 0
        assert kernel.orient2d(a, b, Point2(0.0, -1.0)) < 0
        assert kernel.orient2d(a, b, Point2(5.0, 0.0)) == 0

    def test_side_query_uses_edge_direction(self, kernel):
        edge = SimpleEdge(Point2(0.0, 0.0), Point2(1.0, 1.0))
        assert kernel.side_query(edge, Point2(0.0, 1.0)) > 0
        assert kernel.side_query(edge.reversed(), Point2(0.0, 1.0)) < 0

    def test_is_ordered_ccw(self, kernel):
        a, b, c = Point2(0.0, 0.0), Point2(1.0, 0.0), Point2(0.0, 1.0)
        assert kernel.is_ordered_ccw(a, b, c)
        assert not kernel.is_ordered_ccw(a, c, b)
        # collinear counts as ordered
        assert kernel.is_ordered_ccw(a, b, Point2(2.0, 0.0))

    def test_integer_coordinates(self, kernel):
        assert kernel.orient2d(Point2(0, 0), Point2(4, 0), Point2(1, 3)) == 12

    def test_rejects_3d_points(self, kernel):
        with pytest.raises(DimensionError):
            kernel.orient2d(Point3(0.0, 0.0, 0.0), Point3(1.0, 0.0, 0.0), Point3(0.0, 1.0, 0.0))


def test_kernels_agree_on_well_separated_input():
    a, b, c = Point2(0.0, 0.0), Point2(3.0, 1.0), Point2(-1.0, 2.0)
    assert FloatKernel.orient2d(a, b, c) == TrivialKernel.orient2d(a, b, c)


def test_float_kernel_sign_is_exact_near_degeneracy():
    # points within a few ulps of the line y = x (classic near-collinear grid)
    u = 2.0 ** -53
    q, r = Point2(12.0, 12.0), Point2(24.0, 24.0)
    for i in range(24):
        for j in range(24):
            p = Point2(0.5 + i * u, 0.5 + j * u)
            expected = _sign(_exact_orient(p, q, r))
            got = FloatKernel.orient2d(p, q, r)
            assert _sign(got) == expected
            info = SimpleEdge(p, q).side_query(r, kernel=FloatKernel)
            assert info.is_on_line() == (expected == 0)


def test_float_kernel_exact_for_touching_end_point():
    # (1, 0) lies exactly on the line through (0, -1) and (2, 1)
    assert FloatKernel.orient2d(Point2(0.0, -1.0), Point2(2.0, 1.0), Point2(1.0, 0.0)) == 0


def test_float_kernel_accepts_numpy_scalars():
    f = np.float32
    # collinear, so the exact fallback runs on float32 inputs
    assert FloatKernel.orient2d(Point2(f(0), f(-1)), Point2(f(2), f(1)), Point2(f(1), f(0))) == 0
    assert FloatKernel.orient2d(Point2(f(0), f(0)), Point2(f(1), f(0)), Point2(f(0), f(1))) > 0


def test_exact_fallback_is_logged():
    records = []

    class _Collect(logging.Handler):
        def emit(self, record):
            records.append(record)

    pkg_log = logging.getLogger('geoprim')
    handler = _Collect(level=logging.DEBUG)
    old_level = pkg_log.level
    pkg_log.addHandler(handler)
    pkg_log.setLevel(logging.DEBUG)
    try:
        FloatKernel.orient2d(Point2(0.0, -1.0), Point2(2.0, 1.0), Point2(1.0, 0.0))
    finally:
        pkg_log.removeHandler(handler)
        pkg_log.setLevel(old_level)
    assert any('exact fallback' in r.getMessage() for r in records)
    assert all(r.name == 'geoprim.kernels' for r in records)


def test_base_kernel_is_abstract():
    with pytest.raises(NotImplementedError):
        Kernel.orient2d(Point2(0.0, 0.0), Point2(1.0, 0.0), Point2(0.0, 1.0))


class TestRegistry:
    """get_kernel / register_kernel / KernelConfig."""

    def test_lookup(self):
        assert get_kernel('trivial') is TrivialKernel
        assert get_kernel('float') is FloatKernel

    def test_unknown(self):
        with pytest.raises(UnknownKernelError):
            get_kernel('exact-ish')
        with pytest.raises(KeyError):
            get_kernel('nope')

    def test_register(self):
        @register_kernel
        class _Negated(Kernel):
            name = 'test-negated'

            @classmethod
            def orient2d(cls, a, b, c):
                return -TrivialKernel.orient2d(a, b, c)

        assert get_kernel('test-negated') is _Negated
        edge = SimpleEdge(Point2(0.0, 0.0), Point2(1.0, 0.0))
        assert edge.side_query(Point2(0.0, 1.0), kernel=_Negated).is_on_right_side()

    def test_config_resolve(self):
        assert KernelConfig().resolve() is FloatKernel
        assert KernelConfig(kernel='trivial').resolve() is TrivialKernel
        with pytest.raises(UnknownKernelError):
            KernelConfig(kernel='missing').resolve()

    def test_config_dict_roundtrip(self):
        cfg = KernelConfig.from_dict({'kernel': 'trivial', 'unrelated': 1})
        assert cfg == KernelConfig(kernel='trivial')
        assert cfg.to_dict() == {'kernel': 'trivial'}
