"""
Unit tests for scalar helpers and 3-component vector algebra.
"""

import logging

import numpy as np
import pytest

from navgeom.geometry_kernel import config
from navgeom.geometry_kernel.scalar import dt_abs, dt_clamp, dt_max, dt_min, dt_sqr, dt_sqrt, dt_swap
from navgeom.geometry_kernel.vector import (
    tri_area_2d,
    vadd,
    vcopy,
    vcross,
    vdist,
    vdist_2d,
    vdist_2d_sqr,
    vdist_sqr,
    vdot,
    vdot_2d,
    vequal,
    vlen,
    vlen_sqr,
    vlerp,
    vmad,
    vmax,
    vmin,
    vnormalize,
    vperp_2d,
    vscale,
    vset,
    vsub,
)


class TestScalar:

    def test_min_max(self):
        assert dt_min(1, 2) == 1
        assert dt_max(1.5, -2.0) == 1.5

    def test_abs_sqr(self):
        assert dt_abs(-3) == 3
        assert dt_abs(2.5) == 2.5
        assert dt_sqr(-4.0) == 16.0

    def test_clamp(self):
        assert dt_clamp(5, 0, 3) == 3
        assert dt_clamp(-1.0, 0.0, 1.0) == 0.0
        assert dt_clamp(0.5, 0.0, 1.0) == 0.5

    def test_quantized_types_preserved(self):
        a = np.uint16(7)
        b = np.uint16(9)
        assert dt_min(a, b).dtype == np.uint16
        assert dt_clamp(np.uint16(12), a, b) == 9

    def test_swap(self):
        a, b = dt_swap(1, 2)
        assert (a, b) == (2, 1)

    def test_sqrt(self):
        assert dt_sqrt(9.0) == 3.0


class TestArithmetic:

    def test_add_sub_scale(self):
        assert vadd([1, 2, 3], [4, 5, 6]).tolist() == [5.0, 7.0, 9.0]
        assert vsub([1, 2, 3], [4, 5, 6]).tolist() == [-3.0, -3.0, -3.0]
        assert vscale([1, -2, 3], 2.0).tolist() == [2.0, -4.0, 6.0]

    def test_mad(self):
        assert vmad([1, 1, 1], [1, 2, 3], 0.5).tolist() == [1.5, 2.0, 2.5]

    def test_lerp(self):
        assert vlerp([0, 0, 0], [2, 4, 6], 0.5).tolist() == [1.0, 2.0, 3.0]
        # t is not clamped
        assert vlerp([0, 0, 0], [1, 1, 1], 2.0).tolist() == [2.0, 2.0, 2.0]

    def test_set_copy(self):
        v = vset(1, 2, 3)
        c = vcopy(v)
        c[0] = 10.0
        assert v[0] == 1.0

    def test_min_max_accumulate_in_place(self):
        mn = np.array([1.0, 1.0, 1.0])
        mx = np.array([1.0, 1.0, 1.0])
        for p in ([0.0, 2.0, 1.0], [3.0, -1.0, 5.0]):
            vmin(mn, p)
            vmax(mx, p)
        assert mn.tolist() == [0.0, -1.0, 1.0]
        assert mx.tolist() == [3.0, 2.0, 5.0]

    def test_dot_cross(self):
        assert vdot([1, 2, 3], [4, 5, 6]) == 32.0
        assert vcross([1, 0, 0], [0, 1, 0]).tolist() == [0.0, 0.0, 1.0]


class TestLengths:

    @pytest.mark.parametrize("v", [[3.0, 4.0, 0.0], [1.0, -2.0, 2.0], [0.1, 0.2, 0.3]])
    def test_len_squared_matches(self, v):
        assert vlen(v) ** 2 == pytest.approx(vlen_sqr(v))

    def test_len_sqr_exact(self):
        assert vlen_sqr([1.0, 2.0, 2.0]) == 9.0
        assert vlen([1.0, 2.0, 2.0]) == 3.0

    def test_distances(self):
        assert vdist([0, 0, 0], [1, 2, 2]) == 3.0
        assert vdist_sqr([0, 0, 0], [1, 2, 2]) == 9.0

    def test_distances_2d_ignore_height(self):
        assert vdist_2d([0, 0, 0], [3, 100, 4]) == 5.0
        assert vdist_2d_sqr([0, 0, 0], [3, -7, 4]) == 25.0

    @pytest.mark.parametrize("v", [[3.0, 4.0, 0.0], [-1.0, 2.0, 5.0], [1e-3, 0.0, 0.0]])
    def test_normalize(self, v):
        arr = np.array(v)
        out = vnormalize(arr)
        assert out is arr
        assert vlen(arr) == pytest.approx(1.0)

    def test_normalize_zero_vector_gives_nan(self, caplog):
        arr = np.zeros(3)
        with caplog.at_level(logging.DEBUG, logger="navgeom"):
            vnormalize(arr)
        assert np.isnan(arr).all()
        assert "zero-length" in caplog.text


class TestPlanar:

    def test_dot_2d(self):
        assert vdot_2d([1, 100, 2], [3, -100, 4]) == 11.0

    def test_perp_2d(self):
        # u.z*v.x - u.x*v.z
        assert vperp_2d([1, 0, 0], [0, 0, 1]) == -1.0
        assert vperp_2d([0, 0, 1], [1, 0, 0]) == 1.0

    def test_tri_area_2d_sign(self):
        a, b, c = [0, 0, 0], [1, 0, 0], [0, 0, 1]
        assert tri_area_2d(a, b, c) == -1.0
        assert tri_area_2d(a, c, b) == 1.0
        assert tri_area_2d(a, b, [2, 5, 0]) == 0.0


class TestEqual:

    def test_self(self):
        p = [1.25, -3.0, 7.5]
        assert vequal(p, p)

    def test_within_tolerance(self):
        assert vequal([0, 0, 0], [0, 0, 1.0 / 32768.0])

    def test_at_tolerance_is_not_equal(self):
        assert config.COLOCATION_EPS_SQR == pytest.approx((1.0 / 16384.0) ** 2)
        assert not vequal([0, 0, 0], [0, 0, 1.0 / 16384.0])
        assert not vequal([0, 0, 0], [0.001, 0, 0])
