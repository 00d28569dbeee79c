"""
Unit tests for axis-aligned bounding box overlap.
"""

import numpy as np
import pytest

from navgeom.geometry_kernel.bounds import AABB, overlap_bounds, overlap_quant_bounds

BOXES = [
    ((0, 0, 0), (1, 1, 1)),
    ((0.5, 0.5, 0.5), (2, 2, 2)),
    ((1, 0, 0), (2, 1, 1)),          # shares the x = 1 face with the first box
    ((3, 3, 3), (4, 4, 4)),
    ((-1, -1, -1), (5, 5, 5)),
    ((0, 2, 0), (1, 3, 1)),
]


class TestOverlapBounds:

    def test_overlapping(self):
        assert overlap_bounds([0, 0, 0], [1, 1, 1], [0.5, 0.5, 0.5], [2, 2, 2])

    def test_disjoint_on_each_axis(self):
        for axis in range(3):
            bmin = [0.0, 0.0, 0.0]
            bmax = [1.0, 1.0, 1.0]
            bmin[axis] = 1.5
            bmax[axis] = 2.5
            assert not overlap_bounds([0, 0, 0], [1, 1, 1], bmin, bmax)

    def test_touching_face_counts_as_overlap(self):
        assert overlap_bounds([0, 0, 0], [1, 1, 1], [1, 0, 0], [2, 1, 1])

    def test_touching_corner_counts_as_overlap(self):
        assert overlap_bounds([0, 0, 0], [1, 1, 1], [1, 1, 1], [2, 2, 2])

    def test_containment(self):
        assert overlap_bounds([-1, -1, -1], [5, 5, 5], [0, 0, 0], [1, 1, 1])

    @pytest.mark.parametrize("a", BOXES)
    @pytest.mark.parametrize("b", BOXES)
    def test_symmetric(self, a, b):
        assert overlap_bounds(a[0], a[1], b[0], b[1]) == overlap_bounds(b[0], b[1], a[0], a[1])


class TestOverlapQuantBounds:

    def test_overlapping(self):
        amin = np.array([0, 0, 0], dtype=np.uint16)
        amax = np.array([10, 10, 10], dtype=np.uint16)
        assert overlap_quant_bounds(amin, amax, [5, 5, 5], [20, 20, 20])

    def test_touching(self):
        assert overlap_quant_bounds([0, 0, 0], [10, 10, 10], [10, 0, 0], [20, 10, 10])

    def test_disjoint(self):
        assert not overlap_quant_bounds([0, 0, 0], [10, 10, 10], [0, 11, 0], [10, 20, 10])

    def test_full_uint16_range(self):
        assert overlap_quant_bounds([0, 0, 0], [65535, 65535, 65535], [65535, 65535, 65535], [65535, 65535, 65535])

    def test_short_input(self):
        with pytest.raises(ValueError):
            overlap_quant_bounds([0, 0], [1, 1, 1], [0, 0, 0], [1, 1, 1])


class TestAABB:

    def test_from_points(self):
        box = AABB.from_points([0, 1, 2, -1, 5, 0, 3, 0, 1])
        assert box.min.tolist() == [-1.0, 0.0, 0.0]
        assert box.max.tolist() == [3.0, 5.0, 2.0]

    def test_from_points_empty(self):
        with pytest.raises(ValueError):
            AABB.from_points([])

    def test_overlap_and_merge(self):
        a = AABB([0, 0, 0], [1, 1, 1])
        b = AABB([2, 0, 0], [3, 1, 1])
        assert not a.overlap(b)
        merged = a.merge(b)
        assert merged.min.tolist() == [0.0, 0.0, 0.0]
        assert merged.max.tolist() == [3.0, 1.0, 1.0]
        assert merged.overlap(a) and merged.overlap(b)

    def test_extent_center(self):
        box = AABB([0, 0, 0], [2, 4, 6])
        assert box.extent().tolist() == [2.0, 4.0, 6.0]
        assert box.center().tolist() == [1.0, 2.0, 3.0]

    def test_expand(self):
        a = AABB([0, 0, 0], [1, 1, 1]).expand(0.5)
        assert a.min.tolist() == [-0.5, -0.5, -0.5]
        assert a.overlap(AABB([1.4, 0, 0], [2, 1, 1]))
        with pytest.raises(ValueError):
            a.expand(-1.0)

    def test_constructor_copies(self):
        lo = np.zeros(3)
        box = AABB(lo, [1, 1, 1])
        lo[0] = 5.0
        assert box.min[0] == 0.0
