import numpy as np
from typing import Sequence, Union

from .buffers import ArrayLike, as_vec3, as_vertex_array

QuantLike = Union[np.ndarray, Sequence[int]]


def overlap_bounds(amin: ArrayLike, amax: ArrayLike, bmin: ArrayLike, bmax: ArrayLike) -> bool:
    """Determine whether two float AABBs overlap.

    Boxes that only touch on a face, edge or corner count as overlapping.

    Args:
        amin: Minimum corner of box A (x, y, z).
        amax: Maximum corner of box A.
        bmin: Minimum corner of box B.
        bmax: Maximum corner of box B.
    """
    amin = as_vec3(amin)
    amax = as_vec3(amax)
    bmin = as_vec3(bmin)
    bmax = as_vec3(bmax)
    return not (amin[0] > bmax[0] or amax[0] < bmin[0] or
                amin[1] > bmax[1] or amax[1] < bmin[1] or
                amin[2] > bmax[2] or amax[2] < bmin[2])


def _as_quant(v: QuantLike) -> np.ndarray:
    arr = np.asarray(v, dtype=np.uint16).reshape(-1)
    if arr.shape[0] < 3:
        raise ValueError(f"expected 3 quantized coordinates, got {arr.shape[0]}")
    return arr


def overlap_quant_bounds(amin: QuantLike, amax: QuantLike, bmin: QuantLike, bmax: QuantLike) -> bool:
    """Same test as :func:`overlap_bounds` on quantized uint16 boxes."""
    amin = _as_quant(amin)
    amax = _as_quant(amax)
    bmin = _as_quant(bmin)
    bmax = _as_quant(bmax)
    return not (amin[0] > bmax[0] or amax[0] < bmin[0] or
                amin[1] > bmax[1] or amax[1] < bmin[1] or
                amin[2] > bmax[2] or amax[2] < bmin[2])


class AABB:
    """Axis-aligned bounding box with float64 precision.

    Stores per-axis minima and maxima as 3D float vectors. All operations
    are pure and return new AABB instances unless otherwise stated.
    ``min <= max`` per axis is assumed, not checked.

    Args:
        min_point: Minimum corner (x_min, y_min, z_min).
        max_point: Maximum corner (x_max, y_max, z_max).
    """
    def __init__(self, min_point: ArrayLike, max_point: ArrayLike):
        self.min = np.array(as_vec3(min_point), dtype=np.float64)
        self.max = np.array(as_vec3(max_point), dtype=np.float64)

    @classmethod
    def from_points(cls, verts: ArrayLike, nverts: int = None) -> "AABB":
        """Create the tightest AABB around a vertex buffer.

        Args:
            verts: Flat buffer or (N, 3) array, N >= 1.
            nverts: Number of leading vertices to use.
        """
        pts = as_vertex_array(verts, nverts)
        if pts.shape[0] == 0:
            raise ValueError("Empty vertex buffer")
        return cls(pts.min(axis=0), pts.max(axis=0))

    def overlap(self, other: "AABB") -> bool:
        """Check whether two AABBs overlap (boundary contact included)."""
        return overlap_bounds(self.min, self.max, other.min, other.max)

    def merge(self, other: "AABB") -> "AABB":
        """Return the AABB enclosing both boxes."""
        return AABB(np.minimum(self.min, other.min), np.maximum(self.max, other.max))

    def extent(self) -> np.ndarray:
        """Return per-axis extent vector e = max - min."""
        return self.max - self.min

    def center(self) -> np.ndarray:
        """Return box center c = (min + max) / 2."""
        return (self.min + self.max) * 0.5

    def expand(self, margin: float) -> "AABB":
        """Return a new AABB expanded by `margin` in all directions.

        Args:
            margin: Non-negative scalar expansion.
        """
        if margin < 0:
            raise ValueError("margin must be non-negative")
        delta = np.array([margin, margin, margin], dtype=np.float64)
        return AABB(self.min - delta, self.max + delta)

    def __repr__(self) -> str:
        return f"AABB(min={self.min.tolist()}, max={self.max.tolist()})"
