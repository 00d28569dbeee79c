# -*- coding: utf-8 -*-
"""
Buffers
=======

Coordinate buffer coercion.

Callers hand the kernel plain coordinate data: a single (x, y, z) triple, a
flat vertex buffer ``[x0, y0, z0, x1, y1, z1, ...]``, an ``(N, 3)`` array, or
an index buffer into a shared vertex pool. The helpers here turn those into
float64 / uint16 numpy arrays, reusing the caller's memory whenever numpy can
(``np.asarray`` + ``reshape`` are views for contiguous float64 input).

Vertex ``i`` of a buffer is always ``array[i]`` of the ``(N, 3)`` view, so no
routine does ``3 * i`` offset arithmetic by hand.
"""
from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple, Union

import numpy as np

ArrayLike = Union[np.ndarray, Sequence[float]]


def vec3(x: float, y: float, z: float) -> np.ndarray:
    """Build a float64 (3,) vector."""
    return np.array([x, y, z], dtype=np.float64)


def as_vec3(v: ArrayLike) -> np.ndarray:
    """Coerce ``v`` to a float64 (3,) vector.

    A longer flat buffer is accepted and its first vertex is returned as a
    view, mirroring how a vertex pointer into a flat buffer is used.

    Raises:
        ValueError: If ``v`` holds fewer than three values.
    """
    arr = np.asarray(v, dtype=np.float64).reshape(-1)
    if arr.shape[0] < 3:
        raise ValueError(f"expected at least 3 coordinates, got {arr.shape[0]}")
    return arr[:3]


def as_vertex_array(verts: ArrayLike, nverts: Optional[int] = None) -> np.ndarray:
    """Return an ``(nverts, 3)`` float64 view of a vertex buffer.

    Args:
        verts: Flat buffer of length ``3*N`` or an ``(N, 3)`` array.
        nverts: Number of leading vertices to use. Defaults to all of them.

    Raises:
        ValueError: If the buffer length is not a multiple of 3, or
            ``nverts`` exceeds the number of stored vertices.
    """
    arr = np.asarray(verts, dtype=np.float64)
    if arr.ndim == 2 and arr.shape[1] == 3:
        pts = arr
    else:
        flat = arr.reshape(-1)
        if flat.shape[0] % 3 != 0:
            raise ValueError(f"vertex buffer length {flat.shape[0]} is not a multiple of 3")
        pts = flat.reshape(-1, 3)
    if nverts is None:
        return pts
    if nverts < 0 or nverts > pts.shape[0]:
        raise ValueError(f"nverts={nverts} out of range for buffer with {pts.shape[0]} vertices")
    return pts[:nverts]


def as_index_array(idx: Union[np.ndarray, Sequence[int]], nidx: Optional[int] = None) -> np.ndarray:
    """Return the leading ``nidx`` entries of an index buffer as uint16."""
    arr = np.asarray(idx)
    if arr.ndim != 1:
        arr = arr.reshape(-1)
    if arr.size and (arr.min() < 0 or arr.max() > np.iinfo(np.uint16).max):
        raise ValueError("index buffer values must fit in uint16")
    arr = arr.astype(np.uint16, copy=False)
    if nidx is None:
        return arr
    if nidx < 0 or nidx > arr.shape[0]:
        raise ValueError(f"nidx={nidx} out of range for buffer with {arr.shape[0]} indices")
    return arr[:nidx]


def polygon_edges(n: int) -> Iterator[Tuple[int, int]]:
    """Yield the wrap-around edges ``(j, i)`` of an ``n``-gon.

    ``j`` is the starting vertex: ``(n-1, 0), (0, 1), ..., (n-2, n-1)``.
    """
    j = n - 1
    for i in range(n):
        yield j, i
        j = i


class VertexBuffer:
    """Read-only vertex view over a flat coordinate buffer.

    Wraps :func:`as_vertex_array` so polygon and point-cloud code can address
    vertices by number. ``vertex(i)`` returns a view into the caller's buffer
    when that buffer is contiguous float64.
    """

    def __init__(self, verts: ArrayLike, nverts: Optional[int] = None):
        self.points = as_vertex_array(verts, nverts)

    def __len__(self) -> int:
        return int(self.points.shape[0])

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.points)

    def __getitem__(self, i: int) -> np.ndarray:
        return self.points[i]

    def vertex(self, i: int) -> np.ndarray:
        return self.points[i]

    def edges(self) -> Iterator[Tuple[int, int]]:
        return polygon_edges(len(self))

    def gather(self, idx: Union[np.ndarray, Sequence[int]], nidx: Optional[int] = None) -> np.ndarray:
        """Return the ``(nidx, 3)`` vertices referenced by an index buffer."""
        indices = as_index_array(idx, nidx)
        if indices.size and int(indices.max()) >= len(self):
            raise ValueError(f"index {int(indices.max())} out of range for {len(self)} vertices")
        return self.points[indices.astype(np.intp)]

    def flat(self) -> np.ndarray:
        """Return the buffer as ``[x0, y0, z0, x1, ...]``."""
        return self.points.reshape(-1)

    def __repr__(self) -> str:
        return f"VertexBuffer(nverts={len(self)})"
