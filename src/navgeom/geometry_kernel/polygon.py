# -*- coding: utf-8 -*-
"""
Polygon Operations Module
=========================
Point classification, edge distances and aggregate queries for polygons on
the xz-plane: point-in-polygon parity, point-to-edge distances, centroid and
convex-convex overlap (separating axis test).

Polygons are vertex buffers (see :mod:`.buffers`). The y value is ignored by
every 2D routine here.
"""

import numpy as np
from typing import NamedTuple, Optional, Sequence, Tuple, Union

from .buffers import ArrayLike, VertexBuffer, as_vec3, as_vertex_array, polygon_edges
from .config import SAT_EPS


class PolyEdgeDistances(NamedTuple):
    """Result of :func:`distance_pt_poly_edges_sqr`.

    ``ed[j]`` / ``et[j]`` belong to the edge starting at vertex ``j``.
    """
    inside: bool
    ed: np.ndarray
    et: np.ndarray


def _crosses(pt: np.ndarray, vi: np.ndarray, vj: np.ndarray) -> bool:
    # Half-open crossing rule; the division only runs when vi.z != vj.z.
    return ((vi[2] > pt[2]) != (vj[2] > pt[2])) and \
        (pt[0] < (vj[0] - vi[0]) * (pt[2] - vi[2]) / (vj[2] - vi[2]) + vi[0])


def point_in_polygon(pt: ArrayLike, verts: ArrayLike, nverts: Optional[int] = None) -> bool:
    """Ray-casting parity test on the xz-plane.

    Exact for points strictly inside or outside. Points on the boundary get
    whatever the half-open crossing rule gives them.
    """
    pt = as_vec3(pt)
    poly = as_vertex_array(verts, nverts)
    c = False
    for j, i in polygon_edges(poly.shape[0]):
        if _crosses(pt, poly[i], poly[j]):
            c = not c
    return c


def distance_pt_seg_sqr_2d(pt: ArrayLike, p: ArrayLike, q: ArrayLike) -> Tuple[float, float]:
    """Squared xz distance from ``pt`` to segment pq.

    Returns:
        (dist_sqr, t) where t in [0, 1] locates the closest point
        ``p + t*(q - p)``. A zero-length segment gives t = 0.
    """
    pt = as_vec3(pt)
    p = as_vec3(p)
    q = as_vec3(q)
    pqx = q[0] - p[0]
    pqz = q[2] - p[2]
    dx = pt[0] - p[0]
    dz = pt[2] - p[2]
    d = pqx * pqx + pqz * pqz
    t = pqx * dx + pqz * dz
    if d > 0:
        t /= d
    if t < 0:
        t = 0.0
    elif t > 1:
        t = 1.0
    dx = p[0] + t * pqx - pt[0]
    dz = p[2] + t * pqz - pt[2]
    return float(dx * dx + dz * dz), float(t)


def distance_pt_poly_edges_sqr(
    pt: ArrayLike,
    verts: ArrayLike,
    nverts: Optional[int] = None,
    ed: Optional[np.ndarray] = None,
    et: Optional[np.ndarray] = None,
) -> PolyEdgeDistances:
    """Squared distance from ``pt`` to every polygon edge, plus inside/outside.

    One pass over the edges computes both the parity of
    :func:`point_in_polygon` and, per edge ``(j, i)``, the squared distance and
    clamped parameter of the closest point on ``vj -> vi``.

    Args:
        pt: (3,) query point.
        verts: Polygon vertex buffer.
        nverts: Number of vertices. Defaults to all.
        ed: Optional caller-owned output of length >= nverts for distances.
        et: Optional caller-owned output of length >= nverts for parameters.

    Returns:
        PolyEdgeDistances(inside, ed, et). When ``ed``/``et`` were given, the
        same arrays are returned, written in place.
    """
    pt = as_vec3(pt)
    poly = as_vertex_array(verts, nverts)
    n = poly.shape[0]
    if ed is None:
        ed = np.zeros(n, dtype=np.float64)
    if et is None:
        et = np.zeros(n, dtype=np.float64)
    if len(ed) < n or len(et) < n:
        raise ValueError(f"ed/et must hold at least {n} values")

    c = False
    for j, i in polygon_edges(n):
        vi = poly[i]
        vj = poly[j]
        if _crosses(pt, vi, vj):
            c = not c
        ed[j], et[j] = distance_pt_seg_sqr_2d(pt, vj, vi)
    return PolyEdgeDistances(c, ed, et)


def calc_poly_center(
    idx: Union[np.ndarray, Sequence[int]], verts: ArrayLike, nidx: Optional[int] = None
) -> np.ndarray:
    """Centroid (vertex average) of a polygon stored by reference.

    Args:
        idx: Index buffer (uint16) into ``verts``.
        verts: Shared vertex pool.
        nidx: Number of indices in the polygon (>= 3). Defaults to all.

    Returns:
        (3,) float64 centroid.
    """
    pts = VertexBuffer(verts).gather(idx, nidx)
    tc = np.zeros(3, dtype=np.float64)
    for v in pts:
        tc += v
    s = 1.0 / pts.shape[0]
    return tc * s


def project_poly(axis: ArrayLike, poly: ArrayLike, npoly: Optional[int] = None) -> Tuple[float, float]:
    """Project a polygon onto ``axis`` (xz dot product), returning (min, max)."""
    axis = as_vec3(axis)
    pts = as_vertex_array(poly, npoly)
    d = pts[:, 0] * axis[0] + pts[:, 2] * axis[2]
    return float(d.min()), float(d.max())


def overlap_range(amin: float, amax: float, bmin: float, bmax: float, eps: float) -> bool:
    """Whether [amin, amax] and [bmin, bmax] overlap by more than ``eps``."""
    return not ((amin + eps) > bmax or (amax - eps) < bmin)


def _separated_by_edges(edge_poly: np.ndarray, pa: np.ndarray, pb: np.ndarray, eps: float) -> bool:
    for j, i in polygon_edges(edge_poly.shape[0]):
        va = edge_poly[j]
        vb = edge_poly[i]
        n = np.array([vb[2] - va[2], 0.0, -(vb[0] - va[0])], dtype=np.float64)
        amin, amax = project_poly(n, pa)
        bmin, bmax = project_poly(n, pb)
        if not overlap_range(amin, amax, bmin, bmax, eps):
            # separating axis
            return True
    return False


def overlap_poly_poly_2d(
    polya: ArrayLike,
    polyb: ArrayLike,
    npolya: Optional[int] = None,
    npolyb: Optional[int] = None,
    eps: float = SAT_EPS,
) -> bool:
    """Whether two convex polygons overlap on the xz-plane.

    Separating axis test over the edge normals of A, then of B. Projected
    intervals must overlap by more than ``eps``, so polygons that only share
    an edge are reported as not overlapping. Non-convex input is not detected.
    """
    pa = as_vertex_array(polya, npolya)
    pb = as_vertex_array(polyb, npolyb)
    if _separated_by_edges(pa, pa, pb, eps):
        return False
    if _separated_by_edges(pb, pa, pb, eps):
        return False
    return True
