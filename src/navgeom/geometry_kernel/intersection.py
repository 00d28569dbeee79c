# -*- coding: utf-8 -*-
"""
Intersection
============

Pure 2D (xz-plane) segment intersection utilities.

This module must be stateless:
- no dependency on any mesh / query layer
- only takes raw points and vertex buffers and returns results

Primary use in navigation queries:
    segment  ∩  convex polygon   (mesh-boundary raycasts)
    segment  ∩  segment          (portal / edge crossings)
"""
from __future__ import annotations

from typing import NamedTuple, Optional

import numpy as np

from .buffers import ArrayLike, as_vec3, as_vertex_array, polygon_edges
from .config import PARALLEL_EPS, SEGSEG_PARALLEL_EPS


class SegmentPolyHit(NamedTuple):
    """Result of :func:`intersect_segment_poly_2d`.

    ``tmin``/``tmax`` are parameters along p0 -> p1. ``seg_min``/``seg_max``
    are the starting vertex numbers of the edges that produced them, or -1
    when the segment's own endpoint bounds that side.
    """
    hit: bool
    tmin: float
    tmax: float
    seg_min: int
    seg_max: int


class SegSegHit(NamedTuple):
    """Result of :func:`intersect_seg_seg_2d`. ``s``/``t`` are None on a miss."""
    hit: bool
    s: Optional[float]
    t: Optional[float]


def _perp_xz(a: np.ndarray, b: np.ndarray) -> float:
    """``a.x*b.z - a.z*b.x``: opposite sign convention to ``vperp_2d``."""
    return a[0] * b[2] - a[2] * b[0]


def intersect_segment_poly_2d(
    p0: ArrayLike, p1: ArrayLike, verts: ArrayLike, nverts: Optional[int] = None
) -> SegmentPolyHit:
    """
    Clip segment p0 -> p1 against a convex polygon on the xz-plane.

    Each edge is a half-plane; the admissible interval [tmin, tmax] starts at
    [0, 1] and is narrowed edge by edge (slab clipping). A segment (nearly)
    parallel to an edge is rejected if it lies outside that edge, and the edge
    is ignored otherwise.

    Args:
        p0, p1: (3,) segment endpoints.
        verts: Convex polygon vertex buffer. The interior must lie where
            ``vperp_2d(v_i - v_j, p - v_j) >= 0`` for every edge j -> i.
        nverts: Number of polygon vertices (>= 3). Defaults to all.

    Returns:
        SegmentPolyHit. On a miss the fields hold the interval and edges
        reached when the segment was rejected.
    """
    p0 = as_vec3(p0)
    poly = as_vertex_array(verts, nverts)

    tmin = 0.0
    tmax = 1.0
    seg_min = -1
    seg_max = -1

    direction = as_vec3(p1) - p0

    with np.errstate(divide="ignore", invalid="ignore"):
        for j, i in polygon_edges(poly.shape[0]):
            edge = poly[i] - poly[j]
            diff = p0 - poly[j]
            n = edge[2] * diff[0] - edge[0] * diff[2]
            d = direction[2] * edge[0] - direction[0] * edge[2]
            if abs(d) < PARALLEL_EPS:
                # nearly parallel to this edge
                if n < 0:
                    return SegmentPolyHit(False, tmin, tmax, seg_min, seg_max)
                continue
            t = float(n / d)
            if d < 0:
                # entering across this edge
                if t > tmin:
                    tmin = t
                    seg_min = j
                    # enters after leaving
                    if tmin > tmax:
                        return SegmentPolyHit(False, tmin, tmax, seg_min, seg_max)
            else:
                # leaving across this edge
                if t < tmax:
                    tmax = t
                    seg_max = j
                    # leaves before entering
                    if tmax < tmin:
                        return SegmentPolyHit(False, tmin, tmax, seg_min, seg_max)

    return SegmentPolyHit(True, tmin, tmax, seg_min, seg_max)


def intersect_seg_seg_2d(ap: ArrayLike, aq: ArrayLike, bp: ArrayLike, bq: ArrayLike) -> SegSegHit:
    """Intersect the lines through segments A (ap -> aq) and B (bp -> bq).

    ``s`` is the parameter along A and ``t`` along B. Neither is clamped:
    the segments themselves cross only when both lie in [0, 1].
    Parallel or degenerate segments (|det| < 1e-6) are a miss.
    """
    ap = as_vec3(ap)
    bp = as_vec3(bp)
    u = as_vec3(aq) - ap
    v = as_vec3(bq) - bp
    w = ap - bp
    d = _perp_xz(u, v)
    if abs(d) < SEGSEG_PARALLEL_EPS:
        return SegSegHit(False, None, None)
    s = _perp_xz(v, w) / d
    t = _perp_xz(u, w) / d
    return SegSegHit(True, float(s), float(t))
