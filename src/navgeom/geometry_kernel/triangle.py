# -*- coding: utf-8 -*-
"""
Triangle
========

Closest-point queries against a single triangle ABC.

- :func:`classify_point_triangle` / :func:`closest_pt_point_triangle`:
  nearest point on the triangle to a 3D reference point (Ericson §5.1.5).
- :func:`closest_height_point_triangle`: height of the triangle under a
  point, on the xz-plane, with a small barycentric slack so points on an edge
  shared by two triangles resolve in both.

The module is stateless. Degenerate triangles are not rejected: divisions by
zero produce inf/NaN, which the height query turns into ``found=False``.
"""
from __future__ import annotations

import logging
from typing import NamedTuple, Optional, Tuple

import numpy as np

from .buffers import ArrayLike, VertexBuffer, as_vec3
from .config import BARYCENTRIC_EPS
from .static_class import TriangleRegion
from .vector import tri_area_2d

logger = logging.getLogger(__name__)


class HeightResult(NamedTuple):
    """Result of :func:`closest_height_point_triangle`.

    ``height`` is ``None`` when ``found`` is False.
    """
    found: bool
    height: Optional[float]


def classify_point_triangle(
    p: ArrayLike, a: ArrayLike, b: ArrayLike, c: ArrayLike
) -> Tuple[TriangleRegion, np.ndarray]:
    """
    Nearest point on triangle ABC to ``p``, with the Voronoi region it came from.

    Regions are tested in a fixed order and the first match wins:
    vertex A, vertex B, edge AB, vertex C, edge AC, edge BC, then the face.
    On boundary and degenerate input the order decides the result, so it must
    not be rearranged.

    Args:
        p: (3,) reference point.
        a, b, c: (3,) triangle vertices.

    Returns:
        (region, closest_point) with closest_point a new float64 (3,) array.
    """
    p = as_vec3(p)
    a = as_vec3(a)
    b = as_vec3(b)
    c = as_vec3(c)

    ab = b - a
    ac = c - a
    ap = p - a
    d1 = np.dot(ab, ap)
    d2 = np.dot(ac, ap)
    if d1 <= 0.0 and d2 <= 0.0:
        # barycentric (1, 0, 0)
        return TriangleRegion.VERTEX_A, a.copy()

    bp = p - b
    d3 = np.dot(ab, bp)
    d4 = np.dot(ac, bp)
    if d3 >= 0.0 and d4 <= d3:
        # barycentric (0, 1, 0)
        return TriangleRegion.VERTEX_B, b.copy()

    with np.errstate(divide="ignore", invalid="ignore"):
        vc = d1 * d4 - d3 * d2
        if vc <= 0.0 and d1 >= 0.0 and d3 <= 0.0:
            # barycentric (1-v, v, 0)
            v = d1 / (d1 - d3)
            return TriangleRegion.EDGE_AB, a + v * ab

        cp = p - c
        d5 = np.dot(ab, cp)
        d6 = np.dot(ac, cp)
        if d6 >= 0.0 and d5 <= d6:
            # barycentric (0, 0, 1)
            return TriangleRegion.VERTEX_C, c.copy()

        vb = d5 * d2 - d1 * d6
        if vb <= 0.0 and d2 >= 0.0 and d6 <= 0.0:
            # barycentric (1-w, 0, w)
            w = d2 / (d2 - d6)
            return TriangleRegion.EDGE_AC, a + w * ac

        va = d3 * d6 - d5 * d4
        if va <= 0.0 and (d4 - d3) >= 0.0 and (d5 - d6) >= 0.0:
            # barycentric (0, 1-w, w)
            w = (d4 - d3) / ((d4 - d3) + (d5 - d6))
            return TriangleRegion.EDGE_BC, b + w * (c - b)

        # face region, barycentric (u, v, w)
        denom = 1.0 / (va + vb + vc)
        v = vb * denom
        w = vc * denom
        return TriangleRegion.FACE, a + ab * v + ac * w


def closest_pt_point_triangle(p: ArrayLike, a: ArrayLike, b: ArrayLike, c: ArrayLike) -> np.ndarray:
    """Return the point on triangle ABC closest to ``p``."""
    _, closest = classify_point_triangle(p, a, b, c)
    return closest


def closest_height_point_triangle(
    p: ArrayLike, a: ArrayLike, b: ArrayLike, c: ArrayLike, eps: float = BARYCENTRIC_EPS
) -> HeightResult:
    """Interpolated y of triangle ABC below/above ``p`` on the xz-plane.

    Barycentric (u, v) are taken against edges (c - a) and (b - a). The point
    counts as inside when ``u >= -eps``, ``v >= -eps`` and ``u + v <= 1 + eps``;
    the slack lets points interpolated along an edge find a height in both
    triangles sharing it.

    Args:
        p: (3,) query point; its y is ignored.
        a, b, c: (3,) triangle vertices.
        eps: Barycentric tolerance.

    Returns:
        HeightResult(found, height).
    """
    p = as_vec3(p)
    a = as_vec3(a)
    v0 = as_vec3(c) - a
    v1 = as_vec3(b) - a
    v2 = p - a

    dot00 = v0[0] * v0[0] + v0[2] * v0[2]
    dot01 = v0[0] * v1[0] + v0[2] * v1[2]
    dot02 = v0[0] * v2[0] + v0[2] * v2[2]
    dot11 = v1[0] * v1[0] + v1[2] * v1[2]
    dot12 = v1[0] * v2[0] + v1[2] * v2[2]

    with np.errstate(divide="ignore", invalid="ignore"):
        inv_denom = 1.0 / (dot00 * dot11 - dot01 * dot01)
        u = (dot11 * dot02 - dot01 * dot12) * inv_denom
        v = (dot00 * dot12 - dot01 * dot02) * inv_denom

    if not np.isfinite(inv_denom):
        logger.debug("closest_height_point_triangle: degenerate triangle a=%s b=%s c=%s", a, b, c)

    if u >= -eps and v >= -eps and (u + v) <= 1 + eps:
        return HeightResult(True, float(a[1] + v0[1] * u + v1[1] * v))
    return HeightResult(False, None)


class Triangle:
    """Three vertices (a, b, c) with the closest-point queries bound to them.

    Winding is not normalized; the barycentric sign tests assume the caller
    keeps it consistent across a mesh.
    """

    def __init__(self, a: ArrayLike, b: ArrayLike, c: ArrayLike):
        self.vertices = np.vstack([as_vec3(a), as_vec3(b), as_vec3(c)])

    @classmethod
    def from_buffer(cls, verts: ArrayLike, tri: Tuple[int, int, int]) -> "Triangle":
        """Build a triangle from three vertex numbers of a flat buffer."""
        points = VertexBuffer(verts).gather(tri)
        return cls(points[0], points[1], points[2])

    @property
    def a(self) -> np.ndarray:
        return self.vertices[0]

    @property
    def b(self) -> np.ndarray:
        return self.vertices[1]

    @property
    def c(self) -> np.ndarray:
        return self.vertices[2]

    def closest_point(self, p: ArrayLike) -> np.ndarray:
        return closest_pt_point_triangle(p, self.a, self.b, self.c)

    def classify(self, p: ArrayLike) -> TriangleRegion:
        region, _ = classify_point_triangle(p, self.a, self.b, self.c)
        return region

    def height_at(self, p: ArrayLike, eps: float = BARYCENTRIC_EPS) -> HeightResult:
        return closest_height_point_triangle(p, self.a, self.b, self.c, eps)

    def area_2d(self) -> float:
        """Signed xz-plane area term of the triangle (see :func:`tri_area_2d`)."""
        return tri_area_2d(self.a, self.b, self.c)

    def __repr__(self) -> str:
        return f"Triangle({self.a.tolist()}, {self.b.tolist()}, {self.c.tolist()})"
