# -*- coding: utf-8 -*-
"""
Vector
======

3-component vector algebra on float64 numpy arrays.

Every function accepts anything :func:`as_vec3` accepts and returns a new
(3,) array or a Python float. The exceptions are the accumulators
:func:`vmin` / :func:`vmax` and :func:`vnormalize`, which update the array
passed in and return it.

Functions suffixed ``_2d`` work on the horizontal xz-plane: the y value is
ignored.
"""
from __future__ import annotations

import logging

import numpy as np

from .buffers import ArrayLike, as_vec3, vec3
from .config import COLOCATION_EPS_SQR
from .scalar import dt_sqrt

logger = logging.getLogger(__name__)


def vadd(v1: ArrayLike, v2: ArrayLike) -> np.ndarray:
    """``v1 + v2``"""
    return as_vec3(v1) + as_vec3(v2)


def vsub(v1: ArrayLike, v2: ArrayLike) -> np.ndarray:
    """``v1 - v2``"""
    return as_vec3(v1) - as_vec3(v2)


def vscale(v: ArrayLike, t: float) -> np.ndarray:
    """``v * t``"""
    return as_vec3(v) * t


def vmad(v1: ArrayLike, v2: ArrayLike, s: float) -> np.ndarray:
    """Scaled addition ``v1 + v2 * s``."""
    return as_vec3(v1) + as_vec3(v2) * s


def vlerp(v1: ArrayLike, v2: ArrayLike, t: float) -> np.ndarray:
    """Linear interpolation ``v1 + (v2 - v1) * t``.

    ``t`` is not clamped; values outside [0, 1] extrapolate.
    """
    a = as_vec3(v1)
    return a + (as_vec3(v2) - a) * t


def vmin(mn: np.ndarray, v: ArrayLike) -> np.ndarray:
    """Component-wise ``mn = min(mn, v)``, in place."""
    np.minimum(mn, as_vec3(v), out=mn)
    return mn


def vmax(mx: np.ndarray, v: ArrayLike) -> np.ndarray:
    """Component-wise ``mx = max(mx, v)``, in place."""
    np.maximum(mx, as_vec3(v), out=mx)
    return mx


def vset(x: float, y: float, z: float) -> np.ndarray:
    return vec3(x, y, z)


def vcopy(a: ArrayLike) -> np.ndarray:
    return as_vec3(a).copy()


def vdot(v1: ArrayLike, v2: ArrayLike) -> float:
    a = as_vec3(v1)
    b = as_vec3(v2)
    return float(a[0] * b[0] + a[1] * b[1] + a[2] * b[2])


def vcross(v1: ArrayLike, v2: ArrayLike) -> np.ndarray:
    """Cross product ``v1 x v2``."""
    a = as_vec3(v1)
    b = as_vec3(v2)
    return vec3(
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def vlen_sqr(v: ArrayLike) -> float:
    a = as_vec3(v)
    return float(a[0] * a[0] + a[1] * a[1] + a[2] * a[2])


def vlen(v: ArrayLike) -> float:
    return dt_sqrt(vlen_sqr(v))


def vdist_sqr(v1: ArrayLike, v2: ArrayLike) -> float:
    a = as_vec3(v1)
    b = as_vec3(v2)
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    dz = b[2] - a[2]
    return float(dx * dx + dy * dy + dz * dz)


def vdist(v1: ArrayLike, v2: ArrayLike) -> float:
    return dt_sqrt(vdist_sqr(v1, v2))


def vdist_2d_sqr(v1: ArrayLike, v2: ArrayLike) -> float:
    """Squared distance between two points projected onto the xz-plane."""
    a = as_vec3(v1)
    b = as_vec3(v2)
    dx = b[0] - a[0]
    dz = b[2] - a[2]
    return float(dx * dx + dz * dz)


def vdist_2d(v1: ArrayLike, v2: ArrayLike) -> float:
    """Distance between two points projected onto the xz-plane."""
    return dt_sqrt(vdist_2d_sqr(v1, v2))


def vnormalize(v: np.ndarray) -> np.ndarray:
    """Scale ``v`` to unit length in place and return it.

    ``v`` must be a writable float array. A zero vector becomes NaN: the
    caller is expected not to normalize degenerate directions.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        d = np.float64(1.0) / np.sqrt(np.float64(v[0] * v[0] + v[1] * v[1] + v[2] * v[2]))
        if not np.isfinite(d):
            logger.debug("vnormalize: zero-length vector %s", v)
        v[0] *= d
        v[1] *= d
        v[2] *= d
    return v


def vequal(p0: ArrayLike, p1: ArrayLike) -> bool:
    """Sloppy colocation check.

    Points are considered the same location when their squared distance is
    below ``(1/16384)^2``, which absorbs drift from upstream mesh building.
    """
    return vdist_sqr(p0, p1) < COLOCATION_EPS_SQR


def vdot_2d(u: ArrayLike, v: ArrayLike) -> float:
    """Dot product on the xz-plane: ``u.x*v.x + u.z*v.z``."""
    a = as_vec3(u)
    b = as_vec3(v)
    return float(a[0] * b[0] + a[2] * b[2])


def vperp_2d(u: ArrayLike, v: ArrayLike) -> float:
    """xz-plane perp product ``u.z*v.x - u.x*v.z``."""
    a = as_vec3(u)
    b = as_vec3(v)
    return float(a[2] * b[0] - a[0] * b[2])


def tri_area_2d(a: ArrayLike, b: ArrayLike, c: ArrayLike) -> float:
    """Signed xz-plane area of triangle ABC.

    Equivalently, the side of line AB that point C lies on. The value is
    ``acx*abz - abx*acz`` (twice the geometric area, sign by winding).
    """
    pa = as_vec3(a)
    pb = as_vec3(b)
    pc = as_vec3(c)
    abx = pb[0] - pa[0]
    abz = pb[2] - pa[2]
    acx = pc[0] - pa[0]
    acz = pc[2] - pa[2]
    return float(acx * abz - abx * acz)
