# -*- coding: utf-8 -*-

from .config import (
    BARYCENTRIC_EPS,
    COLOCATION_EPS_SQR,
    CONFIG_VERSION,
    PARALLEL_EPS,
    SAT_EPS,
    SEGSEG_PARALLEL_EPS,
)
from .scalar import dt_abs, dt_clamp, dt_max, dt_min, dt_sqr, dt_sqrt, dt_swap
from .buffers import VertexBuffer, as_index_array, as_vec3, as_vertex_array, polygon_edges, vec3
from .vector import (
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
from .bounds import AABB, overlap_bounds, overlap_quant_bounds
from .static_class import TriangleRegion
from .triangle import (
    HeightResult,
    Triangle,
    classify_point_triangle,
    closest_height_point_triangle,
    closest_pt_point_triangle,
)
from .intersection import SegSegHit, SegmentPolyHit, intersect_seg_seg_2d, intersect_segment_poly_2d
from .polygon import (
    PolyEdgeDistances,
    calc_poly_center,
    distance_pt_poly_edges_sqr,
    distance_pt_seg_sqr_2d,
    overlap_poly_poly_2d,
    overlap_range,
    point_in_polygon,
    project_poly,
)

__all__ = [
    "AABB",
    "BARYCENTRIC_EPS",
    "COLOCATION_EPS_SQR",
    "CONFIG_VERSION",
    "HeightResult",
    "PARALLEL_EPS",
    "PolyEdgeDistances",
    "SAT_EPS",
    "SEGSEG_PARALLEL_EPS",
    "SegSegHit",
    "SegmentPolyHit",
    "Triangle",
    "TriangleRegion",
    "VertexBuffer",
    "as_index_array",
    "as_vec3",
    "as_vertex_array",
    "calc_poly_center",
    "classify_point_triangle",
    "closest_height_point_triangle",
    "closest_pt_point_triangle",
    "distance_pt_poly_edges_sqr",
    "distance_pt_seg_sqr_2d",
    "dt_abs",
    "dt_clamp",
    "dt_max",
    "dt_min",
    "dt_sqr",
    "dt_sqrt",
    "dt_swap",
    "intersect_seg_seg_2d",
    "intersect_segment_poly_2d",
    "overlap_bounds",
    "overlap_poly_poly_2d",
    "overlap_quant_bounds",
    "overlap_range",
    "point_in_polygon",
    "polygon_edges",
    "project_poly",
    "tri_area_2d",
    "vadd",
    "vcopy",
    "vcross",
    "vdist",
    "vdist_2d",
    "vdist_2d_sqr",
    "vdist_sqr",
    "vdot",
    "vdot_2d",
    "vec3",
    "vequal",
    "vlen",
    "vlen_sqr",
    "vlerp",
    "vmad",
    "vmax",
    "vmin",
    "vnormalize",
    "vperp_2d",
    "vscale",
    "vset",
    "vsub",
]
