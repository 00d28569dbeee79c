from enum import Enum


class TriangleRegion(str, Enum):
    """Voronoi region of a triangle that a query point projects into.

    Members are listed in the order the closest-point test checks them.
    """
    VERTEX_A = "VERTEX_A"
    VERTEX_B = "VERTEX_B"
    EDGE_AB = "EDGE_AB"
    VERTEX_C = "VERTEX_C"
    EDGE_AC = "EDGE_AC"
    EDGE_BC = "EDGE_BC"
    FACE = "FACE"

    @property
    def is_vertex(self) -> bool:
        return self in (TriangleRegion.VERTEX_A, TriangleRegion.VERTEX_B, TriangleRegion.VERTEX_C)

    @property
    def is_edge(self) -> bool:
        return self in (TriangleRegion.EDGE_AB, TriangleRegion.EDGE_AC, TriangleRegion.EDGE_BC)
