"""
Orientation-based triangle/triangle intersection predicates.

Every decision is a comparison between signs of signed tetrahedron volumes,
with the sign taken as one of three categories (negative, zero, positive).
No tolerance is applied: an exactly zero volume is its own category, so
segments that only touch a plane or an edge are not reported as crossing.
"""

import numpy as np

from data_types import Edge, Triangle
from geometry import signed_volume


def crosses_plane(sign_start, sign_end) -> bool:
    """True if two endpoint signs lie strictly on opposite sides of a plane."""
    return bool(sign_start != sign_end and sign_start != 0 and sign_end != 0)


def inside_edge_prism(sign_0, sign_1, sign_2) -> bool:
    """True if a segment turns the same way around all three triangle edges."""
    return bool(sign_0 == sign_1 and sign_1 == sign_2)


def edge_intersects(triangle: Triangle, edge: Edge) -> bool:
    """
    Check whether a directed segment crosses the interior of a triangle.

    The segment must have its endpoints strictly on opposite sides of the
    triangle's plane, and the tetrahedra it forms with each of the three
    triangle edges must all have the same orientation.
    """
    v0, v1, v2 = triangle.vertices
    p0, p1 = edge.vertices

    sign_e = [np.sign(signed_volume(v0, v1, v2, p)) for p in (p0, p1)]
    sign_t = [
        np.sign(signed_volume(triangle_edge.vertices[0], triangle_edge.vertices[1], p0, p1))
        for triangle_edge in triangle.edges
    ]

    return crosses_plane(*sign_e) and inside_edge_prism(*sign_t)


def triangles_intersect(triangle_1: Triangle, triangle_2: Triangle) -> bool:
    """
    Check whether two triangles intersect.

    Tries the edges of triangle_2 against triangle_1 first, then the edges of
    triangle_1 against triangle_2, and stops at the first crossing.
    """
    for edge in triangle_2.edges:
        if edge_intersects(triangle_1, edge):
            return True

    for edge in triangle_1.edges:
        if edge_intersects(triangle_2, edge):
            return True

    return False
