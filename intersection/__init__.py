from .predicates import edge_intersects, triangles_intersect
from .vectorized import edge_intersects_vectorized, triangles_intersect_vectorized, check_triangle_pairs
