from .reading import parse_coordinates, read_vertex, read_triangles
from .pair_file import load_triangle_pairs
