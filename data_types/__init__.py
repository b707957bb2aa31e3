from .triangle3d import Vertex, Edge, Triangle, make_vertex, as_vertex
