from dataclasses import dataclass, field
import numpy as np
from numpy.typing import NDArray, ArrayLike

Vertex = NDArray[np.float64]  # read-only array of shape (3,)


def make_vertex(x: float, y: float, z: float) -> Vertex:
    """Build an immutable vertex from three coordinates."""
    return as_vertex([x, y, z])


def as_vertex(value: ArrayLike) -> Vertex:
    """
    Return a read-only float64 copy of a 3-component point. A vertex that is
    already read-only and owns its data is returned as is.

    Raises:
        ValueError: if the value does not have shape (3,).
    """
    if (isinstance(value, np.ndarray) and value.dtype == np.float64 and value.shape == (3,)
            and not value.flags.writeable and value.base is None):
        return value

    vertex = np.array(value, dtype=np.float64)
    if vertex.shape != (3,):
        raise ValueError(f"Vertex must have shape (3,), got {vertex.shape}")
    vertex.setflags(write=False)
    return vertex


@dataclass(frozen=True, eq=False)
class Edge:
    vertices: tuple[Vertex, Vertex]  # directed: vertices[0] -> vertices[1]

    def __post_init__(self):
        start, end = self.vertices
        object.__setattr__(self, "vertices", (as_vertex(start), as_vertex(end)))


@dataclass(frozen=True, eq=False)
class Triangle:
    vertices: tuple[Vertex, Vertex, Vertex]  # in input order
    edges: tuple[Edge, Edge, Edge] = field(init=False)

    def __post_init__(self):
        u, v, w = (as_vertex(vertex) for vertex in self.vertices)
        object.__setattr__(self, "vertices", (u, v, w))
        object.__setattr__(self, "edges", (Edge((u, v)), Edge((v, w)), Edge((w, u))))

    @classmethod
    def from_coordinates(cls, coordinates: ArrayLike) -> "Triangle":
        """
        Build a triangle from a 3x3 array-like, one vertex per row.

        Raises:
            ValueError: if the coordinates do not have shape (3, 3).
        """
        coords = np.asarray(coordinates, dtype=np.float64)
        if coords.shape != (3, 3):
            raise ValueError(f"Triangle coordinates must have shape (3, 3), got {coords.shape}")
        return cls(tuple(make_vertex(*row) for row in coords))

    def as_array(self) -> NDArray[np.float64]:
        """Return the vertices as a 3x3 array."""
        return np.array(self.vertices)
