import numpy as np
from numpy.typing import NDArray

from .vectors import subtract, cross, dot


def signed_volume(a: NDArray[np.float64], b: NDArray[np.float64],
                  c: NDArray[np.float64], d: NDArray[np.float64]):
    """
    Signed volume of the tetrahedron with base (a, b, c) and apex d.

    V = (1/6) * ((a - d) x (b - d)) . (c - d)

    The sign tells which side of the plane through a, b, c the point d is on;
    the volume is zero exactly when d lies on that plane.
    """
    return dot(cross(subtract(a, d), subtract(b, d)), subtract(c, d)) / 6.0
