"""
Vector algebra on 3-component vectors.

Every function accepts arrays whose last axis has length 3, so a single
vector (shape (3,)) and a stack of vectors (shape (N, 3)) go through the
same code.
"""

import numpy as np
from numpy.typing import NDArray


def subtract(a: NDArray[np.float64], b: NDArray[np.float64]) -> NDArray[np.float64]:
    """Component-wise a - b."""
    return np.subtract(a, b)


def cross(a: NDArray[np.float64], b: NDArray[np.float64]) -> NDArray[np.float64]:
    """Right-handed cross product a x b."""
    a = np.asarray(a)
    b = np.asarray(b)
    ax, ay, az = a[..., 0], a[..., 1], a[..., 2]
    bx, by, bz = b[..., 0], b[..., 1], b[..., 2]
    return np.stack([
        ay * bz - az * by,
        -(ax * bz - az * bx),
        ax * by - ay * bx,
    ], axis=-1)


def dot(a: NDArray[np.float64], b: NDArray[np.float64]):
    """Sum of component-wise products, taken over the last axis."""
    a = np.asarray(a)
    b = np.asarray(b)
    # Explicit sum keeps the evaluation order fixed for scalar and batched inputs
    return a[..., 0] * b[..., 0] + a[..., 1] * b[..., 1] + a[..., 2] * b[..., 2]
