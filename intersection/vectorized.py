"""
Vectorized counterparts of the predicates in `predicates.py`.

These evaluate many independent triangle pairs at once and give the same
answer as `triangles_intersect` for every pair.
"""

import numpy as np
from numpy.typing import NDArray, ArrayLike
from tqdm import tqdm

from geometry import signed_volume


def _as_triangle_stack(triangles: ArrayLike, name: str) -> NDArray[np.float64]:
    triangles = np.asarray(triangles, dtype=np.float64)
    if triangles.ndim != 3 or triangles.shape[1:] != (3, 3):
        raise ValueError(f"{name} must have shape (N, 3, 3), got {triangles.shape}")
    return triangles


def edge_intersects_vectorized(triangles: NDArray[np.float64],
                               edge_starts: NDArray[np.float64],
                               edge_ends: NDArray[np.float64]) -> NDArray[np.bool_]:
    """
    Vectorized edge/triangle crossing test.

    Args:
        triangles: N x 3 x 3 array, one triangle per row
        edge_starts: N x 3 array of segment start points
        edge_ends: N x 3 array of segment end points

    Returns:
        NDArray[np.bool_]: N booleans, True where segment i crosses triangle i
    """
    v0 = triangles[:, 0]
    v1 = triangles[:, 1]
    v2 = triangles[:, 2]

    sign_start = np.sign(signed_volume(v0, v1, v2, edge_starts))
    sign_end = np.sign(signed_volume(v0, v1, v2, edge_ends))
    crosses_plane = (sign_start != sign_end) & (sign_start != 0) & (sign_end != 0)

    # Triangle edges in the same cyclic order as Triangle.edges
    sign_t0 = np.sign(signed_volume(v0, v1, edge_starts, edge_ends))
    sign_t1 = np.sign(signed_volume(v1, v2, edge_starts, edge_ends))
    sign_t2 = np.sign(signed_volume(v2, v0, edge_starts, edge_ends))
    inside_prism = (sign_t0 == sign_t1) & (sign_t1 == sign_t2)

    return crosses_plane & inside_prism


def triangles_intersect_vectorized(triangles_a: ArrayLike, triangles_b: ArrayLike) -> NDArray[np.bool_]:
    """
    Check N triangle pairs for intersection.

    Args:
        triangles_a: N x 3 x 3 array of first triangles
        triangles_b: N x 3 x 3 array of second triangles

    Returns:
        NDArray[np.bool_]: N booleans, one per pair
    """
    triangles_a = _as_triangle_stack(triangles_a, "triangles_a")
    triangles_b = _as_triangle_stack(triangles_b, "triangles_b")
    if len(triangles_a) != len(triangles_b):
        raise ValueError(f"Triangle stacks differ in length: {len(triangles_a)} != {len(triangles_b)}")

    result = np.zeros(len(triangles_a), dtype=bool)
    for target, source in ((triangles_a, triangles_b), (triangles_b, triangles_a)):
        for i in range(3):
            result |= edge_intersects_vectorized(target, source[:, i], source[:, (i + 1) % 3])
    return result


def check_triangle_pairs(pairs: ArrayLike, chunk_size: int = 10000, show_progress: bool = False) -> NDArray[np.bool_]:
    """
    Check an N x 2 x 3 x 3 array of triangle pairs, chunk by chunk.

    Args:
        pairs: N x 2 x 3 x 3 array, pairs[i, 0] and pairs[i, 1] are the two triangles of pair i
        chunk_size: Number of pairs evaluated per step
        show_progress: Display a tqdm progress bar over the chunks

    Returns:
        NDArray[np.bool_]: N booleans, one per pair
    """
    pairs = np.asarray(pairs, dtype=np.float64)
    if pairs.ndim != 4 or pairs.shape[1:] != (2, 3, 3):
        raise ValueError(f"Triangle pairs must have shape (N, 2, 3, 3), got {pairs.shape}")
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    results = np.zeros(len(pairs), dtype=bool)
    starts = range(0, len(pairs), chunk_size)
    if show_progress:
        starts = tqdm(starts, desc="Checking triangle pairs")
    for start in starts:
        chunk = pairs[start:start + chunk_size]
        results[start:start + chunk_size] = triangles_intersect_vectorized(chunk[:, 0], chunk[:, 1])
    return results
