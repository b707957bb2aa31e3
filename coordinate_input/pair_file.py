import numpy as np
from numpy.typing import NDArray

from .reading import parse_coordinates

VALUES_PER_PAIR = 18


def load_triangle_pairs(filepath: str) -> tuple[NDArray[np.float64], list[int]]:
    """
    Load triangle pairs from a text file, one pair of 18 numbers per line.

    Blank lines and lines starting with '#' are ignored. Lines that do not
    hold exactly 18 numbers are skipped with a warning.

    Returns:
        tuple: (N x 2 x 3 x 3 array of pairs, 1-based source line number of each pair)
    """
    pairs = []
    line_numbers = []
    with open(filepath, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue

            values = parse_coordinates(stripped)
            if len(values) != VALUES_PER_PAIR:
                print(f"Warning: skipping line {line_number}, expected {VALUES_PER_PAIR} numbers but got {len(values)}")
                continue

            pairs.append(values)
            line_numbers.append(line_number)

    return np.array(pairs, dtype=np.float64).reshape(-1, 2, 3, 3), line_numbers
