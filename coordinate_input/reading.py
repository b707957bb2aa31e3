"""
Interactive collection of triangle vertices from a text stream.
"""

import re
import sys
from typing import Callable, TextIO

from data_types import Triangle

PROMPT = "Please input floating point values (ex. 0.0 0.0 0.0) for vertex {vertex} of triangle {triangle}."
ASCII_WHITESPACE = re.compile(r"[ \t\n\r\f]+")


def _is_plain_token(token: str) -> bool:
    # float() also takes digit separators, Unicode digits and padding whitespace
    return token.isascii() and "_" not in token and not any(c.isspace() for c in token)


def parse_coordinates(line: str) -> list[float]:
    """
    Parse ASCII-whitespace-separated floats from a line, discarding tokens that are not numbers.

    Only plain ASCII number tokens count: '1_000' or tokens holding non-ASCII
    digits are discarded like any other malformed token.
    """
    coordinates = []
    for token in ASCII_WHITESPACE.split(line):
        if not token or not _is_plain_token(token):
            continue
        try:
            coordinates.append(float(token))
        except ValueError:
            continue
    return coordinates


def read_vertex(triangle_index: int, vertex_index: int, input_stream: TextIO,
                prompt: Callable[[str], None] = print) -> list[float]:
    """
    Prompt for one vertex until a line with exactly three numbers is read.

    Raises:
        EOFError: if the stream ends before a valid line is read.
    """
    while True:
        prompt(PROMPT.format(vertex=vertex_index, triangle=triangle_index))
        line = input_stream.readline()
        if not line:
            raise EOFError(f"Input ended before vertex {vertex_index} of triangle {triangle_index} was read")

        coordinates = parse_coordinates(line)
        if len(coordinates) == 3:
            return coordinates


def read_triangles(input_stream: TextIO = None, prompt: Callable[[str], None] = print,
                   triangle_count: int = 2, vertices_per_triangle: int = 3) -> list[Triangle]:
    """Read `triangle_count` triangles, one vertex per line, in input order."""
    if input_stream is None:
        input_stream = sys.stdin

    triangles = []
    for triangle_index in range(1, triangle_count + 1):
        vertices = [
            read_vertex(triangle_index, vertex_index, input_stream, prompt)
            for vertex_index in range(1, vertices_per_triangle + 1)
        ]
        triangles.append(Triangle.from_coordinates(vertices))
    return triangles
