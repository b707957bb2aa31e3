"""
Test script to verify reading triangle coordinates from text streams and pair files.
"""

import io
import os
import sys
import numpy as np
import pytest

# Add the parent directory to the Python path so we can import the coordinate_input module
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from coordinate_input import parse_coordinates, read_vertex, read_triangles, load_triangle_pairs


def test_parse_coordinates():
    assert parse_coordinates("1.0 2 -3.5") == [1.0, 2.0, -3.5]
    assert parse_coordinates("  4\t5   6\n") == [4.0, 5.0, 6.0]
    assert parse_coordinates("") == []


def test_parse_coordinates_discards_bad_tokens():
    assert parse_coordinates("1.0 abc 2.0 3,0 3.0") == [1.0, 2.0, 3.0]
    assert parse_coordinates("x y z") == []


def test_parse_coordinates_only_plain_ascii_numbers():
    assert parse_coordinates("1_000 2 3") == [2.0, 3.0]
    # Arabic-Indic and fullwidth digits
    assert parse_coordinates("\u0661 \uff12 4 5 6") == [4.0, 5.0, 6.0]
    # Vertical tab is not a separator and makes the token malformed
    assert parse_coordinates("1\x0b 2 3 4") == [2.0, 3.0, 4.0]
    # Non-breaking space does not split tokens
    assert parse_coordinates("1\u00a02 3") == [3.0]


def test_read_vertex_reprompts_until_three_numbers():
    stream = io.StringIO("1 2\n1 2 3 4\nfoo bar\n7 8 9\n")
    prompts = []
    vertex = read_vertex(2, 3, stream, prompt=prompts.append)
    assert vertex == [7.0, 8.0, 9.0]
    assert len(prompts) == 4
    assert all("vertex 3 of triangle 2" in prompt for prompt in prompts)


def test_read_vertex_accepts_line_with_extra_junk():
    stream = io.StringIO("1 two 2 3\n")
    assert read_vertex(1, 1, stream, prompt=lambda message: None) == [1.0, 2.0, 3.0]


def test_read_vertex_end_of_input():
    stream = io.StringIO("1 2\n")
    with pytest.raises(EOFError):
        read_vertex(1, 1, stream, prompt=lambda message: None)


def test_read_triangles():
    stream = io.StringIO("0 0 0\n2 0 0\nbad line\n0 2 0\n1 -1 -1\n1 -1 1\n1 1 0\n")
    prompts = []
    triangle_1, triangle_2 = read_triangles(stream, prompt=prompts.append)

    assert np.array_equal(triangle_1.as_array(), [[0, 0, 0], [2, 0, 0], [0, 2, 0]])
    assert np.array_equal(triangle_2.as_array(), [[1, -1, -1], [1, -1, 1], [1, 1, 0]])
    # One extra prompt for the rejected line
    assert len(prompts) == 7
    assert prompts[0] == "Please input floating point values (ex. 0.0 0.0 0.0) for vertex 1 of triangle 1."
    assert prompts[-1] == "Please input floating point values (ex. 0.0 0.0 0.0) for vertex 3 of triangle 2."


def test_load_triangle_pairs(tmp_path, capsys):
    filepath = tmp_path / "pairs.txt"
    filepath.write_text(
        "# t1 then t2\n"
        "0 0 0 1 0 0 0 1 0 10 10 10 11 10 10 10 11 10\n"
        "\n"
        "1 2 3\n"
        "0 0 0 2 0 0 0 2 0 1 -1 -1 1 -1 1 1 1 0\n"
    )

    pairs, line_numbers = load_triangle_pairs(str(filepath))

    assert pairs.shape == (2, 2, 3, 3)
    assert line_numbers == [2, 5]
    assert np.array_equal(pairs[1, 1], [[1, -1, -1], [1, -1, 1], [1, 1, 0]])
    assert "Warning: skipping line 4" in capsys.readouterr().out


def test_load_triangle_pairs_empty_file(tmp_path):
    filepath = tmp_path / "empty.txt"
    filepath.write_text("# nothing here\n")
    pairs, line_numbers = load_triangle_pairs(str(filepath))
    assert pairs.shape == (0, 2, 3, 3)
    assert line_numbers == []


if __name__ == "__main__":
    pytest.main([__file__])
