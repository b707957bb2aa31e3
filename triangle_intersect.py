import argparse
import os
import sys
import matplotlib.pyplot as plt

from coordinate_input import read_triangles, load_triangle_pairs
from intersection import triangles_intersect, check_triangle_pairs
from plotting import plot_triangles


TRIANGLE_COUNT = 2
VERTICES_PER_TRIANGLE = 3
BATCH_CHUNK_SIZE = 10000
RESULT_MESSAGE = "Do the two triangles intersect?: {answer}"


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description='Check whether two triangles in 3D space intersect.')
    parser.add_argument('--pairs-file', type=str, default=None,
                        help='Text file with one triangle pair (18 numbers) per line; checks every pair instead of prompting')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Plot the triangles (interactive mode) or show progress (batch mode)')
    return parser.parse_args(argv)


def format_answer(intersect: bool) -> str:
    return "yes" if intersect else "no"


def run_interactive(verbose=False):
    try:
        triangle_1, triangle_2 = read_triangles(triangle_count=TRIANGLE_COUNT,
                                                vertices_per_triangle=VERTICES_PER_TRIANGLE)
    except EOFError as e:
        print(f"Error: {e}")
        sys.exit(1)

    intersect = triangles_intersect(triangle_1, triangle_2)
    print(RESULT_MESSAGE.format(answer=format_answer(intersect)))

    if verbose:
        plot_triangles(triangle_1, triangle_2, intersect=intersect)
        plt.tight_layout()
        plt.show()


def run_batch(pairs_filepath, verbose=False):
    if not os.path.isfile(pairs_filepath):
        print(f"Error: The file {pairs_filepath} does not exist.")
        sys.exit(1)

    try:
        pairs, line_numbers = load_triangle_pairs(pairs_filepath)
    except UnicodeDecodeError as e:
        print(f"Error: The file {pairs_filepath} is not valid UTF-8 text: {e}")
        sys.exit(1)
    if len(pairs) == 0:
        print(f"Warning: no triangle pairs found in {pairs_filepath}")
        return

    results = check_triangle_pairs(pairs, chunk_size=BATCH_CHUNK_SIZE, show_progress=verbose)
    for line_number, intersect in zip(line_numbers, results):
        print(f"line {line_number}: {format_answer(intersect)}")

    print(f"{int(results.sum())} of {len(results)} pairs intersect")


def main(argv=None):
    args = parse_args(argv)
    if args.pairs_file is not None:
        run_batch(args.pairs_file, verbose=args.verbose)
    else:
        run_interactive(verbose=args.verbose)


if __name__ == "__main__":
    main()
