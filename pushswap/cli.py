"""Command line entry: read the numbers, print the instructions that sort them."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.algorithm import sort_stack
from pushswap.parsing import InputError, sanitize_entry
from pushswap.stack import Board, align_minimum, is_sorted
from pushswap.structuring import establish_cost, index_stack, mark_limits


def push_swap(args: Sequence[str]) -> list[str]:
    """Return the instructions that sort the numbers held by ``args``.

    Raises InputError when the arguments are not distinct 32-bit integers.
    """
    board = Board(sanitize_entry(args))
    size = len(board.a)
    if size <= 1 or is_sorted(board.a):
        return board.moves
    if size <= 3:
        sort_stack(board)
        return board.moves
    index_stack(board.a)
    establish_cost(board.a)
    mark_limits(board.a)
    if align_minimum(board):
        return board.moves
    if not is_sorted(board.a):
        sort_stack(board)
    return board.moves


def main(argv: Sequence[str] | None = None) -> int:
    """Print one instruction per line, or ``Error`` on bad input."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv or not argv[0]:
        return 0
    try:
        moves = push_swap(argv)
    except InputError:
        sys.stdout.write("Error\n")
        return 0
    sys.stdout.write("".join(f"{move}\n" for move in moves))
    return 0


if __name__ == "__main__":
    sys.exit(main())