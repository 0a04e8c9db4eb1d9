import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.cli import main, push_swap
from pushswap.parsing import InputError
from pushswap.stack import Board


def _replay(values, moves):
    board = Board(values)
    for move in moves:
        getattr(board, move)()
    return board


def test_push_swap_small_swap():
    assert push_swap(["2 1 3"]) == ["sa"]


def test_push_swap_sorted_input_needs_nothing():
    assert push_swap(["1", "2", "3"]) == []


def test_push_swap_single_number():
    assert push_swap(["42"]) == []


def test_push_swap_rotated_input_only_rotates():
    moves = push_swap(["4 5 1 2 3"])
    assert set(moves) <= {"ra", "rra"}
    assert _replay([4, 5, 1, 2, 3], moves).a_values() == [1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    "args",
    [["1 a"], ["1", "1"], ["2147483648"], ["3 -"], ["1+2"]],
)
def test_push_swap_rejects_bad_input(args):
    with pytest.raises(InputError):
        push_swap(args)


def test_main_prints_moves(capsys):
    assert main(["3", "2", "1"]) == 0
    moves = capsys.readouterr().out.split()
    assert _replay([3, 2, 1], moves).a_values() == [1, 2, 3]


def test_main_reports_error(capsys):
    assert main(["1 1"]) == 0
    assert capsys.readouterr().out == "Error\n"


@pytest.mark.parametrize("argv", [[], [""]])
def test_main_without_numbers_prints_nothing(argv, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out == ""


@given(st.lists(st.integers(-2147483648, 2147483647), min_size=1, max_size=40, unique=True))
@settings(max_examples=60, deadline=None)
def test_push_swap_output_sorts_input(values):
    moves = push_swap([str(value) for value in values])
    board = _replay(values, moves)
    assert board.a_values() == sorted(values)
    assert board.b_values() == []