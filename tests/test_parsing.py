import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.parsing import (
    InputError,
    has_duplicates,
    is_sanitized,
    parse_number,
    sanitize_entry,
)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("-17", -17), ("+5", 5), ("\t7", 7), ("  8", 8), ("007", 7)],
)
def test_parse_number_valid(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["", "-", "+", "+-3", "--3", "abc", "12a", "1-2"])
def test_parse_number_invalid(text):
    with pytest.raises(InputError):
        parse_number(text)


def test_is_sanitized_accepts_int_limits():
    assert is_sanitized(["2147483647", "-2147483648"]) is True


@pytest.mark.parametrize(
    "args", [["2147483648"], ["-2147483649"], ["1", "x"], ["1", "2-"]]
)
def test_is_sanitized_rejects(args):
    assert is_sanitized(args) is False


def test_is_sanitized_empty():
    assert is_sanitized([]) is True


@pytest.mark.parametrize(
    "args, expected",
    [(["1", "+1"], True), (["0", "-0"], True), (["1", "2", "3"], False), ([], False)],
)
def test_has_duplicates(args, expected):
    assert has_duplicates(args) is expected


def test_sanitize_single_argument_is_split():
    assert sanitize_entry(["3 2 1"]) == [3, 2, 1]


def test_sanitize_multiple_arguments():
    assert sanitize_entry(["3", "2", "1"]) == [3, 2, 1]


def test_sanitize_mixed_arguments():
    assert sanitize_entry(["3  2", "+1", "-4"]) == [3, 2, 1, -4]


def test_sanitize_only_spaces_gives_nothing():
    assert sanitize_entry(["   "]) == []


@pytest.mark.parametrize(
    "argv",
    [["1", "a"], ["1\t2"], ["1", "1"], ["99999999999"], ["1-2"], ["5", "+5"], ["-"]],
)
def test_sanitize_errors(argv):
    with pytest.raises(InputError):
        sanitize_entry(argv)


@given(
    st.lists(
        st.integers(min_value=-(2**31), max_value=2**31 - 1), unique=True, max_size=30
    )
)
def test_sanitize_round_trip(values):
    text = " ".join(str(v) for v in values)
    assert sanitize_entry([text]) == values
    assert sanitize_entry([str(v) for v in values]) == values