import random
from collections import deque

import pytest

from minitools.pmerge import (
    PmergeError,
    ford_johnson_sort,
    format_sequence,
    jacobsthal_order,
    main,
    parse_input,
)


def test_parse_input():
    assert parse_input(["3", "5", "9"]) == [3, 5, 9]
    assert parse_input(["2147483647"]) == [2147483647]


def test_parse_empty_argument_reads_zero():
    assert parse_input([""]) == [0]


@pytest.mark.parametrize("args", [["-1"], ["abc"], ["2147483648"], ["1", "+2"], [" 1"], []])
def test_parse_errors(args):
    with pytest.raises(PmergeError, match="Error"):
        parse_input(args)


@pytest.mark.parametrize("n", [0, 1, 2, 5, 6, 22, 100])
def test_jacobsthal_order_is_permutation(n):
    assert sorted(jacobsthal_order(n)) == list(range(n))


def test_jacobsthal_order_prefix():
    assert jacobsthal_order(6)[:3] == [1, 3, 5]
    assert jacobsthal_order(1) == [0]
    assert jacobsthal_order(0) == []


@pytest.mark.parametrize("size", [0, 1, 2, 3, 7, 21, 100, 1000])
def test_sort_matches_sorted(size):
    rng = random.Random(size)
    data = [rng.randrange(0, 50) for _ in range(size)]
    assert ford_johnson_sort(data) == sorted(data)


def test_sort_does_not_modify_input():
    data = [5, 3, 1, 4]
    copy = list(data)
    ford_johnson_sort(data)
    assert data == copy


def test_sort_deque_returns_deque():
    data = deque([9, 2, 7, 2, 0])
    result = ford_johnson_sort(data)
    assert isinstance(result, deque)
    assert list(result) == sorted(data)


def test_format_sequence():
    assert format_sequence("Before:", [3, 1]) == "Before: 3 1"
    assert format_sequence("After:", []) == "After:"


def test_main_output(capsys):
    assert main(["3", "1", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Before: 3 1 2"
    assert lines[1] == "After: 1 2 3"
    assert lines[2].startswith("Time to process a range of 3 elements with list : ")
    assert lines[3].startswith("Time to process a range of 3 elements with deque : ")
    assert lines[3].endswith(" us")


def test_main_errors(capsys):
    assert main(["1", "-2"]) == 1
    assert capsys.readouterr().err == "Error\n"
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err