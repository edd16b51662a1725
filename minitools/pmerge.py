"""Sort positive integers with merge-insertion (Ford-Johnson) and time it."""

from __future__ import annotations

import bisect
import sys
import time
from collections import deque
from typing import Iterable, MutableSequence, Sequence

INT_MAX = 2**31 - 1
_DIGITS = frozenset("0123456789")


class PmergeError(Exception):
    """Raised for invalid input sequences."""


def parse_input(args: Iterable[str]) -> list[int]:
    """Parse non-negative integers up to INT_MAX; an empty argument reads as 0."""
    numbers: list[int] = []
    for arg in args:
        if not set(arg) <= _DIGITS:
            raise PmergeError("Error")
        value = int(arg) if arg else 0
        if value > INT_MAX:
            raise PmergeError("Error")
        numbers.append(value)
    if not numbers:
        raise PmergeError("Error")
    return numbers


def jacobsthal_order(n: int) -> list[int]:
    """Return an insertion order for ``n`` items led by Jacobsthal-derived indices."""
    order: list[int] = []
    current, previous = 1, 1
    while current < n:
        order.append(current)
        current, previous = current + 2 * previous, current
    seen = set(order)
    order.extend(i for i in range(n) if i not in seen)
    return order


def _sort(items: Sequence[int], kind: type) -> MutableSequence[int]:
    if len(items) <= 1:
        return kind(items)
    bigs = kind()
    smalls: list[int] = []
    pairs = iter(items)
    for a, b in zip(pairs, pairs):
        bigs.append(max(a, b))
        smalls.append(min(a, b))
    if len(items) % 2:
        bigs.append(items[-1])

    bigs = _sort(bigs, kind)
    for index in jacobsthal_order(len(smalls)):
        value = smalls[index]
        bigs.insert(bisect.bisect_right(bigs, value), value)
    return bigs


def ford_johnson_sort(sequence: Iterable[int]) -> MutableSequence[int]:
    """Return a sorted copy; a deque gives a deque, anything else a list."""
    kind = deque if isinstance(sequence, deque) else list
    return _sort(kind(sequence), kind)


def format_sequence(label: str, sequence: Iterable[int]) -> str:
    return label + "".join(f" {value}" for value in sequence)


def _timed_sort(sequence: Iterable[int]) -> tuple[MutableSequence[int], float]:
    start = time.process_time_ns()
    result = ford_johnson_sort(sequence)
    elapsed = (time.process_time_ns() - start) / 1000
    return result, elapsed


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: pmerge <sequence of positive integers>", file=sys.stderr)
        return 1
    try:
        numbers = parse_input(args)
    except PmergeError as error:
        print(error, file=sys.stderr)
        return 1

    print(format_sequence("Before:", numbers))
    sorted_list, list_time = _timed_sort(list(numbers))
    _, deque_time = _timed_sort(deque(numbers))
    print(format_sequence("After:", sorted_list))
    print(f"Time to process a range of {len(numbers)} elements with list : {list_time:.5f} us")
    print(f"Time to process a range of {len(numbers)} elements with deque : {deque_time:.5f} us")
    return 0


if __name__ == "__main__":
    sys.exit(main())