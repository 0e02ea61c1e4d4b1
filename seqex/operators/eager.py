"""Operators that have to see the whole (or most) of their source first.

None of these terminate on an infinite source, except `sorted`, which stops
at the first inversion.
"""
import builtins

from collections import deque
from functools import cmp_to_key
from typing import Any, List

from ..sbase import Sequence, sequence_method, EMPTY
from ..checks import check_sequence, check_callable, check_integer


def natural_order(a, b) -> int:
    if a < b:
        return -1
    return 1 if a > b else 0


@sequence_method
def to_list(sequence) -> List[Any]:
    check_sequence(sequence, 1, 'to_list')
    return list(sequence)


def _reverse(sequence):
    yield from reversed(list(sequence))


@sequence_method
def reverse(sequence) -> Sequence:
    check_sequence(sequence, 1, 'reverse')
    return Sequence.generate(_reverse, sequence)


def _take_last(sequence, amount):
    yield from deque(sequence, maxlen=amount)


@sequence_method
def take_last(sequence, amount: int) -> Sequence:
    check_sequence(sequence, 1, 'take_last')
    check_integer(amount, 2, 'take_last', minimum=0)
    return Sequence.generate(_take_last, sequence, amount)


def _count(sequence):
    total = 0
    for _ in sequence:
        total += 1
    yield total


@sequence_method
def count(sequence) -> Sequence:
    check_sequence(sequence, 1, 'count')
    return Sequence.generate(_count, sequence)


def _sort(sequence, comparator):
    # builtins.sorted is stable: ties keep their original order
    yield from builtins.sorted(sequence, key=cmp_to_key(comparator))


@sequence_method
def sort(sequence, comparator=None) -> Sequence:
    check_sequence(sequence, 1, 'sort')
    check_callable(comparator, 2, 'sort', optional=True)
    return Sequence.generate(_sort, sequence, comparator or natural_order)


def _sorted(sequence, comparator):
    result = True
    previous = EMPTY
    for item in sequence:
        if previous is not EMPTY and comparator(previous, item) > 0:
            result = False
            break
        previous = item
    yield result


@sequence_method
def sorted(sequence, comparator=None) -> Sequence:
    check_sequence(sequence, 1, 'sorted')
    check_callable(comparator, 2, 'sorted', optional=True)
    return Sequence.generate(_sorted, sequence, comparator or natural_order)


def _scan(sequence, reducer, seed):
    accumulator = seed
    for item in sequence:
        accumulator = item if accumulator is EMPTY else reducer(accumulator, item)
        yield accumulator


def _reduce(sequence, reducer, seed):
    accumulator = seed
    for accumulator in _scan(sequence, reducer, seed):
        pass
    if accumulator is not EMPTY:
        yield accumulator


def _reversed_list(sequence):
    return reversed(list(sequence))


@sequence_method
def scan(sequence, reducer, seed=EMPTY) -> Sequence:
    """Yields the accumulator after every element.

    Without a seed the first element is yielded as is, so the output is
    always as long as the input: scan([1, 2, 3], add) gives 1, 3, 6, and
    scan([1, 2, 3], add, 10) gives 11, 13, 16.
    """
    check_sequence(sequence, 1, 'scan')
    check_callable(reducer, 2, 'scan')
    return Sequence.generate(_scan, sequence, reducer, seed)


@sequence_method
def scan_right(sequence, reducer, seed=EMPTY) -> Sequence:
    check_sequence(sequence, 1, 'scan_right')
    check_callable(reducer, 2, 'scan_right')
    return Sequence.generate(_scan, Sequence.generate(_reversed_list, sequence), reducer, seed)


@sequence_method
def reduce(sequence, reducer, seed=EMPTY) -> Sequence:
    """Yields the final accumulator.

    Without a seed the first element is the seed, and an empty sequence
    yields nothing at all.
    """
    check_sequence(sequence, 1, 'reduce')
    check_callable(reducer, 2, 'reduce')
    return Sequence.generate(_reduce, sequence, reducer, seed)


@sequence_method
def reduce_right(sequence, reducer, seed=EMPTY) -> Sequence:
    check_sequence(sequence, 1, 'reduce_right')
    check_callable(reducer, 2, 'reduce_right')
    return Sequence.generate(_reduce, Sequence.generate(_reversed_list, sequence), reducer, seed)


def _sum(sequence):
    yield builtins.sum(sequence)


@sequence_method
def sum(sequence) -> Sequence:
    check_sequence(sequence, 1, 'sum')
    return Sequence.generate(_sum, sequence)


def _average(sequence):
    total, size = 0, 0
    for item in sequence:
        total += item
        size += 1
    if size:
        yield total / size


@sequence_method
def average(sequence) -> Sequence:
    check_sequence(sequence, 1, 'average')
    return Sequence.generate(_average, sequence)


def _extreme(sequence, comparator, sign):
    best = EMPTY
    for item in sequence:
        if best is EMPTY or sign * comparator(item, best) > 0:
            best = item
    if best is not EMPTY:
        yield best


@sequence_method
def min(sequence, comparator=None) -> Sequence:
    check_sequence(sequence, 1, 'min')
    check_callable(comparator, 2, 'min', optional=True)
    return Sequence.generate(_extreme, sequence, comparator or natural_order, -1)


@sequence_method
def max(sequence, comparator=None) -> Sequence:
    check_sequence(sequence, 1, 'max')
    check_callable(comparator, 2, 'max', optional=True)
    return Sequence.generate(_extreme, sequence, comparator or natural_order, 1)


__all__ = (
    'natural_order',
    'to_list', 'reverse', 'take_last', 'count',
    'sort', 'sorted',
    'scan', 'scan_right', 'reduce', 'reduce_right',
    'sum', 'average', 'min', 'max',
)
