from ..sbase import Sequence, sequence_method, sequence_static
from ..checks import check_sequence, check_number, is_flattenable
from ..errors import BadArgumentError


def _just(value):
    yield value


@sequence_static
def just(value) -> Sequence:
    return Sequence.generate(_just, value)


def _empty():
    yield from ()


@sequence_static
def empty() -> Sequence:
    return Sequence.generate(_empty)


def _range(start, end, step):
    value = start
    while end is None or (value < end if step > 0 else value > end):
        yield value
        value += step


@sequence_static
def range(start=0, end=None, step=1) -> Sequence:
    """Counts from `start` towards `end` (exclusive); without `end` it never stops."""
    check_number(start, 1, 'range')
    check_number(end, 2, 'range', optional=True)
    check_number(step, 3, 'range')
    if step == 0:
        raise BadArgumentError(3, 'range', "non-zero number")
    return Sequence.generate(_range, start, end, step)


def _concat(values):
    for value in values:
        if is_flattenable(value):
            yield from value
        else:
            yield value


@sequence_method
def concat(*values) -> Sequence:
    return Sequence.generate(_concat, values)


def _start_with(sequence, values):
    yield from _concat(values)
    yield from sequence


@sequence_method
def start_with(sequence, *values) -> Sequence:
    check_sequence(sequence, 1, 'start_with')
    return Sequence.generate(_start_with, sequence, values)


__all__ = (
    'just', 'empty', 'range', 'concat', 'start_with',
)
