import builtins

from itertools import zip_longest

from ..sbase import Sequence, sequence_method, EMPTY
from ..checks import check_sequence, check_sequences, check_callable


def _zip(sequences, combiner):
    # builtins.zip pulls the inputs left to right and stops at the first one
    # that is exhausted
    for values in builtins.zip(*sequences):
        yield values if combiner is None else combiner(*values)


def zip(sequences, combiner=None) -> Sequence:
    check_sequences(sequences, 1, 'zip')
    check_callable(combiner, 2, 'zip', optional=True)
    return Sequence.generate(_zip, tuple(sequences), combiner)


def _zip_with(self, others, combiner=None) -> Sequence:
    check_sequences(others, 1, 'zip')
    check_callable(combiner, 2, 'zip', optional=True)
    return Sequence.generate(_zip, (self, *others), combiner)


_zip_with.__name__ = 'zip'
sequence_method(_zip_with)


def _equal(sequence, other):
    for left, right in zip_longest(sequence, other, fillvalue=EMPTY):
        if left is EMPTY or right is EMPTY or left != right:
            yield False
            return
    yield True


@sequence_method
def equal(sequence, other) -> Sequence:
    check_sequence(sequence, 1, 'equal')
    check_sequence(other, 2, 'equal')
    return Sequence.generate(_equal, sequence, other)


def _intersect(sequence, other):
    others = list(other)
    for item in list(sequence):
        if item in others:
            yield item


@sequence_method
def intersect(sequence, other) -> Sequence:
    check_sequence(sequence, 1, 'intersect')
    check_sequence(other, 2, 'intersect')
    return Sequence.generate(_intersect, sequence, other)


def _intercalate(sequence, other):
    for index, item in enumerate(sequence):
        if index:
            yield from other
        yield item


@sequence_method
def intercalate(sequence, other) -> Sequence:
    check_sequence(sequence, 1, 'intercalate')
    check_sequence(other, 2, 'intercalate')
    return Sequence.generate(_intercalate, sequence, other)


__all__ = (
    'zip', 'equal', 'intersect', 'intercalate',
)
