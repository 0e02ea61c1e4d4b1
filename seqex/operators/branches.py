from typing import Tuple

from ..sbase import Sequence, sequence_method
from ..checks import check_sequence, check_callable, check_integer
from ..sdatastructures import BranchBuffers, HEAD, TAIL


def _branches(buffers: BranchBuffers) -> Tuple[Sequence, Sequence]:
    return (
        Sequence.generate(buffers.replay, HEAD),
        Sequence.generate(buffers.replay, TAIL),
    )


@sequence_method
def split(sequence, amount: int) -> Tuple[Sequence, Sequence]:
    check_sequence(sequence, 1, 'split')
    check_integer(amount, 2, 'split')

    def classify(buffers, item):
        if buffers.pulls > amount:
            return TAIL
        if buffers.pulls == amount:
            buffers.close(HEAD)
        return HEAD

    buffers = BranchBuffers(sequence, classify)
    if amount <= 0:
        buffers.close(HEAD)
    return _branches(buffers)


def _prefix_classifier(predicate, expected: bool):
    def classify(buffers, item):
        if not buffers.closed[HEAD] and bool(predicate(item)) is expected:
            return HEAD
        buffers.close(HEAD)
        return TAIL
    return classify


@sequence_method
def span_with(sequence, predicate) -> Tuple[Sequence, Sequence]:
    check_sequence(sequence, 1, 'span_with')
    check_callable(predicate, 2, 'span_with')
    return _branches(BranchBuffers(sequence, _prefix_classifier(predicate, True)))


@sequence_method
def break_with(sequence, predicate) -> Tuple[Sequence, Sequence]:
    check_sequence(sequence, 1, 'break_with')
    check_callable(predicate, 2, 'break_with')
    return _branches(BranchBuffers(sequence, _prefix_classifier(predicate, False)))


@sequence_method
def partition(sequence, predicate) -> Tuple[Sequence, Sequence]:
    check_sequence(sequence, 1, 'partition')
    check_callable(predicate, 2, 'partition')

    def classify(buffers, item):
        return HEAD if predicate(item) else TAIL

    return _branches(BranchBuffers(sequence, classify))


__all__ = (
    'split', 'span_with', 'break_with', 'partition',
)
