from ..sbase import Sequence, sequence_method
from ..checks import check_sequence
from ..sdatastructures import ReplayBuffer


# No eviction: on an infinite upstream the buffer grows with the furthest
# position any traversal has reached.
@sequence_method
def cache(sequence) -> Sequence:
    check_sequence(sequence, 1, 'cache')
    return Sequence.generate(ReplayBuffer(sequence).replay)


__all__ = (
    'cache',
)
