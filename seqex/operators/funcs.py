from collections import deque
from itertools import islice, takewhile, dropwhile

from ..sbase import Sequence, sequence_method, EMPTY
from ..checks import check_sequence, check_callable, check_integer, is_flattenable


def _map(sequence, fn):
    for item in sequence:
        yield fn(item)


@sequence_method
def map(sequence, fn) -> Sequence:
    check_sequence(sequence, 1, 'map')
    check_callable(fn, 2, 'map')
    return Sequence.generate(_map, sequence, fn)


def _filter(sequence, predicate):
    for item in sequence:
        if predicate(item):
            yield item


@sequence_method
def filter(sequence, predicate) -> Sequence:
    check_sequence(sequence, 1, 'filter')
    check_callable(predicate, 2, 'filter')
    return Sequence.generate(_filter, sequence, predicate)


def _islice(sequence, *args):
    yield from islice(sequence, *args)


@sequence_method
def take(sequence, amount: int) -> Sequence:
    check_sequence(sequence, 1, 'take')
    check_integer(amount, 2, 'take', minimum=0)
    return Sequence.generate(_islice, sequence, amount)


@sequence_method
def skip(sequence, amount: int) -> Sequence:
    check_sequence(sequence, 1, 'skip')
    check_integer(amount, 2, 'skip', minimum=0)
    return Sequence.generate(_islice, sequence, amount, None)


@sequence_method
def slice(sequence, start: int, end: int) -> Sequence:
    check_sequence(sequence, 1, 'slice')
    check_integer(start, 2, 'slice', minimum=0)
    check_integer(end, 3, 'slice', minimum=0)
    return Sequence.generate(_islice, sequence, start, end)


@sequence_method
def step(sequence, amount: int) -> Sequence:
    check_sequence(sequence, 1, 'step')
    check_integer(amount, 2, 'step', minimum=1)
    return Sequence.generate(_islice, sequence, 0, None, amount)


def _skip_last(sequence, amount):
    window = deque()
    for item in sequence:
        window.append(item)
        if len(window) > amount:
            yield window.popleft()


@sequence_method
def skip_last(sequence, amount: int) -> Sequence:
    check_sequence(sequence, 1, 'skip_last')
    check_integer(amount, 2, 'skip_last', minimum=0)
    return Sequence.generate(_skip_last, sequence, amount)


def _take_while(sequence, predicate):
    yield from takewhile(predicate, sequence)


def _skip_while(sequence, predicate):
    yield from dropwhile(predicate, sequence)


def _negate(predicate):
    return lambda item: not predicate(item)


@sequence_method
def take_while(sequence, predicate) -> Sequence:
    check_sequence(sequence, 1, 'take_while')
    check_callable(predicate, 2, 'take_while')
    return Sequence.generate(_take_while, sequence, predicate)


@sequence_method
def skip_while(sequence, predicate) -> Sequence:
    check_sequence(sequence, 1, 'skip_while')
    check_callable(predicate, 2, 'skip_while')
    return Sequence.generate(_skip_while, sequence, predicate)


@sequence_method
def take_until(sequence, predicate) -> Sequence:
    check_sequence(sequence, 1, 'take_until')
    check_callable(predicate, 2, 'take_until')
    return Sequence.generate(_take_while, sequence, _negate(predicate))


@sequence_method
def skip_until(sequence, predicate) -> Sequence:
    check_sequence(sequence, 1, 'skip_until')
    check_callable(predicate, 2, 'skip_until')
    return Sequence.generate(_skip_while, sequence, _negate(predicate))


def _element_at(sequence, index):
    yield from islice(sequence, index, index + 1)


@sequence_method
def element_at(sequence, index: int) -> Sequence:
    check_sequence(sequence, 1, 'element_at')
    check_integer(index, 2, 'element_at', minimum=0)
    return Sequence.generate(_element_at, sequence, index)


def _first(sequence, predicate):
    for item in sequence:
        if predicate is None or predicate(item):
            yield item
            return


@sequence_method
def first(sequence, predicate=None) -> Sequence:
    check_sequence(sequence, 1, 'first')
    check_callable(predicate, 2, 'first', optional=True)
    return Sequence.generate(_first, sequence, predicate)


def _last(sequence, predicate):
    found = EMPTY
    for item in sequence:
        if predicate is None or predicate(item):
            found = item
    if found is not EMPTY:
        yield found


@sequence_method
def last(sequence, predicate=None) -> Sequence:
    check_sequence(sequence, 1, 'last')
    check_callable(predicate, 2, 'last', optional=True)
    return Sequence.generate(_last, sequence, predicate)


def _find(sequence, predicate):
    for index, item in enumerate(sequence):
        if predicate(item):
            yield index
            return


@sequence_method
def find(sequence, predicate) -> Sequence:
    check_sequence(sequence, 1, 'find')
    check_callable(predicate, 2, 'find')
    return Sequence.generate(_find, sequence, predicate)


@sequence_method
def index_of(sequence, value) -> Sequence:
    check_sequence(sequence, 1, 'index_of')
    return Sequence.generate(_find, sequence, lambda item: item == value)


def _contains(sequence, value):
    for item in sequence:
        if item == value:
            yield True
            return
    yield False


@sequence_method
def contains(sequence, value) -> Sequence:
    check_sequence(sequence, 1, 'contains')
    return Sequence.generate(_contains, sequence, value)


def _all(sequence, predicate):
    for item in sequence:
        if not predicate(item):
            yield False
            return
    yield True


def _any(sequence, predicate):
    for item in sequence:
        if predicate(item):
            yield True
            return
    yield False


@sequence_method
def all(sequence, predicate) -> Sequence:
    check_sequence(sequence, 1, 'all')
    check_callable(predicate, 2, 'all')
    return Sequence.generate(_all, sequence, predicate)


@sequence_method
def any(sequence, predicate) -> Sequence:
    check_sequence(sequence, 1, 'any')
    check_callable(predicate, 2, 'any')
    return Sequence.generate(_any, sequence, predicate)


def _is_empty(sequence):
    for _ in sequence:
        yield False
        return
    yield True


@sequence_method
def is_empty(sequence) -> Sequence:
    check_sequence(sequence, 1, 'is_empty')
    return Sequence.generate(_is_empty, sequence)


def _default_if_empty(sequence, value):
    empty = True
    for item in sequence:
        empty = False
        yield item
    if empty:
        yield value


@sequence_method
def default_if_empty(sequence, value) -> Sequence:
    check_sequence(sequence, 1, 'default_if_empty')
    return Sequence.generate(_default_if_empty, sequence, value)


def _distinct(sequence):
    seen, seen_unhashable = set(), []
    for item in sequence:
        try:
            if item in seen:
                continue
            seen.add(item)
        except TypeError:
            if item in seen_unhashable:
                continue
            seen_unhashable.append(item)
        yield item


@sequence_method
def distinct(sequence) -> Sequence:
    check_sequence(sequence, 1, 'distinct')
    return Sequence.generate(_distinct, sequence)


def _distinct_adjacent(sequence):
    previous = EMPTY
    for item in sequence:
        if previous is EMPTY or item != previous:
            yield item
        previous = item


@sequence_method
def distinct_adjacent(sequence) -> Sequence:
    check_sequence(sequence, 1, 'distinct_adjacent')
    return Sequence.generate(_distinct_adjacent, sequence)


def _flat(sequence):
    for item in sequence:
        if is_flattenable(item):
            yield from item
        else:
            yield item


@sequence_method
def flat(sequence) -> Sequence:
    check_sequence(sequence, 1, 'flat')
    return Sequence.generate(_flat, sequence)


@sequence_method
def flat_map(sequence, mapper) -> Sequence:
    check_sequence(sequence, 1, 'flat_map')
    check_callable(mapper, 2, 'flat_map')
    return Sequence.generate(_flat, Sequence.generate(_map, sequence, mapper))


def _intersperse(sequence, value):
    for index, item in enumerate(sequence):
        if index:
            yield value
        yield item


@sequence_method
def intersperse(sequence, value) -> Sequence:
    check_sequence(sequence, 1, 'intersperse')
    return Sequence.generate(_intersperse, sequence, value)


def _buffer(sequence, amount):
    it = iter(sequence)
    while True:
        chunk = list(islice(it, amount))
        if not chunk:
            break
        yield Sequence(chunk)


@sequence_method
def buffer(sequence, amount: int) -> Sequence:
    check_sequence(sequence, 1, 'buffer')
    check_integer(amount, 2, 'buffer', minimum=1)
    return Sequence.generate(_buffer, sequence, amount)


def _repeat(sequence, amount):
    for _ in range(amount):
        yield from sequence


@sequence_method
def repeat(sequence, amount: int) -> Sequence:
    """Yields the whole of `sequence` `amount` times, one fresh traversal each."""
    check_sequence(sequence, 1, 'repeat')
    check_integer(amount, 2, 'repeat', minimum=0)
    return Sequence.generate(_repeat, sequence, amount)


def _replace(sequence, index, value):
    for position, item in enumerate(sequence):
        yield value if position == index else item


@sequence_method
def replace(sequence, index: int, value) -> Sequence:
    check_sequence(sequence, 1, 'replace')
    check_integer(index, 2, 'replace', minimum=0)
    return Sequence.generate(_replace, sequence, index, value)


def _on_start(sequence, fn):
    fn()
    yield from sequence


def _on_yield(sequence, fn):
    for item in sequence:
        fn(item)
        yield item


def _on_done(sequence, fn):
    yield from sequence
    fn()


@sequence_method
def on_start(sequence, fn) -> Sequence:
    check_sequence(sequence, 1, 'on_start')
    check_callable(fn, 2, 'on_start')
    return Sequence.generate(_on_start, sequence, fn)


@sequence_method
def on_yield(sequence, fn) -> Sequence:
    check_sequence(sequence, 1, 'on_yield')
    check_callable(fn, 2, 'on_yield')
    return Sequence.generate(_on_yield, sequence, fn)


# Not called when a traversal is abandoned before exhaustion.
@sequence_method
def on_done(sequence, fn) -> Sequence:
    check_sequence(sequence, 1, 'on_done')
    check_callable(fn, 2, 'on_done')
    return Sequence.generate(_on_done, sequence, fn)


__all__ = (
    'map', 'filter', 'take', 'skip', 'slice', 'step', 'skip_last',
    'take_while', 'skip_while', 'take_until', 'skip_until',
    'element_at', 'first', 'last', 'find', 'index_of', 'contains',
    'all', 'any', 'is_empty', 'default_if_empty',
    'distinct', 'distinct_adjacent', 'flat', 'flat_map', 'intersperse',
    'buffer', 'repeat', 'replace',
    'on_start', 'on_yield', 'on_done',
)
