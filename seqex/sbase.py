import inspect
import collections.abc

from functools import partial
from itertools import islice
from typing import Any, Callable, Iterator

from .checks import is_sequence, check_sequence, check_callable, check_integer
from .errors import BadArgumentError


EMPTY = object()


class Source:
    single_pass = False

    def open(self) -> Iterator[Any]:
        raise NotImplementedError


class MultiPass(Source):
    __slots__ = ('factory', )

    def __init__(self, factory: Callable[[], Any]):
        self.factory = factory

    def open(self) -> Iterator[Any]:
        return iter(self.factory())

    def __repr__(self):
        return "MultiPass({!r})".format(self.factory)


class SinglePass(Source):
    __slots__ = ('iterator', )
    single_pass = True

    def __init__(self, iterator: Iterator[Any]):
        self.iterator = iterator

    def open(self) -> Iterator[Any]:
        # self-starting: every traversal continues where the last one stopped
        return self.iterator

    def __repr__(self):
        return "SinglePass({!r})".format(self.iterator)


def _make_source(obj) -> Source:
    if isinstance(obj, Sequence):
        return obj.source
    elif inspect.isgeneratorfunction(obj):
        return MultiPass(obj)
    elif isinstance(obj, collections.abc.Iterator):
        return SinglePass(obj)
    elif is_sequence(obj):
        return MultiPass(obj.__iter__)
    else:
        raise BadArgumentError(1, 'Sequence', "Iterable or generator function")


def _islice(sequence, start, stop, step):
    yield from islice(sequence, start, stop, step)


# NOTE: Sequence never buffers. Repeatable traversal of a single-pass source
# needs cache(), split() or partition().
class Sequence:
    not_found = None

    def __init__(self, iterable):
        self.source = _make_source(iterable)

    @classmethod
    def from_source(cls, source: Source) -> "Sequence":
        seq = cls.__new__(cls)
        seq.source = source
        return seq

    @classmethod
    def generate(cls, fn: Callable[..., Iterator[Any]], *args) -> "Sequence":
        return cls.from_source(MultiPass(partial(fn, *args)))

    @classmethod
    def coerce(cls, obj) -> "Sequence":
        if isinstance(obj, Sequence):
            return obj
        return cls(obj)

    @staticmethod
    def is_sequence(value) -> bool:
        return is_sequence(value)

    @property
    def is_single_pass(self) -> bool:
        return self.source.single_pass

    def __iter__(self) -> Iterator[Any]:
        return self.source.open()

    def get(self, index: int):
        """Walks a fresh traversal up to `index`; returns `not_found` past the end."""
        check_integer(index, 1, 'get', minimum=0)
        for position, item in enumerate(self):
            if position == index:
                return item
        return self.not_found

    def __getitem__(self, key):
        if isinstance(key, slice):
            if any(x is not None and x < 0 for x in (key.start, key.stop)):
                raise IndexError("negative slice bounds are not supported")
            if key.step is not None and key.step < 1:
                raise IndexError("slice step must be positive")
            return Sequence.generate(_islice, self, key.start, key.stop, key.step)
        elif isinstance(key, int) and not isinstance(key, bool):
            if key < 0:
                raise IndexError("negative indexes are not supported")
            return self.get(key)
        else:
            raise TypeError("index must be an integer or a slice")

    def __rshift__(self, composer):
        # seq >> composer
        return compose(self, composer)

    def __repr__(self):
        return "<Sequence {!r}>".format(self.source)


def compose(sequence, *composers) -> Sequence:
    check_sequence(sequence, 1, 'compose')
    for index, composer in enumerate(composers):
        check_callable(composer, index + 2, 'compose')

    result = Sequence.coerce(sequence)
    for composer in composers:
        result = composer(result)
        if not isinstance(result, Sequence):
            raise TypeError(
                "composer {!r} returned {}, not a Sequence".format(composer, type(result).__name__)
            )
    return result


def sequence_method(fn):
    # Sequence.op(seq, ...) and seq.op(...) both end up calling fn(seq, ...)
    setattr(Sequence, fn.__name__, fn)
    return fn


def sequence_static(fn):
    setattr(Sequence, fn.__name__, staticmethod(fn))
    return fn


sequence_method(compose)


__all__ = (
    'Source', 'MultiPass', 'SinglePass',
    'Sequence', 'compose',
    'sequence_method', 'sequence_static',
)
