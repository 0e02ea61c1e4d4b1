from collections.abc import Iterable
from typing import Any

from .errors import BadArgumentError


def is_sequence(value: Any) -> bool:
    return isinstance(value, Iterable)


def is_flattenable(value: Any) -> bool:
    return is_sequence(value) and not isinstance(value, (str, bytes))


def check_sequence(value, position: int, operator: str):
    if not is_sequence(value):
        raise BadArgumentError(position, operator, "Sequence")


def check_sequences(values, position: int, operator: str):
    if not isinstance(values, (list, tuple)):
        raise BadArgumentError(position, operator, "list of Sequences")
    for value in values:
        if not is_sequence(value):
            raise BadArgumentError(position, operator, "list of Sequences")


def check_callable(value, position: int, operator: str, optional=False):
    if value is None and optional:
        return
    if not callable(value):
        raise BadArgumentError(position, operator, "function or None" if optional else "function")


def check_integer(value, position: int, operator: str, minimum=None):
    # bool is an int subclass but never a count
    if isinstance(value, bool) or not isinstance(value, int):
        raise BadArgumentError(position, operator, "integer")
    if minimum is not None and value < minimum:
        if minimum == 0:
            raise BadArgumentError(position, operator, "non-negative integer")
        raise BadArgumentError(position, operator, "integer >= {}".format(minimum))


def check_number(value, position: int, operator: str, optional=False):
    if value is None and optional:
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise BadArgumentError(position, operator, "number or None" if optional else "number")


__all__ = (
    'is_sequence', 'is_flattenable',
    'check_sequence', 'check_sequences', 'check_callable', 'check_integer', 'check_number',
)
