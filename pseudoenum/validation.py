from collections.abc import Iterable as _IterableABC
from typing import Any

from .errors import InvalidArgumentError


def check_source(source: Any, name: str = "source") -> None:
    """fail fast on an absent or non-iterable source"""
    if source is None:
        raise InvalidArgumentError(f"{name} must not be None", argument=name)
    if not isinstance(source, _IterableABC):
        raise InvalidArgumentError(
            f"{name} must be iterable, got '{type(source).__name__}'", argument=name)


def check_callable(func: Any, name: str) -> None:
    """fail fast on an absent or non-callable predicate/selector/comparer"""
    if func is None:
        raise InvalidArgumentError(f"{name} must not be None", argument=name)
    if not callable(func):
        raise InvalidArgumentError(
            f"{name} must be callable, got '{type(func).__name__}'", argument=name)


def check_arguments(source: Any, func: Any, name: str = "predicate") -> None:
    check_source(source)
    check_callable(func, name)


def check_positive_int(value: Any, name: str) -> None:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{name} must be an int, got '{type(value).__name__}'", argument=name)
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be greater than zero, got {value}", argument=name)
