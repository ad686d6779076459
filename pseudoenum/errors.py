"""Exception hierarchy for pseudoenum.

Every error raised by an operator derives from :class:`SequenceError`. The
concrete classes also derive from the builtin exception Python code would
normally expect (``ValueError`` for bad arguments, ``TypeError`` for bad
casts), so callers can catch either.
"""

from typing import Any, Optional


class SequenceError(Exception):
    """Base exception for all pseudoenum errors.

    Attributes:
        message: Human-readable error message
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(SequenceError, ValueError):
    """A required argument is absent or unusable.

    Raised at call time, before any element of the source is read.

    Attributes:
        argument: Name of the offending parameter, if known
    """

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        super().__init__(message)
        self.argument = argument


class InvalidConfigurationError(InvalidArgumentError):
    """The sort keys have no natural ordering and no comparer was given."""


class InvalidCastError(SequenceError, TypeError):
    """An element of a cast sequence is not an instance of the target type.

    Raised lazily, when the offending element is consumed.

    Attributes:
        index: Position of the element in the source
        value: The element itself
        target_type: The type the element was cast to
    """

    def __init__(self, index: int, value: Any, target_type: Any) -> None:
        super().__init__(
            f"cannot cast element {index} of type '{type(value).__name__}' "
            f"to '{_type_name(target_type)}'"
        )
        self.index = index
        self.value = value
        self.target_type = target_type


def _type_name(target_type: Any) -> str:
    if isinstance(target_type, tuple):
        return " | ".join(_type_name(t) for t in target_type)
    return getattr(target_type, "__name__", repr(target_type))
