from __future__ import annotations
import logging
import typing
from ..types import *
from ..errors import InvalidArgumentError, InvalidCastError
from ..validation import check_source

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


def _check_result_type(result_type: Any) -> None:
    if result_type is None:
        raise InvalidArgumentError("result_type must not be None", argument="result_type")
    types = result_type if isinstance(result_type, tuple) else (result_type,)
    if not types or not all(isinstance(t, type) for t in types):
        raise InvalidArgumentError(
            f"result_type must be a class or a tuple of classes, got {result_type!r}",
            argument="result_type")


def _is_known_subtype(element_type: Any, result_type: Any) -> bool:
    return isinstance(element_type, type) and issubclass(element_type, result_type)


def cast_to(source: Iterable[Any], result_type: Type[U]) -> 'Enumerable[U]':
    """
    casts the elements of an untyped sequence to result_type.
    a source already known to hold result_type is returned as is. otherwise each
    element is checked when it is consumed, and the first one that is not an
    instance of result_type raises InvalidCastError.
    """
    from ..enumerable import Enumerable
    check_source(source)
    _check_result_type(result_type)

    if _is_known_subtype(getattr(source, "element_type", None), result_type):
        return source

    def cast_data():
        for index, item in enumerate(source):
            if not isinstance(item, result_type):
                logger.debug("element %d (%r) is not a %r", index, item, result_type)
                raise InvalidCastError(index, item, result_type)
            yield item

    element_type = result_type if isinstance(result_type, type) else None
    return Enumerable(cast_data, element_type)


class _CastingOperations(Generic[T]):
    def cast_to(self: 'Enumerable[T]', result_type: Type[U]) -> 'Enumerable[U]':
        """casts the elements of the sequence to the specified type"""
        return cast_to(self, result_type)
