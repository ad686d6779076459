from __future__ import annotations
import typing
from ..types import *
from ..validation import check_arguments

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def filter_by(source: Iterable[T], predicate: Predicate[T]) -> 'Enumerable[T]':
    """
    lazily keep the elements of source for which predicate is true.
    arguments are checked now, the predicate only runs while the result is iterated.
    """
    from ..enumerable import Enumerable
    check_arguments(source, predicate, "predicate")

    def filter_data():
        for item in source:
            if predicate(item):
                yield item

    # filtering never changes an element, so a known element type survives
    return Enumerable(filter_data, getattr(source, "element_type", None))


def transform(source: Iterable[T], transformer: Selector[T, U]) -> 'Enumerable[U]':
    """
    lazily project each element of source through transformer.
    same order and same element count as the source.
    """
    from ..enumerable import Enumerable
    check_arguments(source, transformer, "transformer")

    def transform_data():
        for item in source:
            yield transformer(item)

    return Enumerable(transform_data)


class _CoreOperations(Generic[T]):
    def filter_by(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        return filter_by(self, predicate)

    def transform(self: 'Enumerable[T]', transformer: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        return transform(self, transformer)
