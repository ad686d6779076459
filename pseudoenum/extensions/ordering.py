from __future__ import annotations
import logging
import typing
from functools import cmp_to_key
from ..types import *
from ..errors import InvalidArgumentError, InvalidConfigurationError
from ..validation import check_source, check_callable

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


# --- comparer helpers ---

def natural_comparer(left: K, right: K) -> int:
    """three-way comparison using the keys' own < and > operators"""
    if left < right: return -1
    if left > right: return 1
    return 0


def reverse_comparer(comparer: Comparer[K]) -> Comparer[K]:
    """wraps a comparer so that it orders the other way round"""
    check_callable(comparer, "comparer")
    return lambda left, right: -comparer(left, right)


# --- sorting ---

def sort_by(source: Iterable[T], key_selector: KeySelector[T, K],
            comparer: Comparer[K] = UNSET) -> 'Enumerable[T]':
    """
    sort elements by a key, ascending.
    uses the keys' natural ordering unless a comparer is given.
    """
    return _sort(source, key_selector, comparer, descending=False)


def sort_by_descending(source: Iterable[T], key_selector: KeySelector[T, K],
                       comparer: Comparer[K] = UNSET) -> 'Enumerable[T]':
    """
    sort elements by a key, descending.
    uses the keys' natural ordering unless a comparer is given.
    """
    return _sort(source, key_selector, comparer, descending=True)


def _sort(source: Iterable[T], key_selector: KeySelector[T, K],
          comparer: Comparer[K], descending: bool) -> 'Enumerable[T]':
    """
    EAGER: the source is copied and sorted right here, before anything is returned.
    only handing out the sorted elements is lazy.
    """
    from ..enumerable import Enumerable
    check_source(source)
    check_callable(key_selector, "key_selector")
    if comparer is not UNSET:
        if comparer is None:
            raise InvalidArgumentError("comparer must not be None when passed explicitly", argument="comparer")
        check_callable(comparer, "comparer")

    # one pass over the source, one key per element
    items = list(source)
    keys = [key_selector(item) for item in items]
    logger.debug("sorting %d elements (descending=%s, custom comparer=%s)",
                 len(items), descending, comparer is not UNSET)

    # python's sort is stable, also with reverse=True, so ties keep source order
    if comparer is UNSET:
        try:
            order = sorted(range(len(items)), key=keys.__getitem__, reverse=descending)
        except TypeError as e:
            raise InvalidConfigurationError(
                f"keys of type '{type(keys[0]).__name__}' have no natural ordering; "
                "pass a comparer explicitly", argument="comparer") from e
    else:
        by_key = cmp_to_key(lambda i, j: comparer(keys[i], keys[j]))
        order = sorted(range(len(items)), key=by_key, reverse=descending)

    ordered = [items[i] for i in order]
    return Enumerable(lambda: iter(ordered), getattr(source, "element_type", None))


class _OrderingOperations(Generic[T]):
    def sort_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K],
                comparer: Comparer[K] = UNSET) -> 'Enumerable[T]':
        """sort elements by a key"""
        return sort_by(self, key_selector, comparer)

    def sort_by_descending(self: 'Enumerable[T]', key_selector: KeySelector[T, K],
                           comparer: Comparer[K] = UNSET) -> 'Enumerable[T]':
        """sort elements by a key in descending order"""
        return sort_by_descending(self, key_selector, comparer)
