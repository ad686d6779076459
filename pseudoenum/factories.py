import logging
import typing
from .types import *
from .validation import check_source, check_positive_int

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

logger = logging.getLogger(__name__)


def from_iterable(data: Iterable[T], element_type: Optional[Type[T]] = None) -> 'Enumerable[T]':
    """
    create enumerable from iterable.
    element_type declares what every element is, which lets cast_to skip its checks.
    """
    from .enumerable import Enumerable
    check_source(data, "data")
    return Enumerable(lambda: data, element_type)


def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: ())


def generator(count: int, start: int = 0) -> 'Enumerable[int]':
    """
    count consecutive integers beginning at start.
    count must be positive. start may be any integer, negative included.
    every traversal yields the same sequence again.
    """
    from .enumerable import Enumerable
    check_positive_int(count, "count")
    logger.debug("generator of %d integers from %r", count, start)

    def generate_data():
        value = start
        for _ in range(count):
            yield value
            value += 1

    return Enumerable(generate_data, int)


# --- aliases ---
pseudoenum = from_iterable
P = from_iterable
