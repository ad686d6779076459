from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..validation import check_arguments, check_callable

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def for_all(source: Iterable[T], predicate: Predicate[T]) -> bool:
    """
    true if every element satisfies predicate, true for an empty source.
    the whole source is consumed once and the predicate sees every element,
    even after the answer is already known to be false.
    """
    check_arguments(source, predicate, "predicate")
    result = True
    for item in source:
        if not predicate(item):
            result = False
    return result


class TerminalAccessor(Generic[T]):
    """EAGER operations. each one traverses the enumerable exactly once."""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._enumerable)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary, later keys overwrite earlier ones"""
        check_callable(key_selector, "key_selector")
        val_sel = value_selector if value_selector is not None else lambda item: item
        check_callable(val_sel, "value_selector")
        return {key_selector(item): val_sel(item) for item in self._enumerable}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._enumerable)
        check_callable(predicate, "predicate")
        return sum(1 for x in self._enumerable if predicate(x))

    def for_all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return for_all(self._enumerable, predicate)
