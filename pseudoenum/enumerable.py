from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations
from .extensions.ordering import _OrderingOperations
from .extensions.casting import _CastingOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _traverse(self) -> Iterator[T]:
        """start a fresh traversal of the underlying data"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: DataFunc[T], element_type: Optional[Type[T]] = None):
        """init with a function that returns a fresh iterable each time it is called"""
        self._data_func = data_func
        self.element_type = element_type

    def _traverse(self) -> Iterator[T]:
        # nothing is cached, every traversal re-runs the pipeline from the source
        return iter(self._data_func())

    def __iter__(self) -> Iterator[T]:
        return self._traverse()

    # no __len__: list() would call it as a size hint and traverse twice

    def __repr__(self) -> str:
        element = self.element_type.__name__ if self.element_type is not None else "?"
        return f"{type(self).__name__}[{element}]"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T],
    _OrderingOperations[T],
    _CastingOperations[T]
):
    """a lazy, restartable, linq-inspired sequence over any python iterable."""
    def __init__(self, data_func: DataFunc[T], element_type: Optional[Type[T]] = None):
        super().__init__(data_func, element_type)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)
