from __future__ import annotations
import typing
import logging
import numpy as np
import pandas as pd
from functools import reduce
from ..config import get_options
from ..errors import ConstructionError
from ..types import *

if typing.TYPE_CHECKING:
    from ..view import View

logger = logging.getLogger(__name__)


# --- materializers ---

def _drainable(view: Any, operation: str) -> 'View':
    """view `view` and refuse it before any element is pulled if it never ends"""
    from ..factories import as_view
    view = as_view(view)
    if not view.is_bounded:
        logger.debug("refusing to %s unbounded %r", operation, view)
        raise ConstructionError(f"cannot {operation} an unbounded view; bound it with take() or take_while() first")
    logger.debug("%s %r", operation, view)
    return view


def materialize(view: Union['View[T]', Iterable[T]]) -> List[T]:
    """drain a bounded view into a new list"""
    view = _drainable(view, 'materialize')
    result = []
    cursor, end = view.begin(), view.end()
    while cursor != end:
        result.append(cursor.read())
        cursor.advance()
    return result


def materialize_text(view: Union['View[str]', Iterable[str]], separator: Optional[str] = None) -> str:
    """concatenate the string elements of a bounded view into one text"""
    view = _drainable(view, 'materialize text from')
    sep = get_options().text_separator if separator is None else separator
    return sep.join(view)


def materialize_nested(view: Union['View[View[T]]', Iterable[Iterable[T]]]) -> List[List[T]]:
    """
    drain a view of views into a list of lists. inner views must be common;
    with the strict_nested option off they are normalized here instead.
    """
    from ..adaptors.normalize import common
    from ..factories import as_view
    from ..view import View
    view = _drainable(view, 'materialize nested')
    strict = get_options().strict_nested
    result = []
    for inner in view:
        if isinstance(inner, View) and not inner.is_common:
            if strict:
                raise ConstructionError(
                    f"inner {type(inner).__name__} is not common; apply common() before draining it")
            inner = common(inner)
        result.append(materialize(as_view(inner)))
    return result


# --- accessor ---

class TerminalAccessor(Generic[T]):
    def __init__(self, view_instance: 'View[T]'):
        self._view = view_instance

    def list(self) -> List[T]:
        """convert to list"""
        return materialize(self._view)

    def text(self, separator: Optional[str] = None) -> str:
        """concatenate string elements"""
        return materialize_text(self._view, separator)

    def nested(self) -> List[List[T]]:
        """convert a view of views to a list of lists"""
        return materialize_nested(self._view)

    def array(self, dtype: Optional[Any] = None) -> np.ndarray:
        """convert to numpy array; with a dtype the elements stream straight in"""
        if dtype is not None:
            return np.fromiter(_drainable(self._view, 'materialize'), dtype=dtype)
        return np.array(self.list())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(_drainable(self._view, 'materialize'))

    def dict(self, key_selector: Optional[KeySelector[T, K]] = None,
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary; without selectors the elements must be pairs"""
        view = _drainable(self._view, 'materialize')
        if key_selector is None and value_selector is None:
            # a view has keys() of its own, so dict() must not see it as a mapping
            return dict(iter(view))
        key_sel = key_selector if key_selector else lambda item: item
        val_sel = value_selector if value_selector else lambda item: item
        return {key_sel(item): val_sel(item) for item in view}

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        view = _drainable(self._view, 'count')
        if predicate is None: return sum(1 for _ in view)
        return sum(1 for x in view if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition. stops at the first hit."""
        if predicate is None:
            cursor, end = self._view.begin(), self._view.end()
            return cursor != end
        return any(predicate(x) for x in self._view)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all(predicate(x) for x in _drainable(self._view, 'test every element of'))

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element; pulls no further than needed"""
        for item in self._view:
            if predicate is None or predicate(item):
                return item
        if predicate is None: raise ValueError("sequence contains no elements")
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except ValueError: return default

    def aggregate(self, accumulator: Accumulator[T, T], seed: Optional[T] = None) -> T:
        """applies accumulator function over sequence"""
        data = self.list()
        if not data and seed is None: raise ValueError("cannot aggregate empty sequence without seed")
        return reduce(accumulator, data, seed) if seed is not None else reduce(accumulator, data)
