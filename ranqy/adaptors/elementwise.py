from __future__ import annotations

import logging
from ..cursors import AdaptedCursor, AdaptedSentinel, Cursor, Sentinel, adapt_end
from ..errors import ConstructionError, ExhaustionError
from ..view import AdaptorView, View
from ..types import *

logger = logging.getLogger(__name__)


# --- select ---

class _SelectCursor(AdaptedCursor[U]):
    def __init__(self, base: Cursor[T], selector: Selector[T, U]):
        super().__init__(base)
        self.selector = selector

    def read(self) -> U:
        return self.selector(self.base.read())

    def retreat(self) -> None:
        self.base.retreat()


class SelectView(AdaptorView[U]):
    """applies `selector` to each element as it is read"""

    def __init__(self, parent: View[T], selector: Selector[T, U]):
        super().__init__(parent)
        self.selector = selector

    def begin(self) -> _SelectCursor[U]:
        return _SelectCursor(self._parent.begin(), self.selector)

    def end(self):
        return adapt_end(self._parent.end(), lambda c: _SelectCursor(c, self.selector))

    @property
    def arity(self) -> Optional[int]:
        return None


# --- where ---

class _WhereCursor(AdaptedCursor[T]):
    def __init__(self, base: Cursor[T], predicate: Predicate[T], end):
        super().__init__(base)
        self.predicate = predicate
        self.end = end

    def settle(self) -> '_WhereCursor[T]':
        """move forward until the predicate holds or the parent ends"""
        while self.base != self.end and not self.predicate(self.base.read()):
            self.base.advance()
        return self

    def advance(self) -> None:
        self.base.advance()
        self.settle()

    def retreat(self) -> None:
        self.base.retreat()
        while not self.predicate(self.base.read()):
            self.base.retreat()


class WhereView(AdaptorView[T]):
    """keeps the elements for which `predicate` holds"""

    def __init__(self, parent: View[T], predicate: Predicate[T]):
        super().__init__(parent)
        self.predicate = predicate

    def begin(self) -> _WhereCursor[T]:
        end = self._parent.end()
        return _WhereCursor(self._parent.begin(), self.predicate, end).settle()

    def end(self):
        # the wrapped end cursor may be moved by reverse(); the bound it
        # settles against must be a separate object
        return adapt_end(self._parent.end(), lambda c: _WhereCursor(c, self.predicate, self._parent.end()))


# --- reverse ---

class _ReverseCursor(AdaptedCursor[T]):
    """
    `base` sits one past the element this cursor reads. the retreated copy
    is kept as a one element lookahead so repeated reads don't walk back again.
    """

    def __init__(self, base: Cursor[T]):
        super().__init__(base)
        self._ahead: Optional[Cursor[T]] = None

    def read(self) -> T:
        if self._ahead is None:
            ahead = self.base.copy()
            ahead.retreat()
            self._ahead = ahead
        return self._ahead.read()

    def advance(self) -> None:
        self.base.retreat()
        self._ahead = None

    def retreat(self) -> None:
        self.base.advance()
        self._ahead = None

    def copy(self) -> '_ReverseCursor[T]':
        return _ReverseCursor(self.base.copy())


class ReverseView(AdaptorView[T]):
    """the parent's elements back to front"""

    def __init__(self, parent: View[T]):
        if not parent.is_bounded:
            logger.debug("rejecting reverse over unbounded %r", parent)
            raise ConstructionError("cannot reverse an unbounded view")
        if not parent.is_bidirectional:
            logger.debug("rejecting reverse over forward-only %r", parent)
            raise ConstructionError("cannot reverse a forward-only view")
        if not parent.is_common:
            logger.debug("rejecting reverse over non-common %r", parent)
            raise ConstructionError("cannot reverse a view whose terminator is not a cursor")
        super().__init__(parent)

    def begin(self) -> _ReverseCursor[T]:
        return _ReverseCursor(self._parent.end())

    def end(self) -> _ReverseCursor[T]:
        return _ReverseCursor(self._parent.begin())


# --- take ---

class _TakeCursor(AdaptedCursor[T]):
    def __init__(self, base: Cursor[T], remaining: int):
        super().__init__(base)
        self.remaining = remaining

    def read(self) -> T:
        if self.remaining <= 0:
            raise ExhaustionError("read past the end of a take")
        return self.base.read()

    def advance(self) -> None:
        # the parent is not moved past the last taken element; over a filter
        # on an unbounded source that step might never return
        self.remaining -= 1
        if self.remaining > 0:
            self.base.advance()

    def _same_position(self, other: '_TakeCursor[T]') -> bool:
        if self.remaining <= 0 or other.remaining <= 0:
            return self.remaining <= 0 and other.remaining <= 0
        return self.remaining == other.remaining and self.base == other.base


class _TakeSentinel(AdaptedSentinel):
    def reached(self, cursor: _TakeCursor) -> bool:
        return cursor.remaining <= 0 or cursor.base == self.base


class TakeView(AdaptorView[T]):
    """at most the first `count` elements of the parent"""

    def __init__(self, parent: View[T], count: int):
        if count < 0:
            raise ConstructionError(f"take count must not be negative, got {count}")
        super().__init__(parent)
        self.count = count

    def begin(self) -> _TakeCursor[T]:
        return _TakeCursor(self._parent.begin(), self.count)

    def end(self) -> _TakeSentinel:
        return _TakeSentinel(self._parent.end())

    @property
    def is_bounded(self) -> bool:
        return True

    @property
    def is_bidirectional(self) -> bool:
        return False


# --- take_while ---

class _TakeWhileSentinel(Sentinel):
    def __init__(self, base, predicate: Predicate[T]):
        self.base = base
        self.predicate = predicate

    def reached(self, cursor: Cursor) -> bool:
        return cursor == self.base or not self.predicate(cursor.read())


class TakeWhileView(AdaptorView[T]):
    """
    the parent's elements up to, not including, the first one failing
    `predicate`. iteration stops there for good, even if later elements
    would pass again.
    """

    def __init__(self, parent: View[T], predicate: Predicate[T]):
        super().__init__(parent)
        self.predicate = predicate

    def begin(self) -> Cursor[T]:
        return self._parent.begin()

    def end(self) -> _TakeWhileSentinel:
        return _TakeWhileSentinel(self._parent.end(), self.predicate)

    @property
    def is_bounded(self) -> bool:
        # bounded by the predicate; an infinite run of passing elements is
        # the caller's responsibility, as with where()
        return True

    @property
    def is_bidirectional(self) -> bool:
        return False


# --- drop_while / skip ---

class DropWhileView(AdaptorView[T]):
    """
    skips the leading elements that satisfy `predicate`. the predicate is
    only consulted until its first failure; everything after is yielded.
    """

    def __init__(self, parent: View[T], predicate: Predicate[T]):
        super().__init__(parent)
        self.predicate = predicate

    def begin(self) -> Cursor[T]:
        cursor, end = self._parent.begin(), self._parent.end()
        while cursor != end and self.predicate(cursor.read()):
            cursor.advance()
        return cursor

    def end(self):
        return self._parent.end()


class SkipView(AdaptorView[T]):
    """everything after the first `count` elements"""

    def __init__(self, parent: View[T], count: int):
        if count < 0:
            raise ConstructionError(f"skip count must not be negative, got {count}")
        super().__init__(parent)
        self.count = count

    def begin(self) -> Cursor[T]:
        cursor, end = self._parent.begin(), self._parent.end()
        for _ in range(self.count):
            if cursor == end:
                break
            cursor.advance()
        return cursor

    def end(self):
        return self._parent.end()


# --- enumerate ---

class _EnumerateCursor(AdaptedCursor[Tuple[int, T]]):
    """
    an end cursor starts without an index; `origin` is the parent's begin()
    and the start value, used to count the index the first time it retreats.
    """

    def __init__(self, base: Cursor[T], index: Optional[int],
                 origin: Optional[Tuple[Callable[[], Cursor[T]], int]] = None):
        super().__init__(base)
        self.index = index
        self.origin = origin

    def read(self) -> Tuple[int, T]:
        return self.index, self.base.read()

    def advance(self) -> None:
        self.base.advance()
        self.index += 1

    def _resolve(self) -> None:
        begin, start = self.origin
        probe, distance = begin(), 0
        while probe != self.base:
            probe.advance()
            distance += 1
        self.index = start + distance

    def retreat(self) -> None:
        if self.index is None:
            self._resolve()
        self.base.retreat()
        self.index -= 1


class EnumerateView(AdaptorView[Tuple[int, T]]):
    """(index, element) pairs, counting from `start`"""

    def __init__(self, parent: View[T], start: int = 0):
        super().__init__(parent)
        self.start = start

    def begin(self) -> _EnumerateCursor[T]:
        return _EnumerateCursor(self._parent.begin(), self.start)

    def end(self):
        # positions compare by base; the index is only needed once reverse() walks back
        return adapt_end(self._parent.end(),
                         lambda c: _EnumerateCursor(c, None, (self._parent.begin, self.start)))

    @property
    def arity(self) -> Optional[int]:
        return 2


# --- intersperse ---

class _IntersperseCursor(AdaptedCursor[T]):
    def __init__(self, base: Cursor[T], separator: T, end):
        super().__init__(base)
        self.separator = separator
        self.end = end
        self.on_separator = False

    def read(self) -> T:
        return self.separator if self.on_separator else self.base.read()

    def advance(self) -> None:
        if self.on_separator:
            self.on_separator = False
            return
        self.base.advance()
        self.on_separator = self.base != self.end

    def _same_position(self, other: '_IntersperseCursor[T]') -> bool:
        return self.on_separator == other.on_separator and self.base == other.base


class _IntersperseSentinel(AdaptedSentinel):
    def reached(self, cursor: _IntersperseCursor) -> bool:
        return not cursor.on_separator and cursor.base == self.base


class IntersperseView(AdaptorView[T]):
    """the parent's elements with `separator` placed between neighbours"""

    def __init__(self, parent: View[T], separator: T):
        super().__init__(parent)
        self.separator = separator

    def begin(self) -> _IntersperseCursor[T]:
        return _IntersperseCursor(self._parent.begin(), self.separator, self._parent.end())

    def end(self) -> _IntersperseSentinel:
        return _IntersperseSentinel(self._parent.end())

    @property
    def is_bidirectional(self) -> bool:
        return False

    @property
    def arity(self) -> Optional[int]:
        return None
