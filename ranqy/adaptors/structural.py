from __future__ import annotations

import logging
from ..cursors import AdaptedCursor, AdaptedSentinel, Cursor, Sentinel
from ..errors import ConstructionError, ExhaustionError
from ..view import AdaptorView, View
from .elementwise import TakeView
from ..types import *

logger = logging.getLogger(__name__)


# --- flatten ---

class _FlattenCursor(Cursor[T]):
    """
    outer position plus the cursor into the inner view currently being
    drained. only one inner view is held at a time.
    """

    def __init__(self, outer: Cursor, outer_end):
        self.outer = outer
        self.outer_end = outer_end
        self.inner: Optional[Cursor[T]] = None
        self.inner_end = None

    def settle(self) -> '_FlattenCursor[T]':
        """step the outer cursor until it rests on a non-empty inner view"""
        from ..factories import as_view
        while self.outer != self.outer_end:
            inner_view = as_view(self.outer.read())
            self.inner, self.inner_end = inner_view.begin(), inner_view.end()
            if self.inner != self.inner_end:
                return self
            self.outer.advance()
        self.inner = self.inner_end = None
        return self

    def read(self) -> T:
        if self.inner is None:
            raise ExhaustionError("read past the end of a flattened view")
        return self.inner.read()

    def advance(self) -> None:
        if self.inner is None:
            raise ExhaustionError("cannot advance past the end of a flattened view")
        self.inner.advance()
        if self.inner == self.inner_end:
            self.outer.advance()
            self.settle()

    def copy(self) -> '_FlattenCursor[T]':
        clone = _FlattenCursor(self.outer.copy(), self.outer_end)
        clone.inner = None if self.inner is None else self.inner.copy()
        clone.inner_end = self.inner_end
        return clone

    def _same_position(self, other: '_FlattenCursor[T]') -> bool:
        if not self.outer == other.outer:
            return False
        return self.inner is None or self.inner == other.inner


class _FlattenSentinel(Sentinel):
    def reached(self, cursor: _FlattenCursor) -> bool:
        return cursor.outer == cursor.outer_end


class FlattenView(AdaptorView[T]):
    """
    concatenation of the parent's elements, each of which is viewed as a
    sequence in its own right (views, lists, strings as characters, ...).
    """

    def __init__(self, parent: View, bounded: Optional[bool] = None):
        super().__init__(parent)
        self._bounded = bounded

    def begin(self) -> _FlattenCursor[T]:
        return _FlattenCursor(self._parent.begin(), self._parent.end()).settle()

    def end(self) -> _FlattenSentinel:
        return _FlattenSentinel()

    @property
    def is_bounded(self) -> bool:
        if self._bounded is not None:
            return self._bounded
        return self._parent.is_bounded

    @property
    def is_bidirectional(self) -> bool:
        return False

    @property
    def arity(self) -> Optional[int]:
        return None


# --- split: shared pieces ---

class SubrangeView(View[T]):
    """the elements from a copied parent cursor up to the parent's terminator"""

    def __init__(self, start: Cursor[T], end, bounded: bool = True):
        super().__init__()
        self._start = start
        self._end = end
        self._bounded = bounded

    def begin(self) -> Cursor[T]:
        return self._start.copy()

    def end(self):
        return self._end

    @property
    def is_bounded(self) -> bool:
        return self._bounded


def _at_delimiter(cursor: Cursor, delimiter: Tuple, end) -> bool:
    """whether the elements starting at `cursor` spell out `delimiter`"""
    probe = cursor.copy()
    for expected in delimiter:
        if probe == end or probe.read() != expected:
            return False
        probe.advance()
    return True


# --- split on a delimiter ---

class _RunCursor(AdaptedCursor[T]):
    pass


class _DelimiterSentinel(Sentinel):
    def __init__(self, delimiter: Tuple, end):
        self.delimiter = delimiter
        self.end = end

    def reached(self, cursor: _RunCursor) -> bool:
        return cursor.base == self.end or _at_delimiter(cursor.base, self.delimiter, self.end)


class SplitRunView(View[T]):
    """one run between delimiters; reads the parent in place"""

    def __init__(self, start: Cursor[T], delimiter: Tuple, end):
        super().__init__()
        self._start = start
        self._delimiter = delimiter
        self._end = end

    def begin(self) -> _RunCursor[T]:
        return _RunCursor(self._start.copy())

    def end(self) -> _DelimiterSentinel:
        return _DelimiterSentinel(self._delimiter, self._end)


class _SplitCursor(AdaptedCursor[View[T]]):
    """
    `base` is the start of the current run. `trailing` marks the empty run
    that follows a delimiter at the very end of the parent.
    """

    def __init__(self, base: Cursor[T], delimiter: Tuple, end):
        super().__init__(base)
        self.delimiter = delimiter
        self.end = end
        self.trailing = False

    def read(self) -> SplitRunView[T]:
        return SplitRunView(self.base.copy(), self.delimiter, self.end)

    def advance(self) -> None:
        scan = self.base.copy()
        while scan != self.end and not _at_delimiter(scan, self.delimiter, self.end):
            scan.advance()
        if scan == self.end:
            self.base, self.trailing = scan, False
            return
        for _ in self.delimiter:
            scan.advance()
        self.base = scan
        self.trailing = scan == self.end

    def _same_position(self, other: '_SplitCursor[T]') -> bool:
        return self.trailing == other.trailing and self.base == other.base


class _SplitSentinel(AdaptedSentinel):
    def reached(self, cursor: _SplitCursor) -> bool:
        return not cursor.trailing and cursor.base == self.base


class SplitView(AdaptorView[View[T]]):
    """
    a view of views: the maximal runs of the parent separated by exact
    matches of `delimiter`. matched delimiters are consumed, not emitted.
    """

    def __init__(self, parent: View[T], delimiter: Any):
        if isinstance(delimiter, (str, list, tuple)):
            delimiter = tuple(delimiter)
        else:
            delimiter = (delimiter,)
        if not delimiter:
            logger.debug("rejecting split of %r on an empty delimiter", parent)
            raise ConstructionError("cannot split on an empty delimiter")
        super().__init__(parent)
        self.delimiter = delimiter

    def begin(self) -> _SplitCursor[T]:
        return _SplitCursor(self._parent.begin(), self.delimiter, self._parent.end())

    def end(self) -> _SplitSentinel:
        return _SplitSentinel(self._parent.end())

    @property
    def is_bidirectional(self) -> bool:
        return False

    @property
    def arity(self) -> Optional[int]:
        return None


# --- split into fixed size windows ---

class _ChunkCursor(AdaptedCursor[View[T]]):
    def __init__(self, base: Cursor[T], size: int, end, bounded: bool):
        super().__init__(base)
        self.size = size
        self.end = end
        self.bounded = bounded

    def read(self) -> TakeView[T]:
        return TakeView(SubrangeView(self.base.copy(), self.end, self.bounded), self.size)

    def advance(self) -> None:
        for _ in range(self.size):
            if self.base == self.end:
                break
            self.base.advance()


class ChunkView(AdaptorView[View[T]]):
    """non-overlapping windows of up to `size` elements; the last may be shorter"""

    def __init__(self, parent: View[T], size: int):
        if size <= 0:
            logger.debug("rejecting split of %r into windows of %r", parent, size)
            raise ConstructionError(f"window size must be positive, got {size}")
        super().__init__(parent)
        self.size = size

    def begin(self) -> _ChunkCursor[T]:
        parent = self._parent
        return _ChunkCursor(parent.begin(), self.size, parent.end(), parent.is_bounded)

    def end(self) -> AdaptedSentinel:
        return AdaptedSentinel(self._parent.end())

    @property
    def is_bidirectional(self) -> bool:
        return False

    @property
    def arity(self) -> Optional[int]:
        return None
