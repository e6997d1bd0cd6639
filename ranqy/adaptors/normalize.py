from __future__ import annotations

from ..cursors import Cursor
from ..view import AdaptorView, View
from ..types import *


class _CommonCursor(Cursor[T]):
    """
    pairs a parent cursor with the parent's terminator so that begin and end
    share one type. an end cursor has no base.
    """

    def __init__(self, base: Optional[Cursor[T]], end):
        self.base = base
        self.end = end

    @property
    def done(self) -> bool:
        return self.base is None or self.base == self.end

    def read(self) -> T:
        return self.base.read()

    def advance(self) -> None:
        self.base.advance()

    def copy(self) -> '_CommonCursor[T]':
        return _CommonCursor(None if self.base is None else self.base.copy(), self.end)

    def _same_position(self, other: '_CommonCursor[T]') -> bool:
        if self.done or other.done:
            return self.done and other.done
        return self.base == other.base

    def __repr__(self) -> str:
        return f"_CommonCursor({'end' if self.base is None else repr(self.base)})"


class CommonView(AdaptorView[T]):
    """a non-common view re-expressed with matching cursor and terminator types"""

    def begin(self) -> _CommonCursor[T]:
        return _CommonCursor(self._parent.begin(), self._parent.end())

    def end(self) -> _CommonCursor[T]:
        return _CommonCursor(None, self._parent.end())

    @property
    def is_common(self) -> bool:
        return True

    @property
    def is_bidirectional(self) -> bool:
        return False


def common(view: View[T]) -> View[T]:
    """
    normalize `view` so its cursor and terminator types match. an already
    common view is returned unchanged, which makes this idempotent.
    """
    if view.is_common:
        return view
    return CommonView(view)
