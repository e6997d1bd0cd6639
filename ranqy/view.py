from __future__ import annotations

from abc import ABC, abstractmethod
from .cursors import Cursor, Sentinel
from .types import *

# --- fluent operations ---
from .extensions.core import _CoreOperations
from .extensions.structural import _StructuralOperations
from .extensions.projection import _ProjectionOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IView(ABC, Generic[T]):
    @abstractmethod
    def begin(self) -> Cursor[T]:
        """a fresh cursor at the first element"""
        pass

    @abstractmethod
    def end(self) -> Union[Cursor[T], Sentinel]:
        """the terminator a cursor from begin() is compared against"""
        pass

# --- main view class ---

class View(
    IView[T],
    _CoreOperations[T],
    _StructuralOperations[T],
    _ProjectionOperations[T]
):
    """
    a lazy, non-owning sequence. every adaptor returns a new view wrapping
    its parent, so a view can be the shared ancestor of many pipelines.
    """

    def __init__(self):
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    # --- capability flags ---

    @property
    def is_bounded(self) -> bool:
        """whether iteration is guaranteed to terminate"""
        return True

    @property
    def is_bidirectional(self) -> bool:
        """whether cursors support retreat()"""
        return False

    @property
    def is_common(self) -> bool:
        """whether the terminator is a cursor of the same type as begin()"""
        return isinstance(self.end(), Cursor)

    @property
    def arity(self) -> Optional[int]:
        """width of the tuple elements, when known without pulling"""
        return None

    def __iter__(self) -> Iterator[T]:
        cursor, end = self.begin(), self.end()
        while cursor != end:
            yield cursor.read()
            cursor.advance()

    def __repr__(self) -> str:
        flags = 'bounded' if self.is_bounded else 'unbounded'
        return f"{type(self).__name__}({flags}, common={self.is_common})"


class AdaptorView(View[T]):
    """a view over exactly one parent, inheriting its capabilities by default"""

    def __init__(self, parent: View):
        super().__init__()
        self._parent = parent

    @property
    def parent(self) -> View:
        return self._parent

    @property
    def is_bounded(self) -> bool:
        return self._parent.is_bounded

    @property
    def is_bidirectional(self) -> bool:
        return self._parent.is_bidirectional

    @property
    def arity(self) -> Optional[int]:
        return self._parent.arity
