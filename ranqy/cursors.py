from __future__ import annotations

from abc import ABC, abstractmethod
from itertools import tee
from .errors import ExhaustionError
from .types import *


# --- cursor / terminator protocol ---

class Cursor(ABC, Generic[T]):
    """
    a movable position inside a view.

    a cursor is exhausted when it compares equal to its view's terminator,
    which is either another cursor of the same type (a common view) or a
    Sentinel. callers must check that before calling read().
    """

    @abstractmethod
    def read(self) -> T:
        """the element at this position"""

    @abstractmethod
    def advance(self) -> None:
        """move one element forward, in place"""

    @abstractmethod
    def copy(self) -> 'Cursor[T]':
        """an independent cursor at the same position"""

    @abstractmethod
    def _same_position(self, other: 'Cursor[T]') -> bool:
        pass

    def retreat(self) -> None:
        """move one element back, in place. only bidirectional views support this."""
        raise TypeError(f"{type(self).__name__} is forward-only")

    def __eq__(self, other):
        if isinstance(other, Sentinel):
            return other.reached(self)
        if type(other) is type(self):
            return self._same_position(other)
        return NotImplemented

    __hash__ = None


class Sentinel(ABC):
    """a terminator that is not itself a cursor"""

    @abstractmethod
    def reached(self, cursor: Cursor) -> bool:
        pass

    def __eq__(self, other):
        if isinstance(other, Cursor):
            return self.reached(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Unreachable(Sentinel):
    """terminator of an unbounded view: no cursor ever reaches it"""

    def reached(self, cursor: Cursor) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNREACHABLE"


UNREACHABLE = Unreachable()


# --- cursors over host collections ---

class IndexCursor(Cursor[T]):
    """position in a sequence, read live through __getitem__"""

    def __init__(self, sequence: Sequence[T], index: int):
        self._sequence = sequence  # borrowed, never copied
        self.index = index

    def read(self) -> T:
        if not 0 <= self.index < len(self._sequence):
            raise ExhaustionError(f"index {self.index} is outside the sequence")
        return self._sequence[self.index]

    def advance(self) -> None:
        self.index += 1

    def retreat(self) -> None:
        self.index -= 1

    def copy(self) -> 'IndexCursor[T]':
        return IndexCursor(self._sequence, self.index)

    def _same_position(self, other: 'IndexCursor[T]') -> bool:
        return self._sequence is other._sequence and self.index == other.index

    def __repr__(self) -> str:
        return f"IndexCursor(index={self.index})"


_UNFETCHED = object()
_DONE = object()


class IteratorCursor(Cursor[T]):
    """
    position in a python iterator, with a one element lookahead that is only
    filled on demand. copies share the underlying iterator through tee.
    """

    def __init__(self, iterator: Iterator[T]):
        self._iterator = iterator
        self._current = _UNFETCHED
        self._position = 0

    def _peek(self):
        if self._current is _UNFETCHED:
            self._current = next(self._iterator, _DONE)
        return self._current

    @property
    def exhausted(self) -> bool:
        return self._peek() is _DONE

    def read(self) -> T:
        value = self._peek()
        if value is _DONE:
            raise ExhaustionError("iterator is exhausted")
        return value

    def advance(self) -> None:
        if self._peek() is _DONE:
            raise ExhaustionError("cannot advance past the end of an iterator")
        self._current = _UNFETCHED
        self._position += 1

    def copy(self) -> 'IteratorCursor[T]':
        self._iterator, other = tee(self._iterator)
        clone = IteratorCursor(other)
        clone._current = self._current
        clone._position = self._position
        return clone

    def _same_position(self, other: 'IteratorCursor[T]') -> bool:
        return self._position == other._position

    def __repr__(self) -> str:
        return f"IteratorCursor(position={self._position})"


class IteratorEnd(Sentinel):
    """terminator of iterator backed views"""

    def reached(self, cursor: Cursor) -> bool:
        return cursor.exhausted

    def __repr__(self) -> str:
        return "ITERATOR_END"


ITERATOR_END = IteratorEnd()


# --- building blocks for adaptors ---

class AdaptedCursor(Cursor[T]):
    """a cursor layered over a parent cursor; positions compare by the parent"""

    def __init__(self, base: Cursor):
        self.base = base

    def read(self) -> T:
        return self.base.read()

    def advance(self) -> None:
        self.base.advance()

    def copy(self) -> 'AdaptedCursor[T]':
        clone = object.__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone.base = self.base.copy()
        return clone

    def _same_position(self, other: 'AdaptedCursor[T]') -> bool:
        return self.base == other.base

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.base!r})"


class AdaptedSentinel(Sentinel):
    """terminator of an adaptor whose parent terminates at `base`"""

    def __init__(self, base: Union[Cursor, Sentinel]):
        self.base = base

    def reached(self, cursor: Cursor) -> bool:
        return cursor.base == self.base

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.base!r})"


def adapt_end(end: Union[Cursor, Sentinel], wrap: Callable[[Cursor], Cursor]) -> Union[Cursor, Sentinel]:
    """
    the terminator of an adaptor over a parent ending at `end`. a common
    parent stays common: its end cursor is wrapped like any other cursor.
    """
    if isinstance(end, Cursor):
        return wrap(end)
    return AdaptedSentinel(end)
