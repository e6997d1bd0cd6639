from __future__ import annotations

from itertools import count as _count
from .cursors import (
    Cursor, IndexCursor, IteratorCursor, ITERATOR_END, UNREACHABLE
)
from .errors import ExhaustionError
from .view import View
from .types import *


class SequenceView(View[T]):
    """identity view over a sequence. the sequence is borrowed, never copied."""

    def __init__(self, sequence: Sequence[T], bidirectional: Optional[bool] = None):
        super().__init__()
        self._sequence = sequence
        self._bidirectional = True if bidirectional is None else bidirectional

    def begin(self) -> IndexCursor[T]:
        return IndexCursor(self._sequence, 0)

    def end(self) -> IndexCursor[T]:
        # length is taken when the terminator is requested, so appends made
        # before iteration starts are visible
        return IndexCursor(self._sequence, len(self._sequence))

    @property
    def is_bidirectional(self) -> bool:
        return self._bidirectional

    @property
    def arity(self) -> Optional[int]:
        # peeking the first element is a read, not a copy
        if len(self._sequence) and isinstance(self._sequence[0], tuple):
            return len(self._sequence[0])
        return None


class MappingView(View[Tuple[K, V]]):
    """(key, value) pairs of a mapping, in the mapping's own iteration order"""

    def __init__(self, mapping: Mapping[K, V]):
        super().__init__()
        self._mapping = mapping

    def begin(self) -> IteratorCursor[Tuple[K, V]]:
        return IteratorCursor(iter(self._mapping.items()))

    def end(self):
        return ITERATOR_END

    @property
    def arity(self) -> Optional[int]:
        return 2


class IterableView(View[T]):
    """
    forward-only view over an arbitrary iterable. each begin() calls iter()
    again, so one-shot iterators (generators) can only be traversed once.
    """

    def __init__(self, iterable: Iterable[T]):
        super().__init__()
        self._iterable = iterable

    def begin(self) -> IteratorCursor[T]:
        return IteratorCursor(iter(self._iterable))

    def end(self):
        return ITERATOR_END


class _IotaCursor(Cursor[int]):
    def __init__(self, value: int, stop: Optional[int] = None):
        self.value = value
        self.stop = stop

    def read(self) -> int:
        if self.stop is not None and self.value >= self.stop:
            raise ExhaustionError(f"read at the end of an iota ending at {self.stop}")
        return self.value

    def advance(self) -> None:
        self.value += 1

    def copy(self) -> '_IotaCursor':
        return _IotaCursor(self.value, self.stop)

    def _same_position(self, other: '_IotaCursor') -> bool:
        return self.value == other.value

    def __repr__(self) -> str:
        return f"_IotaCursor({self.value})"


class IotaView(View[int]):
    """the integers [start, stop), or start, start + 1, ... without a stop"""

    def __init__(self, start: int, stop: Optional[int] = None):
        super().__init__()
        self.start = start
        # an inverted range is empty rather than an error
        self.stop = None if stop is None else max(start, stop)

    def begin(self) -> _IotaCursor:
        return _IotaCursor(self.start, self.stop)

    def end(self):
        if self.stop is None:
            return UNREACHABLE
        return _IotaCursor(self.stop, self.stop)

    @property
    def is_bounded(self) -> bool:
        return self.stop is not None


class GenerateView(View[T]):
    """values produced by calling a generative rule, unbounded unless counted"""

    def __init__(self, func: Callable[[], T], count: Optional[int] = None):
        super().__init__()
        self.func = func
        self.count = count

    def _produce(self) -> Iterator[T]:
        calls = _count() if self.count is None else range(self.count)
        return (self.func() for _ in calls)

    def begin(self) -> IteratorCursor[T]:
        return IteratorCursor(self._produce())

    def end(self):
        return UNREACHABLE if self.count is None else ITERATOR_END

    @property
    def is_bounded(self) -> bool:
        return self.count is not None
