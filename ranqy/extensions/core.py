from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..view import View


class _CoreOperations(Generic[T]):
    def select(self: 'View[T]', selector: Selector[T, U]) -> 'View[U]':
        """project each element to a new form as it is read"""
        from ..adaptors.elementwise import SelectView
        return SelectView(self, selector)

    def where(self: 'View[T]', predicate: Predicate[T]) -> 'View[T]':
        """keep elements satisfying the predicate"""
        from ..adaptors.elementwise import WhereView
        return WhereView(self, predicate)

    def reverse(self: 'View[T]') -> 'View[T]':
        """
        the elements back to front. the view must be bounded, bidirectional
        and common; anything else is rejected here, not on first pull.
        """
        from ..adaptors.elementwise import ReverseView
        return ReverseView(self)

    def take(self: 'View[T]', count: int) -> 'View[T]':
        """at most the first 'count' elements"""
        from ..adaptors.elementwise import TakeView
        return TakeView(self, count)

    def skip(self: 'View[T]', count: int) -> 'View[T]':
        """skip the first 'count' elements"""
        from ..adaptors.elementwise import SkipView
        return SkipView(self, count)

    def take_while(self: 'View[T]', predicate: Predicate[T]) -> 'View[T]':
        """take elements until the predicate first fails, then stop for good"""
        from ..adaptors.elementwise import TakeWhileView
        return TakeWhileView(self, predicate)

    def drop_while(self: 'View[T]', predicate: Predicate[T]) -> 'View[T]':
        """skip leading elements while the predicate holds, then yield everything"""
        from ..adaptors.elementwise import DropWhileView
        return DropWhileView(self, predicate)

    # linq spelling
    skip_while = drop_while

    def enumerate(self: 'View[T]', start: int = 0) -> 'View[Tuple[int, T]]':
        """pair each element with its position"""
        from ..adaptors.elementwise import EnumerateView
        return EnumerateView(self, start)

    def select_with_index(self: 'View[T]', selector: Callable[[T, int], U]) -> 'View[U]':
        """project each element to a new form, using the element's index"""
        return self.enumerate().select(lambda pair: selector(pair[1], pair[0]))

    def intersperse(self: 'View[T]', separator: T) -> 'View[T]':
        """place separator between neighbouring elements"""
        from ..adaptors.elementwise import IntersperseView
        return IntersperseView(self, separator)

    def concat(self: 'View[T]', *others: Iterable[T]) -> 'View[T]':
        """this view followed by each of the others, without copying any of them"""
        from ..adaptors.structural import FlattenView
        from ..factories import as_view, from_sequence
        parts = [self] + [as_view(other) for other in others]
        return FlattenView(from_sequence(parts), bounded=all(p.is_bounded for p in parts))

    def append(self: 'View[T]', element: T) -> 'View[T]':
        """appends a value to the end of the sequence"""
        return self.concat((element,))

    def prepend(self: 'View[T]', element: T) -> 'View[T]':
        """adds a value to the beginning of the sequence"""
        from ..factories import from_sequence
        return from_sequence((element,)).concat(self)

    def common(self: 'View[T]') -> 'View[T]':
        """
        this view with matching cursor and terminator types. returns self when
        that already holds, so applying it twice changes nothing.
        """
        from ..adaptors.normalize import common
        return common(self)
