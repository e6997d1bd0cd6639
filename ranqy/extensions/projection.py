from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..view import View


class _ProjectionOperations(Generic[T]):
    def elements(self: 'View[Tuple]', index: int) -> 'View[Any]':
        """the index-th component of every tuple element"""
        from ..adaptors.projection import ElementsView
        return ElementsView(self, index)

    def keys(self: 'View[Tuple[K, V]]') -> 'View[K]':
        """keys of a view of (key, value) pairs"""
        from ..adaptors.projection import keys
        return keys(self)

    def values(self: 'View[Tuple[K, V]]') -> 'View[V]':
        """values of a view of (key, value) pairs"""
        from ..adaptors.projection import values
        return values(self)
