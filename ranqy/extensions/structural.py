from __future__ import annotations
import typing
import logging
from ..errors import ConstructionError
from ..types import *

if typing.TYPE_CHECKING:
    from ..view import View

logger = logging.getLogger(__name__)


class _StructuralOperations(Generic[T]):
    def flatten(self: 'View[Iterable[U]]') -> 'View[U]':
        """
        concatenate the inner sequences. each inner view is drained before the
        outer cursor moves, and only one is held at a time. strings count as
        sequences of characters, so flattening text fragments joins them.
        """
        from ..adaptors.structural import FlattenView
        return FlattenView(self)

    def join(self: 'View[Iterable[U]]', separator: Optional[U] = None) -> 'View[U]':
        """
        flatten, placing separator between inner sequences when given. a string
        separator is spliced in as characters, like the text it joins, so ''
        adds nothing; any other value goes in as a single element.
        """
        if separator is None:
            return self.flatten()
        if isinstance(separator, str):
            return self.intersperse(separator).flatten()
        return self.intersperse((separator,)).flatten()

    def select_many(self: 'View[T]', selector: Selector[T, Iterable[U]]) -> 'View[U]':
        """project and flatten sequences"""
        return self.select(selector).flatten()

    def split(self: 'View[T]', delimiter: Any = None, *, size: Optional[int] = None) -> 'View[View[T]]':
        """
        partition into runs. with a delimiter (a single element, or a string or
        sequence matched as a whole) the runs are the maximal stretches between
        matches; with size=n they are consecutive windows of up to n elements.

        the inner views are not common: normalize them with .common() before
        handing them to code that needs matching cursor and terminator types.
        """
        from ..adaptors.structural import ChunkView, SplitView
        if (delimiter is None) == (size is None):
            logger.debug("rejecting split with delimiter=%r size=%r", delimiter, size)
            raise ConstructionError("split takes exactly one of a delimiter or size=")
        if size is not None:
            return ChunkView(self, size)
        return SplitView(self, delimiter)

    def chunk(self: 'View[T]', size: int) -> 'View[View[T]]':
        """consecutive windows of up to 'size' elements"""
        return self.split(size=size)
