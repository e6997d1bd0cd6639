from __future__ import annotations

import logging
from operator import itemgetter
from ..errors import ConstructionError
from ..view import View
from .elementwise import SelectView
from ..types import *

logger = logging.getLogger(__name__)


class ElementsView(SelectView[Any]):
    """
    the `index`-th component of each tuple element. the index is checked
    against the parent's arity when the parent knows it; otherwise a short
    tuple fails with IndexError when its element is read.
    """

    def __init__(self, parent: View[Tuple], index: int):
        if index < 0:
            logger.debug("rejecting negative projection index %d over %r", index, parent)
            raise ConstructionError(f"projection index must not be negative, got {index}")
        arity = parent.arity
        if arity is not None and index >= arity:
            logger.debug("rejecting projection index %d over %r", index, parent)
            raise ConstructionError(f"projection index {index} is out of range for {arity}-tuples")
        super().__init__(parent, itemgetter(index))
        self.index = index


def keys(view: View[Tuple[K, V]]) -> ElementsView:
    """first component of each pair"""
    return ElementsView(view, 0)


def values(view: View[Tuple[K, V]]) -> ElementsView:
    """second component of each pair"""
    return ElementsView(view, 1)
