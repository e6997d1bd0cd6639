"""
left-to-right composition with the | operator.

    from ranqy import R, pipe
    R(data) | pipe.map(f) | pipe.filter(p) | pipe.take(3)

each function here returns a Pipe: an adaptor waiting for its parent. the
left operand may be a view or anything `as_view` accepts. pipes combine with
each other into new pipes, and applying one never changes the view it is
applied to, so a base view can feed any number of pipelines.

`map` and `filter` deliberately share the builtins' names; use this module
through its name (pipe.map) rather than star-importing it.
"""

from .factories import as_view
from .types import *


class Pipe:
    """an adaptor waiting for the view it will wrap"""

    def __init__(self, apply: Callable[[Any], Any], name: str):
        self._apply = apply
        self.name = name

    def __call__(self, view):
        return self._apply(as_view(view))

    def __ror__(self, left):
        return self(left)

    def __or__(self, other: 'Pipe') -> 'Pipe':
        if not isinstance(other, Pipe):
            return NotImplemented
        return Pipe(lambda view: other(self(view)), f"{self.name} | {other.name}")

    def __repr__(self) -> str:
        return f"Pipe({self.name})"


def map(selector: Selector[T, U]) -> Pipe:
    return Pipe(lambda view: view.select(selector), 'map')


def filter(predicate: Predicate[T]) -> Pipe:
    return Pipe(lambda view: view.where(predicate), 'filter')


def reverse() -> Pipe:
    return Pipe(lambda view: view.reverse(), 'reverse')


def take(count: int) -> Pipe:
    return Pipe(lambda view: view.take(count), f'take({count})')


def take_while(predicate: Predicate[T]) -> Pipe:
    return Pipe(lambda view: view.take_while(predicate), 'take_while')


def drop_while(predicate: Predicate[T]) -> Pipe:
    return Pipe(lambda view: view.drop_while(predicate), 'drop_while')


def skip(count: int) -> Pipe:
    return Pipe(lambda view: view.skip(count), f'skip({count})')


def enumerate(start: int = 0) -> Pipe:
    return Pipe(lambda view: view.enumerate(start), 'enumerate')


def intersperse(separator: Any) -> Pipe:
    return Pipe(lambda view: view.intersperse(separator), 'intersperse')


def flatten() -> Pipe:
    return Pipe(lambda view: view.flatten(), 'flatten')


def join(separator: Any = None) -> Pipe:
    return Pipe(lambda view: view.join(separator), 'join')


def split(delimiter: Any = None, *, size: Optional[int] = None) -> Pipe:
    return Pipe(lambda view: view.split(delimiter, size=size), 'split')


def chunk(size: int) -> Pipe:
    return Pipe(lambda view: view.chunk(size), f'chunk({size})')


def elements(index: int) -> Pipe:
    return Pipe(lambda view: view.elements(index), f'elements({index})')


def keys() -> Pipe:
    return Pipe(lambda view: view.keys(), 'keys')


def values() -> Pipe:
    return Pipe(lambda view: view.values(), 'values')


def common() -> Pipe:
    return Pipe(lambda view: view.common(), 'common')
