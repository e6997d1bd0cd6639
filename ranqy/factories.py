import typing
from collections.abc import Mapping as _Mapping
from .types import *

if typing.TYPE_CHECKING:
    from .view import View

def from_sequence(data: Sequence[T], bidirectional: Optional[bool] = None) -> 'View[T]':
    """view a sequence in place; later mutation of it stays visible"""
    from .sources import SequenceView
    return SequenceView(data, bidirectional)

def from_mapping(data: Mapping[K, V]) -> 'View[Tuple[K, V]]':
    """view the (key, value) pairs of a mapping, in its own iteration order"""
    from .sources import MappingView
    return MappingView(data)

def from_iterable(data: Iterable[T]) -> 'View[T]':
    """create a view from a view, mapping, sequence or any other iterable"""
    from .view import View
    from .sources import IterableView
    if isinstance(data, View):
        return data
    if isinstance(data, _Mapping):
        return from_mapping(data)
    if hasattr(data, '__getitem__') and hasattr(data, '__len__'):
        return from_sequence(data)
    if hasattr(data, '__iter__'):
        return IterableView(data)
    raise TypeError(f"cannot view an object of type {type(data).__name__}")

def iota(start: int, stop: Optional[int] = None) -> 'View[int]':
    """the integers [start, stop); unbounded when stop is omitted"""
    from .sources import IotaView
    return IotaView(start, stop)

def from_range(start: int, count: int) -> 'View[int]':
    """create view from range"""
    return iota(start, start + count)

def repeat(item: T, count: Optional[int] = None) -> 'View[T]':
    """item over and over; unbounded when count is omitted"""
    return iota(0, count).select(lambda _: item)

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'View[T]':
    """generate values by calling a function; unbounded when count is omitted"""
    from .sources import GenerateView
    return GenerateView(generator_func, count)

def empty() -> 'View[Any]':
    """create empty view"""
    return from_sequence(())

def keys(data: Mapping[K, V]) -> 'View[K]':
    """keys of a mapping, in its own iteration order"""
    return from_mapping(data).keys()

def values(data: Mapping[K, V]) -> 'View[V]':
    """values of a mapping, in its own iteration order"""
    return from_mapping(data).values()

# --- aliases ---
as_view = from_iterable
ranqy = from_iterable
R = from_iterable
