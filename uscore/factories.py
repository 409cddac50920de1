import typing
from .types import *

if typing.TYPE_CHECKING:
    from .container import Container

def create(source: Union[List[T], Tuple[T, ...], Mapping, 'Container[T]', None] = None) -> 'Container[T]':
    """create container from a list, tuple, mapping or another container"""
    from .container import Container
    return Container(source)

def split(text: str, separator: Optional[str] = None) -> 'Container[str]':
    """
    create container from the pieces of text. without a separator (or with an
    empty one) every character becomes a piece; otherwise text is split on every
    occurrence of separator, keeping empty pieces.
    """
    from .container import Container
    if not separator:
        return Container(list(text))
    return Container(text.split(separator))

def empty() -> 'Container[Any]':
    """create empty container"""
    from .container import Container
    return Container()

def from_range(start: int, count: int) -> 'Container[int]':
    """create container from range"""
    from .container import Container
    return Container(list(range(start, start + count)))

def repeat(item: T, count: int) -> 'Container[T]':
    """create container with repeated item"""
    from .container import Container
    return Container([item] * count)

# --- aliases ---
us = create
