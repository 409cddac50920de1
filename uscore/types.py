import inspect
from enum import Enum
from collections.abc import Mapping
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Hashable
)

import numpy as np

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Key = Hashable
Entries = Dict[Key, Any]

Predicate = Callable[..., Any]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]
Resolver = Callable[[Any, str], Any]


class Match(Enum):
    """tri-state outcome of a callback: literally true, literally false, or anything else"""
    TRUE = 'true'
    FALSE = 'false'
    OTHER = 'other'

    @classmethod
    def of(cls, result: Any) -> 'Match':
        # numpy comparisons return np.bool_, which is not the bool singleton
        if isinstance(result, (bool, np.bool_)):
            return cls.TRUE if result else cls.FALSE
        return cls.OTHER


class SourceKind(Enum):
    """the closed set of shapes a container can be built from"""
    EMPTY = 'empty'
    SEQUENCE = 'sequence'
    MAPPING = 'mapping'
    CONTAINER = 'container'

    @classmethod
    def classify(cls, source: Any) -> Optional['SourceKind']:
        """returns the shape of source, or None when it is not an accepted shape"""
        from .container import Container
        if source is None:
            return cls.EMPTY
        if isinstance(source, Container):
            return cls.CONTAINER
        if isinstance(source, (list, tuple)):
            return cls.SEQUENCE
        if isinstance(source, Mapping):
            return cls.MAPPING
        return None


def _positional_arity(func: Callable) -> Optional[int]:
    """number of positional parameters func accepts; None when it takes *args"""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # builtins without introspectable signatures get the value only
        return 1

    count = 0
    for param in signature.parameters.values():
        if param.kind is param.VAR_POSITIONAL:
            return None
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def adapt(func: Callable, max_args: int) -> Callable:
    """
    wraps a callback so it can be invoked with up to max_args positional arguments.
    callbacks declaring fewer parameters receive only the leading ones, so both
    `lambda v: ...` and `lambda v, k: ...` work wherever (value, key) is offered.
    """
    arity = _positional_arity(func)
    take = max_args if arity is None else min(arity, max_args)
    return lambda *args: func(*args[:take])


def pack(pairs: Iterable[Tuple[Key, Any]]) -> Entries:
    """renumber integer keys densely from 0, keeping string keys and order"""
    entries, next_index = {}, 0
    for key, value in pairs:
        if isinstance(key, int) and not isinstance(key, bool):
            entries[next_index] = value
            next_index += 1
        else:
            entries[key] = value
    return entries


def dense(values: Iterable[Any]) -> Entries:
    """key the given values 0..n-1, discarding whatever keys they had"""
    return dict(enumerate(values))


def values_of(source: Any) -> List[Any]:
    """the values of a container, mapping or plain iterable as a list"""
    from .container import Container
    if isinstance(source, Container):
        return source.values()
    if isinstance(source, Mapping):
        return list(source.values())
    return list(source)
