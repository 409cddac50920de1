from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from .types import *
from .errors import InvalidInput, KeyNotFound

# --- operation mixins ---
from .extensions.core import _CoreOperations
from .extensions.set import _SetOperations
from .extensions.grouping import _GroupingOperations
from .extensions.utility import _UtilityOperations
from .extensions.stats import _StatsOperations
from .extensions.terminal import _TerminalOperations, TerminalAccessor

# --- abstract base class ---

class IContainer(ABC, Generic[T]):
    @abstractmethod
    def _get_entries(self) -> Entries:
        """get the underlying key -> value mapping"""
        pass

# --- base container implementation ---

class _BaseContainer(IContainer[T]):
    def __init__(self, source: Union[List[T], Tuple[T, ...], Mapping, '_BaseContainer[T]', None] = None):
        """copy the entries of a list, tuple, mapping or container"""
        kind = SourceKind.classify(source)
        if kind is None:
            raise InvalidInput(source)

        if kind is SourceKind.EMPTY:
            self._entries: Entries = {}
        elif kind is SourceKind.SEQUENCE:
            self._entries = dense(source)
        elif kind is SourceKind.MAPPING:
            self._entries = dict(source.items())
        else:
            # copied by value, later mutations of either side stay independent
            self._entries = dict(source._get_entries())

    def _get_entries(self) -> Entries:
        return self._entries

    def _spawn(self, entries: Entries) -> 'Container[Any]':
        """wrap derived entries in a fresh container of the same type"""
        return type(self)(entries)

    # --- indexed access ---

    def __getitem__(self, key: Key) -> T:
        try:
            return self._entries[key]
        except KeyError:
            raise KeyNotFound(key) from None

    def __setitem__(self, key: Key, value: T) -> None:
        # an existing key keeps its position, a new one is appended
        self._entries[key] = value

    def __delitem__(self, key: Key) -> None:
        """remove the key if present, then renumber everything as a dense list"""
        self._entries.pop(key, None)
        self._entries = dense(self._entries.values())

    def key_exists(self, key: Key) -> bool:
        return key in self._entries

    # --- iteration & introspection ---

    def __iter__(self) -> Iterator[Tuple[Key, T]]:
        return iter(self._entries.items())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, value: Any) -> bool:
        return value in self._entries.values()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, _BaseContainer):
            return NotImplemented
        return self._entries == other._get_entries()

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"

    def keys(self) -> List[Key]:
        return list(self._entries.keys())

    def values(self) -> List[T]:
        return list(self._entries.values())

    def entries(self) -> Mapping:
        """read-only live view of the entries"""
        return MappingProxyType(self._entries)

    # --- in-place mutators ---

    def push(self, value: T) -> 'Container[T]':
        """append value in place, returning the same container for chaining"""
        int_keys = [k for k in self._entries if isinstance(k, int) and not isinstance(k, bool)]
        self._entries[max(int_keys, default=-1) + 1] = value
        return self

    def unshift(self, value: T) -> 'Container[T]':
        """prepend value in place, renumbering integer keys"""
        self._entries = pack([(0, value), *self._entries.items()])
        return self

    def pop(self) -> Optional[T]:
        """remove and return the last value, or None when empty"""
        if not self._entries:
            return None
        _, value = self._entries.popitem()
        return value

    def shift(self) -> Optional[T]:
        """remove and return the first value, or None when empty"""
        if not self._entries:
            return None
        first_key = next(iter(self._entries))
        value = self._entries.pop(first_key)
        self._entries = pack(self._entries.items())
        return value

# --- main container class ---

class Container(
    _BaseContainer[T],
    _CoreOperations[T],
    _SetOperations[T],
    _GroupingOperations[T],
    _UtilityOperations[T],
    _StatsOperations[T],
    _TerminalOperations[T]
):
    """an ordered, key-addressable collection with chainable operations."""
    def __init__(self, source: Union[List[T], Tuple[T, ...], Mapping, 'Container[T]', None] = None):
        super().__init__(source)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)
