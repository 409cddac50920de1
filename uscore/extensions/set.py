from __future__ import annotations
import typing
from ..types import *
from ..errors import LengthMismatch

if typing.TYPE_CHECKING:
    from ..container import Container

class _SetOperations(Generic[T]):
    """
    de-duplication, membership and key/value recombination.
    equality is always structural (==), so lists, dicts and containers
    compare by content and unhashable values are supported throughout.
    """

    def uniq(self: 'Container[T]') -> 'Container[T]':
        """drop repeated values. the first occurrence wins and keeps its key."""
        kept = {}
        # hashable values get o(1) lookups, the rest fall back to a linear scan
        seen_hashable, seen_other = set(), []
        for key, value in self._get_entries().items():
            try:
                if value in seen_hashable:
                    continue
                seen_hashable.add(value)
            except TypeError:
                if value in seen_other:
                    continue
                seen_other.append(value)
            kept[key] = value
        return self._spawn(kept)

    def distinct(self: 'Container[T]') -> 'Container[T]':
        """alias of uniq()"""
        return self.uniq()

    def without(self: 'Container[T]', excluded: Union[Iterable[Any], Mapping, 'Container[Any]']) -> 'Container[T]':
        """remove every value equal to one of 'excluded', renumbering the rest"""
        excluded_values = values_of(excluded)
        return self._spawn(dense(
            value for value in self._get_entries().values() if value not in excluded_values
        ))

    def combine(self: 'Container[T]', values: Union[Iterable[V], Mapping, 'Container[V]']) -> 'Container[V]':
        """use this container's values as keys for 'values', matched by position"""
        keys = self.values()
        paired_values = values_of(values)
        if len(keys) != len(paired_values):
            raise LengthMismatch(len(keys), len(paired_values))
        return self._spawn(dict(zip(keys, paired_values)))

    def dict(self: 'Container[T]') -> 'Container[Any]':
        """fold a sequence of [key, value] pairs into one mapping, later keys overwriting earlier"""
        folded = {}
        for pair in self._get_entries().values():
            folded[pair[0]] = pair[1]
        return self._spawn(folded)

    def has(self: 'Container[T]', value: Any) -> bool:
        """determines whether any stored value equals 'value'"""
        return value in self._get_entries().values()

    def index_of(self: 'Container[T]', value: Any) -> Optional[Key]:
        """key of the first value equal to 'value', or None"""
        for key, candidate in self._get_entries().items():
            if candidate == value:
                return key
        return None
