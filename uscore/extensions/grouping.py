from __future__ import annotations
import typing
from collections import defaultdict
from itertools import batched
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import Container

class _GroupingOperations(Generic[T]):
    def group_by(self: 'Container[T]', key_selector: KeySelector[T, K]) -> 'Container[List[T]]':
        """group values by a key. groups appear in the order their key was first seen."""
        groups = defaultdict(list)
        for value in self._get_entries().values():
            groups[key_selector(value)].append(value)
        return self._spawn(dict(groups))

    def partition(self: 'Container[T]', predicate: Predicate) -> 'Container[List[T]]':
        """split into [values where predicate is truthy, the rest]. both groups are always present."""
        true_items, false_items = [], []
        for value in self._get_entries().values():
            (true_items if predicate(value) else false_items).append(value)
        return self._spawn({0: true_items, 1: false_items})

    def chunk(self: 'Container[T]', size: int) -> 'Container[List[T]]':
        """split into consecutive lists of 'size' values. the last one may be shorter."""
        if size <= 0:
            raise ValueError("chunk size must be positive")
        # convert the tuples from batched() to lists so chunks stay mutable like other groups
        return self._spawn(dense(list(batch) for batch in batched(self._get_entries().values(), size)))
