from __future__ import annotations
import typing
import logging
from types import MappingProxyType
from itertools import zip_longest
from ..types import *
from ..errors import EmptyContainer

if typing.TYPE_CHECKING:
    from ..container import Container

logger = logging.getLogger(__name__)


def _is_nested(item: Any) -> bool:
    """true for anything flatten() should descend into. strings and bytes are leaves."""
    from ..container import Container
    if isinstance(item, (Container, Mapping)):
        return True
    return isinstance(item, Iterable) and not isinstance(item, (str, bytes, bytearray))


def _rng(seed: Optional[int]) -> np.random.Generator:
    if seed is not None:
        logger.debug(f"seeding random generator with {seed}")
    return np.random.default_rng(seed)


class _UtilityOperations(Generic[T]):
    def each(self: 'Container[T]', action: Callable[..., Any]) -> None:
        """
        performs action(value, key, entries) on every entry for side-effects.
        entries is a read-only view of the whole container. actions that only
        declare (value) or (value, key) get just those arguments.
        """
        entries = self._get_entries()
        view = MappingProxyType(entries)
        act = adapt(action, 3)
        for key, value in list(entries.items()):
            act(value, key, view)

    def flatten(self: 'Container[T]') -> 'Container[Any]':
        """
        deeply flattens nested lists, tuples, mappings and containers into their leaf values.
        mappings and containers contribute their values, order is preserved.
        """
        result = []
        stack = list(reversed(self.values()))
        while stack:
            item = stack.pop()
            if _is_nested(item):
                stack.extend(reversed(values_of(item)))
            else:
                result.append(item)
        return self._spawn(dense(result))

    def transpose(self: 'Container[T]') -> 'Container[List[Any]]':
        """swap rows and columns of a list of rows. short rows are padded with None."""
        rows = [values_of(row) for row in self._get_entries().values()]
        if not rows:
            return self._spawn({})
        return self._spawn(dense(list(column) for column in zip_longest(*rows)))

    def shuffle(self: 'Container[T]', seed: Optional[int] = None) -> 'Container[T]':
        """values in a uniformly random order. pass a seed for a reproducible order."""
        values = self.values()
        order = _rng(seed).permutation(len(values))
        return self._spawn(dense(values[i] for i in order))

    def sample(self: 'Container[T]', seed: Optional[int] = None) -> T:
        """one uniformly random value"""
        values = self.values()
        if not values:
            raise EmptyContainer('sample')
        return values[_rng(seed).integers(len(values))]
