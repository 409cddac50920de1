from __future__ import annotations
import typing
import logging
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import Container

logger = logging.getLogger(__name__)


def _slice_bounds(size: int, offset: int, length: Optional[int]) -> Tuple[int, int]:
    """start/stop indices for `length` items from `offset`, negatives counting from the end"""
    start = offset if offset >= 0 else max(size + offset, 0)
    start = min(start, size)
    if length is None:
        stop = size
    elif length < 0:
        stop = max(size + length, start)
    else:
        stop = min(start + length, size)
    return start, stop


class _CoreOperations(Generic[T]):
    def map(self: 'Container[T]', selector: Selector[T, U]) -> 'Container[U]':
        """
        project each value with selector. results that are None are dropped and the
        survivors renumbered from 0, so map doubles as a filter.
        """
        results = (selector(value) for value in self._get_entries().values())
        return self._spawn(dense(result for result in results if result is not None))

    def flat_map(self: 'Container[T]', selector: Selector[T, Iterable[U]]) -> 'Container[U]':
        """project each value to an iterable and concatenate the results"""
        # a nested comprehension is the flattest way to concatenate the projections
        return self._spawn(dense(
            item for value in self._get_entries().values() for item in values_of(selector(value))
        ))

    def select(self: 'Container[T]', predicate: Predicate) -> 'Container[T]':
        """keep values for which predicate returns exactly True"""
        return self._spawn(dense(
            value for value in self._get_entries().values() if Match.of(predicate(value)) is Match.TRUE
        ))

    def reject(self: 'Container[T]', predicate: Predicate) -> 'Container[T]':
        """keep values for which predicate returns exactly False"""
        return self._spawn(dense(
            value for value in self._get_entries().values() if Match.of(predicate(value)) is Match.FALSE
        ))

    def pluck(self: 'Container[T]', path: str, resolver: Optional[Resolver] = None) -> 'Container[Any]':
        """
        read a property path from every value. values the path cannot be followed on
        are treated as None and, like every other None, dropped as in map().
        """
        from ..access import resolve
        resolve_path = resolver or resolve

        def pluck_one(value: T) -> Any:
            try:
                return resolve_path(value, path)
            except Exception as e:
                # any accessor failure means "no value" for this element
                logger.debug(f"pluck('{path}') skipped {type(value).__name__}: {e}")
                return None

        return self.map(pluck_one)

    def concat(self: 'Container[T]', other: Union[Iterable[T], Mapping, 'Container[T]']) -> 'Container[T]':
        """append other's values; string keys survive, integer keys are renumbered"""
        from ..container import Container
        if isinstance(other, Container):
            other_pairs = list(other)
        elif isinstance(other, Mapping):
            other_pairs = list(other.items())
        else:
            other_pairs = list(enumerate(other))
        return self._spawn(pack([*self._get_entries().items(), *other_pairs]))

    def reverse(self: 'Container[T]') -> 'Container[T]':
        """inverts the order of the entries"""
        return self._spawn(pack(reversed(self._get_entries().items())))

    def sort(self: 'Container[T]') -> 'Container[T]':
        """values in ascending order. incomparable values raise TypeError."""
        return self._spawn(dense(sorted(self._get_entries().values())))

    def sort_by(self: 'Container[T]', key_selector: KeySelector[T, K]) -> 'Container[T]':
        """values ordered by key_selector ascending. equal keys keep their original order."""
        # sorted() is stable and evaluates key_selector once per value
        return self._spawn(dense(sorted(self._get_entries().values(), key=key_selector)))

    def first(self: 'Container[T]', count: int) -> 'Container[T]':
        """take the first 'count' entries"""
        return self._spawn(pack(list(self._get_entries().items())[:count]))

    def skip(self: 'Container[T]', count: int) -> 'Container[T]':
        """skip the first 'count' entries"""
        return self._spawn(pack(list(self._get_entries().items())[count:]))

    def last(self: 'Container[T]', count: int) -> 'Container[T]':
        """the final 'count' values"""
        if count <= 0:
            return self._spawn({})
        return self._spawn(dense(self.values()[-count:]))

    def slice(self: 'Container[T]', offset: int, length: Optional[int] = None) -> 'Container[T]':
        """
        'length' values starting at 'offset'. a negative offset counts from the end,
        a negative length stops that many values before the end, None runs to the end.
        """
        values = self.values()
        start, stop = _slice_bounds(len(values), offset, length)
        return self._spawn(dense(values[start:stop]))

    def snip(self: 'Container[T]', index: int) -> 'Container[T]':
        """
        cut the sequence at 'index' and return the head. snip(-n) drops the last n values.
        the receiver is left untouched.
        """
        return self._spawn(dense(self.values()[:index]))

    def rotate(self: 'Container[T]', pivot: int) -> 'Container[T]':
        """
        rotate left about 'pivot': everything from the pivot onwards, then everything before it.
        a negative pivot rotates right, i.e. is normalized to len + pivot.
        """
        size = len(self._get_entries())
        if size == 0:
            return self._spawn({})
        pivot %= size
        return self.skip(pivot).concat(self.first(pivot))
