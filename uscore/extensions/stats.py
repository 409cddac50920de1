from __future__ import annotations
import typing
from ..types import *
from ..errors import EmptyContainer, TypeCoercionFailure

if typing.TYPE_CHECKING:
    from ..container import Container

class _StatsOperations(Generic[T]):
    def _as_floats(self: 'Container[T]') -> np.ndarray:
        """helper to coerce every value to float for arithmetic reductions."""
        floats = []
        for key, value in self._get_entries().items():
            try:
                floats.append(float(value))
            except (TypeError, ValueError) as e:
                raise TypeCoercionFailure(key, value) from e
        return np.asarray(floats, dtype=np.float64)

    def _extremum(self: 'Container[T]', operation: str, selector: Optional[Selector[T, Any]],
                  better: Callable[[Any, Any], bool]) -> T:
        """the value whose score is best. the first value wins ties."""
        values = self.values()
        if not values:
            raise EmptyContainer(operation)
        score_of = selector or (lambda value: value)
        best, best_score = values[0], score_of(values[0])
        for value in values[1:]:
            score = score_of(value)
            if better(score, best_score):
                best, best_score = value, score
        return best

    def sum(self: 'Container[T]') -> float:
        """calc sum, treating every value as a float"""
        return np.sum(self._as_floats()).item()

    def product(self: 'Container[T]') -> float:
        """calc product, treating every value as a float"""
        return np.prod(self._as_floats()).item()

    def max(self: 'Container[T]', selector: Optional[Selector[T, Any]] = None) -> T:
        """the value with the largest selector(value), or the largest value when no selector is given"""
        return self._extremum('max', selector, lambda score, best: score > best)

    def min(self: 'Container[T]', selector: Optional[Selector[T, Any]] = None) -> T:
        """the value with the smallest selector(value), or the smallest value when no selector is given"""
        return self._extremum('min', selector, lambda score, best: score < best)
