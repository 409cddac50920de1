from __future__ import annotations
import typing
import pandas as pd
from functools import reduce
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import Container

class TerminalAccessor(Generic[T]):
    def __init__(self, container_instance: 'Container[T]'):
        self._container = container_instance

    def list(self) -> List[T]:
        """the values, in order"""
        return list(self._container._get_entries().values())

    def map(self) -> Dict[Key, T]:
        """copy of the key -> value entries"""
        return dict(self._container._get_entries())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def pandas(self) -> pd.Series:
        """convert to pandas series indexed by key"""
        entries = self._container._get_entries()
        return pd.Series(list(entries.values()), index=list(entries.keys()))

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe, one row per value"""
        return pd.DataFrame(self.list())


class _TerminalOperations(Generic[T]):
    def all(self: 'Container[T]', predicate: Predicate) -> bool:
        """false as soon as predicate(value, key) returns exactly False"""
        check = adapt(predicate, 2)
        for key, value in self._get_entries().items():
            if Match.of(check(value, key)) is Match.FALSE:
                return False
        return True

    def any(self: 'Container[T]', predicate: Predicate) -> bool:
        """true as soon as predicate(value, key) returns exactly True"""
        check = adapt(predicate, 2)
        for key, value in self._get_entries().items():
            if Match.of(check(value, key)) is Match.TRUE:
                return True
        return False

    def none(self: 'Container[T]', predicate: Predicate) -> bool:
        """true when predicate(value, key) never returns exactly True"""
        return not self.any(predicate)

    def find(self: 'Container[T]', predicate: Predicate) -> Optional[T]:
        """
        first value for which predicate(value, key) is anything but exactly False.
        0, '' and None results still count as a match. returns None when nothing matches.
        """
        check = adapt(predicate, 2)
        for key, value in self._get_entries().items():
            if Match.of(check(value, key)) is not Match.FALSE:
                return value
        return None

    def inject(self: 'Container[T]', seed: U, accumulator: Accumulator[U, T]) -> U:
        """left fold from seed"""
        return reduce(accumulator, self._get_entries().values(), seed)

    def reduce(self: 'Container[T]', accumulator: Accumulator[U, T], seed: Optional[U] = None) -> Optional[U]:
        """
        left fold from seed, None when no seed is given. the accumulator sees every
        value, so the first call is accumulator(seed, first_value).
        """
        return reduce(accumulator, self._get_entries().values(), seed)

    def join(self: 'Container[T]', separator: str = '') -> str:
        """string forms of the values with separator between them"""
        return separator.join(str(value) for value in self._get_entries().values())
