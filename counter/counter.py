from typing import Generic, TypeVar, Hashable, Union, Optional
from collections.abc import Mapping, MutableMapping, Iterable, Iterator, ItemsView, KeysView, ValuesView
from itertools import chain, repeat
from collections import Counter as _Elements
from .most_common import most_common

_T = TypeVar('_T', bound=Hashable)
_Other = Union['BaseCounter[_T]', Iterable[_T], Mapping[_T, int]]


def _check_quantity(quantity: object) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise TypeError(f'Counts must be integers, not {type(quantity).__name__}.')
    if quantity < 0:
        raise ValueError('The quantity must not be negative.')
    return quantity


def _counted(iterable: Optional[_Other]) -> _Elements[_T]:
    '''Builds a backing table holding only positive counts.'''
    if iterable is None:
        return _Elements[_T]()
    if isinstance(iterable, BaseCounter):
        return iterable._elements.copy()
    if isinstance(iterable, Mapping):
        elements = _Elements[_T]()
        for element, quantity in iterable.items():
            if _check_quantity(quantity):
                elements[element] = quantity
        return elements
    return _Elements[_T](iterable)


class BaseCounter(Mapping, Generic[_T]):
    """A frequency table of hashable elements.

    Every element maps to the number of times it occurs, which is always strictly positive:
    elements whose count would drop to zero are removed. Missing elements read as zero.
    Binary operations never modify their operands and return an instance of the left operand's class.

    :see: https://en.wikipedia.org/wiki/Multiset
    """

    __slots__ = ('_elements', '_total')
    _elements: _Elements[_T]
    _total: int

    def __init__(self, iterable: Optional[_Other] = None, _internal: Optional[_Elements[_T]] = None):
        assert iterable is None or _internal is None, "Either 'iterable' or '_internal' must be provided, not both."
        if isinstance(iterable, BaseCounter):
            self._elements = iterable._elements.copy()
            self._total = iterable._total
        elif _internal is not None:
            self._elements = _internal
            self._total = self._elements.total()
        else:
            self._elements = _counted(iterable)
            self._total = self._elements.total()

    @classmethod
    def fromkeys(cls, iterable, v=None):
        raise NotImplementedError(f'{cls.__name__}.fromkeys() is undefined. Use {cls.__name__}(iterable) instead.')

    def __contains__(self, element: object) -> bool:
        return element in self._elements

    def __getitem__(self, element: _T) -> int:
        return self._elements[element]

    def __iter__(self) -> Iterator[_T]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __str__(self) -> str:
        items = ', '.join('%r: %r' % item for item in self._elements.items())
        return '{%s}' % items

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self})'

    def total(self) -> int:
        return self._total

    def most_common(self, n: Optional[int] = None) -> list[tuple[_T, int]]:
        '''
        Lists the (element, count) pairs from the most common to the least common.

        If n is given, only the n most common pairs are listed.
        Elements with equal counts are listed in no particular order.
        '''
        return most_common(self._elements, n)

    def elements(self) -> Iterator[_T]:
        '''Iterates over the elements, repeating each one as many times as its count.'''
        return chain.from_iterable(repeat(element, q) for element, q in self._elements.items())

    def isdisjoint(self, other: _Other) -> bool:
        return self._elements.keys().isdisjoint(self._coerce(other).keys())

    def _coerce(self, other: _Other) -> _Elements[_T]:
        if isinstance(other, BaseCounter):
            return other._elements
        return _counted(other)

    def _as_counter(self, other: _Other) -> 'BaseCounter[_T]':
        if isinstance(other, BaseCounter):
            return other
        return BaseCounter(_internal=_counted(other))

    def difference(self, other: _Other):
        return self.__class__(_internal=self._elements - self._coerce(other))

    def union(self, other: _Other):
        return self.__class__(_internal=self._elements | self._coerce(other))

    def combine(self, other: _Other):
        return self.__class__(_internal=self._elements + self._coerce(other))

    def intersection(self, other: _Other):
        return self.__class__(_internal=self._elements & self._coerce(other))

    def times(self, factor: int):
        _check_quantity(factor)
        if factor == 0:
            return self.__class__()
        _elements = self._elements.copy()
        for element in _elements:
            _elements[element] *= factor
        return self.__class__(_internal=_elements)

    def count_contains(self, other: _Other) -> int:
        other = self._as_counter(other)
        if other._total == 0:
            raise ZeroDivisionError('Cannot count the number of times an empty counter is contained in another counter')
        if other._total > self._total:
            return 0
        return min(
            self[k] // v
            for k, v in other.items()
        )

    def issubset(self, other: _Other) -> bool:
        other = self._as_counter(other)
        self_len = self._total
        if self_len == 0:
            return True
        other_len = other._total
        if self_len > other_len:
            return False
        return all(q <= other[element] for element, q in self._elements.items())

    def issuperset(self, other: _Other) -> bool:
        return self._as_counter(other).issubset(self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BaseCounter):
            return self._total == other._total and self._elements == other._elements
        return NotImplemented

    def get(self, element: _T, default: Optional[int] = None) -> Optional[int]:
        return self._elements.get(element, default)

    def copy(self):
        return self.__class__(_internal=self._elements.copy())

    __copy__ = copy

    def items(self) -> ItemsView[_T, int]:
        return self._elements.items()

    def keys(self) -> KeysView[_T]:
        return self._elements.keys()

    def values(self) -> ValuesView[int]:
        return self._elements.values()

    distinct_elements = keys
    multiplicities = values

    def __le__(self, other: 'BaseCounter[_T]') -> bool:
        if not isinstance(other, BaseCounter):
            return NotImplemented
        return self.issubset(other)

    def __lt__(self, other: 'BaseCounter[_T]') -> bool:
        if not isinstance(other, BaseCounter):
            return NotImplemented
        return self._total < other._total and self.issubset(other)

    def __ge__(self, other: 'BaseCounter[_T]') -> bool:
        if not isinstance(other, BaseCounter):
            return NotImplemented
        return self.issuperset(other)

    def __gt__(self, other: 'BaseCounter[_T]') -> bool:
        if not isinstance(other, BaseCounter):
            return NotImplemented
        return self._total > other._total and self.issuperset(other)

    def __add__(self, other: 'BaseCounter[_T]'):
        if not isinstance(other, BaseCounter):
            return NotImplemented
        return self.combine(other)

    def __sub__(self, other: 'BaseCounter[_T]'):
        if not isinstance(other, BaseCounter):
            return NotImplemented
        return self.difference(other)

    def __or__(self, other: 'BaseCounter[_T]'):
        if not isinstance(other, BaseCounter):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: 'BaseCounter[_T]'):
        if not isinstance(other, BaseCounter):
            return NotImplemented
        return self.intersection(other)

    def __mul__(self, factor: int):
        if not isinstance(factor, int) or isinstance(factor, bool):
            return NotImplemented
        return self.times(factor)

    __rmul__ = __mul__

    def __floordiv__(self, other: 'BaseCounter[_T]') -> int:
        if not isinstance(other, BaseCounter):
            return NotImplemented
        return self.count_contains(other)


class Counter(BaseCounter[_T], MutableMapping, Generic[_T]):
    """A mutable counter, usable directly as a mapping from elements to counts."""

    __slots__ = ()

    def __setitem__(self, element: _T, quantity: int) -> None:
        _check_quantity(quantity)
        if quantity == 0:
            del self[element]
            return
        current_quantity = self._elements[element]
        self._elements[element] = quantity
        self._total += quantity - current_quantity

    def __delitem__(self, element: _T) -> None:
        current_quantity = self._elements.get(element, 0)
        if current_quantity:
            del self._elements[element]
            self._total -= current_quantity

    def add(self, element: _T, quantity: int = 1) -> None:
        _check_quantity(quantity)
        if quantity:
            self._elements[element] += quantity
            self._total += quantity

    def discard(self, element: _T, quantity: int = 1) -> int:
        '''Removes up to quantity occurrences of element, returning its previous count.'''
        _check_quantity(quantity)
        current_quantity = self._elements.get(element, 0)
        if current_quantity > quantity:
            self._elements[element] = current_quantity - quantity
            self._total -= quantity
        elif current_quantity:
            del self._elements[element]
            self._total -= current_quantity
        return current_quantity

    def update(self, iterable: Optional[_Other] = None, /) -> None:  # type: ignore[override]
        '''
        Counts the elements of iterable on top of the current counts.

        A mapping, including another counter, adds its counts instead.
        '''
        if iterable is None:
            return
        if isinstance(iterable, Mapping):
            for element, quantity in self._coerce(iterable).items():
                self.add(element, quantity)
            return
        _elements = self._elements
        for element in iterable:
            _elements[element] += 1
            self._total += 1

    def subtract(self, iterable: Optional[_Other] = None, /) -> None:
        '''
        Removes one occurrence for each element of iterable.

        A mapping, including another counter, removes its counts instead.
        Counts never go below zero: elements that run out are removed and missing elements are ignored.
        '''
        if iterable is None:
            return
        # snapshot first, the argument may be this counter or one of its views
        if isinstance(iterable, Mapping):
            for element, quantity in list(self._coerce(iterable).items()):
                self.discard(element, quantity)
            return
        for element in list(iterable):
            self.discard(element)

    def pop(self, element: _T, *default: int) -> int:
        if element in self._elements:
            quantity = self._elements.pop(element)
            self._total -= quantity
            return quantity
        if default:
            return default[0]
        raise KeyError(element)

    def setdefault(self, element: _T, default: int = 0) -> int:
        if element not in self._elements:
            self[element] = default
        return self._elements[element]

    def clear(self) -> None:
        self._elements.clear()
        self._total = 0

    def _replace(self, elements: _Elements[_T]):
        self._elements = elements
        self._total = elements.total()
        return self

    def __iadd__(self, other: 'BaseCounter[_T]'):
        if not isinstance(other, BaseCounter):
            return NotImplemented
        return self._replace(self._elements + other._elements)

    def __isub__(self, other: 'BaseCounter[_T]'):
        if not isinstance(other, BaseCounter):
            return NotImplemented
        return self._replace(self._elements - other._elements)

    def __ior__(self, other: 'BaseCounter[_T]'):
        if not isinstance(other, BaseCounter):
            return NotImplemented
        return self._replace(self._elements | other._elements)

    def __iand__(self, other: 'BaseCounter[_T]'):
        if not isinstance(other, BaseCounter):
            return NotImplemented
        return self._replace(self._elements & other._elements)


class FrozenCounter(BaseCounter[_T], Generic[_T]):
    """An immutable, hashable counter."""

    __slots__ = ()

    def __hash__(self):
        return hash(frozenset(self._elements.items()))
