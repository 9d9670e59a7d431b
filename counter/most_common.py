from typing import Mapping, TypeVar, Hashable
from heapq import nlargest
from operator import itemgetter


_T = TypeVar('_T', bound=Hashable)

_count = itemgetter(1)


def most_common(counts: Mapping[_T, int], n: int | None = None) -> list[tuple[_T, int]]:
    '''
    Snapshot of the (element, count) pairs of a mapping, from the highest count to the lowest.

    When n is given only the n highest pairs are selected, without sorting the whole mapping.
    The relative order of elements with the same count is not specified.
    '''
    if n is None:
        return sorted(counts.items(), key=_count, reverse=True)
    if n <= 0:
        return []
    if n >= len(counts):
        return sorted(counts.items(), key=_count, reverse=True)
    return nlargest(n, counts.items(), key=_count)
