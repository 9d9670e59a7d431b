from .counter import BaseCounter, Counter, FrozenCounter
from .most_common import most_common

__all__ = ['BaseCounter', 'Counter', 'FrozenCounter', 'most_common']
