from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], Union[int, float]]
# item first, accumulator second
Reducer = Callable[[T, U], U]
Operator = Callable[[Any], Any]
Pair = Tuple[K, V]


class SourceKind(Enum):
    """the closed set of input shapes the normalizer understands"""
    ABSENT = 'absent'
    ITERATOR = 'iterator'
    MAPPING = 'mapping'
    STRING = 'string'
    SET = 'set'
    SEQUENCE = 'sequence'
    ITERABLE = 'iterable'
    ENTRIES = 'entries'


class Replay(Generic[T]):
    """
    re-readable view over a one-shot iterator.
    items are recorded the first time they are pulled, every later
    iteration replays the recording before pulling further from the source.
    """

    def __init__(self, source: Iterator[T]):
        self._source = source
        self._cache: List[T] = []
        self._is_fully_enumerated = False

    @property
    def is_fully_enumerated(self) -> bool:
        return self._is_fully_enumerated

    def _pull(self) -> bool:
        """record one more item from the source; false once it is drained"""
        if self._is_fully_enumerated:
            return False
        try:
            self._cache.append(next(self._source))
            return True
        except StopIteration:
            self._is_fully_enumerated = True
            return False

    def __iter__(self) -> Iterator[T]:
        index = 0
        while True:
            if index < len(self._cache):
                yield self._cache[index]
                index += 1
            elif not self._pull():
                return

    def __len__(self) -> int:
        """length of what has been recorded so far"""
        return len(self._cache)

    def __repr__(self) -> str:
        state = "complete" if self._is_fully_enumerated else "partial"
        return f"Replay(recorded={len(self._cache)}, {state})"
