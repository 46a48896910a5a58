from itertools import dropwhile, islice

from ..source import iter as as_iterator
from ..types import *

_DONE = object()


def map(selector: Selector[T, U]) -> Operator:
    """project each element to a new form"""
    def map_items(source: Any) -> Iterator[U]:
        for item in as_iterator(source):
            yield selector(item)
    return map_items


def filter(predicate: Predicate[T]) -> Operator:
    """keep the elements the predicate holds for"""
    def filter_items(source: Any) -> Iterator[T]:
        for item in as_iterator(source):
            if predicate(item):
                yield item
    return filter_items


def remove(predicate: Predicate[T]) -> Operator:
    """drop the elements the predicate holds for, the opposite of filter"""
    def remove_items(source: Any) -> Iterator[T]:
        for item in as_iterator(source):
            if not predicate(item):
                yield item
    return remove_items


def take(count: int) -> Operator:
    """
    take at most 'count' elements.
    upstream is never pulled past the last taken element, which is what
    makes this the bounding operator for infinite sources.
    """
    def take_items(source: Any) -> Iterator[T]:
        # islice checks its bound before each pull
        return islice(as_iterator(source), max(count, 0))
    return take_items


def drop(count: int) -> Operator:
    """
    skip the first 'count' elements.
    the prefix is pulled as soon as the operator is applied, the rest of the
    same iterator is handed back untouched.
    """
    def drop_items(source: Any) -> Iterator[T]:
        itr = as_iterator(source)
        step = max(count, 0)
        next(islice(itr, step, step), None)
        return itr
    return drop_items


def drop_while(predicate: Predicate[T]) -> Operator:
    """skip leading elements while predicate is true, then yield everything"""
    def drop_while_items(source: Any) -> Iterator[T]:
        # itertools.dropwhile never consults the predicate after its first failure
        return dropwhile(predicate, as_iterator(source))
    return drop_while_items


def tap(action: Callable[[T], Any]) -> Operator:
    """call action on every element as it passes, yielding it unchanged"""
    def tap_items(source: Any) -> Iterator[T]:
        for item in as_iterator(source):
            action(item)
            yield item
    return tap_items


def interpose(separator: Any) -> Operator:
    """put separator between consecutive elements"""
    def interpose_items(source: Any) -> Iterator[Any]:
        itr = as_iterator(source)
        item = next(itr, _DONE)
        if item is _DONE:
            return
        yield item
        for item in itr:
            yield separator
            yield item
    return interpose_items


# --- element access ---

def first(source: Any) -> Optional[T]:
    """first element, or None when there is none"""
    return next(as_iterator(source), None)


def second(source: Any) -> Optional[T]:
    return first(drop(1)(source))


def ffirst(source: Any) -> Optional[T]:
    """first element of the first element"""
    return first(first(source))
