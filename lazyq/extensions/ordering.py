from functools import cmp_to_key
from numbers import Real

from ..source import iter as as_iterator
from ..types import *


def num_compare(a: Real, b: Real) -> Real:
    """compare two numbers"""
    return a - b


def str_compare(a: Any, b: Any) -> int:
    """compare the string forms of two values"""
    left, right = str(a), str(b)
    return (left > right) - (left < right)


def default_compare(a: Any, b: Any) -> Union[int, float]:
    """numeric compare when the left value is a number, string compare otherwise"""
    # bool is an int subclass but orders as text here
    if isinstance(a, Real) and not isinstance(a, bool):
        return num_compare(a, b)
    return str_compare(a, b)


def sort(compare: Comparer[T] = default_compare) -> Operator:
    """
    drain the source and return an iterator over its elements in sorted order.
    python's sort is stable, equal elements keep their encounter order.
    """
    def sort_items(source: Any) -> Iterator[T]:
        data = list(as_iterator(source))
        data.sort(key=cmp_to_key(compare))
        return iter(data)
    return sort_items


def sort_by(key_selector: KeySelector[T, K], compare: Comparer[K] = default_compare) -> Operator:
    """like sort, but compares the keys selected from each element"""
    def sort_by_items(source: Any) -> Iterator[T]:
        data = list(as_iterator(source))
        data.sort(key=cmp_to_key(lambda a, b: compare(key_selector(a), key_selector(b))))
        return iter(data)
    return sort_by_items
