from ..helpers import inc, update_entry
from ..source import iter as as_iterator
from .terminal import reduce
from ..types import *


def group_by(key_selector: KeySelector[T, K]) -> Operator:
    """
    bucket elements by key. returns an iterator of (key, items) pairs, keys in
    the order first seen and items in encounter order within each bucket.
    """
    def add(item: T, groups: Dict[K, List[T]]) -> Dict[K, List[T]]:
        groups.setdefault(key_selector(item), []).append(item)
        return groups

    def group_items(source: Any) -> Iterator[Tuple[K, List[T]]]:
        # a fresh dict per call, nothing is shared between invocations
        return iter(reduce(add, {})(as_iterator(source)).items())
    return group_items


def frequencies(source: Any) -> Iterator[Tuple[T, int]]:
    """count occurrences of each distinct element, as (element, count) pairs"""
    counts: Dict[T, int] = {}
    for item in as_iterator(source):
        update_entry(counts, item, inc)
    return iter(counts.items())
