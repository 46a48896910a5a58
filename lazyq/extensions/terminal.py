import numpy as np
import pandas as pd

from ..source import iter as as_iterator
from ..types import *


def reduce(reducer: Reducer[T, U], initial: U) -> Operator:
    """left fold over the whole source; the reducer gets (item, accumulator)"""
    def reduce_items(source: Any) -> U:
        acc = initial
        for item in as_iterator(source):
            acc = reducer(item, acc)
        return acc
    return reduce_items


def every(predicate: Predicate[T]) -> Operator:
    """true when all elements satisfy the predicate; stops at the first that does not"""
    def every_item(source: Any) -> bool:
        for item in as_iterator(source):
            if not predicate(item):
                return False
        return True
    return every_item


def some(predicate: Predicate[T]) -> Operator:
    """true as soon as one element satisfies the predicate"""
    def some_item(source: Any) -> bool:
        for item in as_iterator(source):
            if predicate(item):
                return True
        return False
    return some_item


# --- materializers ---

def into_list(source: Any) -> List[T]:
    """convert to list"""
    return list(as_iterator(source))


def into_set(source: Any) -> Set[T]:
    """convert to set"""
    return set(as_iterator(source))


def into_dict(source: Any) -> Dict[K, V]:
    """convert (key, value) pairs to a dictionary, the last duplicate key wins"""
    return dict(as_iterator(source))


def into_obj(source: Any) -> Dict[str, V]:
    """
    convert (key, value) pairs to a plain record with string keys.
    keys are coerced with str(), so 1 and '1' land on the same entry;
    the last one written wins.
    """
    def assign(pair: Tuple[Any, V], obj: Dict[str, V]) -> Dict[str, V]:
        key, value = pair
        obj[str(key)] = value
        return obj

    return reduce(assign, {})(source)


def into_ndarray(source: Any) -> np.ndarray:
    """convert to numpy array"""
    return np.array(into_list(source))


def into_series(source: Any) -> pd.Series:
    """convert to pandas series"""
    return pd.Series(into_list(source))


def into_frame(source: Any) -> pd.DataFrame:
    """convert rows (dicts or tuples) to a pandas dataframe"""
    return pd.DataFrame(into_list(source))
