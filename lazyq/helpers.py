from typing import Callable, Dict, Any, Optional

from .types import K, V


def inc(i: Optional[int]) -> int:
    """increment, treating a missing value as zero"""
    return i + 1 if i is not None else 1


def dec(i: int) -> int:
    return i - 1


def zero(i: int) -> bool:
    return i == 0


def pos(i: int) -> bool:
    return i > 0


def neg(i: int) -> bool:
    return i < 0


def update_entry(mapping: Dict[K, V], key: K, update_fn: Callable[[Optional[V]], V],
                 default: Any = None) -> Dict[K, V]:
    """get-or-default the value under key, compute the new one and store it back"""
    current = mapping.get(key, default)
    mapping[key] = update_fn(current)
    return mapping
