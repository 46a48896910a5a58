from .extensions.core import map, take
from .types import *


def iterate(step: Callable[[T], T], initial: T) -> Iterator[T]:
    """
    infinite sequence initial, step(initial), step(step(initial)), ...
    bound it with take() before draining it.
    """
    value = initial
    while True:
        yield value
        value = step(value)


def repeatedly(producer: Callable[[], T]) -> Iterator[T]:
    """infinite sequence of fresh producer() calls"""
    while True:
        yield producer()


def repeat(item: T, count: int) -> Iterator[T]:
    """exactly 'count' copies of item"""
    return map(lambda _: item)(from_range(count))


def from_range(count: int, start: int = 0, step: int = 1) -> Iterator[int]:
    """'count' numbers beginning at start, 'step' apart"""
    return take(count)(iterate(lambda i: i + step, start))
