from collections.abc import Iterator as _Iterator

from ..factories import iterate
from ..source import iter as as_iterator, is_rereadable
from ..types import *

_DONE = object()


def is_nestable(item: Any) -> bool:
    """lists, tuples and iterators are descended into by flatten, everything else is a leaf"""
    return isinstance(item, (list, tuple)) or isinstance(item, _Iterator)


def flatten(source: Any) -> Iterator[Any]:
    """
    lazily flatten nested lists, tuples and iterators, depth first.
    descent keeps its own stack of open iterators, so nesting depth is
    bounded by memory only and an infinitely nested source can still be
    consumed one leaf at a time.
    """
    def flatten_items():
        stack = [as_iterator(source)]
        while stack:
            item = next(stack[-1], _DONE)
            if item is _DONE:
                stack.pop()
            elif is_nestable(item):
                stack.append(as_iterator(item))
            else:
                yield item

    return flatten_items()


def cycle(source: Any) -> Iterator[Any]:
    """
    repeat the source forever; bound it with take().
    every lap is a fresh iterator over the source, flattened. a one-shot
    iterator is recorded during the first lap and replayed afterwards.
    a lap that yields no leaf at all, as with [] or [[], []], ends the
    cycle instead of looping without ever yielding.
    """
    def cycle_items():
        laps = source if is_rereadable(source) else Replay(as_iterator(source))
        for lap in iterate(lambda _: as_iterator(laps), as_iterator(laps)):
            produced = False
            for item in flatten(lap):
                produced = True
                yield item
            if not produced:
                return

    return cycle_items()
