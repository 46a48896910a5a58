from ..source import iter as as_iterator
from ..types import *

_DONE = object()


def _steps(sources: Tuple[Any, ...]) -> Iterator[List[Any]]:
    """
    pull one value from every source per step, in source order.
    stops on the first step where any source is exhausted; the values
    already pulled on that step are discarded.
    """
    if not sources:
        return
    iterators = [as_iterator(source) for source in sources]
    while True:
        step = [next(itr, _DONE) for itr in iterators]
        if any(value is _DONE for value in step):
            return
        yield step


def zip(*sources: Any) -> Iterator[Tuple[Any, ...]]:
    """combine sources into tuples, as long as the shortest source"""
    for step in _steps(sources):
        yield tuple(step)


def interleave(*sources: Any) -> Iterator[Any]:
    """yield one value of each source in turn, as long as the shortest source"""
    for step in _steps(sources):
        yield from step
