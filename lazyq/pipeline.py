"""
composition of operators into one transformation.

    pipe([2, 1, 4, 3], map(inc), sort(), into_list)  ->  [2, 3, 4, 5]

operators are applied left to right. lazy operators only wrap their
upstream iterator, so nothing runs until the result is pulled, except for
terminal operators, which pull to completion when they are applied.
"""
import functools
import logging

from .extensions.core import interpose, tap
from .source import iter as as_iterator
from .types import *

_default_logger = logging.getLogger(__name__)


def pipe(source: Any, *operators: Operator) -> Any:
    """
    thread the normalized source through the operators, first to last.
    with no operators the normalized source itself is returned.
    """
    return functools.reduce(lambda upstream, operator: operator(upstream), operators, as_iterator(source))


def compose(*operators: Operator) -> Operator:
    """a reusable operator that pipes its source through the given operators"""
    def composed(source: Any) -> Any:
        return pipe(source, *operators)
    return composed


def log_step(logger: Optional[logging.Logger] = None, label: str = "intermediate pipe result") -> Operator:
    """a tap that logs every element passing through at debug level"""
    target = logger or _default_logger
    return tap(lambda item: target.debug("%s: %r", label, item))


def pipe_debug(source: Any, *operators: Operator, logger: Optional[logging.Logger] = None) -> Any:
    """
    pipe, with every intermediate element logged.
    a log_step runs on the source and between each pair of operators,
    the final result is logged once the pipe returns.
    """
    target = logger or _default_logger
    step = log_step(target)
    target.debug("---[pipe iteration start]---")
    result = pipe(source, step, *interpose(step)(operators))
    target.debug("pipe iteration result => %r", result)
    target.debug("---[pipe iteration end]---")
    return result
