"""
a small registry-based test runner.

test modules register cases with @test("description") and end with
`if __name__ == "__main__": run(title=...)`. the same modules are plain
pytest modules as well: registration does not rename or wrap the case.
"""
import time
from typing import List, Dict, Any, Callable, Optional, Type

_registry: Dict[str, List[Dict[str, Any]]] = {
    'cases': [],
    'outcomes': []
}

# ansi sgr codes, keyed by what the text means rather than its color
_TONES = {
    'good': '32',
    'bad': '31',
    'number': '36',
    'muted': '2',
    'title': '1;34',
}


def _paint(text: Any, tone: str) -> str:
    return f"\033[{_TONES[tone]}m{text}\033[0m"


class TestAssertionError(AssertionError):
    """raised by assert_that and friends, so the report can tell failures from crashes."""
    pass


def test(description: str) -> Callable:
    """register a function as a test case, returning it unchanged."""

    def register(func: Callable) -> Callable:
        _registry['cases'].append({'func': func, 'description': description})
        return func

    return register


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_equal(actual: Any, expected: Any, label: str = "value") -> None:
    """equality check with both sides in the failure message."""
    if actual != expected:
        raise TestAssertionError(f"{label}: expected {expected!r}, got {actual!r}")


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any],
                  message: Optional[str] = None) -> BaseException:
    """call func and require it to raise error_type; returns the caught error."""
    try:
        func()
    except error_type as e:
        return e
    raise TestAssertionError(message or f"expected {error_type.__name__} to be raised")


def run(title: str = "test run") -> bool:
    """run every registered case, print a report and return whether all passed."""
    print(_paint(f"\n== {title} ==", 'title'))
    started = time.perf_counter()
    _registry['outcomes'] = []

    for case in _registry['cases']:
        error = None
        try:
            case['func']()
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        _registry['outcomes'].append({'passed': error is None, 'description': case['description'], 'error': error})
        _report_case(case['description'], error)

    all_passed = _report_totals(time.perf_counter() - started)

    # cleared so several modules can run one after another in one process
    _registry['cases'] = []
    return all_passed


def _report_case(description: str, error: Optional[str]) -> None:
    if error is None:
        print(f"  {_paint('ok  ', 'good')} {description}")
        return
    print(f"  {_paint('FAIL', 'bad')} {description}")
    print(f"       {_paint(error, 'muted')}")


def _report_totals(elapsed: float) -> bool:
    outcomes = _registry['outcomes']
    failures = [o['description'] for o in outcomes if not o['passed']]
    verdict = _paint("all passed", 'good') if not failures else _paint(f"{len(failures)} failed", 'bad')

    print(f"\n{_paint(len(outcomes), 'number')} cases, {verdict}, {_paint(f'{elapsed:.3f}s', 'number')}")
    for description in failures:
        print(f"  - {description}")
    print()
    return not failures
