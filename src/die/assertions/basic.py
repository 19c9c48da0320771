"""Comparison primitives for use inside test bodies."""

from typing import Any

from die.assertions._base import AssertionFailedError, AssertionResult, _render


def _describe(left: Any, op: str, right: Any) -> str:
    left_s = _render(left)
    right_s = _render(right)
    if left_s is None or right_s is None:
        return f"values differ (expected {op} to hold)"
    return f"expected {left_s} {op} {right_s}"


def _check(name: str, passed: bool, left: Any, op: str, right: Any) -> AssertionResult:
    result = AssertionResult(
        assertion_name=name,
        passed=passed,
        message=None if passed else _describe(left, op, right),
    )
    if not passed:
        raise AssertionFailedError(result)
    return result


def assert_eq(a: Any, b: Any) -> AssertionResult:
    """Raise AssertionFailedError unless ``a == b``."""
    return _check("assert_eq", bool(a == b), a, "==", b)


def assert_ne(a: Any, b: Any) -> AssertionResult:
    """Raise AssertionFailedError unless ``a != b``."""
    return _check("assert_ne", bool(a != b), a, "!=", b)
