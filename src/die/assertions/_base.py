"""Assertion result model and the failure raised by assertion primitives."""

from typing import Any

from pydantic import BaseModel


def _render(value: Any, max_len: int = 80) -> str | None:
    """Render a value for a failure message, or None if it cannot be rendered."""
    try:
        s = repr(value)
    except Exception:
        return None
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


class AssertionResult(BaseModel):
    """Result of evaluating an assertion primitive.

    Attributes:
    ----------
    assertion_name : str
        Name of the primitive that was evaluated (e.g. "assert_eq")
    passed : bool
        Whether the comparison held
    message : str | None
        Explanation of the failure, None when passed
    """

    assertion_name: str
    passed: bool
    message: str | None = None

    def __bool__(self) -> bool:
        return self.passed


class AssertionFailedError(AssertionError):
    """AssertionError with attached AssertionResult.

    Only the assertion primitives raise this. The harness treats it as the
    single source of expected-failure signals; a plain AssertionError raised
    by a test body is classified like any other exception.
    """

    def __init__(self, result: AssertionResult):
        self.assertion_result = result
        message = f"{result.assertion_name} failed"
        if result.message:
            message += f": {result.message}"
        super().__init__(message)
