"""Assertion primitives for test bodies."""

from ._base import AssertionFailedError, AssertionResult
from .basic import assert_eq, assert_ne

__all__ = [
    "AssertionFailedError",
    "AssertionResult",
    "assert_eq",
    "assert_ne",
]
