"""Shared types for the die test harness."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TestStatus(Enum):
    """Per-case execution status."""

    __test__ = False

    IDLE = "idle"  # Registered, not executed yet
    PASSED = "passed"
    FAILED = "failed"


# Expectations


@dataclass(frozen=True)
class NoFailureExpected:
    """The body must run to completion."""

    def describe(self) -> str:
        return "no failure"


@dataclass(frozen=True)
class FailureExpected:
    """The body must trip an assertion primitive."""

    def describe(self) -> str:
        return "an assertion failure"


@dataclass(frozen=True)
class ExceptionExpected:
    """The body must raise an exception of kind ``kind_name``.

    ``description`` is display-only text derived from the exemplar value
    given at registration.
    """

    description: str
    kind_name: str

    def describe(self) -> str:
        return f"{self.kind_name} ({self.description})"


Expectation = NoFailureExpected | FailureExpected | ExceptionExpected


# Execution outcomes


@dataclass(frozen=True, slots=True)
class Completed:
    """The body returned normally."""

    def describe(self) -> str:
        return "completed without failure"


@dataclass(frozen=True, slots=True)
class AssertionFailed:
    """An assertion primitive signaled failure."""

    message: str

    def describe(self) -> str:
        return f"assertion failed: {self.message}"


@dataclass(frozen=True, slots=True)
class ExceptionThrown:
    """The body raised an exception."""

    kind_name: str
    message: str

    def describe(self) -> str:
        if self.message:
            return f"raised {self.kind_name}: {self.message}"
        return f"raised {self.kind_name}"


ExecutionOutcome = Completed | AssertionFailed | ExceptionThrown


@dataclass(frozen=True, slots=True)
class Verdict:
    """Pass/fail classification of one executed case.

    ``reason`` is set iff the case failed.
    """

    passed: bool
    reason: str | None = None

    @classmethod
    def pass_(cls) -> Verdict:
        return cls(passed=True)

    @classmethod
    def fail(cls, reason: str) -> Verdict:
        return cls(passed=False, reason=reason)

    @property
    def status(self) -> TestStatus:
        return TestStatus.PASSED if self.passed else TestStatus.FAILED
