"""Base reporter protocol for die test output."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from die.testing.case import Summary, TestResult


class Reporter(Protocol):
    """Protocol defining the interface for test reporters.

    The harness never prints on its own; every line of output goes through
    one of these hooks.
    """

    def on_greetings(self, title: str, description: str) -> None:
        """Called by ``Framework.display_greetings``."""
        ...

    def on_test_complete(self, result: TestResult) -> None:
        """Called after each test body has run and been classified."""
        ...

    def on_run_complete(self, summary: Summary) -> None:
        """Called once at the end of ``Framework.exec``."""
        ...

    def on_summary(self, summary: Summary, results: Sequence[TestResult]) -> None:
        """Called by ``Framework.display_summary``."""
        ...
