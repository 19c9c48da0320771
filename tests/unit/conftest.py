"""Shared fixtures for unit tests."""

import io

import pytest
from rich.console import Console

from die.config import DieConfig
from die.reports.base import Reporter


class NullReporter(Reporter):
    """Silent reporter that remembers what it was told."""

    def __init__(self) -> None:
        self.greetings: list[tuple[str, str]] = []
        self.completed = []
        self.runs = []
        self.summaries = []

    def on_greetings(self, title: str, description: str) -> None:
        self.greetings.append((title, description))

    def on_test_complete(self, result) -> None:
        self.completed.append(result)

    def on_run_complete(self, summary) -> None:
        self.runs.append(summary)

    def on_summary(self, summary, results) -> None:
        self.summaries.append((summary, list(results)))


@pytest.fixture
def null_reporter() -> NullReporter:
    """Provide a silent reporter for tests."""
    return NullReporter()


@pytest.fixture
def config() -> DieConfig:
    return DieConfig()


@pytest.fixture
def console_buffer() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, width=200, no_color=True, force_terminal=False), buf
