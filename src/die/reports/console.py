"""Rich console reporter."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

from die.reports.base import Reporter

if TYPE_CHECKING:
    from die.testing.case import Summary, TestResult


class ConsoleReporter(Reporter):
    """Prints greetings, per-test lines and the final summary to a console."""

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console()
        self.verbosity = verbosity

    def on_greetings(self, title: str, description: str) -> None:
        self.console.print(Rule(f"[bold]{escape(title)}[/bold]"))
        if description:
            self.console.print(escape(description))

    def on_test_complete(self, result: TestResult) -> None:
        if self.verbosity < 1:
            return
        name = escape(result.name)
        if result.verdict.passed:
            self.console.print(f"[green]PASS[/green] {name}")
        else:
            self.console.print(f"[red]FAIL[/red] {name}: {escape(result.verdict.reason or '')}")

    def on_run_complete(self, summary: Summary) -> None:
        if self.verbosity >= 2:
            self.console.print(f"[dim]Ran {summary.executed} test(s)[/dim]")

    def on_summary(self, summary: Summary, results: Sequence[TestResult]) -> None:
        self.console.print(Rule("summary"))
        if summary.executed == 0:
            self.console.print(f"No tests executed ({summary.registered} registered)")
            return

        for failure in summary.failures:
            self.console.print(f"[red]FAILED[/red] {escape(failure.name)}: {escape(failure.reason)}")
            if failure.stdout:
                self.console.print("[dim]--- captured stdout ---[/dim]")
                self.console.print(escape(failure.stdout.rstrip("\n")), highlight=False)
            if failure.stderr:
                self.console.print("[dim]--- captured stderr ---[/dim]")
                self.console.print(escape(failure.stderr.rstrip("\n")), highlight=False)

        style = "green" if summary.failed == 0 else "red"
        self.console.print(
            f"[{style}]{summary.executed} total, {summary.passed} passed, "
            f"{summary.failed} failed[/{style}]"
        )
