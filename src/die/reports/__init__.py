"""Reporting module for die test output."""

from die.reports.base import Reporter
from die.reports.console import ConsoleReporter

__all__ = [
    "ConsoleReporter",
    "Reporter",
]
