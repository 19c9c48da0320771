"""Test harness: case registration, execution and classification."""

from .case import Failure, Summary, TestCase, TestResult
from .framework import Framework
from .runner import classify, describe_exemplar, kind_name_of, run_body


__all__ = [
    "Failure",
    "Framework",
    "Summary",
    "TestCase",
    "TestResult",
    "classify",
    "describe_exemplar",
    "kind_name_of",
    "run_body",
]
