"""Tests for die.assertions primitives."""

import pytest

from die.assertions import AssertionFailedError, AssertionResult, assert_eq, assert_ne


class Unprintable:
    def __eq__(self, other):
        return False

    def __repr__(self):
        raise RuntimeError("no repr")


class TestAssertEq:
    def test_equal_values_pass(self):
        result = assert_eq(1, 1)
        assert isinstance(result, AssertionResult)
        assert result.passed
        assert result.assertion_name == "assert_eq"
        assert result.message is None

    def test_unequal_values_raise(self):
        with pytest.raises(AssertionFailedError) as exc_info:
            assert_eq(1, 2)

        result = exc_info.value.assertion_result
        assert not result.passed
        assert result.message == "expected 1 == 2"
        assert str(exc_info.value) == "assert_eq failed: expected 1 == 2"

    def test_failure_is_an_assertion_error(self):
        with pytest.raises(AssertionError):
            assert_eq("a", "b")

    def test_unrenderable_operand_falls_back(self):
        with pytest.raises(AssertionFailedError, match="values differ"):
            assert_eq(Unprintable(), 1)

    def test_long_values_are_truncated(self):
        with pytest.raises(AssertionFailedError) as exc_info:
            assert_eq("x" * 500, "y")
        assert "..." in exc_info.value.assertion_result.message


class TestAssertNe:
    def test_different_values_pass(self):
        assert assert_ne(1, 2).passed

    def test_equal_values_raise(self):
        with pytest.raises(AssertionFailedError, match=r"expected 1 != 1"):
            assert_ne(1, 1)

    def test_result_is_falsy_on_failure(self):
        with pytest.raises(AssertionFailedError) as exc_info:
            assert_ne([1], [1])
        assert not exc_info.value.assertion_result
