r"""Unit tests for retry decision logic."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from multitry.core import accept_all
from multitry.retry import RetryDecider


def test_retry_decider_creation() -> None:
    exception_filter = Mock(return_value=True)
    decider = RetryDecider(exception_filter)
    assert decider.exception_filter is exception_filter


def test_retry_decider_none_filter_accepts_all() -> None:
    assert RetryDecider(None).exception_filter is accept_all


def test_retry_decider_retryable() -> None:
    exc = ConnectionError("reset")
    exception_filter = Mock(return_value=True)
    decider = RetryDecider(exception_filter)

    assert decider.should_retry_exception(exc, attempt=0)
    exception_filter.assert_called_once_with(exc)


def test_retry_decider_not_retryable() -> None:
    exc = ValueError("bad input")
    decider = RetryDecider(lambda error: isinstance(error, ConnectionError))

    assert not decider.should_retry_exception(exc, attempt=2)


def test_retry_decider_filter_error_propagates() -> None:
    def exception_filter(error: Exception) -> bool:
        raise TypeError("filter failed")

    decider = RetryDecider(exception_filter)
    with pytest.raises(TypeError, match=r"filter failed"):
        decider.should_retry_exception(ValueError(), attempt=0)
