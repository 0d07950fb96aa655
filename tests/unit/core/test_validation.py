from __future__ import annotations

import pytest

from multitry.core import (
    validate_delay,
    validate_final_failure,
    validate_try_count,
    validate_work,
)

####################################
#     Tests for validate_delay     #
####################################


@pytest.mark.parametrize("delay", [0, 1, 0.5, 100, 3000])
def test_validate_delay_accepts_valid_values(delay: float) -> None:
    """Test that validate_delay accepts non-negative delays."""
    validate_delay(delay)


def test_validate_delay_rejects_negative() -> None:
    """Test that validate_delay rejects negative delay."""
    with pytest.raises(ValueError, match=r"delay must be >= 0, got -1"):
        validate_delay(-1)


def test_validate_delay_rejects_negative_float() -> None:
    with pytest.raises(ValueError, match=r"delay must be >= 0, got -0.5"):
        validate_delay(-0.5)


########################################
#     Tests for validate_try_count     #
########################################


@pytest.mark.parametrize("try_count", [0, 1, 3, 100])
def test_validate_try_count_accepts_valid_values(try_count: int) -> None:
    """Test that validate_try_count accepts non-negative counts."""
    validate_try_count(try_count)


def test_validate_try_count_rejects_negative() -> None:
    """Test that validate_try_count rejects negative count."""
    with pytest.raises(ValueError, match=r"try_count must be an integer >= 0, got -2"):
        validate_try_count(-2)


@pytest.mark.parametrize("try_count", [2.5, 3.0, "3", None, True])
def test_validate_try_count_rejects_non_integer(try_count: object) -> None:
    """Test that validate_try_count rejects values that are not
    integers."""
    with pytest.raises(ValueError, match=r"try_count must be an integer >= 0"):
        validate_try_count(try_count)


############################################
#     Tests for validate_final_failure     #
############################################


def test_validate_final_failure_accepts_callable() -> None:
    validate_final_failure(lambda error: None)


def test_validate_final_failure_rejects_none() -> None:
    with pytest.raises(ValueError, match=r"on_final_failure must be set"):
        validate_final_failure(None)


###################################
#     Tests for validate_work     #
###################################


def test_validate_work_accepts_callable() -> None:
    validate_work(lambda: 42)


def test_validate_work_rejects_none() -> None:
    with pytest.raises(TypeError, match=r"work must be set"):
        validate_work(None)


def test_validate_work_rejects_non_callable() -> None:
    with pytest.raises(TypeError, match=r"work must be callable, got int"):
        validate_work(42)
