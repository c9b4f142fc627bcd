from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_dens.config import (
    get_invalid_parameter_policy,
    invalid_parameter_policy,
    reset_invalid_parameter_policy,
    set_invalid_parameter_policy,
)


def test_default_policy() -> None:
    assert get_invalid_parameter_policy() == "nan"


@pytest.mark.parametrize("policy", ["nan", "warn", "raise"])
def test_set_policy(policy: str) -> None:
    set_invalid_parameter_policy(policy)  # type: ignore[arg-type]
    assert get_invalid_parameter_policy() == policy


def test_unknown_policy_rejected() -> None:
    with pytest.raises(ValueError, match="Invalid policy 'ignore'"):
        set_invalid_parameter_policy("ignore")  # type: ignore[arg-type]
    assert get_invalid_parameter_policy() == "nan"


def test_reset_policy() -> None:
    set_invalid_parameter_policy("raise")
    reset_invalid_parameter_policy()
    assert get_invalid_parameter_policy() == "nan"


def test_context_manager_restores_previous_policy() -> None:
    set_invalid_parameter_policy("warn")

    with invalid_parameter_policy("raise"):
        assert get_invalid_parameter_policy() == "raise"

    assert get_invalid_parameter_policy() == "warn"


def test_context_manager_restores_on_error() -> None:
    with pytest.raises(RuntimeError):
        with invalid_parameter_policy("raise"):
            raise RuntimeError("boom")

    assert get_invalid_parameter_policy() == "nan"
