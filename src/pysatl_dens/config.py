"""
Runtime configuration of density engines.

The only tunable is the invalid-parameter policy shared by every family:

- ``"nan"`` (default): elements with invalid parameters evaluate to ``NaN``;
- ``"warn"``: same values, plus a :class:`RuntimeWarning`;
- ``"raise"``: :class:`~pysatl_dens.errors.InvalidParameterError` is raised.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from contextlib import contextmanager
from typing import TYPE_CHECKING, get_args

from pysatl_dens.types import InvalidParameterPolicy

if TYPE_CHECKING:
    from collections.abc import Iterator

_POLICIES: tuple[str, ...] = get_args(InvalidParameterPolicy)
_DEFAULT_POLICY: InvalidParameterPolicy = "nan"
_CURRENT_POLICY: InvalidParameterPolicy = _DEFAULT_POLICY


def set_invalid_parameter_policy(policy: InvalidParameterPolicy) -> None:
    """
    Set how density functions react to invalid distribution parameters.

    Parameters
    ----------
    policy : {"nan", "warn", "raise"}
        New policy.

    Raises
    ------
    ValueError
        If ``policy`` is not one of the known policies.
    """
    global _CURRENT_POLICY

    if policy not in _POLICIES:
        raise ValueError(
            f"Invalid policy '{policy}'. Must be one of: {', '.join(repr(p) for p in _POLICIES)}"
        )
    _CURRENT_POLICY = policy


def get_invalid_parameter_policy() -> InvalidParameterPolicy:
    """Get the currently configured invalid-parameter policy."""
    return _CURRENT_POLICY


def reset_invalid_parameter_policy() -> None:
    """Restore the default ``"nan"`` policy."""
    set_invalid_parameter_policy(_DEFAULT_POLICY)


@contextmanager
def invalid_parameter_policy(policy: InvalidParameterPolicy) -> Iterator[None]:
    """
    Temporarily switch the invalid-parameter policy.

    Examples
    --------
    >>> from pysatl_dens import dlnorm, invalid_parameter_policy
    >>> with invalid_parameter_policy("raise"):
    ...     dlnorm(1.0, 0.0, -1.0)  # doctest: +SKIP
    Traceback (most recent call last):
    InvalidParameterError: ...
    """
    previous = get_invalid_parameter_policy()
    set_invalid_parameter_policy(policy)
    try:
        yield
    finally:
        set_invalid_parameter_policy(previous)


__all__ = [
    "get_invalid_parameter_policy",
    "invalid_parameter_policy",
    "reset_invalid_parameter_policy",
    "set_invalid_parameter_policy",
]
