"""
Supports of univariate distributions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Protocol, overload, runtime_checkable

from pysatl_dens.types import BoolArray, Interval1D, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


POSITIVE_REALS = ContinuousSupport(left=0.0, left_closed=False)
"""Open ray (0, ∞)."""


__all__ = [
    "Support",
    "ContinuousSupport",
    "POSITIVE_REALS",
]
