"""
Distributions subpackage

Shared building blocks of distribution objects:

- the distribution protocol (:mod:`.distribution`);
- supports (:mod:`.support`);
- analytical computation primitives (:mod:`.computation`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .computation import AnalyticalComputation
from .distribution import Distribution
from .support import POSITIVE_REALS, ContinuousSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    # distribution
    "Distribution",
    # supports
    "Support",
    "ContinuousSupport",
    "POSITIVE_REALS",
]
