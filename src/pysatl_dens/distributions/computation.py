"""
Computation Primitives
======================

:class:`AnalyticalComputation` binds a characteristic name (e.g. ``"pdf"``)
to the callable that evaluates it for a concrete distribution.

Notes
-----
- Callables accept scalars as well as containers; density characteristics
  delegate to the bulk engine for the latter.
- ``**options`` are forwarded verbatim (e.g. ``excess=True`` for kurtosis).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mypy_extensions import KwArg

from pysatl_dens.types import GenericCharacteristicName


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)


__all__ = [
    "AnalyticalComputation",
]
