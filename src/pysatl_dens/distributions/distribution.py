"""
Distribution Interface
======================

The :class:`Distribution` protocol is the public interface of distribution
objects: a type descriptor, analytically provided characteristics and a
support. Characteristic lookup and evaluation are implemented once here.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_dens.distributions.computation import AnalyticalComputation
    from pysatl_dens.distributions.support import Support
    from pysatl_dens.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName
    ) -> AnalyticalComputation[Any, Any]:
        """
        Look up the computation of a characteristic.

        Raises
        ------
        KeyError
            If the distribution does not provide ``characteristic_name``.
        """
        computations = self.analytical_computations
        if characteristic_name not in computations:
            raise KeyError(
                f"Characteristic '{characteristic_name}' is not provided; "
                f"available: {', '.join(computations)}"
            )
        return computations[characteristic_name]

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)
