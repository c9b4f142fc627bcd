"""
Concrete distribution instances with specific parameter values.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pysatl_dens.distributions.distribution import Distribution
from pysatl_dens.families.registry import ParametricFamilyRegister
from pysatl_dens.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_dens.distributions.computation import AnalyticalComputation
    from pysatl_dens.distributions.support import Support
    from pysatl_dens.families.parametric_family import ParametricFamily
    from pysatl_dens.families.parametrizations import Parametrization
    from pysatl_dens.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parametrization : Parametrization
        Parameter values for this distribution.
    _support : Support or None
        Support of this distribution.
    """

    family_name: str
    _distribution_type: DistributionType
    parametrization: Parametrization
    _support: Support | None

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """Get the parametric family this distribution belongs to."""
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values in the parametrization the distribution was created with."""
        return self.parametrization.parameters

    @property
    def parametrization_name(self) -> str:
        """Name of the parametrization the distribution was created with."""
        return self.parametrization.name

    @property
    def base_parameters(self) -> dict[str, Any]:
        """Parameter values converted to the base parametrization."""
        return self.family.to_base(self.parametrization).parameters

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Characteristics of the family bound to this distribution's parameters."""
        return self.family._build_analytical_computations(self.parametrization)

    @property
    def support(self) -> Support | None:
        """Get the support of this distribution."""
        return self._support

    def pdf(self, x: Any) -> Any:
        """
        Probability density at ``x``.

        Parameters
        ----------
        x : float or array_like
            Point or container of points.

        Returns
        -------
        numpy.floating or container
            Density shaped like ``x``.
        """
        return self.calculate_characteristic(CharacteristicName.PDF, x)

    def logpdf(self, x: Any) -> Any:
        """Log-density at ``x``, shaped like ``x``."""
        return self.calculate_characteristic(CharacteristicName.LOG_PDF, x)

    def log_likelihood(self, data: Any) -> float:
        """
        Log-likelihood of the observations in ``data``.

        Returns
        -------
        float
            Sum of log-densities; ``-inf`` if any observation lies outside
            the support.
        """
        values = np.asarray(self.logpdf(np.asarray(data, dtype=float).ravel()))
        return float(np.sum(values))
