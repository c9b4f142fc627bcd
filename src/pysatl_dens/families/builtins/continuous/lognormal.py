"""
Log-normal distribution family implementation.

Contains the LogNormal family with multiple parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_dens.dens.lognormal import dlnorm
from pysatl_dens.distributions.support import POSITIVE_REALS, ContinuousSupport
from pysatl_dens.families.parametric_family import ParametricFamily
from pysatl_dens.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_dens.families.registry import ParametricFamilyRegister
from pysatl_dens.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_lognormal_family() -> None:
    """
    Configure and register the LogNormal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOGNORMAL):
        return

    LOGNORMAL_DOC = """
    Log-normal distribution.

    A positive random variable X is log-normal when ln X is normally
    distributed with mean μ and standard deviation σ.

    Probability density function:
        f(x) = 1/(xσ√(2π)) * exp(-(ln x - μ)²/(2σ²)),  x > 0

    Typical models: sizes of particles, incomes, response times and other
    products of many independent positive factors.
    """

    def pdf(parameters: Parametrization, x: Any) -> Any:
        """
        Probability density function for log-normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean of ln X)
            - sigma: float (standard deviation of ln X)
        x : float or array_like
            Points at which to evaluate the probability density function

        Returns
        -------
        numpy.floating or container
            Probability density values at points x, shaped like x
        """
        parameters = cast(_LogMeanStd, parameters)
        return dlnorm(x, parameters.mu, parameters.sigma)

    def logpdf(parameters: Parametrization, x: Any) -> Any:
        """Logarithm of the probability density function, shaped like x."""
        parameters = cast(_LogMeanStd, parameters)
        return dlnorm(x, parameters.mu, parameters.sigma, True)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of log-normal distribution."""
        parameters = cast(_LogMeanStd, parameters)
        return math.exp(parameters.mu + parameters.sigma**2 / 2)

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of log-normal distribution."""
        parameters = cast(_LogMeanStd, parameters)
        sigma2 = parameters.sigma**2
        return math.expm1(sigma2) * math.exp(2 * parameters.mu + sigma2)

    def median_func(parameters: Parametrization, _: Any) -> float:
        """Median of log-normal distribution."""
        parameters = cast(_LogMeanStd, parameters)
        return math.exp(parameters.mu)

    def mode_func(parameters: Parametrization, _: Any) -> float:
        """Mode of log-normal distribution."""
        parameters = cast(_LogMeanStd, parameters)
        return math.exp(parameters.mu - parameters.sigma**2)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of log-normal distribution (depends on sigma only)."""
        parameters = cast(_LogMeanStd, parameters)
        sigma2 = parameters.sigma**2
        return (math.exp(sigma2) + 2) * math.sqrt(math.expm1(sigma2))

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """Raw or excess kurtosis of log-normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters
        excess : bool
            A value defines if there will be raw or excess kurtosis
            default is False

        Returns
        -------
        float
            Kurtosis value
        """
        parameters = cast(_LogMeanStd, parameters)
        sigma2 = parameters.sigma**2
        excess_kurtosis = (
            math.exp(4 * sigma2) + 2 * math.exp(3 * sigma2) + 3 * math.exp(2 * sigma2) - 6
        )
        return excess_kurtosis if excess else excess_kurtosis + 3

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of log-normal distribution"""
        return POSITIVE_REALS

    LogNormal = ParametricFamily(
        name=FamilyName.LOGNORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["logMeanStd", "meanVar", "scaleShape"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOG_PDF: logpdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.MEDIAN: median_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
        },
        support_by_parametrization=_support,
    )
    LogNormal.__doc__ = LOGNORMAL_DOC

    @parametrization(family=LogNormal, name="logMeanStd")
    class _LogMeanStd(Parametrization):
        """
        Standard parametrization of log-normal distribution.

        Parameters
        ----------
        mu : float
            Mean of ln X
        sigma : float
            Standard deviation of ln X
        """

        mu: float
        sigma: float

        @constraint(description="mu is finite")
        def check_mu_finite(self) -> bool:
            """Check that location is a finite number."""
            return math.isfinite(self.mu)

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            """Check that scale is positive and finite."""
            return math.isfinite(self.sigma) and self.sigma > 0

    @parametrization(family=LogNormal, name="meanVar")
    class _MeanVar(Parametrization):
        """
        Moment parametrization of log-normal distribution.

        Parameters
        ----------
        mean : float
            Mean of X itself
        var : float
            Variance of X itself
        """

        mean: float
        var: float

        @constraint(description="mean > 0")
        def check_mean_positive(self) -> bool:
            """Check that mean is positive."""
            return self.mean > 0

        @constraint(description="var > 0")
        def check_var_positive(self) -> bool:
            """Check that variance is positive."""
            return self.var > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            sigma2 = math.log1p(self.var / self.mean**2)
            mu = math.log(self.mean) - sigma2 / 2
            return _LogMeanStd(mu=mu, sigma=math.sqrt(sigma2))

    @parametrization(family=LogNormal, name="scaleShape")
    class _ScaleShape(Parametrization):
        """
        Scale-shape parametrization (as in ``scipy.stats.lognorm``).

        Parameters
        ----------
        scale : float
            Scale, equal to exp(mu) and to the median
        s : float
            Shape, equal to sigma
        """

        scale: float
        s: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            """Check that scale is positive."""
            return self.scale > 0

        @constraint(description="s > 0")
        def check_s_positive(self) -> bool:
            """Check that shape is positive."""
            return self.s > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """Transform to Standard parametrization."""
            return _LogMeanStd(mu=math.log(self.scale), sigma=self.s)

    ParametricFamilyRegister.register(LogNormal)
