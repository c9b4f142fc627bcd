"""
Log-normal density.

If ``ln X ~ N(mu, sigma^2)`` then ``X`` is log-normal with density

    f(x) = 1 / (x σ √(2π)) * exp(-(ln x - μ)² / (2σ²)),    x > 0.

The density is evaluated in log space,

    ln f(x) = -ln x - ln σ - ½ ln(2π) - (ln x - μ)² / (2σ²),

and exponentiated only when the linear form is requested.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_dens.dens.function import DensityFunction
from pysatl_dens.dens.kernel import DensityKernel, ParameterSpec, finite, finite_non_negative
from pysatl_dens.distributions.support import POSITIVE_REALS
from pysatl_dens.types import FamilyName

if TYPE_CHECKING:
    from pysatl_dens.types import FloatArray

HALF_LOG_2PI = 0.5 * math.log(2.0 * math.pi)


def lognormal_log_density(x: FloatArray, mu: FloatArray, sigma: FloatArray) -> FloatArray:
    """
    Log-density of the log-normal distribution for ``x > 0``.

    ``sigma == 0`` is the point mass at ``exp(mu)``: the log-density is
    ``+inf`` where ``ln(x) == mu``, ``-inf`` elsewhere and ``NaN`` for ``NaN`` points.
    """
    log_x = np.log(x)
    z = (log_x - mu) / sigma
    out = -log_x - np.log(sigma) - HALF_LOG_2PI - 0.5 * z * z

    point_mass = np.where(np.isnan(log_x), np.nan, np.where(log_x == mu, np.inf, -np.inf))
    return cast("FloatArray", np.where(sigma == 0, point_mass, out))


LOGNORMAL_KERNEL = DensityKernel(
    family=FamilyName.LOGNORMAL,
    parameters=(
        ParameterSpec(name="mu", default=0.0, requirement="a finite real", is_valid=finite),
        ParameterSpec(
            name="sigma",
            default=1.0,
            requirement="a finite real >= 0",
            is_valid=finite_non_negative,
        ),
    ),
    log_density=lognormal_log_density,
    support=POSITIVE_REALS,
)
"""Log-normal kernel with parameters ``mu`` (default 0) and ``sigma`` (default 1)."""


dlnorm = DensityFunction(
    LOGNORMAL_KERNEL,
    name="dlnorm",
    doc="""
    Density of the log-normal distribution.

    Call forms
    ----------
    ``dlnorm(x)``, ``dlnorm(x, log_form)``, ``dlnorm(x, mu, sigma)``,
    ``dlnorm(x, mu, sigma, log_form)``; ``mu``, ``sigma`` and ``log_form`` are
    also accepted as keywords.

    Parameters
    ----------
    x : float or array_like
        Evaluation point(s). Containers give a container of the same shape.
    mu : float or array_like, default=0.0
        Mean of ``ln X``; a scalar or one value per element of ``x``.
    sigma : float or array_like, default=1.0
        Standard deviation of ``ln X``; a scalar or one value per element of ``x``.
    log_form : bool, default=False
        Return the log-density.

    Returns
    -------
    numpy.floating or container
        ``0`` (``-inf`` in log form) for ``x <= 0`` and ``x == inf``;
        ``NaN`` for invalid parameters under the default policy.

    Examples
    --------
    >>> float(dlnorm(1.0))
    0.3989422804014327
    >>> dlnorm([1.0, 2.0], 0.0, 1.0, True)  # doctest: +SKIP
    [-0.9189385332046727, -1.8523122089929734]
    """,
)


__all__ = [
    "HALF_LOG_2PI",
    "LOGNORMAL_KERNEL",
    "dlnorm",
    "lognormal_log_density",
]
