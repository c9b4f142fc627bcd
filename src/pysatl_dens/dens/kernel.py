"""
Density Kernels
===============

Generic building block shared by every density family:

- :class:`ParameterSpec` — name, default value and domain of one parameter;
- :class:`DensityKernel` — a family's log-density formula together with its
  parameters and support.

A family only provides the log-density on the interior of its support for
valid parameters. The kernel takes care of the rest, identically for all
families:

1. the floating type of the result (``numpy.result_type`` of the inputs);
2. points outside the support map to ``-inf`` (``0`` in linear form);
3. invalid parameters are handled by the configured policy
   (see :mod:`pysatl_dens.config`);
4. the final ``exp`` when the linear density is requested.

Notes
-----
- The same :meth:`DensityKernel.evaluate` serves zero-dimensional (scalar)
  and one-dimensional (bulk) inputs, so both paths share one formula.
- Evaluation is pure: no state is kept between calls.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import os
import warnings
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

import numpy as np

from pysatl_dens.config import get_invalid_parameter_policy
from pysatl_dens.errors import InvalidParameterError

if TYPE_CHECKING:
    from pysatl_dens.distributions.support import ContinuousSupport
    from pysatl_dens.types import BoolArray, FloatArray

    type LogDensityFormula = Callable[..., FloatArray]

# Warnings point at the first frame outside of the package.
_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def finite(value: FloatArray) -> BoolArray:
    """Domain predicate: finite real value."""
    return cast("BoolArray", np.isfinite(value))


def finite_non_negative(value: FloatArray) -> BoolArray:
    """Domain predicate: finite value ``>= 0``."""
    return cast("BoolArray", np.isfinite(value) & (value >= 0))


@dataclass(frozen=True, slots=True)
class ParameterSpec:
    """
    Description of a single distribution parameter.

    Parameters
    ----------
    name : str
        Parameter name, also its keyword in density functions.
    default : float
        Value used when the caller omits the parameter.
    requirement : str
        Human-readable domain description used in error messages.
    is_valid : Callable[[FloatArray], BoolArray]
        Vectorized domain predicate.
    """

    name: str
    default: float
    requirement: str
    is_valid: Callable[[FloatArray], BoolArray]


@dataclass(frozen=True, slots=True)
class DensityKernel:
    """
    Log-density formula of a family bundled with its parameters and support.

    Parameters
    ----------
    family : str
        Family name used in diagnostics.
    parameters : tuple[ParameterSpec, ...]
        Parameters in positional order.
    log_density : Callable[..., FloatArray]
        ``log_density(x, *params)`` on floating arrays of a common dtype.
        Only has to be correct for ``x`` inside the support and valid
        parameters; it runs with floating point warnings suppressed.
    support : ContinuousSupport
        Points outside the support have zero density.
    """

    family: str
    parameters: tuple[ParameterSpec, ...]
    log_density: LogDensityFormula
    support: ContinuousSupport

    @property
    def parameter_names(self) -> tuple[str, ...]:
        """Parameter names in positional order."""
        return tuple(p.name for p in self.parameters)

    @property
    def defaults(self) -> tuple[float, ...]:
        """Default parameter values in positional order."""
        return tuple(p.default for p in self.parameters)

    def result_dtype(self, x: Any, *params: Any) -> np.dtype[Any]:
        """
        Floating dtype of the result for the given inputs.

        Python scalars do not widen NumPy values, so ``float32`` points give a
        ``float32`` density and integer points give ``float64``.

        Raises
        ------
        TypeError
            If the inputs do not promote to a real floating type.
        """
        dtype = np.result_type(x, *params, 1.0)
        if not np.issubdtype(dtype, np.floating):
            raise TypeError(f"{self.family} density requires real inputs, got dtype {dtype}")
        return dtype

    def _invalid_mask(self, params: tuple[FloatArray, ...]) -> BoolArray | None:
        """
        Mask of elements with invalid parameters, after applying the policy.

        Returns ``None`` if every parameter is valid.

        Raises
        ------
        InvalidParameterError
            If some parameter is invalid and the policy is ``"raise"``.
        """
        mask: BoolArray | None = None
        offending: list[ParameterSpec] = []

        for spec, value in zip(self.parameters, params, strict=True):
            bad = ~spec.is_valid(value)
            if not np.any(bad):
                continue
            offending.append(spec)
            mask = bad if mask is None else mask | bad

        if mask is None:
            return None

        policy = get_invalid_parameter_policy()
        if policy == "raise":
            first = offending[0]
            raise InvalidParameterError(self.family, first.name, first.requirement)
        if policy == "warn":
            warnings.warn(
                f"Invalid {self.family} parameter(s) {', '.join(p.name for p in offending)}; "
                "density evaluates to NaN",
                RuntimeWarning,
                skip_file_prefixes=(_PACKAGE_DIR,),
            )
        return mask

    def evaluate(self, x: Any, *params: Any, log_form: bool = False) -> FloatArray:
        """
        Evaluate the density elementwise.

        Parameters
        ----------
        x : array_like
            Evaluation points; a 0-d value or a 1-D array.
        *params : array_like
            Parameter values, each a scalar or broadcastable against ``x``.
        log_form : bool, default=False
            Return the log-density instead of the density.

        Returns
        -------
        FloatArray
            Density values with the broadcast shape of the inputs.
        """
        if len(params) != len(self.parameters):
            raise TypeError(
                f"{self.family} density takes {len(self.parameters)} parameters "
                f"({', '.join(self.parameter_names)}), got {len(params)}"
            )

        dtype = self.result_dtype(x, *params)
        points = np.asarray(x, dtype=dtype)
        values = tuple(np.asarray(p, dtype=dtype) for p in params)

        with np.errstate(all="ignore"):
            invalid = self._invalid_mask(values)
            out = self.log_density(points, *values)

            outside = ~np.asarray(self.support.contains(points)) & ~np.isnan(points)
            out = np.where(outside, -np.inf, out)
            if invalid is not None:
                out = np.where(invalid, np.nan, out)

            if not log_form:
                out = np.exp(out)

        return np.asarray(out, dtype=dtype)

    def scalar(self, x: Any, *params: Any, log_form: bool = False) -> np.floating[Any]:
        """
        Evaluate the density at a single point with scalar parameters.

        Returns
        -------
        numpy.floating
            Scalar of the promoted floating type.
        """
        return cast("np.floating[Any]", self.evaluate(x, *params, log_form=log_form)[()])


__all__ = [
    "DensityKernel",
    "ParameterSpec",
    "finite",
    "finite_non_negative",
]
