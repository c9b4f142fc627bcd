"""
Bulk Density Evaluation
=======================

Elementwise application of a :class:`~pysatl_dens.dens.kernel.DensityKernel`
over a container of points.

Each parameter is either a scalar shared by all points or a container with
exactly one value per point, matched by row-major linear index. The output
has the shape (and, where the adapter allows it, the type) of the input.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

from pysatl_dens.dens.containers import adapt_container, is_container
from pysatl_dens.errors import ShapeMismatchError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pysatl_dens.dens.kernel import DensityKernel
    from pysatl_dens.types import NumericArray


def broadcast_parameter(name: str, value: Any, size: int) -> Any:
    """
    Prepare a parameter for evaluation against ``size`` flattened points.

    Parameters
    ----------
    name : str
        Parameter name (for error messages).
    value : Any
        Scalar or container of per-element values.
    size : int
        Element count of the evaluation points.

    Returns
    -------
    Any
        ``value`` unchanged if it is a scalar, otherwise its elements as a
        1-D array in row-major order.

    Raises
    ------
    ShapeMismatchError
        If a container does not hold exactly ``size`` elements.
    """
    if not is_container(value):
        return value

    flat: NumericArray = adapt_container(value).flat()
    if flat.size != size:
        raise ShapeMismatchError(name, size, int(flat.size))
    return flat


def evaluate_bulk(
    kernel: DensityKernel,
    points: Any,
    params: Sequence[Any],
    log_form: bool = False,
) -> Any:
    """
    Evaluate ``kernel`` at every element of ``points``.

    Parameters
    ----------
    kernel : DensityKernel
        Density family to evaluate.
    points : Any
        Container of evaluation points (see
        :func:`~pysatl_dens.dens.containers.adapt_container`).
    params : Sequence[Any]
        Parameter values in the kernel's positional order; each a scalar or a
        container with one value per point.
    log_form : bool, default=False
        Return log-densities.

    Returns
    -------
    Any
        Container of the same shape as ``points``.

    Raises
    ------
    ShapeMismatchError
        If a per-element parameter does not match the number of points.
    TypeError
        If ``points`` is not a supported container.
    """
    adapter = adapt_container(points)
    flat_points = adapter.flat()

    flat_params = [
        broadcast_parameter(spec.name, value, adapter.size)
        for spec, value in zip(kernel.parameters, params, strict=True)
    ]

    values = kernel.evaluate(flat_points, *flat_params, log_form=log_form)
    return adapter.like(values)


__all__ = [
    "broadcast_parameter",
    "evaluate_bulk",
]
