"""
Density Functions
=================

:class:`DensityFunction` is the user-facing entry point built on top of a
:class:`~pysatl_dens.dens.kernel.DensityKernel`. It resolves the layered call
forms of a density:

- ``f(x)`` — default parameters, linear density;
- ``f(x, log_form)`` — default parameters, a single positional ``bool``;
- ``f(x, *params)`` — all parameters, linear density;
- ``f(x, *params, log_form)`` — the full form;
- any parameter or ``log_form`` may also be passed by keyword, omitted ones
  take their defaults.

Scalars are evaluated by the kernel directly, containers go through
:func:`~pysatl_dens.dens.broadcast.evaluate_bulk`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_dens.dens.broadcast import evaluate_bulk
from pysatl_dens.dens.containers import is_container

if TYPE_CHECKING:
    from pysatl_dens.dens.kernel import DensityKernel


def _is_flag(value: object) -> bool:
    return isinstance(value, bool | np.bool_)


class DensityFunction:
    """
    Callable density of one family.

    Parameters
    ----------
    kernel : DensityKernel
        Family kernel.
    name : str
        Function name shown in error messages and ``repr``.
    doc : str, optional
        Docstring of the callable.
    """

    def __init__(self, kernel: DensityKernel, name: str, doc: str | None = None) -> None:
        self._kernel = kernel
        self.__name__ = name
        self.__qualname__ = name
        if doc is not None:
            self.__doc__ = doc

    def __repr__(self) -> str:
        return f"<density function {self.__name__} ({self._kernel.family})>"

    @property
    def kernel(self) -> DensityKernel:
        """Underlying kernel."""
        return self._kernel

    def _resolve(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> tuple[tuple[Any, ...], bool]:
        """
        Map a call signature onto ``(params, log_form)``.

        Raises
        ------
        TypeError
            On unknown or duplicated arguments, partial positional parameters
            or boolean parameter values.
        """
        names = self._kernel.parameter_names
        n_params = len(names)

        options = dict(kwargs)
        log_form = options.pop("log_form", None)

        unknown = sorted(set(options) - set(names))
        if unknown:
            raise TypeError(
                f"{self.__name__}() got unexpected keyword argument(s): {', '.join(unknown)}"
            )

        positional = list(args)
        if positional and len(positional) in (1, n_params + 1) and _is_flag(positional[-1]):
            if log_form is not None:
                raise TypeError(f"{self.__name__}() got multiple values for argument 'log_form'")
            log_form = positional.pop()

        if positional and len(positional) != n_params:
            raise TypeError(
                f"{self.__name__}() takes the parameters ({', '.join(names)}) either all "
                f"positionally or by keyword, got {len(positional)} positional value(s)"
            )

        values = dict(zip(names, positional, strict=False))
        for key, value in options.items():
            if key in values:
                raise TypeError(f"{self.__name__}() got multiple values for argument '{key}'")
            values[key] = value

        params = tuple(values.get(spec.name, spec.default) for spec in self._kernel.parameters)
        for name, value in zip(names, params, strict=True):
            if _is_flag(value):
                raise TypeError(f"{self.__name__}() parameter '{name}' must be numeric, got bool")

        return params, bool(log_form) if log_form is not None else False

    def __call__(self, x: Any, *args: Any, **kwargs: Any) -> Any:
        """
        Evaluate the density at a point or at every element of a container.

        Returns
        -------
        numpy.floating or container
            Scalar for scalar ``x``, otherwise a container shaped like ``x``.
        """
        params, log_form = self._resolve(args, kwargs)
        if is_container(x):
            return evaluate_bulk(self._kernel, x, params, log_form)
        return self._scalar(x, params, log_form)

    def scalar(self, x: Any, *args: Any, **kwargs: Any) -> np.floating[Any]:
        """
        Evaluate at a single point.

        Raises
        ------
        TypeError
            If ``x`` or any parameter is a container.
        """
        params, log_form = self._resolve(args, kwargs)
        if is_container(x):
            raise TypeError(f"{self.__name__}.scalar() expects a scalar point, use bulk()")
        return self._scalar(x, params, log_form)

    def bulk(self, x: Any, *args: Any, **kwargs: Any) -> Any:
        """
        Evaluate at every element of a container.

        Raises
        ------
        ShapeMismatchError
            If a per-element parameter does not match the element count of ``x``.
        TypeError
            If ``x`` is not a supported container.
        """
        params, log_form = self._resolve(args, kwargs)
        return evaluate_bulk(self._kernel, x, params, log_form)

    def _scalar(self, x: Any, params: tuple[Any, ...], log_form: bool) -> np.floating[Any]:
        for name, value in zip(self._kernel.parameter_names, params, strict=True):
            if is_container(value):
                raise TypeError(
                    f"{self.__name__}() parameter '{name}' is a container but x is a scalar; "
                    "pass x as a container for per-element parameters"
                )
        return self._kernel.scalar(x, *params, log_form=log_form)


__all__ = [
    "DensityFunction",
]
