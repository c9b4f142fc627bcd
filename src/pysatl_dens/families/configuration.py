"""
Distribution Families Configuration
====================================

Registers the built-in parametric families:

- :class:`LogNormal Family` — log-normal distribution with ``logMeanStd``,
  ``meanVar`` and ``scaleShape`` parametrizations.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Density characteristics delegate to the density functions of
  :mod:`pysatl_dens.dens`, so scalar and array inputs are both accepted.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_dens.families.builtins import configure_lognormal_family
from pysatl_dens.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all built-in families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_lognormal_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
