"""
Built-in distribution families.

This package contains the parametric families available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_dens.families.builtins.continuous import configure_lognormal_family

__all__ = [
    "configure_lognormal_family",
]
