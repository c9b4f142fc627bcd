"""
PySATL Dens
===========

Density engines for probability distributions: a reusable kernel pattern
with scalar and elementwise (bulk) evaluation, parameter broadcasting and a
parametric family layer on top.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .config import *
from .config import __all__ as _config_all
from .dens import *
from .dens import __all__ as _dens_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-dens")
__all__ = [
    "__version__",
    *_config_all,
    *_dens_all,
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_types_all,
]

del _config_all
del _dens_all
del _distr_all
del _errors_all
del _family_all
del _types_all
