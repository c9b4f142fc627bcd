"""
Density engines
===============

- generic kernel and parameter descriptions (:mod:`.kernel`);
- scalar/bulk dispatching density functions (:mod:`.function`);
- elementwise bulk evaluation with parameter broadcasting (:mod:`.broadcast`);
- container capability interface (:mod:`.containers`);
- the log-normal family (:mod:`.lognormal`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .broadcast import broadcast_parameter, evaluate_bulk
from .containers import (
    ContainerAdapter,
    NDArrayAdapter,
    SequenceAdapter,
    adapt_container,
    is_container,
    register_container_adapter,
    unregister_container_adapter,
)
from .function import DensityFunction
from .kernel import DensityKernel, ParameterSpec
from .lognormal import LOGNORMAL_KERNEL, dlnorm, lognormal_log_density

__all__ = [
    # kernel
    "DensityKernel",
    "ParameterSpec",
    # functions
    "DensityFunction",
    # bulk
    "broadcast_parameter",
    "evaluate_bulk",
    # containers
    "ContainerAdapter",
    "NDArrayAdapter",
    "SequenceAdapter",
    "adapt_container",
    "is_container",
    "register_container_adapter",
    "unregister_container_adapter",
    # families
    "LOGNORMAL_KERNEL",
    "dlnorm",
    "lognormal_log_density",
]
