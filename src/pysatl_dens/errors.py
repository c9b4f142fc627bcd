"""
Exceptions raised by density engines.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidParameterError(ValueError):
    """
    Distribution parameter outside of its domain.

    Raised only when the invalid-parameter policy is ``"raise"``; under the
    default policy offending elements evaluate to ``NaN`` instead.

    Parameters
    ----------
    family : str
        Name of the density family.
    parameter : str
        Name of the offending parameter.
    requirement : str
        Human-readable description of the parameter domain.
    """

    def __init__(self, family: str, parameter: str, requirement: str) -> None:
        self.family = family
        self.parameter = parameter
        self.requirement = requirement
        super().__init__(
            f"Invalid parameter '{parameter}' for {family} density: expected {requirement}"
        )


class ShapeMismatchError(ValueError):
    """
    Per-element parameter container does not match the input element count.

    Parameters
    ----------
    parameter : str
        Name of the parameter that was supplied per element.
    expected : int
        Element count of the evaluation points.
    actual : int
        Element count of the parameter container.
    """

    def __init__(self, parameter: str, expected: int, actual: int) -> None:
        self.parameter = parameter
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Parameter '{parameter}' has {actual} elements, "
            f"expected a scalar or {expected} elements"
        )


__all__ = [
    "InvalidParameterError",
    "ShapeMismatchError",
]
