"""
Parametrizations of density families.

A parametrization is a frozen dataclass holding one named set of parameter
values (e.g. ``mu``/``sigma`` or ``mean``/``var``) together with the
constraints these values must satisfy. Every parametrization converts to the
family's base parametrization, whose fields are the positional parameters of
the family's density kernel.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from pysatl_dens.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_dens.families.parametric_family import ParametricFamily


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint, e.g. ``"sigma > 0"``.
    check : Callable[[Any], bool]
        Predicate over the parametrization instance.
    """

    description: str
    check: Callable[[Any], bool]

    def holds(self, parameters: Parametrization) -> bool:
        """Evaluate the constraint for ``parameters``."""
        return bool(self.check(parameters))


class Parametrization(ABC):
    """
    Abstract base class for parametrizations.

    Concrete classes are registered with :func:`parametrization`, which also
    turns them into frozen dataclasses.
    """

    # These attributes are set by the @parametrization decorator
    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Get the name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary, in field order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    def validate(self) -> None:
        """
        Validate all constraints for this parametrization.

        Raises
        ------
        ValueError
            If any constraint is not satisfied; the message lists every
            violated constraint.
        """
        failed = [c.description for c in self._constraints if not c.holds(self)]
        if failed:
            raise ValueError(
                "; ".join(f'Constraint "{description}" does not hold' for description in failed)
            )

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Convert this parametrization to the base parametrization.

        Notes
        -----
        Base implementation returns self. Non-base parametrizations override it.
        """
        return self


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def _collect_constraints(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
    """Collect constraint methods from the class and its bases."""
    constraints: list[ParametrizationConstraint] = []
    seen: set[str] = set()
    for klass in cls.__mro__:
        for attr_name, attr in vars(klass).items():
            if attr_name in seen:
                continue
            if isinstance(attr, staticmethod | classmethod):
                if getattr(attr.__func__, "__is_constraint", False):
                    raise TypeError(f"@constraint '{attr_name}' must be an instance method")
                continue
            if not (callable(attr) and isfunction(attr)):
                continue
            seen.add(attr_name)
            if getattr(attr, "__is_constraint", False):
                desc = getattr(attr, "__constraint_description", attr.__name__)
                constraints.append(ParametrizationConstraint(description=desc, check=attr))
    return constraints


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Decorator to register a class as a parametrization for a family.

    Parameters
    ----------
    family : ParametricFamily
        Family to register the parametrization with.
    name : str
        Name of the parametrization.

    Notes
    -----
    Converts the class to a frozen dataclass if it is not one already.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return decorator


__all__ = [
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
]
