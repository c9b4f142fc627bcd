"""
Container Capability Interface
==============================

The bulk density engine never touches a concrete matrix or vector type
directly. It talks to a :class:`ContainerAdapter` which offers exactly three
capabilities:

- ``size`` — element count;
- ``flat()`` — the elements as a 1-D array, addressable by linear
  (row-major) index;
- ``like(values)`` — a new container of the original shape and type filled
  with ``values``.

Adapters for :class:`numpy.ndarray` (subclasses such as ``numpy.matrix``
included) and rectangular nested sequences ship by default. Other container
types are plugged in with :func:`register_container_adapter`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from pysatl_dens.types import FloatArray, NumericArray

    type AdapterFactory = Callable[[Any], ContainerAdapter]


@runtime_checkable
class ContainerAdapter(Protocol):
    """Minimal view of a rectangular numeric container."""

    @property
    def size(self) -> int: ...

    def flat(self) -> NumericArray: ...

    def like(self, values: FloatArray) -> Any: ...


class NDArrayAdapter:
    """
    Adapter for NumPy arrays.

    ``like`` returns an array of the same shape; ndarray subclasses are
    preserved through :meth:`numpy.ndarray.view`.
    """

    __slots__ = ("_array", "_cls")

    def __init__(self, array: np.ndarray[Any, Any]) -> None:
        self._cls = type(array)
        self._array = np.asarray(array)

    @property
    def size(self) -> int:
        return int(self._array.size)

    def flat(self) -> NumericArray:
        return self._array.ravel(order="C")

    def like(self, values: FloatArray) -> np.ndarray[Any, Any]:
        out = np.asarray(values).reshape(self._array.shape, order="C")
        if self._cls is not np.ndarray:
            return out.view(self._cls)
        return out


class SequenceAdapter:
    """
    Adapter for rectangular nested lists and tuples.

    The result of ``like`` is a nested list of the same shape.

    Raises
    ------
    ValueError
        If the nested sequence is ragged.
    """

    __slots__ = ("_array",)

    def __init__(self, data: Sequence[Any]) -> None:
        try:
            array = np.asarray(data)
        except ValueError as exc:
            raise ValueError("Nested sequence input must be rectangular") from exc
        if array.dtype == object:
            raise ValueError("Nested sequence input must be rectangular and numeric")
        self._array = array

    @property
    def size(self) -> int:
        return int(self._array.size)

    def flat(self) -> NumericArray:
        return self._array.ravel(order="C")

    def like(self, values: FloatArray) -> list[Any]:
        return np.asarray(values).reshape(self._array.shape, order="C").tolist()


_ADAPTERS: dict[type, AdapterFactory] = {
    np.ndarray: NDArrayAdapter,
    list: SequenceAdapter,
    tuple: SequenceAdapter,
}


def register_container_adapter(container_type: type, factory: AdapterFactory) -> None:
    """
    Register an adapter factory for a container type.

    Parameters
    ----------
    container_type : type
        Container class. Subclasses resolve to the same factory unless they
        are registered themselves.
    factory : Callable[[Any], ContainerAdapter]
        Callable building an adapter around a container instance.

    Raises
    ------
    ValueError
        If an adapter is already registered for exactly this type.
    """
    if container_type in _ADAPTERS:
        raise ValueError(f"Container adapter for {container_type.__name__} already registered")
    _ADAPTERS[container_type] = factory


def unregister_container_adapter(container_type: type) -> None:
    """
    Remove a previously registered adapter.

    Raises
    ------
    KeyError
        If no adapter is registered for ``container_type``.
    """
    del _ADAPTERS[container_type]


def _find_factory(obj: object) -> AdapterFactory | None:
    for klass in type(obj).__mro__:
        factory = _ADAPTERS.get(klass)
        if factory is not None:
            return factory
    return None


def is_container(obj: object) -> bool:
    """
    Check whether ``obj`` is handled by the bulk engine.

    Zero-dimensional arrays count as scalars; ready-made adapters count as
    containers.
    """
    if isinstance(obj, np.ndarray):
        return obj.ndim > 0
    if isinstance(obj, ContainerAdapter):
        return True
    if _find_factory(obj) is not None:
        return True
    return hasattr(obj, "__array__") and np.ndim(obj) > 0


def adapt_container(obj: object) -> ContainerAdapter:
    """
    Wrap ``obj`` in the adapter registered for its type.

    Objects exposing ``__array__`` without a dedicated adapter are treated as
    arrays and produce :class:`numpy.ndarray` results.

    Raises
    ------
    TypeError
        If no adapter applies to ``obj``.
    """
    if isinstance(obj, ContainerAdapter):
        return obj

    factory = _find_factory(obj)
    if factory is not None:
        return factory(obj)

    if hasattr(obj, "__array__"):
        return NDArrayAdapter(np.asarray(obj))

    raise TypeError(f"Unsupported container type: {type(obj).__name__}")


__all__ = [
    "ContainerAdapter",
    "NDArrayAdapter",
    "SequenceAdapter",
    "adapt_container",
    "is_container",
    "register_container_adapter",
    "unregister_container_adapter",
]
