"""
Computation Primitives
======================

This module defines the building blocks used to evaluate distribution
characteristics:

- :class:`Computation` — callable for a single characteristic.
- :class:`AnalyticalComputation` — a closed-form callable provided by a
  distribution directly. It performs no argument checks.
- :class:`DomainConstraint` — the admissible argument set of a
  characteristic, e.g. ``0 <= p <= 1`` for the quantile function.
- :class:`CheckedComputation` — an analytical computation guarded by its
  domain constraint.

Notes
-----
- Callables accept scalars as well as arrays; the result has the shape of
  the argument.
- ``**options`` are passed through to the wrapped callable untouched.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import numpy as np
from mypy_extensions import KwArg

from pysatl_extremes.errors import DomainViolationError
from pysatl_extremes.types import BoolArray, GenericCharacteristicName, NumericArray


@runtime_checkable
class Computation[In, Out](Protocol):
    """Anything evaluating the characteristic named by ``target``."""

    @property
    def target(self) -> GenericCharacteristicName: ...
    def __call__(self, data: In, **options: Any) -> Out: ...


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """
    Closed form of a characteristic, evaluated without argument checks.

    Parameters
    ----------
    target : str
        Characteristic it evaluates, e.g. ``"ppf"``.
    func : Callable[[In, KwArg(Any)], Out]
        Closed form already bound to the parameters.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class DomainConstraint:
    """
    Admissible argument set of a characteristic.

    Parameters
    ----------
    description : str
        Human-readable description, e.g. ``"0 <= p <= 1"``.
    check : Callable[[NumericArray], BoolArray]
        Element-wise predicate returning True for admissible arguments.
    """

    description: str
    check: Callable[[NumericArray], BoolArray]

    def validate(self, target: GenericCharacteristicName, data: Any) -> None:
        """
        Check every element of ``data``.

        Raises
        ------
        DomainViolationError
            If at least one element is outside the domain.
        """
        arr = np.asarray(data, dtype=np.float64)
        ok = np.asarray(self.check(arr), dtype=bool)
        if not ok.all():
            bad = arr[~ok] if arr.ndim else arr
            raise DomainViolationError(
                f'Argument of "{target}" must satisfy "{self.description}", '
                f"got {float(np.atleast_1d(bad)[0])}"
            )


@dataclass(frozen=True, slots=True)
class CheckedComputation[In, Out]:
    """
    Analytical computation that validates its argument first.

    Parameters
    ----------
    computation : AnalyticalComputation
        Unchecked analytical computation.
    domain : DomainConstraint
        Domain the argument must belong to.
    """

    computation: AnalyticalComputation[In, Out]
    domain: DomainConstraint

    @property
    def target(self) -> GenericCharacteristicName:
        return self.computation.target

    def __call__(self, data: In, **options: Any) -> Out:
        self.domain.validate(self.target, data)
        return self.computation(data, **options)


__all__ = [
    "Computation",
    "AnalyticalComputation",
    "DomainConstraint",
    "CheckedComputation",
]
