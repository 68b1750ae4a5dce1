"""
Parametrizations of extreme-value families.

A parametrization is a frozen dataclass of float parameters registered with
its family under a name, e.g. the ``standard`` ``(loc, scale, shape)`` form
of the GEV family or its ``scipy`` ``(loc, scale, c)`` form. Methods marked
with :func:`constraint` are collected at registration and checked by
:meth:`Parametrization.validate`.

Examples
--------
>>> @parametrization(family=Gumbel, name="standard")  # doctest: +SKIP
... class Standard(Parametrization):
...     loc: float
...     scale: float
...
...     @constraint(description="scale > 0")
...     def check_scale_positive(self) -> bool:
...         return self.scale > 0
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from inspect import isfunction
from typing import TYPE_CHECKING

from pysatl_extremes.errors import DomainViolationError
from pysatl_extremes.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_extremes.families.parametric_family import ParametricFamily

_CONSTRAINT_MARK = "__constraint__"


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Named predicate over the parameters of a parametrization.

    Parameters
    ----------
    description : str
        Condition as shown in error messages, e.g. ``"scale > 0"``.
    check : Callable[[Any], bool]
        Predicate called with the parametrization instance.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Base class of family parametrizations.

    Subclasses declare float fields and are turned into frozen dataclasses
    by :func:`parametrization`, so distributions built from them are
    immutable values.
    """

    # Set by the @parametrization decorator
    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Name the parametrization is registered under."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values keyed by field name, in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        return self._constraints

    def validate(self) -> None:
        """
        Check that every parameter is finite and every constraint holds.

        Raises
        ------
        DomainViolationError
            On the first non-finite parameter or failed constraint.
        """
        for param, value in self.parameters.items():
            if not math.isfinite(value):
                raise DomainViolationError(f'Parameter "{param}" must be finite, got {value}')
        for rule in self._constraints:
            if not rule.check(self):
                raise DomainViolationError(f'Constraint "{rule.description}" does not hold')

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Express these parameters in the family's base parametrization.

        The base parametrization itself returns ``self``; alternative
        parametrizations override this.
        """
        return self


def constraint[F: Callable[..., bool]](description: str) -> Callable[[F], F]:
    """
    Mark an instance method of a parametrization as a constraint.

    Parameters
    ----------
    description : str
        Condition as shown in error messages.

    Returns
    -------
    Callable[[F], F]
        Decorator returning the method itself, tagged with ``description``.
    """

    def mark(func: F) -> F:
        setattr(func, _CONSTRAINT_MARK, description)
        return func

    return mark


def _constraints_of(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
    found: list[ParametrizationConstraint] = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, staticmethod | classmethod):
            if hasattr(attr.__func__, _CONSTRAINT_MARK):
                raise TypeError(f"@constraint '{attr_name}' must be an instance method")
        elif isfunction(attr) and hasattr(attr, _CONSTRAINT_MARK):
            found.append(
                ParametrizationConstraint(description=getattr(attr, _CONSTRAINT_MARK), check=attr)
            )
    return found


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Class decorator registering a parametrization with ``family``.

    Parameters
    ----------
    family : ParametricFamily
        Family that declares ``name``.
    name : str
        Name of the parametrization.

    Returns
    -------
    Callable[[type[Parametrization]], type[Parametrization]]
        Decorator returning the (dataclass) parametrization class.

    Raises
    ------
    TypeError
        If a static or class method is marked with :func:`constraint`.
    ValueError
        If the family does not declare ``name`` or has it registered already.
    """

    def register(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _constraints_of(cls)

        family.register_parametrization(name, cls)
        return cls

    return register
