"""
Parametric families of extreme-value distributions.

A :class:`ParametricFamily` ties together the closed forms of a law, the
argument domains they are valid on, its support and the parametrizations
it accepts. Calling a family validates the parameters and returns an
immutable :class:`~pysatl_extremes.families.distribution.ParametricFamilyDistribution`.

All closed forms are written against the base (first declared)
parametrization. Other parametrizations only convert into it.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

from pysatl_extremes.distributions.computation import AnalyticalComputation, DomainConstraint
from pysatl_extremes.distributions.strategies import (
    DefaultComputationStrategy,
    InverseTransformSamplingStrategy,
)
from pysatl_extremes.families.distribution import ParametricFamilyDistribution

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_extremes.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_extremes.distributions.support import Support
    from pysatl_extremes.families.parametrizations import Parametrization
    from pysatl_extremes.types import (
        BoolArray,
        DistributionType,
        GenericCharacteristicName,
        NumericArray,
        ParametrizationName,
    )

    type ClosedForm = Callable[[Parametrization, Any], Any]
    type DomainRule = tuple[str, Callable[[Parametrization, NumericArray], BoolArray]]
    type SupportResolver = Callable[[Parametrization], Support | None]


def _no_support(_: Parametrization) -> None:
    return None


class ParametricFamily:
    """
    Family of distributions sharing closed forms up to their parameters.

    Parameters
    ----------
    name : str
        Register key of the family, e.g. ``FamilyName.GEV``.
    distr_type : DistributionType
        Type of every member of the family.
    distr_parametrizations : list[ParametrizationName]
        Accepted parametrization names. The first one is the base
        parametrization the closed forms are written for.
    distr_characteristics : dict[str, Callable]
        Closed forms ``func(base_parameters, x)`` by characteristic name.
    argument_domains : dict[str, tuple[str, Callable]], optional
        ``(description, check)`` by characteristic name, where
        ``check(base_parameters, x)`` is True for admissible arguments.
        Every key must also be a key of ``distr_characteristics``.
    sampling_strategy : SamplingStrategy, optional
        Defaults to :class:`InverseTransformSamplingStrategy`.
    computation_strategy : ComputationStrategy, optional
        Defaults to a domain-checking :class:`DefaultComputationStrategy`.
    support_by_parametrization : Callable, optional
        Maps base parameters to the support. Members have no support if
        omitted.

    Raises
    ------
    ValueError
        If a domain is given for a characteristic without a closed form.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[GenericCharacteristicName, ClosedForm],
        argument_domains: dict[GenericCharacteristicName, DomainRule] | None = None,
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy[Any, Any] | None = None,
        support_by_parametrization: SupportResolver | None = None,
    ):
        domains = dict(argument_domains or {})
        orphaned = set(domains) - set(distr_characteristics)
        if orphaned:
            raise ValueError(f"Argument domains given for unknown characteristics: {sorted(orphaned)}")

        self._name = name
        self.distribution_type = distr_type
        self.parametrization_names = list(distr_parametrizations)
        self.base_parametrization_name = self.parametrization_names[0]
        self.distr_characteristics = dict(distr_characteristics)
        self.argument_domains: dict[GenericCharacteristicName, DomainRule] = domains

        self.sampling_strategy: SamplingStrategy = (
            sampling_strategy or InverseTransformSamplingStrategy()
        )
        self.computation_strategy: ComputationStrategy[Any, Any] = (
            computation_strategy or DefaultComputationStrategy()
        )
        self._support_resolver: SupportResolver = support_by_parametrization or _no_support

        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Registered parametrization classes by name."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Class of the base parametrization.

        Raises
        ------
        ValueError
            If it has not been registered yet.
        """
        base = self._parametrizations.get(self.base_parametrization_name)
        if base is None:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            )
        return base

    @property
    def support_resolver(self) -> SupportResolver:
        """Function mapping base parameters to the support interval."""
        return self._support_resolver

    def register_parametrization(
        self, name: ParametrizationName, parametrization_class: type[Parametrization]
    ) -> None:
        """
        Accept ``parametrization_class`` as the implementation of ``name``.

        Raises
        ------
        ValueError
            If the family does not declare ``name`` or has it registered already.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family {self.name}.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Express ``parameters`` in the base parametrization, which all closed forms use."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def build_analytical_computations(
        self, base_parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Bind every closed form to ``base_parameters``."""
        return {
            characteristic: AnalyticalComputation(
                target=characteristic, func=partial(func, base_parameters)
            )
            for characteristic, func in self.distr_characteristics.items()
        }

    def build_argument_domains(
        self, base_parameters: Parametrization
    ) -> dict[GenericCharacteristicName, DomainConstraint]:
        """Bind every argument domain rule to ``base_parameters``."""
        return {
            characteristic: DomainConstraint(
                description=description, check=partial(check, base_parameters)
            )
            for characteristic, (description, check) in self.argument_domains.items()
        }

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Build a validated member of the family.

        Parameters
        ----------
        parametrization_name : str, optional
            Parametrization of ``parameters_values``; the base one by default.
        **parameters_values
            Values of the parametrization's fields.

        Returns
        -------
        ParametricFamilyDistribution

        Raises
        ------
        KeyError
            If ``parametrization_name`` is not registered.
        TypeError
            If fields are missing or unknown.
        DomainViolationError
            If a value is not finite or a constraint fails, checked for the
            given parameters and again after conversion to the base form.
        """
        if parametrization_name is None:
            cls = self.base
        else:
            cls = self._parametrizations[parametrization_name]

        parameters = cls(**parameters_values)
        parameters.validate()
        base_parameters = self.to_base(parameters)
        if base_parameters is not parameters:
            base_parameters.validate()

        return ParametricFamilyDistribution(
            family_name=self.name,
            _distribution_type=self.distribution_type,
            parameters=parameters,
            base_parameters=base_parameters,
            _support=self._support_resolver(base_parameters),
        )

    __call__ = distribution

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """Shorthand for ``parametrization(family=self, name=name)``."""
        from pysatl_extremes.families.parametrizations import parametrization

        return parametrization(family=self, name=name)
