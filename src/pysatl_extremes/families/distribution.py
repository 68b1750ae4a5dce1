"""
Distributions built by parametric families.

A :class:`ParametricFamilyDistribution` is an immutable value holding the
parameters it was created with, the same parameters in the base
parametrization and its support. Closed forms and argument domains are
bound to the base parameters on first use.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_extremes.distributions.distribution import Distribution
from pysatl_extremes.families.registry import ParametricFamilyRegister
from pysatl_extremes.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_extremes.distributions.computation import (
        AnalyticalComputation,
        DomainConstraint,
    )
    from pysatl_extremes.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_extremes.distributions.support import Support
    from pysatl_extremes.families.parametric_family import ParametricFamily
    from pysatl_extremes.families.parametrizations import Parametrization
    from pysatl_extremes.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@dataclass(frozen=True, slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    Member of a parametric family with fixed parameter values.

    Instances with equal parameters compare equal and are safe to share.

    Parameters
    ----------
    family_name : str
        Register key of the family.
    _distribution_type : DistributionType
        Univariate continuous for every extreme-value family.
    parameters : Parametrization
        Parameter values as given by the caller.
    base_parameters : Parametrization
        The same parameters in the family's base parametrization.
    _support : Support or None
        Open support interval, or None if the family declares none.
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization
    base_parameters: Parametrization
    _support: Support | None
    _analytical: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] | None = field(
        default=None, init=False, repr=False, compare=False
    )
    _domains: dict[GenericCharacteristicName, DomainConstraint] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def distribution_type(self) -> DistributionType:
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """Family resolved through the register by :attr:`family_name`."""
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parametrization_name(self) -> str:
        return self.parameters.name

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Closed forms bound to the base parameters, built once per instance."""
        if self._analytical is None:
            computations = self.family.build_analytical_computations(self.base_parameters)
            object.__setattr__(self, "_analytical", computations)
        assert self._analytical is not None
        return self._analytical

    @property
    def argument_domains(self) -> Mapping[GenericCharacteristicName, DomainConstraint]:
        """Domain checks bound to the base parameters, built once per instance."""
        if self._domains is None:
            domains = self.family.build_argument_domains(self.base_parameters)
            object.__setattr__(self, "_domains", domains)
        assert self._domains is not None
        return self._domains

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        return self.family.computation_strategy

    @property
    def support(self) -> Support | None:
        return self._support

    def mean(self) -> float:
        """Mean of the distribution, ``inf`` if it does not exist."""
        return float(self.calculate_characteristic(CharacteristicName.MEAN, None))

    def var(self) -> float:
        """Variance of the distribution, ``inf`` if it does not exist."""
        return float(self.calculate_characteristic(CharacteristicName.VAR, None))
