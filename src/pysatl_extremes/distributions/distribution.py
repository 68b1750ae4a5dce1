"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol, the
capability set every extreme-value distribution satisfies:

- ``cdf(x)`` — cumulative distribution function, values in [0, 1];
- ``pdf(x)`` — probability density function, values >= 0;
- ``quantile(p)`` — inverse CDF for ``p`` in [0, 1];
- ``random(seed)`` — one variate drawn by inverse-transform sampling;
- ``sample(n, seed)`` — ``n`` variates as an :class:`ArraySample`.

Notes
-----
- The default method bodies route through the distribution's computation
  strategy, so arguments are domain-checked. Use
  ``query_method(name, check_domain=False)`` for the unchecked callable.
- Scalar arguments produce Python floats; array arguments produce arrays.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from pysatl_extremes.seed import Unseeded, make_generator
from pysatl_extremes.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_extremes.distributions.computation import (
        AnalyticalComputation,
        DomainConstraint,
    )
    from pysatl_extremes.distributions.sampling import ArraySample
    from pysatl_extremes.distributions.strategies import (
        ComputationStrategy,
        Method,
        SamplingStrategy,
    )
    from pysatl_extremes.distributions.support import Support
    from pysatl_extremes.seed import RandomSeed
    from pysatl_extremes.types import (
        DistributionType,
        GenericCharacteristicName,
        Number,
        NumericArray,
    )


def _as_output(value: Any) -> Any:
    """Unwrap 0-d results into Python floats."""
    if np.ndim(value) == 0:
        return float(value)
    return value


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface shared by all families."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def argument_domains(self) -> Mapping[GenericCharacteristicName, DomainConstraint]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...
    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> Method[Any, Any]:
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return _as_output(self.query_method(characteristic_name, **options)(value))

    def cdf(self, x: Number | NumericArray) -> Any:
        """Cumulative distribution function P(X <= x)."""
        return self.calculate_characteristic(CharacteristicName.CDF, x)

    def pdf(self, x: Number | NumericArray) -> Any:
        """Probability density function."""
        return self.calculate_characteristic(CharacteristicName.PDF, x)

    def quantile(self, p: Number | NumericArray) -> Any:
        """Quantile function (inverse CDF)."""
        return self.calculate_characteristic(CharacteristicName.PPF, p)

    def random(self, seed: RandomSeed = Unseeded()) -> float:
        """
        Draw one variate by inverse-transform sampling.

        Parameters
        ----------
        seed : RandomSeed, default Unseeded()
            Seed selector. A fresh generator is built for this call.

        Returns
        -------
        float
            ``quantile(u)`` for ``u ~ U[0, 1)``.
        """
        u = make_generator(seed).random()
        return float(self.quantile(u))

    def sample(self, n: int, seed: RandomSeed = Unseeded(), **options: Any) -> ArraySample:
        return self.sampling_strategy.sample(n, distr=self, seed=seed, **options)
