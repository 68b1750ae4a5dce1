"""
Strategies
==========

How a distribution turns a characteristic name into a callable, and how
it draws samples:

- :class:`ComputationStrategy` — maps a characteristic name to a method.
- :class:`DefaultComputationStrategy` — resolves analytical characteristics
  and, unless asked not to, guards them with their domain constraints.
- :class:`SamplingStrategy` — produces a sample of a requested size.
- :class:`InverseTransformSamplingStrategy` — draws ``(n, 1)`` samples by
  applying the quantile function to i.i.d. uniform variates.

Notes
-----
- Strategies are stateless; any generator is created per call.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_extremes.distributions.computation import (
    AnalyticalComputation,
    CheckedComputation,
)
from pysatl_extremes.seed import RandomSeed, Unseeded, make_generator
from pysatl_extremes.types import CharacteristicName, GenericCharacteristicName

from .sampling import ArraySample

if TYPE_CHECKING:
    from .distribution import Distribution

type Method[In, Out] = AnalyticalComputation[In, Out] | CheckedComputation[In, Out]


class ComputationStrategy[In, Out](Protocol):
    """Maps characteristic names of a distribution to callables."""

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


class DefaultComputationStrategy[In, Out]:
    """
    Default characteristic resolver.

    Resolution order
    ----------------
    1. Take the analytical implementation the distribution provides.
    2. If domain checking is on and the distribution declares a domain for
       the characteristic, wrap it into a :class:`CheckedComputation`.

    Parameters
    ----------
    check_domain : bool, default True
        Default for the ``check_domain`` option of :meth:`query_method`.

    Raises
    ------
    RuntimeError
        If the distribution has no analytical implementation of the
        requested characteristic.
    """

    def __init__(self, check_domain: bool = True) -> None:
        self.check_domain = check_domain

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Resolve a method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing the analytical implementations.
        **options
            ``check_domain`` (bool) overrides the strategy default. Passing
            ``check_domain=False`` returns the raw analytical callable, which
            does not validate its argument.

        Returns
        -------
        Method
            Analytical callable, possibly domain-checked.
        """
        check_domain = options.get("check_domain", self.check_domain)

        computation = distr.analytical_computations.get(state)
        if computation is None:
            raise RuntimeError(
                f"Distribution provides no analytical computation for '{state}'."
            )

        domain = distr.argument_domains.get(state)
        if not check_domain or domain is None:
            return computation
        return CheckedComputation(computation=computation, domain=domain)


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return an :class:`ArraySample`)."""

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample: ...


class InverseTransformSamplingStrategy(SamplingStrategy):
    """
    Univariate sampler using inverse transform sampling.

    The strategy resolves the distribution's quantile function and applies
    it to i.i.d. uniforms ``U ~ U[0, 1)`` drawn from a generator built for
    this call from the ``seed`` option.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        if n < 0:
            raise ValueError(f"Sample size must be non-negative, got {n}")

        seed: RandomSeed = options.get("seed", Unseeded())
        rng = make_generator(seed)
        U = rng.random(n)

        ppf = distr.query_method(CharacteristicName.PPF, check_domain=False)
        vals = np.asarray(ppf(U), dtype=np.float64).reshape(n, 1)
        return ArraySample(vals, seed=seed)
