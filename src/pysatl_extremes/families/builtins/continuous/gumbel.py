"""
Gumbel distribution family implementation.

Contains the Gumbel (type I extreme value) family with its standard
location-scale parametrization.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_extremes.distributions.support import ContinuousSupport
from pysatl_extremes.families.builtins.continuous._common import (
    PROBABILITY_DOMAIN,
    in_unit_interval,
)
from pysatl_extremes.families.parametric_family import ParametricFamily
from pysatl_extremes.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_extremes.families.registry import ParametricFamilyRegister
from pysatl_extremes.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_gumbel_family() -> None:
    """
    Configure and register the Gumbel distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GUMBEL):
        return

    GUMBEL_DOC = """
    Gumbel distribution.

    The Gumbel (type I extreme value) distribution is the limit law of
    maxima of samples with exponentially decaying tails. It has a location
    (μ) and a scale (σ > 0) parameter and is supported on the whole real line.

    Cumulative distribution function:
        F(x) = exp(-exp(-(x - μ) / σ))
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Gumbel distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - loc: float (location)
            - scale: float (scale)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            f(x) = (1/σ) exp(-y) exp(-exp(-y)), y = (x - μ) / σ
        """
        parameters = cast(_Standard, parameters)
        y = (np.asarray(x, dtype=np.float64) - parameters.loc) / parameters.scale
        with np.errstate(over="ignore", invalid="ignore"):
            density = 1.0 / parameters.scale * np.exp(-y) * np.exp(-np.exp(-y))
        # exp(-y) overflows deep in the left tail, where the density is 0
        return np.where(np.isnan(density) & ~np.isnan(y), 0.0, density)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for Gumbel distribution.

        Returns
        -------
        NumericArray
            F(x) = exp(-exp(-y)), y = (x - μ) / σ
        """
        parameters = cast(_Standard, parameters)
        y = (np.asarray(x, dtype=np.float64) - parameters.loc) / parameters.scale
        with np.errstate(over="ignore"):
            return np.exp(-np.exp(-y))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Quantile function (inverse CDF) for Gumbel distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - loc: float (location)
            - scale: float (scale)
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            μ - σ log(-log p):
            - For p = 0: returns -inf
            - For p = 1: returns inf
        """
        parameters = cast(_Standard, parameters)
        p = np.asarray(p, dtype=np.float64)
        with np.errstate(divide="ignore"):
            return parameters.loc - parameters.scale * np.log(-np.log(p))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Gumbel distribution, μ + σγ."""
        parameters = cast(_Standard, parameters)
        return parameters.loc + parameters.scale * np.euler_gamma

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Gumbel distribution, π²σ²/6."""
        parameters = cast(_Standard, parameters)
        return math.pi**2 * parameters.scale**2 / 6.0

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Gumbel distribution is the real line"""
        return ContinuousSupport()

    Gumbel = ParametricFamily(
        name=FamilyName.GUMBEL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        argument_domains={
            CharacteristicName.PDF: ("-inf < x < inf", lambda _, x: np.isfinite(x)),
            CharacteristicName.CDF: ("x is not NaN", lambda _, x: ~np.isnan(x)),
            CharacteristicName.PPF: (PROBABILITY_DOMAIN, in_unit_interval),
        },
        support_by_parametrization=_support,
    )
    Gumbel.__doc__ = GUMBEL_DOC

    @parametrization(family=Gumbel, name="standard")
    class _Standard(Parametrization):
        """
        Location-scale parametrization of Gumbel distribution.

        Parameters
        ----------
        loc : float
            Location parameter (μ)
        scale : float
            Scale parameter (σ)
        """

        loc: float
        scale: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return self.scale > 0

    ParametricFamilyRegister.register(Gumbel)
