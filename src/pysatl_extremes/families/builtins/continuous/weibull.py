"""
Reversed Weibull distribution family implementation.

Contains the Weibull (type III extreme value) family bounded above by its
location, with its standard location-scale-shape parametrization. This is
the extreme-value form for maxima, not the reliability Weibull law.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gamma

from pysatl_extremes.distributions.support import ContinuousSupport
from pysatl_extremes.families.builtins.continuous._common import (
    PROBABILITY_DOMAIN,
    in_unit_interval,
    neg_log,
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


def configure_weibull_family() -> None:
    """
    Configure and register the reversed Weibull distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.WEIBULL):
        return

    WEIBULL_DOC = """
    Reversed Weibull distribution.

    The reversed Weibull (type III extreme value) distribution is the limit
    law of maxima of samples with a finite upper end point. It has a
    location (μ), a scale (σ > 0) and a shape (α > 0) parameter and is
    supported on (-∞, μ).

    Cumulative distribution function:
        F(x) = exp(-(-(x - μ) / σ)^α) for x < μ
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for reversed Weibull distribution.

        Returns
        -------
        NumericArray
            f(x) = (α/σ) (-y)^(α-1) exp(-(-y)^α), y = (x - μ) / σ
        """
        parameters = cast(_Standard, parameters)
        shape = parameters.shape
        y = (np.asarray(x, dtype=np.float64) - parameters.loc) / parameters.scale
        with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
            density = (
                shape / parameters.scale * np.power(-y, shape - 1.0) * np.exp(-np.power(-y, shape))
            )
        # (-y)^(α-1) overflows far below loc, where the density is 0
        return np.where(np.isnan(density) & (y <= 0.0), 0.0, density)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for reversed Weibull distribution.

        Returns
        -------
        NumericArray
            F(x) = exp(-(-y)^α), y = (x - μ) / σ
        """
        parameters = cast(_Standard, parameters)
        y = (np.asarray(x, dtype=np.float64) - parameters.loc) / parameters.scale
        with np.errstate(over="ignore"):
            return np.exp(-np.power(-y, parameters.shape))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Quantile function (inverse CDF) for reversed Weibull distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - loc: float (location, upper end of the support)
            - scale: float (scale)
            - shape: float (shape)
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            μ - σ (-log p)^(1/α):
            - For p = 0: returns -inf
            - For p = 1: returns loc
        """
        parameters = cast(_Standard, parameters)
        p = np.asarray(p, dtype=np.float64)
        return parameters.loc - parameters.scale * np.power(neg_log(p), 1.0 / parameters.shape)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of reversed Weibull distribution, μ - σΓ(1 + 1/α)."""
        parameters = cast(_Standard, parameters)
        return parameters.loc - parameters.scale * float(gamma(1.0 + 1.0 / parameters.shape))

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of reversed Weibull distribution."""
        parameters = cast(_Standard, parameters)
        g1 = float(gamma(1.0 + 1.0 / parameters.shape))
        g2 = float(gamma(1.0 + 2.0 / parameters.shape))
        return parameters.scale**2 * (g2 - g1**2)

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support of reversed Weibull distribution, (-inf, loc)"""
        parameters = cast(_Standard, parameters)
        return ContinuousSupport(right=parameters.loc)

    def _below_loc(parameters: Parametrization, x: NumericArray) -> Any:
        parameters = cast(_Standard, parameters)
        return x < parameters.loc

    Weibull = ParametricFamily(
        name=FamilyName.WEIBULL,
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
            CharacteristicName.PDF: ("x < loc", _below_loc),
            CharacteristicName.CDF: ("x < loc", _below_loc),
            CharacteristicName.PPF: (PROBABILITY_DOMAIN, in_unit_interval),
        },
        support_by_parametrization=_support,
    )
    Weibull.__doc__ = WEIBULL_DOC

    @parametrization(family=Weibull, name="standard")
    class _Standard(Parametrization):
        """
        Location-scale-shape parametrization of reversed Weibull distribution.

        Parameters
        ----------
        loc : float
            Location parameter (μ), upper end of the support
        scale : float
            Scale parameter (σ)
        shape : float
            Shape parameter (α)
        """

        loc: float
        scale: float
        shape: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return self.scale > 0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            """Check that shape parameter is positive."""
            return self.shape > 0

    ParametricFamilyRegister.register(Weibull)
