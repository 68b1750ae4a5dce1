"""
Generalized extreme value distribution family implementation.

Contains the GEV family with two parametrizations:

- ``standard`` — location, scale and shape ξ, where ξ > 0 gives the
  Fréchet-like, ξ < 0 the reversed-Weibull-like and ξ = 0 the Gumbel law;
- ``scipy`` — location, scale and ``c = -ξ``, the sign convention of
  ``scipy.stats.genextreme``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from pathlib import Path
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

NEAR_ZERO_SHAPE = 1e-12
"""Nonzero shapes below this magnitude trigger a precision warning."""

_PACKAGE_DIR = str(Path(__file__).parents[3])
"""Frames under this directory are skipped when attributing warnings."""


def configure_gev_family() -> None:
    """
    Configure and register the generalized extreme value distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GEV):
        return

    GEV_DOC = """
    Generalized extreme value (GEV) distribution.

    The GEV distribution is the only possible non-degenerate limit law of
    normalized maxima. It has a location (μ), a scale (σ > 0) and a shape (ξ)
    parameter and unifies the three extreme-value types:
    ξ = 0 is Gumbel, ξ > 0 is Fréchet-like, ξ < 0 is reversed Weibull-like.

    Cumulative distribution function:
        F(x) = exp(-t(x)) for 1 + ξ(x - μ)/σ > 0, where
        t(x) = (1 + ξ(x - μ)/σ)^(-1/ξ)   if ξ != 0
        t(x) = exp(-(x - μ)/σ)          if ξ = 0

    The ξ = 0 branch is selected by exact comparison.
    """

    def _t(parameters: _Standard, x: NumericArray) -> NumericArray:
        y = (np.asarray(x, dtype=np.float64) - parameters.loc) / parameters.scale
        with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
            if parameters.shape == 0.0:
                return np.exp(-y)
            return np.power(1.0 + parameters.shape * y, -1.0 / parameters.shape)

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for GEV distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - loc: float (location)
            - scale: float (scale)
            - shape: float (shape)
        x : NumericArray
            Points with 1 + shape (x - loc) / scale > 0

        Returns
        -------
        NumericArray
            f(x) = (1/σ) t(x)^(ξ+1) exp(-t(x))
        """
        parameters = cast(_Standard, parameters)
        t = _t(parameters, x)
        with np.errstate(over="ignore", invalid="ignore"):
            density = 1.0 / parameters.scale * np.power(t, parameters.shape + 1.0) * np.exp(-t)
        # t overflows at the lower end of the support, where the density is 0
        return np.where(np.isnan(density) & ~np.isnan(t), 0.0, density)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for GEV distribution.

        Returns
        -------
        NumericArray
            F(x) = exp(-t(x))
        """
        parameters = cast(_Standard, parameters)
        return np.exp(-_t(parameters, x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Quantile function (inverse CDF) for GEV distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - loc: float (location)
            - scale: float (scale)
            - shape: float (shape)
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            μ - σ log(-log p) if ξ = 0, else (σ/ξ)(-log p)^(-ξ) - σ/ξ + μ.
            p = 0 and p = 1 map onto the ends of the support.
        """
        parameters = cast(_Standard, parameters)
        p = np.asarray(p, dtype=np.float64)
        with np.errstate(divide="ignore"):
            if parameters.shape == 0.0:
                return -parameters.scale * np.log(neg_log(p)) + parameters.loc
            ratio = parameters.scale / parameters.shape
            return ratio * np.power(neg_log(p), -parameters.shape) - ratio + parameters.loc

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of GEV distribution, infinite for ξ >= 1."""
        parameters = cast(_Standard, parameters)
        shape = parameters.shape
        if shape == 0.0:
            return parameters.loc + parameters.scale * np.euler_gamma
        if shape >= 1.0:
            return math.inf
        g1 = float(gamma(1.0 - shape))
        return parameters.loc + parameters.scale * (g1 - 1.0) / shape

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of GEV distribution, infinite for ξ >= 1/2."""
        parameters = cast(_Standard, parameters)
        shape = parameters.shape
        if shape == 0.0:
            return math.pi**2 * parameters.scale**2 / 6.0
        if shape >= 0.5:
            return math.inf
        g1 = float(gamma(1.0 - shape))
        g2 = float(gamma(1.0 - 2.0 * shape))
        return parameters.scale**2 * (g2 - g1**2) / shape**2

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support of GEV distribution, depends on the sign of the shape"""
        parameters = cast(_Standard, parameters)
        if parameters.shape > 0.0:
            return ContinuousSupport(left=parameters.loc - parameters.scale / parameters.shape)
        if parameters.shape < 0.0:
            return ContinuousSupport(right=parameters.loc - parameters.scale / parameters.shape)
        return ContinuousSupport()

    def _in_domain(parameters: Parametrization, x: NumericArray) -> Any:
        parameters = cast(_Standard, parameters)
        with np.errstate(invalid="ignore"):
            return 1.0 + parameters.shape * ((x - parameters.loc) / parameters.scale) > 0.0

    def _cdf_in_domain(parameters: Parametrization, x: NumericArray) -> Any:
        # the Gumbel form extends to x = -inf and x = inf
        if cast(_Standard, parameters).shape == 0.0:
            return ~np.isnan(x)
        return _in_domain(parameters, x)

    GEV = ParametricFamily(
        name=FamilyName.GEV,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "scipy"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        argument_domains={
            CharacteristicName.PDF: ("1 + shape * (x - loc) / scale > 0", _in_domain),
            CharacteristicName.CDF: ("1 + shape * (x - loc) / scale > 0", _cdf_in_domain),
            CharacteristicName.PPF: (PROBABILITY_DOMAIN, in_unit_interval),
        },
        support_by_parametrization=_support,
    )
    GEV.__doc__ = GEV_DOC

    @parametrization(family=GEV, name="standard")
    class _Standard(Parametrization):
        """
        Location-scale-shape parametrization of GEV distribution.

        Parameters
        ----------
        loc : float
            Location parameter (μ)
        scale : float
            Scale parameter (σ)
        shape : float
            Shape parameter (ξ), any real number
        """

        loc: float
        scale: float
        shape: float

        def __post_init__(self) -> None:
            # stacklevel 3 steps over the generated __init__, then package frames are skipped
            if self.shape != 0.0 and abs(self.shape) < NEAR_ZERO_SHAPE:
                warnings.warn(
                    f"GEV shape {self.shape} is nonzero but tiny; the general formula loses "
                    "precision here. Pass shape=0.0 to use the Gumbel form.",
                    UserWarning,
                    stacklevel=3,
                    skip_file_prefixes=(_PACKAGE_DIR,),
                )

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return self.scale > 0

    @parametrization(family=GEV, name="scipy")
    class _Scipy(Parametrization):
        """
        SciPy ``genextreme`` parametrization of GEV distribution.

        Parameters
        ----------
        loc : float
            Location parameter (μ)
        scale : float
            Scale parameter (σ)
        c : float
            Shape parameter with SciPy's sign, c = -ξ
        """

        loc: float
        scale: float
        c: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return self.scale > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance with shape = -c
            """
            return _Standard(loc=self.loc, scale=self.scale, shape=-self.c)

    ParametricFamilyRegister.register(GEV)
