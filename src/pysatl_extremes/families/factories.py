"""
Shortcuts creating validated extreme-value distributions.

Each shortcut configures the families register on first use and builds a
distribution in the family's standard parametrization. Omitted parameters
default to the standard law: loc = 0, scale = 1 and shape = 1, or shape = 0
for GEV, which makes it the standard Gumbel law.

Examples
--------
>>> from pysatl_extremes import gumbel
>>> gumbel(loc=0.5, scale=2.0).cdf(2.0)
0.6235249162568004
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_extremes.families.configuration import configure_families_register
from pysatl_extremes.types import FamilyName

if TYPE_CHECKING:
    from pysatl_extremes.families.distribution import ParametricFamilyDistribution


def _build(family_name: FamilyName, **parameters: float) -> ParametricFamilyDistribution:
    return configure_families_register().get(family_name)(**parameters)


def gumbel(loc: float = 0.0, scale: float = 1.0) -> ParametricFamilyDistribution:
    """Gumbel distribution; raises DomainViolationError unless scale > 0."""
    return _build(FamilyName.GUMBEL, loc=loc, scale=scale)


def frechet(
    loc: float = 0.0, scale: float = 1.0, shape: float = 1.0
) -> ParametricFamilyDistribution:
    """Fréchet distribution; requires scale > 0 and shape > 0."""
    return _build(FamilyName.FRECHET, loc=loc, scale=scale, shape=shape)


def weibull(
    loc: float = 0.0, scale: float = 1.0, shape: float = 1.0
) -> ParametricFamilyDistribution:
    """Reversed Weibull distribution bounded above by loc; requires scale > 0 and shape > 0."""
    return _build(FamilyName.WEIBULL, loc=loc, scale=scale, shape=shape)


def gev(
    loc: float = 0.0, scale: float = 1.0, shape: float = 0.0
) -> ParametricFamilyDistribution:
    """Generalized extreme value distribution; requires scale > 0."""
    return _build(FamilyName.GEV, loc=loc, scale=scale, shape=shape)


__all__ = ["gumbel", "frechet", "weibull", "gev"]
