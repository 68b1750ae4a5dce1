"""
Built-in continuous distribution families.

This module contains implementations of the extreme-value parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_extremes.families.builtins.continuous.frechet import configure_frechet_family
from pysatl_extremes.families.builtins.continuous.gev import configure_gev_family
from pysatl_extremes.families.builtins.continuous.gumbel import configure_gumbel_family
from pysatl_extremes.families.builtins.continuous.weibull import configure_weibull_family

__all__ = [
    "configure_gumbel_family",
    "configure_frechet_family",
    "configure_weibull_family",
    "configure_gev_family",
]
