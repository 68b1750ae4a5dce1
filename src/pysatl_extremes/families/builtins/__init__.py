"""
Built-in distribution families for PySATL extremes.

This package contains the extreme-value families that are available by
default: Gumbel, Fréchet, reversed Weibull and GEV.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_extremes.families.builtins.continuous import (
    configure_frechet_family,
    configure_gev_family,
    configure_gumbel_family,
    configure_weibull_family,
)

__all__ = [
    "configure_gumbel_family",
    "configure_frechet_family",
    "configure_weibull_family",
    "configure_gev_family",
]
