"""
Registration of the built-in families.

The families are registered in this order:

- Gumbel, the light-tailed law on the whole real line;
- Fréchet, the heavy-tailed law bounded below;
- reversed Weibull, bounded above;
- GEV, which contains the other three as special cases.

Registration runs once per process. Tests clear it with
:func:`reset_families_register`.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_extremes.families.builtins import (
    configure_frechet_family,
    configure_gev_family,
    configure_gumbel_family,
    configure_weibull_family,
)
from pysatl_extremes.families.registry import ParametricFamilyRegister

_BUILTIN_FAMILIES = (
    configure_gumbel_family,
    configure_frechet_family,
    configure_weibull_family,
    configure_gev_family,
)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Register every built-in family, once.

    Returns
    -------
    ParametricFamilyRegister
        The process-wide register.
    """
    for configure in _BUILTIN_FAMILIES:
        configure()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """Forget the registered families; the next configuration starts afresh."""
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
