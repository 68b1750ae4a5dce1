"""
PySATL Extremes
===============

Extreme-value probability distributions (Gumbel, Fréchet, reversed Weibull
and the generalized extreme value law) with closed-form CDF, PDF, quantile
function and seeded inverse-transform sampling, built on the PySATL
parametric-family framework.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import DomainViolationError
from .families import *
from .families import __all__ as _family_all
from .seed import RandomSeed, Seed, Unseeded, make_generator
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-extremes")
__all__ = [
    "__version__",
    "DomainViolationError",
    "RandomSeed",
    "Seed",
    "Unseeded",
    "make_generator",
    *_distr_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _family_all
del _types_all
