"""
Helpers shared by the built-in continuous families.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from pysatl_extremes.families.parametrizations import Parametrization
    from pysatl_extremes.types import BoolArray, NumericArray

PROBABILITY_DOMAIN = "0 <= p <= 1"


def in_unit_interval(_: Parametrization, p: NumericArray) -> BoolArray:
    """Domain of every quantile function."""
    return (p >= 0.0) & (p <= 1.0)


def neg_log(p: NumericArray) -> NumericArray:
    """
    ``-log(p)`` for probabilities, with ``+0.0`` at ``p = 1``.

    Plain negation yields ``-0.0`` at ``p = 1``, which flips the sign of
    infinities produced by negative powers of it.
    """
    with np.errstate(divide="ignore"):
        return 0.0 - np.log(p)
