"""
Support primitives for continuous distributions.

Extreme-value laws live on the whole real line (Gumbel, GEV with zero
shape), on a ray bounded below (Fréchet, GEV with positive shape) or on a
ray bounded above (reversed Weibull, GEV with negative shape). All of these
are open intervals, represented by :class:`ContinuousSupport`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Protocol, overload, runtime_checkable

from pysatl_extremes.types import BoolArray, Interval1D, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support):
    """Interval support of a univariate continuous distribution."""

    @property
    def is_left_bounded(self) -> bool:
        return self.left != float("-inf")

    @property
    def is_right_bounded(self) -> bool:
        return self.right != float("inf")


__all__ = [
    "Support",
    "ContinuousSupport",
]
