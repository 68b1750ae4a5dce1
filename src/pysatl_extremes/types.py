"""
Shared types
============

Distribution type descriptors, numeric aliases, supports and the names
of characteristics and families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from math import inf
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """Whether a law has a density; every extreme-value law does."""

    CONTINUOUS = "continuous"


class DistributionType:
    """Descriptor of what kind of law a distribution is."""

    __slots__ = ()

    @property
    def features(self) -> Mapping[str, Any]:
        """Field values of the descriptor keyed by field name."""
        fields = getattr(self, "__dataclass_fields__", None) or {}
        return {name: getattr(self, name) for name in fields}


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Type of a law on R^n.

    Parameters
    ----------
    kind : Kind
        Discrete or continuous.
    dimension : int
        n, which is 1 for every extreme-value family.
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type shared by all extreme-value distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""NumPy scalar accepted as a point."""

Number = NumPyNumber | int | float
"""Any scalar accepted as a point."""

NumericArray = NDArray[np.float64]
"""Type alias for float64 arrays the characteristics operate on."""

BoolArray = NDArray[np.bool_]
"""Result of element-wise domain and support checks."""


class ContinuousSupportShape1D(Enum):
    """
    How an interval support is bounded.

    Attributes
    ----------
    REAL_LINE
        Entire real line (-∞, ∞).
    RAY_LEFT
        Ray bounded on the right, (-∞, b).
    RAY_RIGHT
        Ray bounded on the left, (a, ∞).
    BOUNDED_INTERVAL
        Interval (a, b) with both ends finite.
    EMPTY
        Empty support.
    """

    REAL_LINE = auto()
    RAY_LEFT = auto()
    RAY_RIGHT = auto()
    BOUNDED_INTERVAL = auto()
    EMPTY = auto()


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Open interval ``(left, right)`` of the real line.

    Parameters
    ----------
    left : float, default=-inf
        Left end, not included.
    right : float, default=inf
        Right end, not included.

    Notes
    -----
    Extreme-value supports never contain their finite ends, since the
    density formulas are undefined there.
    """

    left: float = -inf
    right: float = inf

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Element-wise membership test.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            ``left < x < right``; NaN is never contained.
        """
        arr = np.asarray(x, dtype=np.float64)
        inside = (self.left < arr) & (arr < self.right)
        if inside.ndim == 0:
            return bool(inside)
        return cast(BoolArray, inside)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def is_empty(self) -> bool:
        return not self.left < self.right

    @property
    def shape(self) -> ContinuousSupportShape1D:
        """Classify the interval by which of its ends are finite."""
        if self.is_empty:
            return ContinuousSupportShape1D.EMPTY
        return _SHAPE_BY_FINITE_ENDS[(self.left > -inf, self.right < inf)]


_SHAPE_BY_FINITE_ENDS = {
    (False, False): ContinuousSupportShape1D.REAL_LINE,
    (True, False): ContinuousSupportShape1D.RAY_RIGHT,
    (False, True): ContinuousSupportShape1D.RAY_LEFT,
    (True, True): ContinuousSupportShape1D.BOUNDED_INTERVAL,
}


type GenericCharacteristicName = str
"""Key of a characteristic, a CharacteristicName value for built-in families."""

type ParametrizationName = str
"""Key of a parametrization within its family, e.g. "standard"."""


class CharacteristicName(StrEnum):
    """
    Enumeration of the characteristics extreme-value families provide.

    ``PPF`` is the quantile function; distributions expose it as
    :meth:`quantile`.
    """

    PDF = "pdf"
    CDF = "cdf"
    PPF = "ppf"
    MEAN = "mean"
    VAR = "var"


class FamilyName(StrEnum):
    GUMBEL = "Gumbel"
    FRECHET = "Frechet"
    WEIBULL = "Weibull"
    GEV = "GEV"


__all__ = [
    "Kind",
    "DistributionType",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "GenericCharacteristicName",
    "ParametrizationName",
    "Interval1D",
    "ContinuousSupportShape1D",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "FamilyName",
]
