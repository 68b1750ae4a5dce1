"""
Samples
=======

Containers for values drawn from a distribution. A sample remembers the
seed selector it was drawn with, so seeded samples can be reproduced.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

from pysatl_extremes.seed import Unseeded

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt

    from pysatl_extremes.seed import RandomSeed


class Sample(Protocol):
    """
    Read-only view of drawn values.

    Attributes
    ----------
    array : numpy.ndarray
        Values as an ``(n, d)`` array.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample of a univariate distribution.

    Parameters
    ----------
    data : numpy.ndarray
        2D floating-point array of shape (n, 1).
    seed : RandomSeed, optional
        Seed selector the sample was drawn with.

    Raises
    ------
    ValueError
        If data is not a single-column 2D array.
    """

    data: npt.NDArray[np.float64]
    seed: RandomSeed

    def __init__(self, data: npt.NDArray[np.float64], seed: RandomSeed | None = None) -> None:
        if data.ndim != 2 or data.shape[1] != 1:
            raise ValueError("ArraySample expects 2D array of shape (n, 1).")
        self.data = data
        self.seed = Unseeded() if seed is None else seed

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[float]:
        """Iterate over the sampled values."""
        for value in self.data[:, 0]:
            yield float(value)

    @property
    def array(self) -> npt.NDArray[np.float64]:
        return self.data

    @property
    def values(self) -> npt.NDArray[np.float64]:
        """Return the samples as a flat array of shape (n,)."""
        return self.data[:, 0]

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self.data.shape
        return int(n), int(d)
