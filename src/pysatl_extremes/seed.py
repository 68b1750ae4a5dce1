"""
Random Seed Selection
=====================

Seed selectors passed per call to random-variate generation:

- :class:`Unseeded` — draw the generator state from OS entropy.
- :class:`Seed` — use a caller-supplied unsigned 64-bit integer.

Every call builds a fresh ``numpy.random.Generator`` backed by ``PCG64``
(seeded through ``numpy.random.SeedSequence``), so two calls with the same
:class:`Seed` and the same distribution parameters produce bit-identical
values.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass

import numpy as np

SEED_UPPER_BOUND = 2**64
"""Exclusive upper bound of explicit seeds (unsigned 64-bit)."""


@dataclass(frozen=True, slots=True)
class Unseeded:
    """Use an entropy-derived seed."""

    def get_seed(self) -> None:
        """Unseeded selectors carry no seed value."""
        return None


@dataclass(frozen=True, slots=True)
class Seed:
    """
    Use an explicit seed.

    Parameters
    ----------
    value : int
        Unsigned 64-bit seed, ``0 <= value < 2**64``.

    Raises
    ------
    ValueError
        If ``value`` is not an integer in the unsigned 64-bit range.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int | np.integer):
            raise ValueError(f"Seed must be an integer, got {type(self.value).__name__}")
        if not 0 <= int(self.value) < SEED_UPPER_BOUND:
            raise ValueError(f"Seed must be in [0, 2**64), got {self.value}")

    def get_seed(self) -> int:
        """Return the seed value."""
        return int(self.value)


type RandomSeed = Unseeded | Seed
"""Seed selector: either :class:`Unseeded` or :class:`Seed`."""


def make_generator(seed: RandomSeed) -> np.random.Generator:
    """
    Build a fresh generator for a single call.

    Parameters
    ----------
    seed : RandomSeed
        Seed selector.

    Returns
    -------
    numpy.random.Generator
        ``PCG64``-backed generator, never shared between calls.

    Raises
    ------
    TypeError
        If ``seed`` is not a seed selector.
    """
    if isinstance(seed, Unseeded):
        return np.random.Generator(np.random.PCG64())
    if isinstance(seed, Seed):
        return np.random.Generator(np.random.PCG64(seed.get_seed()))
    raise TypeError(f"Expected Unseeded or Seed, got {type(seed).__name__}")


__all__ = [
    "SEED_UPPER_BOUND",
    "RandomSeed",
    "Seed",
    "Unseeded",
    "make_generator",
]
