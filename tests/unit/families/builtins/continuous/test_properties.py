"""
Laws shared by all extreme-value families.

Every distribution is checked for the inverse-transform round trip,
monotonicity of its quantile and distribution functions, non-negativity of
the density and reproducibility of seeded draws.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_extremes.families import frechet, gev, gumbel, weibull
from pysatl_extremes.seed import SEED_UPPER_BOUND, Seed, Unseeded

from .base import BaseDistributionTest

DISTRIBUTIONS = {
    "gumbel": lambda: gumbel(loc=0.5, scale=2.0),
    "frechet-heavy": lambda: frechet(loc=1.0, scale=0.1, shape=1.0),
    "frechet": lambda: frechet(loc=0.0, scale=1.0, shape=3.5),
    "weibull": lambda: weibull(loc=2.0, scale=2.0, shape=2.0),
    "weibull-sharp": lambda: weibull(loc=0.0, scale=1.0, shape=0.7),
    "gev-positive": lambda: gev(loc=2.0, scale=2.0, shape=2.0),
    "gev-zero": lambda: gev(loc=2.0, scale=2.0, shape=0.0),
    "gev-negative": lambda: gev(loc=0.0, scale=1.0, shape=-0.4),
}

FINITE_VARIANCE = ["gumbel", "frechet", "weibull", "weibull-sharp", "gev-zero", "gev-negative"]

PROBABILITIES = np.linspace(0.01, 0.99, 99)


@pytest.fixture(params=sorted(DISTRIBUTIONS))
def distribution(request):
    return DISTRIBUTIONS[request.param]()


class TestDistributionLaws(BaseDistributionTest):
    """Properties every extreme-value distribution satisfies."""

    def test_cdf_inverts_quantile(self, distribution):
        x = distribution.quantile(PROBABILITIES)
        self.assert_arrays_almost_equal(distribution.cdf(x), PROBABILITIES, precision=1e-9)

    def test_quantile_is_non_decreasing(self, distribution):
        q = distribution.quantile(np.linspace(0.0, 1.0, 201))
        assert np.all(q[1:] >= q[:-1])

    def test_cdf_is_non_decreasing(self, distribution):
        x = distribution.quantile(PROBABILITIES)
        values = distribution.cdf(x)
        assert np.all(values[1:] >= values[:-1])
        assert np.all((values >= 0.0) & (values <= 1.0))

    def test_pdf_is_non_negative(self, distribution):
        density = distribution.pdf(distribution.quantile(PROBABILITIES))
        assert np.all(density >= 0.0)
        assert np.all(np.isfinite(density))

    def test_quantile_boundaries_are_support_ends(self, distribution):
        support = distribution.support
        assert distribution.quantile(0.0) == support.left
        assert distribution.quantile(1.0) == support.right


class TestSeededSampling(BaseDistributionTest):
    """Seeded draws are reproducible and consistent between random and sample."""

    def test_same_seed_same_value(self, distribution):
        assert distribution.random(Seed(12345)) == distribution.random(Seed(12345))

    @pytest.mark.parametrize("seed", [0, 1, 2**32, SEED_UPPER_BOUND - 1])
    def test_random_is_first_sample_element(self, distribution, seed):
        value = distribution.random(Seed(seed))
        sample = distribution.sample(3, seed=Seed(seed))

        assert sample.array[0, 0] == value
        assert sample.seed == Seed(seed)

    def test_random_is_in_support(self, distribution):
        support = distribution.support
        for seed in range(20):
            value = distribution.random(Seed(seed))
            assert support.left <= value <= support.right

    def test_unseeded_random_returns_float(self, distribution):
        assert isinstance(distribution.random(Unseeded()), float)
        assert isinstance(distribution.random(), float)

    def test_empty_sample(self, distribution):
        sample = distribution.sample(0, seed=Seed(1))
        assert sample.shape == (0, 1)
        assert len(sample) == 0

    @pytest.mark.parametrize("name", FINITE_VARIANCE)
    def test_sample_mean_is_close_to_mean(self, name):
        dist = DISTRIBUTIONS[name]()
        n = 50_000
        values = dist.sample(n, seed=Seed(2024)).values

        tolerance = 5.0 * math.sqrt(dist.var() / n)
        assert float(values.mean()) == pytest.approx(dist.mean(), abs=tolerance)
