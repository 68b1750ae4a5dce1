"""
Tests for Gumbel Distribution Family

This module tests the functionality of the Gumbel distribution family,
including parameterization, characteristics, support and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import gumbel_r

from pysatl_extremes.distributions.support import ContinuousSupport
from pysatl_extremes.errors import DomainViolationError
from pysatl_extremes.families import gumbel
from pysatl_extremes.families.configuration import configure_families_register
from pysatl_extremes.seed import Seed
from pysatl_extremes.types import (
    CharacteristicName,
    ContinuousSupportShape1D,
    FamilyName,
    UnivariateContinuous,
)

from .base import BaseDistributionTest


class TestGumbelFamily(BaseDistributionTest):
    """Test suite for Gumbel distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.gumbel_family = registry.get(FamilyName.GUMBEL)
        self.gumbel_dist_example = self.gumbel_family(loc=0.5, scale=2.0)

    def test_family_properties(self):
        """Test basic properties of Gumbel family."""
        assert self.gumbel_family.name == FamilyName.GUMBEL
        assert self.gumbel_family.parametrization_names == ["standard"]
        assert self.gumbel_family.base_parametrization_name == "standard"

    def test_standard_parametrization_creation(self):
        dist = self.gumbel_dist_example

        assert dist.family_name == FamilyName.GUMBEL
        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters.parameters == {"loc": 0.5, "scale": 2.0}
        assert dist.parametrization_name == "standard"

    def test_shortcut_matches_family(self):
        assert gumbel(loc=0.5, scale=2.0) == self.gumbel_dist_example
        assert gumbel() == self.gumbel_family(loc=0.0, scale=1.0)

    @pytest.mark.parametrize("scale", [0.0, -1.0])
    def test_parametrization_constraints(self, scale):
        with pytest.raises(DomainViolationError, match="scale > 0"):
            self.gumbel_family(loc=0.0, scale=scale)

    def test_reference_values(self):
        dist = self.gumbel_dist_example
        self.assert_exact_value(dist.cdf(2.0), 0.6235249162568004)
        self.assert_exact_value(dist.pdf(2.0), 0.14726615762017733)
        self.assert_exact_value(dist.quantile(0.7), 2.5618608663174456)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-10.0, -1.0, 0.0, 0.5, 2.0, 10.0, 40.0], gumbel_r.pdf),
            (CharacteristicName.CDF, [-10.0, -1.0, 0.0, 0.5, 2.0, 10.0, 40.0], gumbel_r.cdf),
            (
                CharacteristicName.PPF,
                [0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99, 0.999],
                gumbel_r.ppf,
            ),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, test_data, scipy_func):
        """Test that characteristics support array inputs and agree with SciPy."""
        char_func = self.gumbel_dist_example.query_method(char_name)

        input_array = np.array(test_data)
        result_array = char_func(input_array)

        assert result_array.shape == input_array.shape
        expected_array = scipy_func(input_array, loc=0.5, scale=2.0)
        self.assert_arrays_almost_equal(result_array, expected_array)

    def test_moments(self):
        dist = self.gumbel_dist_example
        assert dist.mean() == pytest.approx(gumbel_r.mean(loc=0.5, scale=2.0), rel=1e-12)
        assert dist.var() == pytest.approx(gumbel_r.var(loc=0.5, scale=2.0), rel=1e-12)
        assert dist.var() == pytest.approx(math.pi**2 * 4.0 / 6.0)

    def test_gumbel_support(self):
        support = self.gumbel_dist_example.support

        assert isinstance(support, ContinuousSupport)
        assert support.shape == ContinuousSupportShape1D.REAL_LINE
        assert not support.is_left_bounded
        assert not support.is_right_bounded
        assert support.contains(-1e300) is True

    def test_seeded_random_is_reproducible(self):
        dist = self.gumbel_dist_example
        assert dist.random(Seed(42)) == dist.random(Seed(42))
        assert dist.random(Seed(42)) != dist.random(Seed(43))

    def test_sample_mean(self):
        sample = self.gumbel_family(loc=0.0, scale=1.0).sample(20_000, seed=Seed(0))
        assert sample.shape == (20_000, 1)
        assert float(sample.array.mean()) == pytest.approx(np.euler_gamma, abs=0.05)


class TestGumbelFamilyEdgeCases(BaseDistributionTest):
    """Test edge cases and error conditions for Gumbel distribution."""

    def setup_method(self):
        registry = configure_families_register()
        self.gumbel_family = registry.get(FamilyName.GUMBEL)

    def test_quantile_boundaries(self):
        dist = self.gumbel_family(loc=1.0, scale=3.0)
        assert dist.quantile(0.0) == -math.inf
        assert dist.quantile(1.0) == math.inf

    def test_invalid_probability_quantile(self):
        dist = self.gumbel_family(loc=0.0, scale=1.0)
        with pytest.raises(DomainViolationError, match="0 <= p <= 1"):
            dist.quantile(-0.1)
        with pytest.raises(DomainViolationError):
            dist.quantile(np.array([0.5, 1.1]))

    def test_cdf_accepts_infinities(self):
        dist = self.gumbel_family(loc=0.0, scale=1.0)
        assert dist.cdf(-math.inf) == 0.0
        assert dist.cdf(math.inf) == 1.0
        with pytest.raises(DomainViolationError, match="NaN"):
            dist.cdf(math.nan)

    def test_pdf_far_left_tail_is_zero(self):
        dist = self.gumbel_family(loc=0.0, scale=1.0)
        assert dist.pdf(-2000.0) == 0.0
        with pytest.raises(DomainViolationError):
            dist.pdf(-math.inf)

    def test_unchecked_quantile(self):
        dist = self.gumbel_family(loc=0.0, scale=1.0)
        ppf = dist.query_method(CharacteristicName.PPF, check_domain=False)
        assert np.isnan(ppf(1.5))
