"""
Tests for Frechet Distribution Family

This module tests the functionality of the Fréchet distribution family,
including parameterization, characteristics, moments and support.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import invweibull

from pysatl_extremes.distributions.support import ContinuousSupport
from pysatl_extremes.errors import DomainViolationError
from pysatl_extremes.families import frechet
from pysatl_extremes.families.configuration import configure_families_register
from pysatl_extremes.types import (
    CharacteristicName,
    ContinuousSupportShape1D,
    FamilyName,
)

from .base import BaseDistributionTest


class TestFrechetFamily(BaseDistributionTest):
    """Test suite for Fréchet distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.frechet_family = registry.get(FamilyName.FRECHET)
        self.frechet_dist_example = self.frechet_family(loc=1.0, scale=2.0, shape=3.0)

    def test_family_properties(self):
        assert self.frechet_family.name == FamilyName.FRECHET
        assert self.frechet_family.parametrization_names == ["standard"]

    def test_standard_parametrization_creation(self):
        dist = self.frechet_dist_example

        assert dist.family_name == FamilyName.FRECHET
        assert dist.parameters.parameters == {"loc": 1.0, "scale": 2.0, "shape": 3.0}
        assert frechet(1.0, 2.0, 3.0) == dist

    @pytest.mark.parametrize(
        "scale, shape, message",
        [
            (0.0, 1.0, "scale > 0"),
            (-2.0, 1.0, "scale > 0"),
            (1.0, 0.0, "shape > 0"),
            (1.0, -0.5, "shape > 0"),
        ],
    )
    def test_parametrization_constraints(self, scale, shape, message):
        with pytest.raises(DomainViolationError, match=message):
            self.frechet_family(loc=0.0, scale=scale, shape=shape)

    def test_non_finite_parameter_is_rejected(self):
        with pytest.raises(DomainViolationError, match="finite"):
            self.frechet_family(loc=math.nan, scale=1.0, shape=1.0)

    def test_reference_values(self):
        dist = frechet(loc=1.0, scale=0.1, shape=1.0)
        self.assert_exact_value(dist.cdf(3.0), 0.951229424500714)
        self.assert_reference_value(dist.pdf(3.0), 0.023780735612517853)
        self.assert_reference_value(dist.quantile(0.7), 1.2803673252057128)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [1.001, 1.5, 2.0, 3.0, 5.0, 20.0, 1e6], invweibull.pdf),
            (CharacteristicName.CDF, [1.001, 1.5, 2.0, 3.0, 5.0, 20.0, 1e6], invweibull.cdf),
            (CharacteristicName.PPF, [0.0, 0.01, 0.1, 0.5, 0.9, 0.99], invweibull.ppf),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, test_data, scipy_func):
        """Test that characteristics support array inputs and agree with SciPy."""
        char_func = self.frechet_dist_example.query_method(char_name)

        input_array = np.array(test_data)
        result_array = char_func(input_array)

        assert result_array.shape == input_array.shape
        expected_array = scipy_func(input_array, 3.0, loc=1.0, scale=2.0)
        self.assert_arrays_almost_equal(result_array, expected_array)

    def test_moments(self):
        dist = self.frechet_dist_example
        assert dist.mean() == pytest.approx(invweibull.mean(3.0, loc=1.0, scale=2.0), rel=1e-10)
        assert dist.var() == pytest.approx(invweibull.var(3.0, loc=1.0, scale=2.0), rel=1e-10)

    @pytest.mark.parametrize(
        "shape, mean_is_finite, var_is_finite",
        [(0.5, False, False), (1.0, False, False), (1.5, True, False), (2.0, True, False)],
    )
    def test_heavy_tail_moments_are_infinite(self, shape, mean_is_finite, var_is_finite):
        dist = self.frechet_family(loc=0.0, scale=1.0, shape=shape)
        assert math.isfinite(dist.mean()) is mean_is_finite
        assert math.isfinite(dist.var()) is var_is_finite
        if not mean_is_finite:
            assert dist.mean() == math.inf

    def test_frechet_support(self):
        support = self.frechet_dist_example.support

        assert isinstance(support, ContinuousSupport)
        assert support.left == 1.0
        assert support.shape == ContinuousSupportShape1D.RAY_RIGHT
        assert support.contains(1.0) is False
        assert support.contains(1.5) is True


class TestFrechetFamilyEdgeCases(BaseDistributionTest):
    """Test edge cases and error conditions for Fréchet distribution."""

    def setup_method(self):
        self.dist = frechet(loc=1.0, scale=2.0, shape=1.0)

    def test_quantile_boundaries(self):
        assert self.dist.quantile(0.0) == 1.0
        assert self.dist.quantile(1.0) == math.inf

    @pytest.mark.parametrize("x", [1.0, 0.0, -5.0])
    def test_arguments_outside_support_are_rejected(self, x):
        with pytest.raises(DomainViolationError, match="x > loc"):
            self.dist.cdf(x)
        with pytest.raises(DomainViolationError, match="x > loc"):
            self.dist.pdf(x)

    def test_invalid_probability_quantile(self):
        with pytest.raises(DomainViolationError, match="0 <= p <= 1"):
            self.dist.quantile(1.5)

    def test_pdf_vanishes_next_to_loc(self):
        assert frechet(loc=0.0, scale=1.0, shape=1.0).pdf(1e-300) == 0.0

    def test_unchecked_cdf_below_loc(self):
        dist = frechet(loc=1.0, scale=2.0, shape=2.5)
        cdf = dist.query_method(CharacteristicName.CDF, check_domain=False)
        assert np.isnan(cdf(0.0))
