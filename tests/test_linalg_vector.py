# -*- coding: utf-8 -*-
"""Tests for vector helpers."""
import numpy as np
from navgeom.linalg.vector import vnorm, vhat, vlcom


class TestVnorm:
    """Test the overflow-safe vector norm."""

    def test_basic(self):
        assert vnorm(np.array([3.0, 4.0, 0.0])) == 5.0

    def test_zero(self):
        assert vnorm(np.zeros(3)) == 0.0

    def test_no_overflow(self):
        """Squaring 1e200 would overflow; the scaled norm does not."""
        result = vnorm(np.array([1e200, 1e200, 0.0]))
        assert np.isfinite(result)
        np.testing.assert_allclose(result, np.sqrt(2.0) * 1e200, rtol=1e-15)

    def test_no_underflow(self):
        result = vnorm(np.array([3e-200, 4e-200, 0.0]))
        np.testing.assert_allclose(result, 5e-200, rtol=1e-15)


class TestVhat:
    """Test unit-vector normalization."""

    def test_unit_length(self):
        np.testing.assert_allclose(vnorm(vhat(np.array([1.0, -2.0, 2.0]))), 1.0)

    def test_zero_stays_zero(self):
        np.testing.assert_array_equal(vhat(np.zeros(3)), np.zeros(3))


class TestVlcom:
    """Test two-term linear combinations."""

    def test_combination(self):
        result = vlcom(2.0, np.array([1.0, 0.0, 0.0]), -1.0, np.array([0.0, 1.0, 3.0]))
        np.testing.assert_array_equal(result, [2.0, -1.0, -3.0])
