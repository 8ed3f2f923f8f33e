"""Tests for performance metrics providers."""

import random

import pytest

from seo_audit.performance import PerformanceMetricsProvider, SyntheticPerformanceMetrics


class TestSyntheticPerformanceMetrics:
    """Test cases for SyntheticPerformanceMetrics."""

    def test_values_within_ranges(self):
        """Test that generated values stay in their documented ranges."""
        provider = SyntheticPerformanceMetrics(random.Random(1234))

        for _ in range(200):
            metrics = provider.measure("https://example.com/")
            assert 500 <= metrics.fcp_ms < 1500
            assert 1000 <= metrics.lcp_ms < 3000
            assert 0 <= metrics.cls <= 0.2
            assert metrics.cls == round(metrics.cls, 2)
            assert metrics.synthetic is True

    def test_seeded_rng_is_reproducible(self):
        """Test that equal seeds give equal metrics."""
        first = SyntheticPerformanceMetrics(random.Random(7)).measure("https://example.com/")
        second = SyntheticPerformanceMetrics(random.Random(7)).measure("https://example.com/")

        assert first == second

    def test_provider_is_abstract(self):
        """Test that the base provider cannot be instantiated."""
        with pytest.raises(TypeError):
            PerformanceMetricsProvider()
