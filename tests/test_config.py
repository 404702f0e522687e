"""Tests for ResolverConfig."""

import pytest

from elastic_length.models import (
    DEFAULT_SLOPE_TOLERANCE,
    DEFAULT_TOLERANCE,
    REFERENCE_SCALING,
    NegativeScalingPolicy,
    ResolverConfig,
    TieBreak,
)


class TestResolverConfig:
    """Tests for the ResolverConfig model."""

    def test_defaults(self):
        """Test the default policies."""
        config = ResolverConfig()
        assert config.tolerance == DEFAULT_TOLERANCE == 0.001
        assert config.slope_tolerance == DEFAULT_SLOPE_TOLERANCE == 0.001
        assert config.negative_scaling == NegativeScalingPolicy.REJECT
        assert config.tie_break == TieBreak.LARGEST
        assert config.reference_scaling == REFERENCE_SCALING == 1.0

    def test_zero_tolerance_raises_error(self):
        """Test that zero tolerance raises ValueError."""
        with pytest.raises(ValueError, match="tolerance must be positive"):
            ResolverConfig(tolerance=0.0)

    def test_negative_tolerance_raises_error(self):
        """Test that negative tolerance raises ValueError."""
        with pytest.raises(ValueError, match="tolerance must be positive"):
            ResolverConfig(tolerance=-0.1)

    def test_zero_slope_tolerance_raises_error(self):
        """Test that zero slope tolerance raises ValueError."""
        with pytest.raises(ValueError, match="slope_tolerance must be positive"):
            ResolverConfig(slope_tolerance=0.0)

    def test_negative_reference_scaling_raises_error(self):
        """Test that a negative reference scaling raises ValueError."""
        with pytest.raises(ValueError, match="reference_scaling must be finite and non-negative"):
            ResolverConfig(reference_scaling=-1.0)

    def test_infinite_reference_scaling_raises_error(self):
        """Test that an infinite reference scaling raises ValueError."""
        with pytest.raises(ValueError, match="reference_scaling must be finite and non-negative"):
            ResolverConfig(reference_scaling=float("inf"))

    def test_config_immutability(self):
        """Test that ResolverConfig is immutable (frozen dataclass)."""
        config = ResolverConfig()
        with pytest.raises(Exception):  # FrozenInstanceError
            config.tolerance = 0.1
