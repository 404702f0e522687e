"""Resolver configuration model."""

import math
from dataclasses import dataclass
from enum import Enum

# Length equality tolerance (px)
DEFAULT_TOLERANCE = 0.001

# Slopes (px per unit of scaling) within this distance of zero count as flat
DEFAULT_SLOPE_TOLERANCE = 0.001

# Canonical "unscaled" elastic scaling factor
REFERENCE_SCALING = 1.0


class NegativeScalingPolicy(Enum):
    """How resolve treats scaling factors below zero."""

    REJECT = "reject"  # Raise OutOfDomainError
    CLAMP = "clamp"  # Evaluate at s = 0 instead


class TieBreak(Enum):
    """Which scaling factor deresolve returns when several produce the length."""

    LARGEST = "largest"  # Most generous interpretation
    NEAREST_REFERENCE = "nearest_reference"  # Closest to the reference scaling


@dataclass(frozen=True)
class ResolverConfig:
    """Policies used when evaluating and inverting elastic lengths.

    Attributes:
        tolerance: Absolute tolerance for comparing lengths
        slope_tolerance: Largest elastic component still treated as flat
        negative_scaling: Treatment of negative scaling factors in resolve
        tie_break: Choice among several scaling factors matching a length
        reference_scaling: Scaling factor returned when no elastic solution
            exists, and the anchor for nearest-match decisions
    """

    tolerance: float = DEFAULT_TOLERANCE
    slope_tolerance: float = DEFAULT_SLOPE_TOLERANCE
    negative_scaling: NegativeScalingPolicy = NegativeScalingPolicy.REJECT
    tie_break: TieBreak = TieBreak.LARGEST
    reference_scaling: float = REFERENCE_SCALING

    def __post_init__(self) -> None:
        """Validate tolerances and reference scaling."""
        if not self.tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")
        if not self.slope_tolerance > 0:
            raise ValueError(f"slope_tolerance must be positive, got {self.slope_tolerance}")
        if not math.isfinite(self.reference_scaling) or self.reference_scaling < 0:
            raise ValueError(
                f"reference_scaling must be finite and non-negative, got {self.reference_scaling}"
            )
