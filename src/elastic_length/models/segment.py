"""Segment model for elastic lengths."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Segment:
    """One affine branch of an elastic length: ``constant + elastic * s``.

    Attributes:
        constant: Length at elastic scaling 0
        elastic: Length gained per unit of elastic scaling (may be negative)
    """

    constant: float
    elastic: float

    def __post_init__(self) -> None:
        """Validate that both components are finite."""
        if not math.isfinite(self.constant):
            raise ValueError(f"constant must be finite, got {self.constant}")
        if not math.isfinite(self.elastic):
            raise ValueError(f"elastic must be finite, got {self.elastic}")

    def value_at(self, scaling: float) -> float:
        """Length of this branch at the given elastic scaling."""
        return self.constant + self.elastic * scaling

    def is_constant(self, tolerance: float = 0.0) -> bool:
        """Whether the branch does not react to elastic scaling."""
        return abs(self.elastic) <= tolerance
