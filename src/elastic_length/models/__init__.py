"""Core data models for elastic lengths.

This package contains the value types and the resolver configuration.
"""

from elastic_length.models.config import (
    DEFAULT_SLOPE_TOLERANCE,
    DEFAULT_TOLERANCE,
    REFERENCE_SCALING,
    NegativeScalingPolicy,
    ResolverConfig,
    TieBreak,
)
from elastic_length.models.elastic import Y, constant_y, elastic_y
from elastic_length.models.segment import Segment

__all__ = [
    "Segment",
    "Y",
    "constant_y",
    "elastic_y",
    "ResolverConfig",
    "NegativeScalingPolicy",
    "TieBreak",
    "DEFAULT_SLOPE_TOLERANCE",
    "DEFAULT_TOLERANCE",
    "REFERENCE_SCALING",
]
