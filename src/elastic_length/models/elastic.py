"""Elastic length value type and its constructors."""

from dataclasses import dataclass
from typing import Tuple

from elastic_length.models.segment import Segment


@dataclass(frozen=True)
class Y:
    """A vertical length that depends on the elastic scaling factor.

    The length at scaling ``s`` is the maximum over all segments, which makes
    every Y a convex, piecewise linear function of ``s`` on ``[0, inf)``.

    Note:
        Segments that never attain the maximum are allowed and never change
        results. Use ``elastic_length.algebra.simplify`` to drop them.

    Attributes:
        segments: Non-empty tuple of affine branches
    """

    segments: Tuple[Segment, ...]

    def __post_init__(self) -> None:
        """Store segments as a tuple and reject empty collections."""
        object.__setattr__(self, "segments", tuple(self.segments))
        if not self.segments:
            raise ValueError("segments must not be empty")

    @property
    def segment_count(self) -> int:
        """Number of stored segments, including dominated ones."""
        return len(self.segments)


def constant_y(constant: float) -> Y:
    """Lift a fixed length that ignores elastic scaling.

    Examples:
        >>> constant_y(7.0).segments
        (Segment(constant=7.0, elastic=0.0),)
    """
    return Y((Segment(constant=float(constant), elastic=0.0),))


def elastic_y(elastic: float) -> Y:
    """Lift a purely elastic length that is 0 at scaling 0.

    Examples:
        >>> elastic_y(10.0).segments
        (Segment(constant=0.0, elastic=10.0),)
    """
    return Y((Segment(constant=0.0, elastic=float(elastic)),))
