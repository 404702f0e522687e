"""Upper envelope of an elastic length's segments."""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from elastic_length.models.config import DEFAULT_SLOPE_TOLERANCE
from elastic_length.models.elastic import Y
from elastic_length.models.segment import Segment


@dataclass(frozen=True)
class EnvelopePiece:
    """
    Stretch of the scaling axis on which a single segment attains the maximum.

    Attributes:
        segment: Segment that is on top within the interval
        start: First scaling factor of the interval
        end: Last scaling factor of the interval (``math.inf`` for the last piece)
    """

    segment: Segment
    start: float
    end: float

    def value_at(self, scaling: float) -> float:
        """Length of the piece's segment at the given scaling."""
        return self.segment.value_at(scaling)

    def is_flat(self, slope_tolerance: float = DEFAULT_SLOPE_TOLERANCE) -> bool:
        """Whether the piece does not change length with scaling."""
        return self.segment.is_constant(slope_tolerance)

    def clamp(self, scaling: float) -> float:
        """Nearest scaling factor inside the piece's interval."""
        return min(max(scaling, self.start), self.end)


@dataclass(frozen=True)
class EnvelopeMinimum:
    """
    Lowest length an envelope reaches on ``[0, inf)``.

    Attributes:
        value: The minimum length
        lower: Smallest scaling factor attaining the minimum
        upper: Largest scaling factor attaining the minimum (may be ``math.inf``)
    """

    value: float
    lower: float
    upper: float


def compute_envelope(y: Y) -> Tuple[EnvelopePiece, ...]:
    """
    Compute the upper envelope of a Y over ``[0, inf)``.

    Args:
        y: Elastic length to analyze

    Returns:
        Pieces ordered by scaling factor. Consecutive pieces touch, the first
        starts at 0, the last ends at infinity, and the elastic component
        strictly increases from piece to piece (convexity).

    Algorithm:
        1. Start with the segment that is longest at s = 0 (steepest on ties)
        2. Among all steeper segments, find the one overtaking the current
           segment first (steepest on ties)
        3. Close the current piece there and continue with that segment
        4. Stop when no steeper segment exists

    Note:
        Dominated segments never show up in the result, so the envelope of a
        Y and of its simplified form are identical.
    """
    segments = y.segments
    current = max(segments, key=lambda seg: (seg.constant, seg.elastic))
    start = 0.0
    pieces: List[EnvelopePiece] = []

    while True:
        next_segment: Optional[Segment] = None
        next_start = math.inf

        for candidate in segments:
            if candidate.elastic <= current.elastic:
                continue
            crossing = (current.constant - candidate.constant) / (
                candidate.elastic - current.elastic
            )
            # The current segment is on top at `start`, so steeper ones cross later
            crossing = max(crossing, start)
            if next_segment is None or (crossing, -candidate.elastic) < (
                next_start,
                -next_segment.elastic,
            ):
                next_segment = candidate
                next_start = crossing

        if next_segment is None:
            pieces.append(EnvelopePiece(segment=current, start=start, end=math.inf))
            return tuple(pieces)

        if next_start > start:
            pieces.append(EnvelopePiece(segment=current, start=start, end=next_start))
        current = next_segment
        start = next_start


def envelope_minimum(pieces: Tuple[EnvelopePiece, ...]) -> Optional[EnvelopeMinimum]:
    """
    Find the minimum of an envelope and the interval attaining it.

    Args:
        pieces: Envelope as returned by compute_envelope

    Returns:
        EnvelopeMinimum, or None if the envelope falls without bound
    """
    if pieces[-1].segment.elastic < 0:
        return None

    # Falling pieces come first, then flat ones, then rising ones
    bottom = next(piece for piece in pieces if piece.segment.elastic >= 0)
    rising = next((piece for piece in pieces if piece.segment.elastic > 0), None)

    return EnvelopeMinimum(
        value=bottom.value_at(bottom.start),
        lower=bottom.start,
        upper=math.inf if rising is None else rising.start,
    )
