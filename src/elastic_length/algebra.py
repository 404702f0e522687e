"""Operators combining elastic lengths.

Every operator returns a new Y; inputs are never modified. None of them
prunes dominated segments implicitly, call simplify() between composition
stages when segment counts grow large.

Example:
    >>> from elastic_length.models import constant_y, elastic_y
    >>> gap = max_y(constant_y(10.0), elastic_y(25.0))
    >>> block = add(gap, constant_y(4.0))
    >>> block.segment_count
    2
"""

import logging
import math

from elastic_length.envelope import compute_envelope
from elastic_length.errors import DivideByZeroError, NonConvexResultError, OutOfDomainError
from elastic_length.models.config import DEFAULT_SLOPE_TOLERANCE, DEFAULT_TOLERANCE
from elastic_length.models.elastic import Y
from elastic_length.models.segment import Segment

logger = logging.getLogger(__name__)


def add(a: Y, b: Y) -> Y:
    """
    Pointwise sum of two elastic lengths.

    Uses ``max_i f_i + max_j g_j = max_ij (f_i + g_j)``, so the result holds
    one segment per pair of input segments.

    Args:
        a: First summand
        b: Second summand

    Returns:
        Y with ``a.segment_count * b.segment_count`` segments
    """
    return Y(
        tuple(
            Segment(
                constant=seg_a.constant + seg_b.constant,
                elastic=seg_a.elastic + seg_b.elastic,
            )
            for seg_a in a.segments
            for seg_b in b.segments
        )
    )


def scale(a: Y, factor: float) -> Y:
    """
    Multiply a length uniformly, both its fixed and its elastic part.

    Args:
        a: Length to scale
        factor: Finite multiplier

    Returns:
        Scaled Y

    Raises:
        ValueError: If factor is not finite
        NonConvexResultError: If factor is negative and ``a`` is not a single
            line on ``[0, inf)``. Negating a maximum gives a minimum.
    """
    if not math.isfinite(factor):
        raise ValueError(f"factor must be finite, got {factor}")

    segments = a.segments
    if factor < 0:
        envelope = compute_envelope(a)
        if len(envelope) > 1:
            raise NonConvexResultError(
                f"cannot scale a Y with {len(envelope)} envelope pieces by negative "
                f"factor {factor}"
            )
        segments = (envelope[0].segment,)

    return Y(
        tuple(
            Segment(constant=seg.constant * factor, elastic=seg.elastic * factor)
            for seg in segments
        )
    )


def divide(a: Y, divisor: float) -> Y:
    """
    Divide a length uniformly, the inverse of scale().

    Raises:
        DivideByZeroError: If divisor is zero
    """
    if divisor == 0:
        raise DivideByZeroError("cannot divide an elastic length by zero")
    return scale(a, 1.0 / divisor)


def scale_elastic(a: Y, factor: float) -> Y:
    """
    Rescale only the elastic part of a length.

    The fixed part is untouched, so the length at scaling 0 stays the same.
    A factor below 1 makes a gap less stretchy, 0 freezes it at its minimum.

    Args:
        a: Length to rescale
        factor: Non-negative multiplier for every elastic component

    Raises:
        OutOfDomainError: If factor is negative
        ValueError: If factor is not finite
    """
    if factor < 0:
        raise OutOfDomainError(f"elastic factor must be non-negative, got {factor}")
    if not math.isfinite(factor):
        raise ValueError(f"factor must be finite, got {factor}")

    return Y(
        tuple(Segment(constant=seg.constant, elastic=seg.elastic * factor) for seg in a.segments)
    )


def max_y(a: Y, b: Y) -> Y:
    """Pointwise maximum of two lengths: the union of their segments."""
    return Y(a.segments + b.segments)


def subtract(a: Y, b: Y) -> Y:
    """
    Pointwise difference ``a - b``.

    Raises:
        NonConvexResultError: If ``b`` is not a single line on ``[0, inf)``
    """
    return add(a, scale(b, -1.0))


def simplify(a: Y) -> Y:
    """
    Drop every segment that never attains the maximum on ``[0, inf)``.

    The result resolves and deresolves exactly like the input. Its segments
    are ordered by the scaling interval on which they are on top.
    """
    envelope = compute_envelope(a)
    simplified = Y(tuple(piece.segment for piece in envelope))
    logger.debug(
        "simplify: %d -> %d segments", a.segment_count, simplified.segment_count
    )
    return simplified


def equivalent(
    a: Y,
    b: Y,
    tolerance: float = DEFAULT_TOLERANCE,
    slope_tolerance: float = DEFAULT_SLOPE_TOLERANCE,
) -> bool:
    """
    Check whether two lengths agree for every scaling factor ``s >= 0``.

    Both envelopes are piecewise linear, so comparing them at every breakpoint
    of either one and comparing their final slopes is sufficient.
    """
    envelope_a = compute_envelope(a)
    envelope_b = compute_envelope(b)

    if abs(envelope_a[-1].segment.elastic - envelope_b[-1].segment.elastic) > slope_tolerance:
        return False

    breakpoints = sorted({piece.start for piece in envelope_a + envelope_b})
    for scaling in breakpoints:
        value_a = max(seg.value_at(scaling) for seg in a.segments)
        value_b = max(seg.value_at(scaling) for seg in b.segments)
        if abs(value_a - value_b) > tolerance:
            return False
    return True
