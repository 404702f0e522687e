"""Forward and inverse evaluation of elastic lengths.

Example:
    >>> from elastic_length.algebra import add
    >>> from elastic_length.models import constant_y, elastic_y
    >>> gap = add(constant_y(7.0), elastic_y(10.0))
    >>> resolve(gap, 0.5)
    12.0
    >>> deresolve(gap, 12.0)
    0.5
"""

import logging
import math
from typing import Iterable, List, Optional

import numpy as np

from elastic_length.envelope import EnvelopePiece, compute_envelope, envelope_minimum
from elastic_length.errors import OutOfDomainError
from elastic_length.models.config import NegativeScalingPolicy, ResolverConfig, TieBreak
from elastic_length.models.elastic import Y

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = ResolverConfig()


def _checked_scaling(scaling: float, config: ResolverConfig) -> float:
    """Apply the negative scaling policy to a single scaling factor."""
    if not math.isfinite(scaling):
        raise OutOfDomainError(f"elastic scaling must be finite, got {scaling}")
    if scaling < 0:
        if config.negative_scaling == NegativeScalingPolicy.REJECT:
            raise OutOfDomainError(f"elastic scaling must be non-negative, got {scaling}")
        return 0.0
    return scaling


def resolve(y: Y, scaling: float, config: ResolverConfig = DEFAULT_CONFIG) -> float:
    """
    Compute the concrete length of ``y`` at an elastic scaling factor.

    Args:
        y: Elastic length to evaluate
        scaling: Elastic scaling factor, normally ``>= 0``
        config: Resolver policies (default: reject negative scaling)

    Returns:
        Maximum over all segments at the scaling factor

    Raises:
        OutOfDomainError: If scaling is not finite, or negative under the REJECT policy
    """
    scaling = _checked_scaling(scaling, config)
    return max(seg.value_at(scaling) for seg in y.segments)


def resolve_many(
    y: Y, scalings: Iterable[float], config: ResolverConfig = DEFAULT_CONFIG
) -> np.ndarray:
    """
    Evaluate ``y`` at many scaling factors at once.

    Args:
        y: Elastic length to evaluate
        scalings: Scaling factors to evaluate at
        config: Resolver policies (default: reject negative scaling)

    Returns:
        Array of lengths, one per scaling factor
    """
    ss = np.asarray(list(scalings), dtype=float)
    if not np.isfinite(ss).all():
        bad = float(ss[~np.isfinite(ss)][0])
        raise OutOfDomainError(f"elastic scaling must be finite, got {bad}")
    if (ss < 0).any():
        if config.negative_scaling == NegativeScalingPolicy.REJECT:
            raise OutOfDomainError(
                f"elastic scaling must be non-negative, got {float(ss.min())}"
            )
        ss = np.clip(ss, 0.0, None)

    constants = np.array([seg.constant for seg in y.segments])
    elastics = np.array([seg.elastic for seg in y.segments])
    return np.max(constants[:, None] + elastics[:, None] * ss[None, :], axis=0)


def _interval_choice(start: float, end: float, reference: float) -> float:
    """Most generous scaling of an interval, bounded by the reference if open."""
    if math.isinf(end):
        return max(start, reference)
    return end


def _nearest(candidates: List[float], reference: float) -> float:
    """Candidate closest to the reference; larger wins on ties."""
    return min(candidates, key=lambda s: (abs(s - reference), -s))


def _exact_matches(
    pieces: Iterable[EnvelopePiece], length: float, config: ResolverConfig
) -> List[float]:
    """Scaling factors at which the envelope takes on the length."""
    matches = []
    for piece in pieces:
        if piece.is_flat(config.slope_tolerance):
            if abs(piece.segment.constant - length) <= config.tolerance:
                matches.append(
                    _interval_choice(piece.start, piece.end, config.reference_scaling)
                )
            continue

        solution = (length - piece.segment.constant) / piece.segment.elastic
        candidate = piece.clamp(solution)
        if abs(piece.value_at(candidate) - length) <= config.tolerance:
            matches.append(candidate)
    return matches


def deresolve(y: Y, length: float, config: ResolverConfig = DEFAULT_CONFIG) -> float:
    """
    Find the elastic scaling factor that best produces a concrete length.

    Args:
        y: Elastic length to invert
        length: Concrete target length
        config: Resolver policies (default: largest scaling wins ties)

    Returns:
        A scaling factor ``>= 0``. Re-resolve it and compare when you need to
        know whether the match is exact.

    Raises:
        ValueError: If length is not finite

    Algorithm:
        1. At or below the minimum: return the largest scaling attaining it
        2. Exact matches on the envelope, flat pieces contributing the upper
           end of their interval: pick by config.tie_break
        3. No elastic piece at all: return the reference scaling
        4. Otherwise: solve every elastic piece's line, take the solution
           nearest the reference and clamp it to 0
    """
    if not math.isfinite(length):
        raise ValueError(f"length must be finite, got {length}")

    reference = config.reference_scaling
    pieces = compute_envelope(y)

    minimum = envelope_minimum(pieces)
    if minimum is not None and length <= minimum.value:
        logger.debug("deresolve(%s): at or below minimum %s", length, minimum.value)
        return _interval_choice(minimum.lower, minimum.upper, reference)

    matches = _exact_matches(pieces, length, config)
    if matches:
        logger.debug("deresolve(%s): exact matches %s", length, matches)
        if config.tie_break == TieBreak.NEAREST_REFERENCE:
            return _nearest(matches, reference)
        return max(matches)

    solutions = [
        (length - piece.segment.constant) / piece.segment.elastic
        for piece in pieces
        if not piece.is_flat(config.slope_tolerance)
    ]
    if not solutions:
        logger.debug("deresolve(%s): constant length, using reference", length)
        return reference

    logger.debug("deresolve(%s): best match among %s", length, solutions)
    return max(0.0, _nearest(solutions, reference))


class ElasticResolver:
    """
    Evaluator bundling a fixed set of resolver policies.

    Layout code typically creates one resolver per document and calls
    resolve() for every gap once the document's scaling factor is known.

    Args:
        config: Resolver policies. Default: ResolverConfig() (reject negative
                scaling, largest scaling wins ties, tolerance 0.001)

    Example:
        >>> resolver = ElasticResolver()
        >>> resolver.resolve(elastic_y(10.0), 1.5)
        15.0
    """

    def __init__(self, config: Optional[ResolverConfig] = None):
        self.config = config if config is not None else DEFAULT_CONFIG

    def resolve(self, y: Y, scaling: float) -> float:
        """Concrete length of ``y`` at the scaling factor."""
        return resolve(y, scaling, self.config)

    def resolve_many(self, y: Y, scalings: Iterable[float]) -> np.ndarray:
        """Concrete lengths of ``y`` at each scaling factor."""
        return resolve_many(y, scalings, self.config)

    def deresolve(self, y: Y, length: float) -> float:
        """Scaling factor best producing the length."""
        return deresolve(y, length, self.config)

    def __repr__(self) -> str:
        """Return string representation of the resolver."""
        return (
            f"ElasticResolver(tolerance={self.config.tolerance}, "
            f"negative_scaling={self.config.negative_scaling.name}, "
            f"tie_break={self.config.tie_break.name})"
        )
