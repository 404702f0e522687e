"""Resolver configuration presets for common callers."""

from enum import Enum

from elastic_length.models.config import NegativeScalingPolicy, ResolverConfig, TieBreak


class ResolverProfile(Enum):
    """Typical consumers of the elastic length algebra."""

    LAYOUT = "layout"  # Layout engine: strict domain, most generous match
    EDITOR = "editor"  # Editing UI: forgiving domain, pixel tolerance


def create_resolver_config(profile: ResolverProfile) -> ResolverConfig:
    """
    Create a ResolverConfig from a predefined profile.

    - LAYOUT: rejects negative scaling factors, since a negative factor there
      points to a bug in the layout algorithm
    - EDITOR: clamps negative scaling factors produced by dragging a handle
      past its origin, compares lengths with half-pixel tolerance and prefers
      the answer closest to the unscaled state

    Args:
        profile: Profile to use

    Returns:
        ResolverConfig matching the selected profile

    Examples:
        >>> editor = create_resolver_config(ResolverProfile.EDITOR)
        >>> print(editor.negative_scaling.name)
        CLAMP
    """
    if profile == ResolverProfile.LAYOUT:
        return ResolverConfig(
            tolerance=0.001,
            negative_scaling=NegativeScalingPolicy.REJECT,
            tie_break=TieBreak.LARGEST,
        )
    elif profile == ResolverProfile.EDITOR:
        return ResolverConfig(
            tolerance=0.5,  # px - half a pixel is indistinguishable on screen
            negative_scaling=NegativeScalingPolicy.CLAMP,
            tie_break=TieBreak.NEAREST_REFERENCE,
        )
    else:
        raise ValueError(f"Unknown resolver profile: {profile}")
