"""Visualization utilities for elastic lengths.

This module plots the length of Y values over the elastic scaling axis, which
helps when checking where the branches of a gap take over from each other.
"""

from typing import List, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from elastic_length.models import Y
from elastic_length.resolver import resolve_many


def _scaling_axis(max_scaling: float, samples: int) -> np.ndarray:
    """Evenly spaced scaling factors from 0 to max_scaling.

    Args:
        max_scaling: Right end of the axis
        samples: Number of points

    Returns:
        Array of scaling factors
    """
    if max_scaling <= 0:
        raise ValueError(f"max_scaling must be positive, got {max_scaling}")
    if samples < 2:
        raise ValueError(f"samples must be >= 2, got {samples}")
    return np.linspace(0.0, max_scaling, samples)


def plot_y(
    y: Y,
    max_scaling: float = 2.0,
    samples: int = 200,
    title: Optional[str] = None,
    show_segments: bool = True,
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot the resolved length of a Y over the elastic scaling axis.

    Args:
        y: Elastic length to plot
        max_scaling: Largest scaling factor on the x axis (default: 2.0)
        samples: Number of sample points (default: 200)
        title: Optional custom title (default: auto-generated)
        show_segments: Whether to draw every segment as a dashed line
        show: Whether to display the plot (default: True)
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object

    Example:
        >>> from elastic_length import constant_y, elastic_y, max_y
        >>> plot_y(max_y(constant_y(5.0), elastic_y(10.0)))
    """
    ss = _scaling_axis(max_scaling, samples)
    lengths = resolve_many(y, ss)

    fig, ax = plt.subplots(figsize=(10, 5))

    if title is None:
        title = f"Elastic Length ({y.segment_count} segments)"

    if show_segments:
        for seg in y.segments:
            ax.plot(
                ss,
                seg.constant + seg.elastic * ss,
                linestyle="--",
                linewidth=1,
                alpha=0.5,
                label=f"{seg.constant:g} + {seg.elastic:g}·s",
            )

    ax.plot(ss, lengths, color="black", linewidth=2, label="Resolved")
    ax.axvline(1.0, color="gray", linestyle=":", alpha=0.7, label="Reference (s=1)")
    ax.set_xlabel("Elastic Scaling (s)")
    ax.set_ylabel("Length (px)")
    ax.set_title(title)
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig


def plot_comparison(
    ys: Sequence[Y],
    labels: Optional[Sequence[str]] = None,
    max_scaling: float = 2.0,
    samples: int = 200,
    title: str = "Elastic Length Comparison",
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot several Y values on one axis.

    Args:
        ys: Elastic lengths to compare
        labels: Optional legend label per Y (default: "Y 0", "Y 1", ...)
        max_scaling: Largest scaling factor on the x axis
        samples: Number of sample points
        title: Plot title
        show: Whether to display the plot
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object
    """
    if not ys:
        raise ValueError("Cannot plot empty Y list")

    if labels is None:
        labels = [f"Y {i}" for i in range(len(ys))]
    if len(labels) != len(ys):
        raise ValueError(f"Labels must match Y values: {len(labels)} != {len(ys)}")

    ss = _scaling_axis(max_scaling, samples)
    curves: List[np.ndarray] = [resolve_many(y, ss) for y in ys]

    fig, ax = plt.subplots(figsize=(10, 5))
    for curve, label in zip(curves, labels):
        ax.plot(ss, curve, linewidth=2, label=label)
    ax.set_xlabel("Elastic Scaling (s)")
    ax.set_ylabel("Length (px)")
    ax.set_title(title)
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig
