"""Helper functions for creating matplotlib plots in examples."""

import os
from typing import Optional, Sequence

from elastic_length import Y
from elastic_length.visualize import plot_comparison


def save_comparison_plot(
    ys: Sequence[Y],
    labels: Sequence[str],
    filename: str,
    title: Optional[str] = None,
    max_scaling: float = 2.0,
) -> None:
    """Save a comparison plot to file.

    Args:
        ys: Elastic lengths to plot
        labels: Legend label per Y
        filename: Output filename (e.g., "my_plot.png")
        title: Optional custom title
        max_scaling: Largest scaling factor on the x axis
    """
    if not filename.endswith((".png", ".jpg", ".pdf")):
        filename += ".png"

    plot_comparison(
        ys,
        labels=labels,
        max_scaling=max_scaling,
        title=title or "Elastic Length Comparison",
        show=False,
        save_path=filename,
    )
    print(f"  Plot saved: {filename}")


def generate_example_plot(
    name: str,
    ys: Sequence[Y],
    labels: Sequence[str],
    output_dir: Optional[str] = None,
) -> None:
    """Generate and save a plot with automatic naming.

    Args:
        name: Base name for the plot (e.g., "basic_usage")
        ys: Elastic lengths to plot
        labels: Legend label per Y
        output_dir: Optional output directory (defaults to caller's directory)
    """
    if output_dir is None:
        import inspect

        caller_frame = inspect.stack()[1]
        caller_file = caller_frame.filename
        output_dir = os.path.dirname(os.path.abspath(caller_file))

    filename = os.path.join(output_dir, f"{name}_plot.png")
    title = name.replace("_", " ").title()

    save_comparison_plot(ys, labels, filename=filename, title=title)
