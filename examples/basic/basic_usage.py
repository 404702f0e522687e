"""Basic usage example.

This example demonstrates:
- Lifting fixed and elastic gaps into Y values
- Combining them with add and max
- Resolving a credits block at several scaling factors
- Mapping a measured length back to a scaling factor

This is the simplest way to use the elastic length algebra.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from plot_helper import generate_example_plot

from elastic_length import add, constant_y, deresolve, elastic_y, max_y, resolve, simplify


def main():
    """Lay out a small credits block and resolve it."""

    print("=" * 80)
    print("BASIC ELASTIC LENGTH USAGE")
    print("=" * 80)

    # A heading followed by two lines of names
    heading_height = constant_y(32.0)  # px
    line_height = constant_y(18.0)  # px

    # The gap below the heading is at least 10px, grows 5px per unit of
    # scaling, and must also keep up with a 25px-per-unit stretch rule
    head_gap = max_y(add(constant_y(10.0), elastic_y(5.0)), elastic_y(25.0))

    # Gap between name lines: purely elastic
    line_gap = elastic_y(6.0)

    block = add(add(add(heading_height, head_gap), add(line_height, line_gap)), line_height)

    print(f"\nBlock built from {block.segment_count} segments")
    block = simplify(block)
    print(f"Simplified to {block.segment_count} segments\n")

    print(f"  {'Scaling':<10} {'Head gap':<12} {'Block height'}")
    print(f"  {'(s)':<10} {'(px)':<12} {'(px)'}")
    print("  " + "-" * 40)
    for s in [0.0, 0.25, 0.5, 1.0, 1.5]:
        print(f"  {s:<10.2f} {resolve(head_gap, s):<12.2f} {resolve(block, s):.2f}")

    # A user drags the head gap handle to 20px
    dragged = 20.0
    s = deresolve(head_gap, dragged)
    print(f"\nDragging the head gap to {dragged:.1f}px corresponds to s = {s:.3f}")
    print(f"Re-resolved: {resolve(head_gap, s):.2f}px")

    print("\n" + "=" * 80)
    print("GENERATING PLOT")
    print("=" * 80)
    generate_example_plot("basic_usage", [head_gap, block], ["Head gap", "Block"])
    print()


if __name__ == "__main__":
    main()
