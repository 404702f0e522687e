"""Editor drag handle example.

This example demonstrates:
- Using resolver profiles (LAYOUT vs EDITOR)
- How deresolve picks a scaling factor for ambiguous and unreachable lengths
- Why the editor clamps scaling factors produced by dragging past the origin

Shows how editing UI maps pixel lengths back onto the scaling axis.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from plot_helper import save_comparison_plot

from elastic_length import ElasticResolver, OutOfDomainError, add, constant_y, elastic_y, max_y
from elastic_length.profiles import ResolverProfile, create_resolver_config


def create_gaps():
    """Create gaps with different shapes.

    Returns:
        Dict of gap name to Y
    """
    return {
        "Flat minimum": max_y(constant_y(5.0), elastic_y(10.0)),
        "Valley": max_y(
            max_y(add(constant_y(15.0), elastic_y(-15.0)), add(constant_y(10.0), elastic_y(5.0))),
            elastic_y(25.0),
        ),
        "Fixed": constant_y(8.0),
    }


def main():
    """Compare how both profiles answer drag requests."""

    print("=" * 80)
    print("EDITOR DRAG HANDLES")
    print("=" * 80)

    gaps = create_gaps()
    resolvers = {
        profile.name: ElasticResolver(create_resolver_config(profile))
        for profile in ResolverProfile
    }

    for name, gap in gaps.items():
        print(f"\n{name}:")
        print(f"  {'Length':<10} " + " ".join(f"{profile:<12}" for profile in resolvers))
        print("  " + "-" * 40)
        for length in [3.0, 5.0, 5.3, 12.0, 20.0]:
            answers = [resolver.deresolve(gap, length) for resolver in resolvers.values()]
            print(f"  {length:<10.1f} " + " ".join(f"{s:<12.3f}" for s in answers))

    print("\nDragging past the origin:")
    for profile, resolver in resolvers.items():
        try:
            length = resolver.resolve(gaps["Flat minimum"], -0.25)
            print(f"  {profile}: clamped to {length:.2f}px")
        except OutOfDomainError as e:
            print(f"  {profile}: rejected ({e})")

    print("\n" + "=" * 80)
    print("GENERATING PLOT")
    print("=" * 80)
    output = Path(__file__).parent / "editor_drag_plot.png"
    save_comparison_plot(list(gaps.values()), list(gaps.keys()), str(output), title="Gap Shapes")
    print()


if __name__ == "__main__":
    main()
