"""
1) Load a genogram dataset (people and relationships) from a JSON file.
2) Validate it for dangling references, duplicates and cycles.
3) Lay it out: one position per person, plus the bounding box.
4) Print the positions, and optionally plot a preview.
"""

import argparse
import json
from pathlib import Path

from genogram.config import (
    HORIZONTAL_SPACING,
    PERSON_HEIGHT,
    PERSON_WIDTH,
    VERTICAL_SPACING,
    LayoutConfig,
)
from genogram.layout import layout
from genogram.models import GenogramData
from genogram.validation import validate_data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lay out a genogram JSON dataset.")
    parser.add_argument("input_json", type=Path, help="Path to input JSON file.")
    parser.add_argument("--plot", type=Path, help="Save a preview image (png, svg or pdf).")
    parser.add_argument("--person-width", type=float, default=PERSON_WIDTH)
    parser.add_argument("--person-height", type=float, default=PERSON_HEIGHT)
    parser.add_argument("--horizontal-spacing", type=float, default=HORIZONTAL_SPACING)
    parser.add_argument("--vertical-spacing", type=float, default=VERTICAL_SPACING)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = LayoutConfig(
            person_width=args.person_width,
            person_height=args.person_height,
            horizontal_spacing=args.horizontal_spacing,
            vertical_spacing=args.vertical_spacing,
        )

        print(f"Loading genogram: {args.input_json}")
        raw = json.loads(args.input_json.read_text(encoding="utf-8"))
        data = GenogramData.from_dict(raw)
        print(f"  Found {len(data.people)} people and {len(data.relationships)} relationships")

        print("Validating data...")
        warnings = validate_data(data)
        if warnings:
            print(f"  Found {len(warnings)} validation warnings:")
            for w in warnings[:10]:  # Show first 10 warnings
                print(f"    - {w}")
            if len(warnings) > 10:
                print(f"    ... and {len(warnings) - 10} more")
        else:
            print("  No validation issues found")

        print("Computing layout...")
        result = layout(data, config)
    except (ValueError, OSError) as e:  # GenogramError and JSON errors are ValueErrors
        print(f"Error: {e}")
        return 1

    for pid, pos in result.positions.items():
        print(f"  {pid}: ({pos.x:g}, {pos.y:g})")
    print(f"  Bounds: {result.bounds.width:g} x {result.bounds.height:g}")

    if args.plot:
        from genogram.plotting import plot_layout

        print(f"Plotting genogram to: {args.plot}")
        plot_layout(data, result, config, args.plot)

    print("Done!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
