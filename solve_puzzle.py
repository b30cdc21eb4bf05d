#!/usr/bin/env python
"""
Tile Reassembly Solver

Usage:
    python solve_puzzle.py <tiles_path> [--template <path>] [--output <image_path>]

Examples:
    python solve_puzzle.py ./inputs/tiles.txt
    python solve_puzzle.py ./inputs/tiles.txt --output "./debug/composite.png" --no-display

Pipeline:
    Phase 1: Arrange tiles so that every shared edge matches (corner product)
    Phase 2: Locate the pattern in the composite image (unmatched foreground)
"""

import argparse
import os
import sys

from core import JigsawError, load_lines
from pipeline import SolverConfig, solve_jigsaw


def main():
    parser = argparse.ArgumentParser(
        description="Square tile reassembly and pattern search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input format:
  Tile <id>:      one block per tile, rows of '#' (foreground) and '.'
  <rows>          blocks separated by a single blank line

Template format:
  rows of '#' (required foreground) and '.' (ignored)
        """
    )
    parser.add_argument("tiles_path", help="Path to the tile blocks")
    parser.add_argument("--template", "-t", help="Path to a shape template (default: sea monster)")
    parser.add_argument("--output", "-o", help="Output path for the marked composite image")
    parser.add_argument("--scale", "-s", type=int, default=8, help="Pixel scale of the saved image")
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress progress output")
    parser.add_argument("--no-display", action="store_true", help="Don't display result")

    args = parser.parse_args()

    for path in (args.tiles_path, args.template):
        if path is not None and not os.path.isfile(path):
            print(f"Error: File not found: {path}")
            sys.exit(1)

    if args.scale < 1:
        print(f"Error: Scale must be >= 1, got {args.scale}")
        sys.exit(1)

    try:
        config_kwargs = {"verbose": not args.quiet}
        if args.template:
            config_kwargs["template_lines"] = load_lines(args.template)
        config = SolverConfig(**config_kwargs)

        result = solve_jigsaw(load_lines(args.tiles_path), config)
    except JigsawError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"\nCorner product: {result.corner_product}")
    if result.scan is None:
        print("Unmatched foreground: pattern not found")
    else:
        print(f"Unmatched foreground: {result.unmatched_foreground}")

    shown = result.scan.image if result.scan is not None else result.composite

    if args.output:
        from visualization import save_image
        save_image(shown, args.output, scale=args.scale)
        if not args.quiet:
            print(f"\nSaved: {args.output}")

    # Display
    if not args.no_display:
        from visualization import display_arrangement, display_comparison, display_image

        display_arrangement(result.grid)
        if result.scan is None:
            display_image(result.composite, title="Assembled (no matches)")
        else:
            display_comparison(result.composite, result.scan.image, matches=result.scan.matches)


if __name__ == "__main__":
    main()
