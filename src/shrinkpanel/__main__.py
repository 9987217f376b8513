"""Main entry point for shrinkpanel."""

import argparse
import json
import logging
import math
import sys
from pathlib import Path

from shrinkpanel.errors import ShrinkPanelError, validate_range
from shrinkpanel.layout.geometry import Size
from shrinkpanel.model.element import Element, layout_tree
from shrinkpanel.model.loader import load_tree


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="shrinkpanel",
        description="Lay out a tree of shrinking panels and print the placements",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "tree",
        type=Path,
        help="JSON document describing the layout tree",
    )
    parser.add_argument(
        "--width",
        type=float,
        default=math.inf,
        metavar="W",
        help="Available width (default: unbounded)",
    )
    parser.add_argument(
        "--height",
        type=float,
        default=math.inf,
        metavar="H",
        help="Available height (default: unbounded)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log layout decisions to stderr",
    )
    return parser.parse_args(argv)


def format_layout(root: Element, output_format: str = "text") -> str:
    """Render the arranged bounds of every element in the tree.

    Args:
        root: Root of an arranged tree
        output_format: ``"text"`` for an indented listing, ``"json"`` for a list of objects

    Returns:
        Formatted placements, one entry per element in pre-order
    """
    if output_format == "json":
        entries = [
            {
                "name": element.name,
                "x": element.bounds.x,
                "y": element.bounds.y,
                "width": element.bounds.width,
                "height": element.bounds.height,
            }
            for element in root.walk()
        ]
        return json.dumps(entries, indent=2)

    lines = []
    for element in root.walk():
        rect = element.bounds
        indent = "  " * element.depth
        lines.append(f"{indent}{element.name}  x={rect.x:g} y={rect.y:g} w={rect.width:g} h={rect.height:g}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        validate_range(args.width, 0, math.inf, "width")
        validate_range(args.height, 0, math.inf, "height")
        root = load_tree(args.tree)
        layout_tree(root, Size(args.width, args.height))
    except ShrinkPanelError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_layout(root, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
