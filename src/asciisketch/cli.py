import argparse
import logging
import shutil
import sys
from pathlib import Path

from asciisketch.converter import render
from asciisketch.engine import RenderConfig


def _default_width() -> int:
    if not sys.stdout.isatty():
        return 80
    return shutil.get_terminal_size((80, 24)).columns


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render an image as ASCII art with edge-following line glyphs")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-s", "--size", type=int, default=None, help="Output width in columns (default: terminal width)"
    )
    parser.add_argument(
        "-c", "--contrast", type=float, default=1.0, help="Contrast factor around mid-gray (default: 1.0, neutral)"
    )
    parser.add_argument(
        "-e",
        "--edge-threshold",
        type=int,
        default=50,
        help="Gradient above which a cell becomes a line glyph, 0-255 (default: 50). 255 disables edges.",
    )
    parser.add_argument(
        "-d", "--density", type=float, default=1.0, help="Fraction of the character ramp to use, (0, 1] (default: 1.0)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    try:
        config = RenderConfig(
            output_width=args.size if args.size is not None else _default_width(),
            contrast=args.contrast,
            edge_threshold=args.edge_threshold,
            density=args.density,
        )
    except ValueError as e:
        print(str(e), file=sys.stderr)
        sys.exit(2)

    print(render(image_path, config))
