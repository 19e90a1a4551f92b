"""VintagePy CLI batch filter.

Applies vintage looks to image files without a GUI.
"""

import argparse
import logging
import os
import sys
import time
from typing import List, Optional

from vintagepy.domain.errors import FilterError
from vintagepy.domain.models import FilterStyle, Tier
from vintagepy.kernel.system.config import APP_CONFIG
from vintagepy.kernel.system.logging import setup_logging
from vintagepy.services.rendering.engine import VintageEngine

SUPPORTED_EXTENSIONS = (
    ".jpg",
    ".jpeg",
    ".png",
    ".tif",
    ".tiff",
    ".bmp",
    ".gif",
    ".webp",
)

STYLE_CHOICES = tuple(style.slug for style in FilterStyle)


def list_styles() -> int:
    """Prints the available styles and exits."""
    print("Available styles:", file=sys.stderr)
    for style in FilterStyle:
        print(
            f"  {style.emoji} {style.slug:<14} {style.display_name} - {style.description}",
            file=sys.stderr,
        )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vintagepy",
        description="VintagePy -- Vintage photo filter batch converter",
        epilog="Example: vintagepy --style sepia --output ./export /path/to/photos/",
    )

    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="FILE_OR_DIR",
        help="Input images or directories containing images",
    )

    parser.add_argument(
        "--style",
        choices=STYLE_CHOICES,
        default=FilterStyle.CLASSIC.slug,
        help=f"Filter style (default: {FilterStyle.CLASSIC.slug})",
    )

    parser.add_argument(
        "--all-styles",
        action="store_true",
        default=False,
        help="Render every style for each input",
    )

    parser.add_argument(
        "--lightweight",
        action="store_true",
        default=False,
        help="Use the fast preview pipeline",
    )

    parser.add_argument(
        "--resave",
        action="store_true",
        default=False,
        help="Re-encode inputs without filtering",
    )

    parser.add_argument(
        "--output",
        default="./export",
        metavar="DIR",
        help="Output directory (default: ./export)",
    )

    parser.add_argument(
        "--list-styles",
        action="store_true",
        default=False,
        help="List available styles and exit",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )

    return parser


def discover_files(inputs: List[str]) -> List[str]:
    """Resolves input paths to a sorted list of supported image files."""
    files = []
    for input_path in inputs:
        path = os.path.abspath(input_path)
        if os.path.isfile(path):
            ext = os.path.splitext(path)[1].lower()
            if ext in SUPPORTED_EXTENSIONS:
                files.append(path)
            else:
                print(f"Warning: Skipping unsupported file: {path}", file=sys.stderr)
        elif os.path.isdir(path):
            for root, _dirs, filenames in os.walk(path):
                for fname in sorted(filenames):
                    ext = os.path.splitext(fname)[1].lower()
                    if ext in SUPPORTED_EXTENSIONS:
                        files.append(os.path.join(root, fname))
        else:
            print(f"Warning: Path not found: {path}", file=sys.stderr)
    return files


def output_name(file_path: str, suffix: str) -> str:
    name = os.path.splitext(os.path.basename(file_path))[0]
    return f"{name}_{suffix}.jpg"


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns 0 on success, 1 on failure."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_styles:
        return list_styles()

    setup_logging(logging.DEBUG if args.verbose else APP_CONFIG.log_level)

    files = discover_files(args.inputs)
    if not files:
        print("Error: No supported image files found.", file=sys.stderr)
        return 1

    tier = Tier.LIGHTWEIGHT if args.lightweight else Tier.FULL
    styles = list(FilterStyle) if args.all_styles else [FilterStyle.from_slug(args.style)]

    os.makedirs(args.output, exist_ok=True)
    engine = VintageEngine()

    jobs = []
    for file_path in files:
        if args.resave:
            jobs.append((file_path, None))
        else:
            jobs.extend((file_path, style) for style in styles)

    total = len(jobs)
    failed = 0
    print(f"Processing {total} job(s) -> {args.output}", file=sys.stderr)
    t_start = time.monotonic()

    for i, (file_path, style) in enumerate(jobs, 1):
        label = "resave" if style is None else style.slug
        name = os.path.basename(file_path)
        print(f"  [{i}/{total}] {name} ({label}) ...", file=sys.stderr, end="", flush=True)
        t_file = time.monotonic()

        try:
            with open(file_path, "rb") as f:
                data = f.read()
            if style is None:
                bits = engine.resave(data)
            else:
                bits = engine.run(style, data, tier)
        except (FilterError, OSError) as e:
            print(f" FAILED ({e})", file=sys.stderr)
            failed += 1
            continue

        out_path = os.path.join(args.output, output_name(file_path, label))
        with open(out_path, "wb") as f:
            f.write(bits)

        elapsed = time.monotonic() - t_file
        print(f" OK ({elapsed:.1f}s)", file=sys.stderr)

    elapsed_total = time.monotonic() - t_start
    print(
        f"Done: {total - failed}/{total} succeeded in {elapsed_total:.1f}s",
        file=sys.stderr,
    )
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
