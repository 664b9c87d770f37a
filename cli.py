"""
CLI utilities for autogrid.

Handles command-line argument parsing and validation of grid inputs.
"""

from __future__ import annotations

import argparse
import difflib
from pathlib import Path

from grid_core.constants import VALID_OUTPUT_FORMATS
from grid_core.rect import GridError, Rect


__version__ = "1.0.0"
FORMAT_ALIASES = {
    "txt": "table",
    "text": "table",
    "yml": "yaml",
}


class CLIError(ValueError):
    """User-facing CLI validation error with optional hint text."""

    def __init__(self, message: str, hint: str | None = None):
        self.message = message
        self.hint = hint
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\nHint: {self.hint}"
        return self.message


class FriendlyArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises CLIError instead of exiting immediately."""

    def error(self, message: str) -> None:
        hint = None
        if "unrecognized arguments" in message:
            if "--rows" in message or "--cols" in message or "--grid" in message:
                hint = "The grid shape is chosen automatically from --count; use --shape-only to preview it."
            elif "--gap" in message:
                hint = "Use --spacing (or -s) to set the gap between cells."
        usage = self.format_usage().strip()
        raise CLIError(f"Argument error: {message}\n{usage}", hint=hint)


def _suggest_values(value: str, options: list[str], max_suggestions: int = 5) -> str | None:
    """Return a short suggestion string from close matches."""
    matches = difflib.get_close_matches(value, options, n=max_suggestions, cutoff=0.5)
    if not matches:
        return None
    return ", ".join(matches)


def _parse_non_negative(value: str, label: str, hint: str) -> int:
    try:
        number = int(value.strip())
    except (AttributeError, ValueError):
        raise CLIError(f"Invalid {label} '{value}'.", hint)
    if number < 0:
        raise CLIError(f"Invalid {label} '{value}'; it must not be negative.", hint)
    return number


def parse_count(count_str: str) -> int:
    """
    Parse the number of cells requested on the command line.

    Raises:
        CLIError: If the value is not a non-negative integer.
    """
    return _parse_non_negative(count_str, "cell count", "Use a whole number, e.g. --count 9.")


def parse_spacing(spacing_str: str | None) -> int | None:
    """Parse --spacing; None means fall back to config.yaml."""
    if spacing_str is None:
        return None
    return _parse_non_negative(spacing_str, "spacing", "Use a whole number of cells, e.g. --spacing 1.")


def parse_area(area_str: str | None) -> Rect | None:
    """
    Parse area string into a Rect.

    Args:
        area_str: "WxH" (origin 0,0), "X,Y,WxH" or "X,Y,W,H", or None.

    Returns:
        Rect | None: Parsed area, or None if area_str is None.

    Raises:
        CLIError: If the area format is invalid or out of range.
    """
    if area_str is None:
        return None

    hint = "Use WxH or X,Y,WxH with non-negative integers (e.g., --area 80x24 or --area 10,5,120x40)."
    parts = [part.strip() for part in area_str.lower().split(',')]

    try:
        if len(parts) == 1:
            x, y = 0, 0
            size = parts[0]
        elif len(parts) == 3:
            x, y = int(parts[0]), int(parts[1])
            size = parts[2]
        elif len(parts) == 4:
            x, y = int(parts[0]), int(parts[1])
            size = f"{parts[2]}x{parts[3]}"
        else:
            raise ValueError()

        size_parts = size.split('x')
        if len(size_parts) != 2:
            raise ValueError()
        width = int(size_parts[0])  # X = horizontal
        height = int(size_parts[1])  # Y = vertical
    except ValueError:
        raise CLIError(f"Invalid area format '{area_str}'.", hint)

    try:
        return Rect(x, y, width, height)
    except GridError as exc:
        raise CLIError(f"Invalid area '{area_str}': {exc}", hint)


def parse_format(format_str: str | None) -> str | None:
    """Normalize --format, resolving aliases and suggesting close matches."""
    if format_str is None:
        return None

    candidate = format_str.strip().lower()
    candidate = FORMAT_ALIASES.get(candidate, candidate)
    if candidate in VALID_OUTPUT_FORMATS:
        return candidate

    options = list(VALID_OUTPUT_FORMATS) + list(FORMAT_ALIASES)
    suggestion = _suggest_values(candidate, options)
    hint = f"Did you mean: {suggestion}?" if suggestion else f"Allowed values: {', '.join(VALID_OUTPUT_FORMATS)}."
    raise CLIError(f"Unknown output format '{format_str}'.", hint)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments for autogrid.

    Values that can also come from config.yaml (area, spacing, format) are
    left as None when not given so the caller can apply config defaults.

    Returns:
        argparse.Namespace: Parsed command-line arguments.
    """
    parser = FriendlyArgumentParser(
        prog="autogrid",
        description="Partition a rectangle into an automatic grid of equally sized cells.",
        epilog="""
Examples:
  %(prog)s -n 9                                # 9 cells in the configured default area
  %(prog)s -n 6 --area 100x100                 # 6 cells (3 columns x 2 rows)
  %(prog)s -n 7 --area 10,10,200x150 -s 1      # offset area with 1-cell spacing
  %(prog)s -n 12 --format csv                  # CSV output
  %(prog)s -n 12 --shape-only                  # print the chosen COLSxROWS only
  %(prog)s --print-config                      # show the effective configuration
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    grid_group = parser.add_argument_group("grid")
    grid_group.add_argument(
        "-n", "--count",
        type=str,
        default=None,
        help="Number of cells to produce"
    )
    grid_group.add_argument(
        "-a", "--area",
        type=str,
        default=None,
        help="Area to partition as WxH or X,Y,WxH (default: grid.default_area from config)"
    )
    grid_group.add_argument(
        "-s", "--spacing",
        type=str,
        default=None,
        help="Gap between adjacent rows and columns (default: grid.spacing from config)"
    )

    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "-f", "--format",
        dest="output_format",
        type=str,
        default=None,
        help=f"Output format: {', '.join(VALID_OUTPUT_FORMATS)} (default: output.format from config)"
    )
    output_group.add_argument(
        "--shape-only",
        action="store_true",
        help="Print the grid shape (COLSxROWS) chosen for --count and exit"
    )
    output_group.add_argument(
        "--config",
        type=Path,
        default=Path("config.yaml"),
        help="Path to config YAML file (default: config.yaml)"
    )
    output_group.add_argument(
        "--print-config",
        action="store_true",
        help="Print the effective configuration as YAML and exit"
    )

    advanced_group = parser.add_argument_group("advanced options")
    advanced_group.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress console output except errors (log file unaffected)"
    )
    advanced_group.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose console output (DEBUG level, log file always at DEBUG)"
    )

    args = parser.parse_args(argv)
    if args.quiet and args.verbose:
        raise CLIError("--quiet and --verbose cannot be combined.", "Pick one of -q or -v.")
    if args.count is None and not args.print_config:
        raise CLIError("Missing cell count.", "Use --count N (e.g., -n 9).")
    return args
