"""
autogrid: automatic grid partitioning for terminal layouts.

Main entry point for the autogrid application. Resolves command-line options
against config.yaml, partitions the requested area and prints the cells.
"""

import logging
import sys

from cli import CLIError, parse_area, parse_args, parse_count, parse_format, parse_spacing
from grid_core.config import GridConfigService
from grid_core.formatting import format_cells, format_shape
from grid_core.grid import grid_cells, grid_shape_for
from logging_config import get_logger, set_console_level, setup_logging


def _configure_console_logging(args, logger) -> None:
    """Apply console verbosity rules based on CLI flags."""
    if args.verbose:
        set_console_level(logging.DEBUG)
        logger.debug("Verbose mode enabled (console output at DEBUG level)")
    elif args.quiet:
        set_console_level(logging.ERROR)


def _resolve_run_context(args, config: GridConfigService) -> dict:
    """Resolve parsed CLI options and config defaults into validated values."""
    count = parse_count(args.count)
    area = parse_area(args.area)
    spacing = parse_spacing(args.spacing)
    output_format = parse_format(args.output_format)

    try:
        if area is None:
            area = config.load_default_area()
        spacing = config.load_spacing(spacing)
        output_format = config.load_output_format(output_format)
    except (OSError, ValueError) as exc:
        raise CLIError(
            f"Failed to load settings from {config.config_file}: {exc}",
            "Fix the grid/output sections of config.yaml or provide a valid --config path.",
        )

    return {
        'count': count,
        'area': area,
        'spacing': spacing,
        'output_format': output_format,
    }


def _print_config(config: GridConfigService) -> int:
    """Render the effective configuration (file values merged over defaults)."""
    raw = config.load_raw_config()
    grid_settings = config.load_grid_settings()
    raw['grid'] = {
        **(raw.get('grid') or {}),
        'spacing': grid_settings['spacing'],
        'default_area': grid_settings['default_area'].to_dict(),
    }
    raw['output'] = config.load_output_settings()
    print(config.render_config_yaml(raw), end="")
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for autogrid.

    Parses command-line arguments, applies config defaults, partitions the
    area and writes the cells to stdout in the selected format.
    """
    try:
        args = parse_args(argv)
    except CLIError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    try:
        setup_logging(args.config)
    except (OSError, ValueError) as e:
        print(f"ERROR: Failed to configure logging from {args.config}: {e}", file=sys.stderr)
        return 2
    logger = get_logger("autogrid")  # Use explicit name, not __name__

    _configure_console_logging(args, logger)

    config = GridConfigService(args.config)

    if args.print_config:
        try:
            return _print_config(config)
        except ValueError as e:
            logger.error(str(e))
            return 2

    try:
        context = _resolve_run_context(args, config)
    except CLIError as e:
        logger.error(str(e))
        return 2

    if args.shape_only:
        print(format_shape(grid_shape_for(context['count'])))
        return 0

    cells = grid_cells(context['area'], context['count'], context['spacing'])
    logger.info(
        "Area %s, %d cell(s), spacing %d, grid %s",
        context['area'].as_tuple(),
        context['count'],
        context['spacing'],
        format_shape(grid_shape_for(context['count'])),
    )
    print(format_cells(cells, context['output_format']).rstrip("\n"))
    return 0


def run() -> None:
    """Console-script wrapper around :func:`main`."""
    raise SystemExit(main())


if __name__ == "__main__":
    exit_code = main()
    in_debugger = (
        sys.gettrace() is not None
        or "debugpy" in sys.modules
        or "pydevd" in sys.modules
    )
    if not in_debugger:
        raise SystemExit(exit_code)
