"""Core grid partitioning helpers for autogrid."""

from .config import (
    GridConfigService,
    load_grid_settings,
    load_output_settings,
    render_config_yaml,
)
from .constants import MAX_COORD
from .formatting import cells_to_frame, format_cells, format_shape
from .grid import GridCell, GridShape, auto_grid, grid_cells, grid_dimensions, grid_shape_for
from .rect import GridError, Rect
from .split import Direction, Ratio, equal_shares, split, split_columns, split_rows

__all__ = [
    "auto_grid",
    "cells_to_frame",
    "Direction",
    "equal_shares",
    "format_cells",
    "format_shape",
    "grid_cells",
    "grid_dimensions",
    "grid_shape_for",
    "GridCell",
    "GridConfigService",
    "GridError",
    "GridShape",
    "load_grid_settings",
    "load_output_settings",
    "MAX_COORD",
    "Ratio",
    "Rect",
    "render_config_yaml",
    "split",
    "split_columns",
    "split_rows",
]
