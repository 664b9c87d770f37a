"""Formatting helpers shared across CLI and package layers."""

from __future__ import annotations

import pandas as pd
import yaml

from .constants import CELL_COLUMNS, VALID_OUTPUT_FORMATS
from .grid import GridCell, GridShape


def format_shape(shape: GridShape | None) -> str:
    """
    Render a grid shape in COLSxROWS notation.

    Args:
        shape: Grid shape, or None when no grid was built.

    Returns:
        String such as "3x2" (3 columns, 2 rows), or "0x0" for no grid.
    """
    if shape is None:
        return "0x0"
    return f"{shape.cols}x{shape.rows}"


def cells_to_records(cells: list[GridCell]) -> list[dict[str, int]]:
    return [
        {'index': cell.index, 'row': cell.row, 'col': cell.col, **cell.rect.to_dict()}
        for cell in cells
    ]


def cells_to_frame(cells: list[GridCell]) -> pd.DataFrame:
    """Tabulate cells, one row per cell in row-major order."""
    return pd.DataFrame(cells_to_records(cells), columns=list(CELL_COLUMNS))


def format_cells(cells: list[GridCell], fmt: str = "table") -> str:
    """
    Render cells in one of the supported output formats.

    Args:
        cells: Cells as returned by ``grid_cells``.
        fmt: One of "table", "csv", "yaml" or "json".

    Returns:
        Rendered text (without a trailing newline for table output).

    Raises:
        ValueError: If ``fmt`` is not a supported format.
    """
    if fmt not in VALID_OUTPUT_FORMATS:
        allowed = ', '.join(VALID_OUTPUT_FORMATS)
        raise ValueError(f"Unknown output format '{fmt}'. Use one of: {allowed}.")

    if fmt == "table":
        if not cells:
            return "(no cells)"
        return cells_to_frame(cells).to_string(index=False)
    if fmt == "csv":
        return cells_to_frame(cells).to_csv(index=False)
    if fmt == "yaml":
        return yaml.safe_dump({'cells': cells_to_records(cells)}, sort_keys=False)
    return cells_to_frame(cells).to_json(orient="records", indent=2)
