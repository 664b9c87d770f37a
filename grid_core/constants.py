"""Core constants shared across grid and configuration helpers."""

# Terminal coordinates are 16-bit unsigned.
MAX_COORD = 65535

VALID_OUTPUT_FORMATS = ("table", "csv", "yaml", "json")
DEFAULT_OUTPUT_FORMAT = VALID_OUTPUT_FORMATS[0]
DEFAULT_AREA = {
    'x': 0,
    'y': 0,
    'width': 80,
    'height': 24,
}
DEFAULT_GRID_SETTINGS = {
    'spacing': 0,
    'default_area': DEFAULT_AREA,
}
DEFAULT_OUTPUT_SETTINGS = {
    'format': DEFAULT_OUTPUT_FORMAT,
}
CELL_COLUMNS = ('index', 'row', 'col', 'x', 'y', 'width', 'height')
