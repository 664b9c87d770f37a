"""Configuration helpers shared across CLI and library layers."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .constants import (
    DEFAULT_AREA,
    DEFAULT_GRID_SETTINGS,
    DEFAULT_OUTPUT_SETTINGS,
    VALID_OUTPUT_FORMATS,
)
from .rect import GridError, Rect

logger = logging.getLogger("autogrid")


def _read_config(config_file: Path) -> dict:
    """Read config YAML; a missing file behaves like an empty config."""
    if not config_file.exists():
        logger.debug("Config file %s not found; using defaults", config_file)
        return {}
    with open(config_file, 'r') as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise ValueError(f"Invalid config in {config_file}; expected mapping at top level.")
    return config


def _section(config: dict, name: str, config_file: Path) -> dict:
    section = config.get(name, {})
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"Invalid {name} section in {config_file}; expected mapping.")
    return section


def _parse_area(area_config: object, config_file: Path) -> Rect:
    if not isinstance(area_config, dict):
        raise ValueError(f"Invalid grid.default_area in {config_file}; expected mapping.")

    unknown = sorted(set(area_config) - set(DEFAULT_AREA))
    if unknown:
        raise ValueError(f"Unknown grid.default_area keys in {config_file}: {', '.join(unknown)}")

    values = DEFAULT_AREA.copy()
    values.update(area_config)
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"grid.default_area.{key} must be a non-negative integer")

    try:
        return Rect(**values)
    except GridError as exc:
        raise ValueError(f"Invalid grid.default_area in {config_file}: {exc}") from exc


def load_grid_settings(config_file: Path = Path("config.yaml")) -> dict[str, int | Rect]:
    """
    Load grid defaults from config YAML.

    Settings are read from the top-level ``grid`` section and merged with
    defaults when the section or keys are missing.

    Returns:
        dict: ``spacing`` (int) and ``default_area`` (Rect).
    """
    grid_config = _section(_read_config(config_file), 'grid', config_file)

    spacing = grid_config.get('spacing', DEFAULT_GRID_SETTINGS['spacing'])
    if isinstance(spacing, bool) or not isinstance(spacing, int) or spacing < 0:
        raise ValueError("grid.spacing must be a non-negative integer")

    area = _parse_area(grid_config.get('default_area', DEFAULT_GRID_SETTINGS['default_area']), config_file)

    return {'spacing': spacing, 'default_area': area}


def load_output_settings(config_file: Path = Path("config.yaml")) -> dict[str, str]:
    """Load output format defaults from the top-level ``output`` section."""
    output_config = _section(_read_config(config_file), 'output', config_file)

    fmt = output_config.get('format', DEFAULT_OUTPUT_SETTINGS['format'])
    if not isinstance(fmt, str) or fmt.strip().lower() not in VALID_OUTPUT_FORMATS:
        allowed = ', '.join(VALID_OUTPUT_FORMATS)
        raise ValueError(f"Invalid output.format '{fmt}' in {config_file}. Use one of: {allowed}.")

    return {'format': fmt.strip().lower()}


class GridConfigService:
    """Stateful access wrapper for grid config helpers."""

    def __init__(self, config_file: Path = Path("config.yaml")) -> None:
        self.config_file = config_file

    def load_grid_settings(self) -> dict[str, int | Rect]:
        return load_grid_settings(self.config_file)

    def load_output_settings(self) -> dict[str, str]:
        return load_output_settings(self.config_file)

    def load_spacing(self, cli_spacing: int | None = None) -> int:
        if cli_spacing is not None:
            return cli_spacing
        return self.load_grid_settings()['spacing']

    def load_default_area(self) -> Rect:
        return self.load_grid_settings()['default_area']

    def load_output_format(self, cli_format: str | None = None) -> str:
        if cli_format is not None:
            return cli_format
        return self.load_output_settings()['format']

    def load_raw_config(self) -> dict:
        return _read_config(self.config_file)

    @staticmethod
    def render_config_yaml(config: dict) -> str:
        return render_config_yaml(config)


def render_config_yaml(config: dict) -> str:
    """Render config mapping to the project's canonical YAML format."""
    lines = []

    lines.append("# autogrid configuration file")
    lines.append("")

    handled_sections = set()

    if 'logging' in config:
        handled_sections.add('logging')
        lines.append("# Logging configuration")
        lines.append("logging:")
        for key, value in config['logging'].items():
            lines.append(f"  {key}: {value}")
        lines.append("")

    if 'grid' in config:
        handled_sections.add('grid')
        lines.append("# Grid partition defaults")
        lines.append("grid:")
        grid_config = config['grid']
        if 'spacing' in grid_config:
            lines.append("  # Gap between adjacent rows and columns (used when no --spacing is given)")
            lines.append(f"  spacing: {grid_config['spacing']}")
        if 'default_area' in grid_config:
            area = grid_config['default_area']
            lines.append("  # Area partitioned when no --area is given")
            lines.append(
                "  default_area: {"
                + ", ".join(f"{key}: {value}" for key, value in area.items())
                + "}"
            )
        for key, value in grid_config.items():
            if key not in ('spacing', 'default_area'):
                lines.append(f"  {key}: {value}")
        lines.append("")

    for section_name, section_data in config.items():
        if section_name not in handled_sections:
            lines.append(f"# {section_name.replace('_', ' ').title()} section")
            lines.append(f"{section_name}:")
            section_yaml = yaml.dump(section_data, default_flow_style=False, sort_keys=False)
            for line in section_yaml.rstrip().split('\n'):
                lines.append(f"  {line}")
            lines.append("")

    output = "\n".join(lines)
    if lines and lines[-1] != "":
        output += "\n"
    return output
