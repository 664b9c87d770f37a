import pytest
import yaml

from grid_core.config import (
    GridConfigService,
    load_grid_settings,
    load_output_settings,
    render_config_yaml,
)
from grid_core.constants import DEFAULT_OUTPUT_FORMAT
from grid_core.rect import Rect


def test_load_grid_settings_valid(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "grid:\n"
        "  spacing: 2\n"
        "  default_area: {x: 1, y: 2, width: 120, height: 40}\n"
    )

    settings = load_grid_settings(config_file)
    assert settings['spacing'] == 2
    assert settings['default_area'] == Rect(1, 2, 120, 40)


def test_load_grid_settings_defaults(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("other_section:\n  key: value\n")

    settings = load_grid_settings(config_file)
    assert settings['spacing'] == 0
    assert settings['default_area'] == Rect(0, 0, 80, 24)


def test_load_grid_settings_partial_area(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("grid:\n  default_area: {width: 200}\n")

    assert load_grid_settings(config_file)['default_area'] == Rect(0, 0, 200, 24)


def test_load_grid_settings_missing_file(tmp_path):
    settings = load_grid_settings(tmp_path / "nonexistent.yaml")
    assert settings['spacing'] == 0


@pytest.mark.parametrize(
    "content",
    [
        "grid: [1, 2]\n",
        "grid:\n  spacing: -1\n",
        "grid:\n  spacing: 1.5\n",
        "grid:\n  spacing: true\n",
        "grid:\n  default_area: 80x24\n",
        "grid:\n  default_area: {width: -3}\n",
        "grid:\n  default_area: {depth: 3}\n",
        "grid:\n  default_area: {x: 65535, width: 10}\n",
        "- just\n- a list\n",
    ],
)
def test_load_grid_settings_invalid_value_raises(tmp_path, content):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(content)

    with pytest.raises(ValueError):
        load_grid_settings(config_file)


def test_load_output_settings(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("output:\n  format: CSV\n")
    assert load_output_settings(config_file) == {'format': 'csv'}


def test_load_output_settings_default(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("grid:\n  spacing: 1\n")
    assert load_output_settings(config_file) == {'format': DEFAULT_OUTPUT_FORMAT}


def test_load_output_settings_invalid_format(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("output:\n  format: xml\n")
    with pytest.raises(ValueError) as exc_info:
        load_output_settings(config_file)
    assert "Invalid output.format" in str(exc_info.value)


def test_grid_config_service_cli_overrides(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "grid:\n"
        "  spacing: 3\n"
        "output:\n"
        "  format: yaml\n"
    )

    service = GridConfigService(config_file)
    assert service.load_spacing() == 3
    assert service.load_spacing(cli_spacing=0) == 0
    assert service.load_output_format() == 'yaml'
    assert service.load_output_format(cli_format='json') == 'json'
    assert service.load_default_area() == Rect(0, 0, 80, 24)


def test_render_config_yaml_round_trips(tmp_path):
    config = {
        'logging': {'log_file': 'autogrid.log', 'console_level': 'INFO'},
        'grid': {'spacing': 1, 'default_area': {'x': 0, 'y': 0, 'width': 100, 'height': 50}},
        'output': {'format': 'csv'},
    }

    rendered = render_config_yaml(config)

    assert rendered.startswith("# autogrid configuration file")
    assert "default_area: {x: 0, y: 0, width: 100, height: 50}" in rendered
    assert yaml.safe_load(rendered) == config

    config_file = tmp_path / "config.yaml"
    config_file.write_text(rendered)
    assert load_grid_settings(config_file)['default_area'] == Rect(0, 0, 100, 50)
