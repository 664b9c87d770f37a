"""Centralized logging configuration for autogrid.

Reads logging configuration from config.yaml.
"""

import logging
import sys
from pathlib import Path

import yaml


DEFAULT_LOGGING_SETTINGS = {
    'log_file': 'autogrid.log',
    'console_level': 'WARNING',
    'file_mode': 'w',
    'suppress_root_logger': True,
    'third_party_log_level': 'WARNING',
}


def _load_logging_settings(config_path: Path) -> dict:
    """Load and validate logging settings from config.yaml."""
    config = {}
    if config_path.exists():
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}

    logging_config = config.get('logging', {})
    if logging_config is None:
        logging_config = {}
    if not isinstance(logging_config, dict):
        raise ValueError(f"Invalid logging section in {config_path}; expected mapping.")

    settings = DEFAULT_LOGGING_SETTINGS.copy()
    settings.update(logging_config)

    console_level = str(settings['console_level']).upper()
    if not isinstance(logging.getLevelName(console_level), int):
        raise ValueError(f"Invalid logging.console_level '{settings['console_level']}'")
    settings['console_level'] = console_level

    third_party_level = str(settings['third_party_log_level']).upper()
    if not isinstance(logging.getLevelName(third_party_level), int):
        raise ValueError(f"Invalid logging.third_party_log_level '{settings['third_party_log_level']}'")
    settings['third_party_log_level'] = third_party_level

    if settings['file_mode'] not in ('w', 'a'):
        raise ValueError("logging.file_mode must be 'w' or 'a'")
    if not isinstance(settings['suppress_root_logger'], bool):
        raise ValueError("logging.suppress_root_logger must be boolean")
    if not isinstance(settings['log_file'], str) or not settings['log_file'].strip():
        raise ValueError("logging.log_file must be a non-empty string")

    return settings


def setup_logging(config_path: Path = Path("config.yaml")) -> logging.Logger:
    """
    Configure logging using settings from config.yaml.

    A missing config file falls back to DEFAULT_LOGGING_SETTINGS.

    Args:
        config_path: Path to the configuration YAML file.

    Returns:
        Configured logger instance.
    """
    settings = _load_logging_settings(config_path)
    log_file = settings['log_file']
    console_level = settings['console_level']

    logger = logging.getLogger("autogrid")
    logger.setLevel(logging.DEBUG)

    # Idempotent: a second call keeps the existing handlers
    if logger.handlers:
        return logger

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    simple_formatter = logging.Formatter(
        '%(levelname)s: %(message)s'
    )

    # The log file always records DEBUG
    file_handler = logging.FileHandler(log_file, mode=settings['file_mode'], encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(detailed_formatter)
    logger.addHandler(file_handler)

    # Console on stderr; stdout carries the rendered cells
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, console_level))
    console_handler.setFormatter(simple_formatter)
    logger.addHandler(console_handler)

    if settings['suppress_root_logger']:
        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, settings['third_party_log_level']))

    return logger


def set_console_level(level: int, name: str = "autogrid") -> None:
    """Change the level of console handlers only; the log file stays at DEBUG."""
    for handler in logging.getLogger(name).handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)


def get_logger(name: str = "autogrid") -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (default: "autogrid").

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
