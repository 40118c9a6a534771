"""
Configuration for plag

Settings live in an optional JSON file. Missing keys fall back to the
defaults below and command-line options override both.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "max_workers": None,
    "properties": [],
    "pretty": False,
    "log_level": "INFO",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def create_default_config(path: Union[str, Path] = 'plag.json') -> Dict[str, Any]:
    """Write the default configuration file and return its contents"""
    config = dict(DEFAULT_CONFIG)

    with open(path, 'w') as f:
        json.dump(config, f, indent=2)

    logger.info(f"Default configuration written to {path}")
    return config


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Load a configuration file merged over the defaults"""
    config = dict(DEFAULT_CONFIG)
    if path is None:
        return config

    try:
        with open(path, 'r') as f:
            overrides = json.load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"config file {path} is not valid JSON: {e}") from e

    if not isinstance(overrides, dict):
        raise ConfigError(f"config file {path} must contain a JSON object")

    unknown = sorted(set(overrides) - set(DEFAULT_CONFIG))
    if unknown:
        raise ConfigError(f"unknown config keys in {path}: {', '.join(unknown)}")

    config.update(overrides)
    validate_config(config)
    logger.debug(f"Loaded configuration from {path}: {config}")
    return config


def validate_config(config: Dict[str, Any]) -> None:
    """Check value types; property names are checked by the pipeline"""
    max_workers = config.get("max_workers")
    if max_workers is not None and (
            isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1):
        raise ConfigError("max_workers must be a positive integer or null")

    properties = config.get("properties")
    if not isinstance(properties, list) or not all(isinstance(p, str) for p in properties):
        raise ConfigError("properties must be a list of names")

    if not isinstance(config.get("pretty"), bool):
        raise ConfigError("pretty must be true or false")

    log_level = config.get("log_level")
    if not isinstance(log_level, str) or log_level.upper() not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
