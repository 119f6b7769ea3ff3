import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from .models import ChessSceneConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_config.yml"


def merge_config(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge `override` into a copy of `base`. Empty (null) sections keep the base values."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if value is None and isinstance(merged.get(key), dict):
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _read_yaml(path: str | Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Invalid YAML configuration in {path}: {e}")

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Configuration file {path} must contain a mapping, got {type(config).__name__}")
    return config


def load_config(
    config_path: str | Path | None = None,
    config_dict: dict[str, Any] | None = None,
    overrides: dict[str, Any] | None = None,
) -> ChessSceneConfig:
    """
    Load the scene configuration.

    The packaged defaults are read first; values from the YAML file or the
    dictionary override them key by key, and `overrides` is applied last.

    Args:
        config_path: Path to a YAML configuration file
        config_dict: Dictionary containing the configuration
        overrides: Values applied on top of either source (command line flags)

    Returns:
        The parsed ChessSceneConfig

    Raises:
        ValueError: If both sources are given, a source is not a mapping, or a value is invalid
        yaml.YAMLError: If a YAML file is malformed
    """
    if config_path is not None and config_dict is not None:
        raise ValueError("Cannot provide both config_path and config_dict")

    config = _read_yaml(DEFAULT_CONFIG_PATH)
    if config_path is not None:
        logger.info(f"Loading configuration from {config_path}")
        config = merge_config(config, _read_yaml(config_path))
    elif config_dict is not None:
        if not isinstance(config_dict, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(config_dict).__name__}")
        config = merge_config(config, config_dict)
    if overrides:
        config = merge_config(config, overrides)

    return ChessSceneConfig.from_dict(config)
