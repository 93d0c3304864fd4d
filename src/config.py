"""Configuration loading for the game front-ends."""

from __future__ import annotations

import pathlib
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "tick_interval_ms": 1000,
    "cell_size": 30,
    "fps": 60,
    "seed": None,
}

# Keys that must hold a positive integer
_POSITIVE_INT_KEYS = ("tick_interval_ms", "cell_size", "fps")


def load_config(config_path: str | pathlib.Path) -> dict[str, Any]:
    """Load configuration from a YAML file, filling in defaults.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dict of configuration key-value pairs.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the file is not a mapping or a value is invalid.
    """
    config_path = pathlib.Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(config_path, "r") as f:
        loaded = yaml.safe_load(f)

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    config = {**DEFAULT_CONFIG, **loaded}
    validate_config(config)
    return config


def validate_config(config: dict[str, Any]) -> None:
    """Check value types and ranges.

    Raises:
        ValueError: On the first invalid value.
    """
    for key in _POSITIVE_INT_KEYS:
        value = config.get(key)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"Config '{key}' must be a positive integer, got {value!r}")

    seed = config.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ValueError(f"Config 'seed' must be an integer or null, got {seed!r}")
