"""
YAML I/O for fast marching configurations.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from .fmm_configs import FastMarchingConfig


def load_marching_config(path: str | Path) -> FastMarchingConfig:
    """
    Load a fast marching configuration from a YAML file.

    Parameters
    ----------
    path : str | Path
        Path to YAML configuration file

    Returns
    -------
    FastMarchingConfig
        Validated configuration

    Raises
    ------
    FileNotFoundError
        If configuration file doesn't exist
    ValueError
        If the YAML is malformed or the configuration is invalid

    YAML Format
    -----------
    margin: 1
    limit: 25.0
    stop_at_limit: true
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in {path}: {e}") from e

    if data is None:
        data = {}

    try:
        return FastMarchingConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {path}:\n{e}") from e


def save_marching_config(config: FastMarchingConfig, path: str | Path) -> None:
    """Save a fast marching configuration to a YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config.model_dump(mode="json")

    with open(path, "w") as f:
        yaml.safe_dump(config_dict, f, default_flow_style=False, sort_keys=False, indent=2)
