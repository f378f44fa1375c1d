"""Configuration loading."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .config_models import LabConfig

DEFAULT_CONFIG = LabConfig().to_dict()


def find_config() -> Optional[Path]:
    """Find config file in standard locations."""
    locations = [
        Path.cwd() / "rtlab.yaml",
        Path.home() / ".rtlab" / "config.yaml",
    ]
    for loc in locations:
        if loc.exists():
            return loc
    return None


def load_config_model(config_path: Optional[Path] = None) -> LabConfig:
    """Load configuration as a validated model, falling back to defaults."""
    data = {}

    path = config_path or find_config()
    if path and Path(path).exists():
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping, got {type(data).__name__}")

    try:
        return LabConfig.from_dict(data)
    except ValidationError as e:
        raise ValueError(f"Config validation failed: {e}")
