"""Runtime settings loaded from an optional YAML file and the environment.

Environment variables (override the YAML file):
    B64IMG_CONFIG: Path to a YAML config file
    B64IMG_OUTPUT_DIR: Directory for written images (default: working directory)
    B64IMG_FILENAME_PREFIX: Prefix for generated file names (default: "image")
    B64IMG_DATA_FILE: Fallback input file name (default: "DATA")
    B64IMG_FETCH_TIMEOUT: URL fetch timeout in seconds (default: 30)
    B64IMG_USER_AGENT: User-Agent header for URL fetches
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .api.fetcher import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

ENV_PREFIX = "B64IMG_"


@dataclass
class Settings:
    output_dir: Optional[Path] = None
    filename_prefix: str = "image"
    data_file: str = "DATA"
    fetch_timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    def base_dir(self) -> Path:
        """Directory that relative output paths resolve against."""
        return self.output_dir if self.output_dir else Path.cwd()

    def update(self, values: dict) -> None:
        """Apply raw values (from YAML or env), converting types."""
        known = {f.name for f in fields(self)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown config key(s): {', '.join(sorted(unknown))}")

        for key, value in values.items():
            if value is None:
                continue
            if key == "output_dir":
                value = Path(value).expanduser()
            elif key == "fetch_timeout":
                value = float(value)
            else:
                value = str(value)
            setattr(self, key, value)


def load_config(config_path: str | Path) -> dict:
    """Load configuration values from a YAML file."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")
    return config


def env_overrides() -> dict:
    """Collect B64IMG_* variables matching Settings fields."""
    values = {}
    for f in fields(Settings):
        value = os.environ.get(ENV_PREFIX + f.name.upper())
        if value:
            values[f.name] = value
    return values


def load_settings(config_path: Optional[str | Path] = None) -> Settings:
    """Build settings from defaults, the YAML file, then the environment."""
    settings = Settings()

    config_path = config_path or os.environ.get(ENV_PREFIX + "CONFIG")
    if config_path:
        settings.update(load_config(config_path))

    settings.update(env_overrides())
    return settings
