"""Configuration management for gql-sdl."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from . import utils

DEFAULT_CONFIG_PATH = "~/.gql-sdl/config.yaml"
DEFAULT_SCHEMA_CACHE_DIR = "~/.gql-sdl/schemas"


@dataclass
class Config:
    """Configuration for gql-sdl."""

    default_url: Optional[str] = None
    token: Optional[str] = None
    timeout: int = 30
    schema_cache_dir: str = DEFAULT_SCHEMA_CACHE_DIR
    headers: dict[str, str] = field(default_factory=dict)
    profiles: list[dict] = field(default_factory=list)

    def __post_init__(self):
        """Expand paths after initialization."""
        self.schema_cache_dir = utils.expand_path(self.schema_cache_dir)

    def profile(self, name: str) -> dict:
        """
        Look up a named endpoint profile.

        Raises:
            KeyError: If no profile has that name
        """
        for prof in self.profiles:
            if prof.get("name") == name:
                return prof
        raise KeyError(f"Unknown profile: {name}")


def get_default_config_path() -> str:
    """Get default config file path."""
    return utils.expand_path(DEFAULT_CONFIG_PATH)


def load(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Config object with defaults for missing values.
    """
    if config_path is None:
        config_path = get_default_config_path()

    # Return defaults if config doesn't exist
    if not Path(config_path).exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    return Config(
        default_url=data.get("default_url"),
        token=data.get("token"),
        timeout=data.get("timeout", 30),
        schema_cache_dir=data.get("schema_cache_dir", DEFAULT_SCHEMA_CACHE_DIR),
        headers=data.get("headers", {}),
        profiles=data.get("profiles", []),
    )


def create_example_config(path: Optional[str] = None) -> str:
    """Create an example config file and return its path."""
    if path is None:
        path = get_default_config_path()

    example = {
        "default_url": "https://api.example.com/graphql",
        "token": None,
        "timeout": 30,
        "schema_cache_dir": DEFAULT_SCHEMA_CACHE_DIR,
        "headers": {"Accept": "application/json"},
        "profiles": [
            {"name": "prod", "url": "https://prod.example.com/graphql"},
            {"name": "dev", "url": "https://dev.example.com/graphql"},
        ],
    }

    utils.write_text(path, yaml.dump(example, default_flow_style=False, sort_keys=False))

    return path
