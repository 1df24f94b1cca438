"""Global configuration for requireflow.

Configuration is read from $REQUIREFLOW_HOME/config.yaml, defaulting
to ~/.config/requireflow/config.yaml.
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel


class GlobalConfig(BaseModel):
    """Settings shared by every command."""

    document_version: str = "1.0"
    company_name: str = "RequireFlow"
    log_level: str = "WARNING"


def get_requireflow_home() -> Path:
    """Return the configuration directory."""
    env_home = os.environ.get("REQUIREFLOW_HOME")
    if env_home:
        return Path(env_home)
    return Path.home() / ".config" / "requireflow"


def get_config_path() -> Path:
    return get_requireflow_home() / "config.yaml"


def load_global_config(path: Path | None = None) -> GlobalConfig:
    """Load the global config, falling back to defaults if absent."""
    config_path = path if path is not None else get_config_path()
    if not config_path.exists():
        return GlobalConfig()

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    return GlobalConfig.model_validate(data)


def write_global_config(config: GlobalConfig, path: Path | None = None) -> Path:
    """Write a config file, creating its directory if needed."""
    config_path = path if path is not None else get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(), f, sort_keys=False)

    return config_path
