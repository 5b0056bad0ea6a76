"""
Configuration Management

Loads configuration from YAML files with environment variable resolution.
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


class NetworkConfig(BaseModel):
    """Network file configuration."""
    path: str = "network.txt"
    encoding: str = "utf-8"


class RecommendationConfig(BaseModel):
    """Friend recommendation configuration."""
    default_limit: int = Field(default=5, ge=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "INFO"
    file: Optional[str] = None


class Config(BaseModel):
    """Root configuration object."""
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    recommendations: RecommendationConfig = Field(default_factory=RecommendationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _resolve_env_vars(data: Any) -> Any:
    """Recursively resolve environment variables in config values.

    Supports ${VAR_NAME} and ${VAR_NAME:-default} syntax.
    """
    if isinstance(data, str):
        if data.startswith("${") and data.endswith("}"):
            var_expr = data[2:-1]
            if ":-" in var_expr:
                var_name, default = var_expr.split(":-", 1)
                return os.environ.get(var_name, default)
            return os.environ.get(var_expr, data)
        return data
    elif isinstance(data, dict):
        return {k: _resolve_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_resolve_env_vars(item) for item in data]
    return data


def load_config(
    config_path: Optional[Path] = None,
    local_config_path: Optional[Path] = None,
) -> Config:
    """Load configuration from YAML files.

    Args:
        config_path: Path to main config file (default: config.yaml)
        local_config_path: Path to local overrides (default: config.local.yaml)

    Returns:
        Merged and validated Config object
    """
    project_root = Path(__file__).parent.parent.parent

    if config_path is None:
        config_path = project_root / "config.yaml"
    if local_config_path is None:
        local_config_path = project_root / "config.local.yaml"

    config_path = Path(config_path)
    local_config_path = Path(local_config_path)

    config_data: dict[str, Any] = {}

    if config_path.exists():
        with open(config_path) as f:
            config_data = yaml.safe_load(f) or {}

    # Local overrides win
    if local_config_path.exists():
        with open(local_config_path) as f:
            local_data = yaml.safe_load(f) or {}
            config_data = _deep_merge(config_data, local_data)

    config_data = _resolve_env_vars(config_data)

    return Config(**config_data)


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result
