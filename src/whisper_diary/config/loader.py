"""Configuration loader with YAML merging and environment overrides."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from whisper_diary.config.schema import WhisperDiaryConfig
from whisper_diary.core.exceptions import ConfigError
from whisper_diary.utils.logging import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "WHISPER_DIARY"


def deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, override takes precedence."""
    result = base.copy()
    
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    
    return result


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping.
    
    Raises:
        ConfigError: If the file is missing, invalid, or not a mapping
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}")
    return data


def apply_env_overrides(config: dict[str, Any], prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Apply environment variable overrides to config.
    
    Environment variables follow pattern: {PREFIX}__{SECTION}__{KEY}
    Example: WHISPER_DIARY__ALIGNMENT__FRAME_RATE=25
    """
    result = config.copy()
    
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}__"):
            continue
        
        # WHISPER_DIARY__ALIGNMENT__FRAME_RATE -> ['alignment', 'frame_rate']
        parts = key[len(prefix) + 2:].lower().split("__")
        
        target = result
        for part in parts[:-1]:
            target[part] = dict(target.get(part) or {})
            target = target[part]
        
        target[parts[-1]] = _convert_value(value)
        logger.debug(f"Env override: {'.'.join(parts)} = {value}")
    
    return result


def _convert_value(value: str) -> Any:
    """Convert string value to appropriate type."""
    if value.lower() in ("true", "yes"):
        return True
    if value.lower() in ("false", "no"):
        return False
    
    if value.lower() in ("null", "none"):
        return None
    
    try:
        if "." in value:
            return float(value)
        return int(value)
    except ValueError:
        pass
    
    return value


def load_config(
    config_path: Path | str | None = None,
    env: str | None = None,
    config_dir: Path | str = "configs",
) -> WhisperDiaryConfig:
    """Load configuration from YAML files with environment overrides.
    
    Loading order (each overrides previous):
    1. Default values from schema
    2. base.yaml (if exists)
    3. {env}.yaml (if env specified and exists)
    4. config_path (if specified)
    5. Environment variables
    
    Args:
        config_path: Optional specific config file to load
        env: Environment name (development, production, etc.)
        config_dir: Directory containing config files
        
    Returns:
        Validated WhisperDiaryConfig instance
        
    Raises:
        ConfigError: If configuration is invalid
    """
    config_dir = Path(config_dir)
    config: dict[str, Any] = {}
    
    base_path = config_dir / "base.yaml"
    if base_path.exists():
        logger.debug(f"Loading base config: {base_path}")
        config = deep_merge(config, load_yaml(base_path))
    
    if env:
        env_path = config_dir / f"{env}.yaml"
        if env_path.exists():
            logger.debug(f"Loading {env} config: {env_path}")
            config = deep_merge(config, load_yaml(env_path))
    
    if config_path:
        config_path = Path(config_path)
        logger.debug(f"Loading config: {config_path}")
        config = deep_merge(config, load_yaml(config_path))
    
    config = apply_env_overrides(config)
    
    try:
        return WhisperDiaryConfig(**config)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed: {e}") from e
