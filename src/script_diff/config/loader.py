"""Configuration loader with YAML merging and environment overrides."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from script_diff.config.schema import ScriptDiffConfig
from script_diff.core.exceptions import ConfigError
from script_diff.utils.decorators import logged
from script_diff.utils.logging import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "SCRIPT_DIFF"


def deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, override takes precedence.

    Args:
        base: Base dictionary
        override: Override dictionary (takes precedence)

    Returns:
        New merged dictionary; neither input is modified
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping from disk.

    Raises:
        ConfigError: If the file is missing, is not valid YAML, or is not a mapping
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def apply_env_overrides(config: dict[str, Any], prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Apply environment variable overrides to config.

    Variables follow the pattern ``{PREFIX}__{SECTION}__{KEY}``, for example
    ``SCRIPT_DIFF__API__PORT=9000`` or ``SCRIPT_DIFF__LOG_LEVEL=DEBUG``.
    """
    result = deep_merge({}, config)

    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}__"):
            continue

        # SCRIPT_DIFF__API__LIMITS__MAX_TEXT_CHARS -> ['api', 'limits', 'max_text_chars']
        parts = key[len(prefix) + 2:].lower().split("__")

        target = result
        for part in parts[:-1]:
            if not isinstance(target.get(part), dict):
                target[part] = {}
            target = target[part]

        target[parts[-1]] = _convert_value(value)
        logger.debug(f"Env override: {'.'.join(parts)} = {value}")

    return result


def _convert_value(value: str) -> Any:
    """Convert string value to appropriate type."""
    lowered = value.lower()
    if lowered in ("true", "yes"):
        return True
    if lowered in ("false", "no"):
        return False
    if lowered in ("null", "none"):
        return None

    try:
        if "." in value:
            return float(value)
        return int(value)
    except ValueError:
        pass

    return value


@logged
def load_config(
    config_path: Path | str | None = None,
    env: str | None = None,
    config_dir: Path | str = "configs",
) -> ScriptDiffConfig:
    """Load configuration from YAML files with environment overrides.

    Loading order (each overrides previous):
    1. Default values from schema
    2. base.yaml (if exists)
    3. {env}.yaml (if env specified and exists)
    4. config_path (if specified, must exist)
    5. Environment variables

    Raises:
        ConfigError: If a file cannot be read or the result fails validation
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
        else:
            logger.warning(f"No config file for environment '{env}' in {config_dir}")

    if config_path:
        config_path = Path(config_path)
        logger.debug(f"Loading config: {config_path}")
        config = deep_merge(config, load_yaml(config_path))

    config = apply_env_overrides(config)

    try:
        return ScriptDiffConfig(**config)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed: {e}") from e
