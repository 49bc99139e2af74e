"""Configuration management."""

from script_diff.config.schema import ScriptDiffConfig
from script_diff.config.loader import load_config, load_yaml, deep_merge, apply_env_overrides

__all__ = [
    "ScriptDiffConfig",
    "load_config",
    "load_yaml",
    "deep_merge",
    "apply_env_overrides",
]
