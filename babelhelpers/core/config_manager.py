"""
Configuration management for babelhelpers.

Handles loading, merging, and discovery of configuration files with
single responsibility for config operations.
"""
import importlib.resources as importlib_resources
import logging
import os
from typing import Optional

import yaml

DEFAULT_CONFIG_FILENAME = "babelhelpers.config.yaml"


class ConfigManager:
    """Manages babelhelpers configuration loading and merging operations."""

    def load_config(self, path: str) -> dict:
        """Load configuration from YAML file."""
        with open(path, "r") as f:
            return yaml.safe_load(f) or {}

    def deep_merge(self, default: dict, user: dict) -> dict:
        """Deep merge user config into default config."""
        result = default.copy()
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def load_package_default_config(self) -> dict:
        """Load default config from package."""
        import babelhelpers.config
        default_config_path = importlib_resources.files(babelhelpers.config) / "default.yaml"
        with default_config_path.open("r") as f:
            return yaml.safe_load(f)

    def load_and_merge_config(self, user_config_path: str) -> dict:
        """Load user config and merge with package default."""
        default_config = self.load_package_default_config()
        user_config = self.load_config(user_config_path)
        return self.deep_merge(default_config, user_config)

    def discover_and_load_config(self, config_arg: Optional[str]) -> dict:
        """Discover config file with priority order."""

        # Priority 1: --config argument
        if config_arg:
            if os.path.exists(config_arg):
                return self.load_and_merge_config(config_arg)
            else:
                raise FileNotFoundError(f"Config file not found: {config_arg}")

        # Priority 2: babelhelpers.config.yaml in current directory
        if os.path.exists(DEFAULT_CONFIG_FILENAME):
            return self.load_and_merge_config(DEFAULT_CONFIG_FILENAME)

        # Priority 3: Package default config
        return self.load_package_default_config()

    def merge_config_and_args(self, config: dict, verbose: bool) -> dict:
        """Merge configuration with CLI arguments."""
        if verbose:
            config.setdefault("logging", {})["level"] = "DEBUG"
        return config

    def configure_logging(self, config: dict) -> None:
        """Apply the configured log level to the root logger."""
        level_name = str(config.get("logging", {}).get("level", "WARNING")).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.WARNING
        logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger().setLevel(level)
