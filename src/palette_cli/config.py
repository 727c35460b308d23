"""Configuration management for the Palette CLI application."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.palette/config.yaml")


@dataclass
class ConfigModel:
    """Global configuration model for Palette CLI."""

    # Theme selection
    default_theme: str = "tokyonight"
    contrast_level: str = "aa"  # aa, aa-large, aaa, aaa-large

    # Export preferences
    css_prefix: Optional[str] = None

    # File paths
    themes_dir: str = "~/.palette/themes"
    data_dir: str = "~/.palette"

    # Diagnostics
    log_level: str = "WARNING"

    def __post_init__(self):
        """Post-initialization setup."""
        # Expand user paths
        self.themes_dir = os.path.expanduser(self.themes_dir)
        self.data_dir = os.path.expanduser(self.data_dir)

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        return yaml.dump(data, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML.

        Unknown keys are ignored.

        Raises:
            ValueError: If the document is not a mapping
            yaml.YAMLError: If the document is not valid YAML
        """
        data = yaml.safe_load(yaml_str)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("config file must contain a mapping")

        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def get_config_path(self) -> Path:
        """Get the config file path."""
        return Path(self.data_dir) / "config.yaml"

    def get_themes_path(self) -> Path:
        """Get the custom themes directory path."""
        return Path(self.themes_dir)


class Config:
    """Configuration manager for Palette CLI."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file, falling back to defaults.

        A missing file is not created; an unreadable or invalid file logs a
        warning and yields the default configuration.
        """
        if config_path is None:
            config_path = Path(os.path.expanduser(str(DEFAULT_CONFIG_PATH)))
        config_path = Path(config_path)

        config = ConfigModel()

        if config_path.exists():
            try:
                config = ConfigModel.from_yaml(config_path.read_text(encoding="utf-8"))
                logger.debug(f"Loaded configuration from {config_path}")
            except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}; using defaults")
        else:
            logger.debug(f"No configuration at {config_path}; using defaults")

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = config.get_config_path()
        config_path = Path(config_path)

        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(config.to_yaml(), encoding="utf-8")
        logger.info(f"Configuration saved to {config_path}")

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load(config_path)


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    Config.save(config, config_path)
