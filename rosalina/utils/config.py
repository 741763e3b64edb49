"""
Configuration System for Rosalina.

This module provides the host-side configuration: which tool name and
version go into the generated banner, which files count as UI documents,
and how logging is set up. Configuration is read from a JSON or YAML file;
synthesis itself takes no configuration.
"""

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigurationError
from .logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_FILES = ("rosalina.yaml", "rosalina.yml", "rosalina.json")
YAML_SUFFIXES = (".yaml", ".yml")


@dataclass
class GeneratorConfig:
    """Code generation configuration."""

    tool_name: str = "Rosalina Code Generator"
    version: Optional[str] = None
    document_extension: str = ".uxml"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    enable_file_logging: bool = False
    log_file: str = "rosalina.log"


class RosalinaConfig:
    """
    Configuration manager for the Rosalina host tools.

    Values come from a single JSON or YAML file with ``generator`` and
    ``logging`` sections. Missing keys take their defaults.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, looks for
                rosalina.yaml, rosalina.yml or rosalina.json in the working
                directory.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.generator = self._create_generator_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        for name in DEFAULT_CONFIG_FILES:
            candidate = Path.cwd() / name
            if candidate.exists():
                return candidate
        return Path.cwd() / DEFAULT_CONFIG_FILES[-1]

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            logger.debug(f"Configuration file {self.config_file} not found, using defaults")
            return {}

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                if self.config_file.suffix.lower() in YAML_SUFFIXES:
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to load configuration: {e}", str(self.config_file)
            ) from e

        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            raise ConfigurationError(
                "Configuration root must be a mapping", str(self.config_file)
            )

        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data

    def _section(self, name: str) -> Dict[str, Any]:
        section = self._config_data.get(name) or {}
        if not isinstance(section, dict):
            raise ConfigurationError(
                f"Configuration section '{name}' must be a mapping", str(self.config_file)
            )
        return section

    def _create_generator_config(self) -> GeneratorConfig:
        """Create generator configuration from loaded data."""
        gen_data = self._section("generator")
        defaults = GeneratorConfig()

        version = gen_data.get("version", defaults.version)
        return GeneratorConfig(
            tool_name=str(gen_data.get("tool_name", defaults.tool_name)),
            version=str(version) if version is not None else None,
            document_extension=str(
                gen_data.get("document_extension", defaults.document_extension)
            ),
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._section("logging")
        defaults = LoggingConfig()

        return LoggingConfig(
            level=str(log_data.get("level", defaults.level)),
            enable_file_logging=bool(log_data.get("enable_file_logging", defaults.enable_file_logging)),
            log_file=str(log_data.get("log_file", defaults.log_file)),
        )

    def banner(self):
        """Banner metadata for generated files; version defaults to the package's."""
        from ..codegen.renderer import BannerMeta

        default = BannerMeta.default()
        return BannerMeta(
            tool_name=self.generator.tool_name,
            version=self.generator.version or default.version,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a dictionary."""
        return {
            "generator": asdict(self.generator),
            "logging": asdict(self.logging),
        }

    def save_config(self) -> None:
        """Save current configuration to file."""
        config_data = self.to_dict()

        try:
            with open(self.config_file, "w", encoding="utf-8") as f:
                if self.config_file.suffix.lower() in YAML_SUFFIXES:
                    yaml.safe_dump(config_data, f, sort_keys=False)
                else:
                    json.dump(config_data, f, indent=2)
        except OSError as e:
            raise ConfigurationError(
                f"Failed to save configuration: {e}", str(self.config_file)
            ) from e
        logger.info(f"Configuration saved to {self.config_file}")


# Global configuration instance
_global_config: Optional[RosalinaConfig] = None


def get_config() -> RosalinaConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = RosalinaConfig()
    return _global_config


def set_config(config: Optional[RosalinaConfig]) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> RosalinaConfig:
    """Load configuration from a specific file."""
    return RosalinaConfig(os.fspath(config_file))
