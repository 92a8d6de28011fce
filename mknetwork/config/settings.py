"""
MKNETWORK - Configuration Management

Handles client configuration from environment variables and files.
"""

import json
import logging
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

import yaml

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ClientConfig:
    """Network client configuration."""

    # Transport settings
    timeout: float = 30.0  # Seconds before a hung request fails

    # Default headers
    user_agent: Optional[str] = None  # Overrides the platform-derived user agent
    platform_source: str = "MKNetwork"  # First token of the composed user agent

    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Load configuration from environment variables.

        Environment variables:
        - MKNETWORK_TIMEOUT: Request timeout (seconds)
        - MKNETWORK_USER_AGENT: Fixed user agent string
        - MKNETWORK_PLATFORM_SOURCE: First token of the composed user agent
        - MKNETWORK_LOG_LEVEL: Log level for the mknetwork logger
        """
        return cls(
            timeout=float(os.environ.get("MKNETWORK_TIMEOUT", cls.timeout)),
            user_agent=os.environ.get("MKNETWORK_USER_AGENT", cls.user_agent),
            platform_source=os.environ.get("MKNETWORK_PLATFORM_SOURCE", cls.platform_source),
            log_level=os.environ.get("MKNETWORK_LOG_LEVEL", cls.log_level).upper(),
        )

    @classmethod
    def _read_file(cls, path: str) -> Dict[str, Any]:
        """
        Read configuration values from a YAML or JSON file.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If the format is unsupported, the content is not a
                mapping, or a key is not a ClientConfig field
        """
        if not os.path.exists(path):
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, "r") as f:
            if path.endswith((".yaml", ".yml")):
                data = yaml.safe_load(f)
            elif path.endswith(".json"):
                data = json.load(f)
            else:
                raise ValueError(f"Unsupported config file format: {path}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file must contain a mapping: {path}")

        known = {item.name for item in fields(cls)}
        for key in data:
            if key not in known:
                raise ValueError(f"Unknown configuration key: {key}")

        return data

    @classmethod
    def from_file(cls, path: str) -> "ClientConfig":
        """
        Load configuration from YAML or JSON file.

        Args:
            path: Path to configuration file (.yaml, .yml, or .json)

        Returns:
            ClientConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file format or keys are invalid
        """
        return cls(**cls._read_file(path))

    @classmethod
    def load(cls, config_file: Optional[str] = None) -> "ClientConfig":
        """
        Load configuration with priority: file > env > defaults.

        Args:
            config_file: Optional path to configuration file

        Returns:
            ClientConfig instance

        Raises:
            ValueError: If the file's format or keys are invalid
        """
        config = cls.from_env()

        if config_file and os.path.exists(config_file):
            # Only keys present in the file override env values
            for key, value in cls._read_file(config_file).items():
                setattr(config, key, value)

        return config

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")

        if not self.platform_source:
            raise ValueError("platform_source is required")


def configure_logging(config: ClientConfig) -> logging.Logger:
    """Apply the configured level to the mknetwork logger and return it."""
    logger = logging.getLogger("mknetwork")
    logger.setLevel(config.log_level.upper())
    return logger
