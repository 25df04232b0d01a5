"""
Configuration management for the todo-app client.

This module handles loading and accessing configuration values from config.yaml.
It decides which base URL convention and which envelope decoding strategy a
deployment uses, so the same client code can talk to either kind of server.
"""

import yaml
from pathlib import Path
from typing import Any, Dict
import logging


class ConfigManager:
    """
    Manages configuration loading and access for the client.
    """

    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file
        """
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            logging.debug(f"Configuration file not found: {self.config_path}, using defaults")
            self._config = self._get_default_config()
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}

            self._config = self._merge(self._get_default_config(), loaded)
            logging.info(f"Configuration loaded from {self.config_path}")

        except (OSError, yaml.YAMLError) as e:
            logging.error(f"Failed to load configuration: {e}")
            self._config = self._get_default_config()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values as fallback."""
        return {
            "api": {
                "url_convention": "api",
                "api_url": "http://localhost:8080/api/",
                "service_prefix": "todo_app/",
                "static_url": "http://localhost:8080/",
                "decode_strategy": "envelope",
                "validate_responses": False,
                "timeout": 30.0
            },
            "logging": {
                "level": "INFO",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        }

    @classmethod
    def _merge(cls, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        merged = dict(base)
        for key, value in override.items():
            if isinstance(merged.get(key), dict) and value is None:
                # an empty section in the file keeps the defaults
                continue
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = cls._merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key_path: Dot-separated path to the configuration value (e.g., "api.api_url")
            default: Default value if key is not found

        Returns:
            The configuration value

        Examples:
            config.get("api.decode_strategy")  # Returns "envelope"
            config.get("logging.level")  # Returns "INFO"
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get an entire configuration section.

        Args:
            section: Name of the configuration section

        Returns:
            Dictionary containing the section configuration
        """
        return self._config.get(section, {})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    # Convenience properties for commonly used values

    @property
    def url_convention(self) -> str:
        """Get the default base URL convention ("api" or "static")."""
        return self.get("api.url_convention", "api")

    @property
    def api_url(self) -> str:
        """Get the shared API URL."""
        return self.get("api.api_url", "http://localhost:8080/api/")

    @property
    def service_prefix(self) -> str:
        """Get the path prefix of the todo-app service under the API URL."""
        return self.get("api.service_prefix", "todo_app/")

    @property
    def static_url(self) -> str:
        """Get the shared static URL."""
        return self.get("api.static_url", "http://localhost:8080/")

    @property
    def decode_strategy(self) -> str:
        """Get the response decoding strategy ("envelope" or "status")."""
        return self.get("api.decode_strategy", "envelope")

    @property
    def validate_responses(self) -> bool:
        """Whether successful responses are validated into typed records."""
        return bool(self.get("api.validate_responses", False))

    @property
    def timeout(self) -> float:
        """Get the HTTP request timeout in seconds."""
        return float(self.get("api.timeout", 30.0))


# Global configuration instance
config = ConfigManager()


def get_config() -> ConfigManager:
    """
    Get the global configuration instance.

    Returns:
        The global ConfigManager instance
    """
    return config
