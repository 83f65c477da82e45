"""
Config Module - Black Box Interface

Purpose: Application configuration management
Interface: get_config(), ConfigModule.get(), ConfigModule.set()
Hidden: Config sources, validation logic, environment parsing

Can be replaced with different config systems (Consul, etcd, AWS Parameter Store).
"""

import os
from typing import Any, Dict


# Configuration Contract: Required and Optional Keys

REQUIRED_CONFIG_KEYS = {
    "host": "API server bind address",
    "port": "API server port",
    "log_level": "Logging level (DEBUG, INFO, WARNING, ERROR)",
    "backend": "Queue storage backend (memory or redis)",
    "retry_interval": "Seconds between attempts while a GET waits for a value",
}

OPTIONAL_CONFIG_KEYS = {
    "debug": {
        "description": "Enable debug mode (auto-reload)",
        "default": False,
    },
    "redis_host": {
        "description": "Redis server hostname (redis backend only)",
        "default": "localhost",
    },
    "redis_port": {
        "description": "Redis server port number (redis backend only)",
        "default": 6379,
    },
    "redis_db": {
        "description": "Redis database number (redis backend only)",
        "default": 0,
    },
    "redis_password": {
        "description": "Redis authentication password",
        "default": None,
    },
    "redis_key_prefix": {
        "description": "Prefix for the Redis lists holding each queue",
        "default": "queue:values:",
    },
}

SUPPORTED_BACKENDS = ("memory", "redis")


class ConfigModule:
    """Configuration management module."""

    def __init__(self):
        """Initialize with environment variables."""
        self._config = self._load_from_env()
        self._validate_required_keys()
        self._validate_values()

    def _validate_required_keys(self) -> None:
        """
        Validate that all required configuration keys are present.

        Raises:
            ValueError: If required keys are missing
        """
        missing_keys = []
        for key in REQUIRED_CONFIG_KEYS:
            if key not in self._config or self._config[key] is None:
                missing_keys.append(key)

        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}. "
                f"Check environment variables and deployment configuration."
            )

    def _validate_values(self) -> None:
        """Reject values the service cannot run with."""
        if self._config["backend"] not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"Unsupported QUEUE_BACKEND {self._config['backend']!r}. "
                f"Expected one of: {', '.join(SUPPORTED_BACKENDS)}"
            )
        if self._config["retry_interval"] <= 0:
            raise ValueError("QUEUE_RETRY_INTERVAL must be a positive number of seconds")

    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment."""
        # Parse Redis port (might be in tcp://host:port format from K8s)
        redis_port_env = os.getenv("REDIS_PORT", "6379")
        if redis_port_env.startswith("tcp://"):
            redis_port = int(redis_port_env.split(":")[-1])
        else:
            redis_port = int(redis_port_env)

        return {
            # API settings
            "host": os.getenv("API_HOST", "0.0.0.0"),
            "port": int(os.getenv("API_PORT", "8080")),
            "log_level": os.getenv("LOG_LEVEL", "INFO"),
            "debug": os.getenv("DEBUG", "false").lower() == "true",
            # Queue settings
            "backend": os.getenv("QUEUE_BACKEND", "memory").lower(),
            "retry_interval": float(os.getenv("QUEUE_RETRY_INTERVAL", "1.0")),
            # Redis settings
            "redis_host": os.getenv("REDIS_HOST", "localhost"),
            "redis_port": redis_port,
            "redis_db": int(os.getenv("REDIS_DB", "0")),
            "redis_password": os.getenv("REDIS_PASSWORD"),
            "redis_key_prefix": os.getenv("REDIS_KEY_PREFIX", "queue:values:"),
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set configuration value."""
        self._config[key] = value

    def get_all(self) -> Dict[str, Any]:
        """Get all configuration values."""
        return self._config.copy()

    @staticmethod
    def get_config_schema() -> Dict[str, Any]:
        """
        Get the configuration schema (contract) for this module.

        Returns:
            Dictionary with 'required' and 'optional' key specifications

        Example:
            >>> schema = ConfigModule.get_config_schema()
            >>> print(schema['required']['backend'])
            'Queue storage backend (memory or redis)'
        """
        return {
            "required": REQUIRED_CONFIG_KEYS.copy(),
            "optional": OPTIONAL_CONFIG_KEYS.copy(),
        }


# Singleton instance
_instance = None


def get_config() -> ConfigModule:
    """Get the configuration module singleton."""
    global _instance
    if _instance is None:
        _instance = ConfigModule()
    return _instance


def reset_config() -> None:
    """Drop the cached singleton so the next get_config() re-reads the environment."""
    global _instance
    _instance = None


__all__ = ["get_config", "reset_config", "ConfigModule", "SUPPORTED_BACKENDS"]
