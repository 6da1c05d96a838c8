"""
Configuration settings for the application.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from dirserve.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings:
    """
    Server settings loaded from explicit arguments or environment variables.

    Explicit arguments take precedence over the environment. The served root is
    canonicalized once here and exposed read-only.
    """

    def __init__(
        self,
        serve_dir: Optional[str] = None,
        host: Optional[str] = None,
        port: Optional[int] = None,
        log_level: Optional[str] = None,
        templates_dir: Optional[str] = None,
    ):
        self._serve_root: str = self._resolve_root(
            serve_dir or self._get_env("DIRSERVE_ROOT", "")
        )
        self.host: str = host or self._get_env("DIRSERVE_HOST", "0.0.0.0")
        self.port: int = self._parse_port(
            port if port is not None else self._get_env("DIRSERVE_PORT", "8000")
        )
        self.log_level: str = self._parse_log_level(
            log_level or self._get_env("DIRSERVE_LOG_LEVEL", "INFO")
        )
        self.templates_dir: Optional[str] = templates_dir or (
            os.getenv("DIRSERVE_TEMPLATES_DIR") or None
        )

    @property
    def serve_root(self) -> str:
        """Absolute, canonical path of the served directory."""
        return self._serve_root

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _resolve_root(self, serve_dir: str) -> str:
        """Canonicalize the served root, defaulting to the current directory."""
        try:
            root = os.path.realpath(os.path.expanduser(serve_dir) if serve_dir else os.getcwd())
        except OSError as e:
            raise ConfigurationError(f"Could not retrieve current directory: {e}")
        if not os.path.isdir(root):
            raise ConfigurationError(f"Directory to serve does not exist: {root}")
        return root

    def _parse_port(self, value) -> int:
        try:
            port = int(value)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Port must be an integer, got {value!r}")
        if not 0 <= port <= 65535:
            raise ConfigurationError(f"Port out of range: {port}")
        return port

    def _parse_log_level(self, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {value}")
        return level

    def __repr__(self) -> str:
        return (
            f"Settings(serve_root={self._serve_root!r}, host={self.host!r}, "
            f"port={self.port}, log_level={self.log_level!r})"
        )


def get_settings(**overrides) -> Settings:
    """
    Build settings from the environment.

    Args:
        **overrides: Explicit values (serve_dir, host, port, log_level, templates_dir)

    Returns:
        A new Settings instance

    Raises:
        ConfigurationError: If a value is invalid
    """
    return Settings(**overrides)
