"""
Configuration management for Taskify.

Loads settings from config.ini with environment variable overrides.
"""

import configparser
import os
from pathlib import Path
from typing import Optional, Dict, Any

from taskify.logging_config import get_logger
from taskify.models import Priority

logger = get_logger(__name__)

DEFAULT_TITLE = "Taskify - Track. Plan. Achieve."


class Config:
    """Application configuration manager."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config file, defaults to ~/.taskify/config.ini
        """
        self.config_path = config_path or self._default_config_path()
        self._config = configparser.ConfigParser()
        self._load()

    def _default_config_path(self) -> Path:
        """Get default config path."""
        return Path.home() / ".taskify" / "config.ini"

    def _load(self):
        """Load configuration from file."""
        if self.config_path.exists():
            try:
                self._config.read(self.config_path)
                logger.info(f"Loaded configuration from {self.config_path}")
            except configparser.Error as e:
                logger.warning(f"Failed to read config file: {e}. Using defaults.")
        else:
            logger.debug(f"Config file not found at {self.config_path}. Using defaults.")

    def get_display_config(self) -> Dict[str, Any]:
        """
        Get display configuration with environment overrides.

        Environment variables take precedence over config file:
        - TASKIFY_TITLE
        - TASKIFY_SHOW_COUNTS
        - TASKIFY_DEFAULT_PRIORITY

        Returns:
            Dictionary with display configuration. default_priority is a
            Priority member or None when no priority should be preselected.
        """
        show_counts_env = os.getenv('TASKIFY_SHOW_COUNTS', '').lower()
        show_counts = (
            show_counts_env == 'true'
            if show_counts_env
            else self._config.getboolean('display', 'show_counts', fallback=True)
        )

        raw_priority = (os.getenv('TASKIFY_DEFAULT_PRIORITY') or
                        self._config.get('display', 'default_priority', fallback=''))
        default_priority = None
        if raw_priority:
            try:
                default_priority = Priority.parse(raw_priority)
            except ValueError:
                logger.warning(f"Ignoring unknown default_priority '{raw_priority}'")

        config = {
            'title': os.getenv('TASKIFY_TITLE') or
                     self._config.get('display', 'title', fallback=DEFAULT_TITLE),
            'show_counts': show_counts,
            'default_priority': default_priority,
        }

        logger.debug(f"Display config: title={config['title']}, "
                     f"show_counts={config['show_counts']}, "
                     f"default_priority={config['default_priority']}")

        return config

    def get(self, section: str, key: str, fallback: Any = None) -> Any:
        """
        Get configuration value with fallback.

        Args:
            section: Config section name
            key: Config key name
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        return self._config.get(section, key, fallback=fallback)

    def get_bool(self, section: str, key: str, fallback: bool = False) -> bool:
        """Get boolean configuration value."""
        return self._config.getboolean(section, key, fallback=fallback)

    def get_int(self, section: str, key: str, fallback: int = 0) -> int:
        """Get integer configuration value."""
        return self._config.getint(section, key, fallback=fallback)

    def has_section(self, section: str) -> bool:
        """
        Check if config section exists.

        Args:
            section: Section name to check

        Returns:
            True if section exists
        """
        return self._config.has_section(section)

    def sections(self) -> list:
        """
        Get list of all configuration sections.

        Returns:
            List of section names
        """
        return self._config.sections()
