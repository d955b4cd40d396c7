"""Configuration management for the File Organizer."""

import logging
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field
import configparser

from .exceptions import ConfigurationError


@dataclass
class OrganizeConfig:
    """Organizer run settings."""
    dry_run: bool = False
    show_entries: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_enabled: bool = False
    file_path: Optional[Path] = None
    file_max_size_mb: int = 10
    file_backup_count: int = 5
    console_enabled: bool = True


@dataclass
class AppConfig:
    """Main application configuration."""
    organize: OrganizeConfig = field(default_factory=OrganizeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigManager:
    """Loads application configuration from an optional INI file."""

    def __init__(self, config_file: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_file: Path to an INI file. If None, defaults are used and
                         nothing is read from or written to disk.

        Raises:
            ConfigurationError: If config_file is given but does not exist
        """
        self.config_file = config_file
        self.config = AppConfig()
        self.logger = logging.getLogger(__name__)

        if self.config_file is not None:
            if not self.config_file.is_file():
                raise ConfigurationError(f"Configuration file not found: {self.config_file}")
            self.load_from_file()

    def load_from_file(self) -> None:
        """Load configuration from INI file."""
        try:
            parser = configparser.ConfigParser(interpolation=None)  # Log formats contain '%'
            parser.read(self.config_file)

            if 'organize' in parser:
                organize_section = parser['organize']
                if 'dry_run' in organize_section:
                    self.config.organize.dry_run = organize_section.getboolean('dry_run')
                if 'show_entries' in organize_section:
                    self.config.organize.show_entries = organize_section.getboolean('show_entries')

            if 'logging' in parser:
                log_section = parser['logging']
                if 'level' in log_section:
                    self.config.logging.level = log_section.get('level')
                if 'format' in log_section:
                    self.config.logging.format = log_section.get('format')
                if 'file_enabled' in log_section:
                    self.config.logging.file_enabled = log_section.getboolean('file_enabled')
                if 'file_path' in log_section:
                    self.config.logging.file_path = Path(log_section.get('file_path'))
                if 'file_max_size_mb' in log_section:
                    self.config.logging.file_max_size_mb = log_section.getint('file_max_size_mb')
                if 'file_backup_count' in log_section:
                    self.config.logging.file_backup_count = log_section.getint('file_backup_count')
                if 'console_enabled' in log_section:
                    self.config.logging.console_enabled = log_section.getboolean('console_enabled')

            self.logger.info(f"Configuration loaded from {self.config_file}")

        except (configparser.Error, ValueError) as e:
            self.logger.error(f"Error loading configuration from {self.config_file}: {e}")
            # Values parsed before the error are kept, the rest stay default

    def get_config(self) -> AppConfig:
        """Get the current configuration."""
        return self.config


# Global configuration instance
_config_manager = None


def get_config() -> AppConfig:
    """Get the global application configuration."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager.get_config()


def setup_config(config_file: Optional[Path] = None) -> ConfigManager:
    """
    Set up global configuration.

    Args:
        config_file: Optional path to configuration file

    Returns:
        ConfigManager instance
    """
    global _config_manager
    _config_manager = ConfigManager(config_file)
    return _config_manager
