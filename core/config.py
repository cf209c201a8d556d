"""
==============================================
Configuration management for the SQL helpers.
==============================================

Loads configuration from environment variables (.env file) and provides
a centralized Config singleton for library-wide access.

The configuration only controls ambient behaviour (logging). It never
changes the SQL text or parameter lists produced by the fragment builders.

Environment variables:
    SQLFRAGMENTS_LOG_LEVEL: Logging level (default INFO)
    SQLFRAGMENTS_LOG_FILE: Optional log file name
    SQLFRAGMENTS_LOG_DIR: Directory for the log file (default logs)
    SQLFRAGMENTS_LOG_COLORS: Colored console output (default true)
    SQLFRAGMENTS_AUTO_LOGGING: Configure root logging on import (default false)

Example:
    >>> from core.config import config
    >>>
    >>> if config.auto_setup_logging:
    ...     print(f"Logging at {config.log_level}")
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

TRUTHY_VALUES = ('1', 'true', 'yes', 'on')


def parse_bool(value: Optional[str], default: bool = False) -> bool:
    """Parse an environment flag.

    Args:
        value: Raw environment value (None when unset)
        default: Value returned when the variable is unset or blank

    Returns:
        True for 1/true/yes/on (case-insensitive), False otherwise
    """
    if value is None or not value.strip():
        return default
    return value.strip().lower() in TRUTHY_VALUES


@dataclass
class LoggingConfig:
    """Logging configuration settings.

    Attributes:
        level: Logging level name (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        log_file: Optional log file name
        log_dir: Directory where the log file is written
        use_colors: Use colored console output
        auto_setup: Configure root logging when core.logger is imported
    """

    level: str
    log_file: Optional[str]
    log_dir: str
    use_colors: bool
    auto_setup: bool


class Config:
    """Centralized configuration manager.

    Attributes:
        logging: LoggingConfig instance with logging settings

    Properties:
        log_level: Logging level name
        log_file: Optional log file name
        auto_setup_logging: Whether root logging is configured on import

    Example:
        >>> config = Config()
        >>> print(config.log_level)
    """

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.logging = LoggingConfig(
            level=os.getenv('SQLFRAGMENTS_LOG_LEVEL', 'INFO').upper(),
            log_file=os.getenv('SQLFRAGMENTS_LOG_FILE') or None,
            log_dir=os.getenv('SQLFRAGMENTS_LOG_DIR', 'logs'),
            use_colors=parse_bool(os.getenv('SQLFRAGMENTS_LOG_COLORS'), default=True),
            auto_setup=parse_bool(os.getenv('SQLFRAGMENTS_AUTO_LOGGING'), default=False)
        )

    @property
    def log_level(self) -> str:
        """Get logging level name."""
        return self.logging.level

    @property
    def log_file(self) -> Optional[str]:
        """Get log file name, if any."""
        return self.logging.log_file

    @property
    def auto_setup_logging(self) -> bool:
        """Get whether root logging is configured on import."""
        return self.logging.auto_setup


# Global configuration instance
config = Config()
