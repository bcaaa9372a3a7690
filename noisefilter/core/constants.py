"""
NoiseFilter Core: Constants

This module provides package-wide constants, error codes, and configuration
keys shared by the rules, infrastructure, and filter layers.
"""
from enum import IntEnum

# Version information
NOISEFILTER_VERSION = "1.0.0"

# Ignore file syntax
COMMENT_PREFIX = "#"
DEFAULT_ENCODING = "utf-8-sig"  # Plain UTF-8, tolerating a leading BOM


# Error codes
class ErrorCode(IntEnum):
    """Standardized error codes for NoiseFilter operations."""

    INVALID_INPUT = 1  # Bad pattern, invalid configuration
    NOT_FOUND = 2  # File or resource doesn't exist
    INTERNAL_ERROR = 6  # Bug in NoiseFilter


# Resource limits and defaults
class Limits:
    """Input limits and default values."""

    MAX_PATH_LENGTH = 4096

    # Log file rotation
    LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10MB
    LOG_FILE_BACKUP_COUNT = 5


# Configuration keys
class ConfigKey:
    """Configuration key constants."""

    # Root section
    ROOT = "noisefilter"

    # Section keys
    IGNORE_FILE = "ignore_file"
    ENCODING = "encoding"
    LOGGING = "logging"

    # Logging configuration
    LOG_LEVEL = "level"
    LOG_FILE = "file"


# Default configuration values
DEFAULT_CONFIG = {
    ConfigKey.ROOT: {
        ConfigKey.IGNORE_FILE: None,
        ConfigKey.ENCODING: DEFAULT_ENCODING,
        ConfigKey.LOGGING: {
            ConfigKey.LOG_LEVEL: "INFO",
            ConfigKey.LOG_FILE: None,
        },
    }
}
