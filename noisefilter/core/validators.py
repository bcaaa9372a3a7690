"""
NoiseFilter Core: Input Validators.

This module provides validation functions for ignore patterns and the
configuration section consumed by the filter.
"""
import codecs
import re
from typing import Any, Dict, Pattern

from noisefilter.core.constants import ConfigKey, ErrorCode, Limits

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ValidationError(Exception):
    """Base exception for validation errors."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_INPUT):
        """Initialize ValidationError.

        Args:
            message: Error message
            error_code: Associated error code
        """
        super().__init__(message)
        self.error_code = error_code


def validate_pattern(pattern: str) -> bool:
    """Validate an ignore pattern source string.

    Only type and emptiness are checked; syntax is checked by validate_regex
    when the pattern is compiled.

    Args:
        pattern: Regular expression source

    Returns:
        True if valid

    Raises:
        ValidationError: If pattern is invalid
    """
    if not isinstance(pattern, str):
        raise ValidationError(f"Pattern must be string, got {type(pattern)}")

    if not pattern:
        raise ValidationError("Pattern cannot be empty")

    return True


def validate_regex(pattern: str, flags: int = 0) -> Pattern[str]:
    """Validate and compile a regular expression.

    Args:
        pattern: Regular expression source
        flags: Flags passed to re.compile

    Returns:
        Compiled pattern

    Raises:
        ValidationError: If pattern does not compile, including repeat counts
            too large for the engine and nesting too deep for the parser
    """
    try:
        return re.compile(pattern, flags)
    except (re.error, OverflowError, RecursionError) as e:
        raise ValidationError(f"Invalid regex pattern: {e}")


def validate_log_level(level: str) -> bool:
    """Validate a log level name.

    Args:
        level: Level name (case-insensitive)

    Returns:
        True if valid

    Raises:
        ValidationError: If level is unknown
    """
    if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
        raise ValidationError(
            f"Invalid log level: {level!r}. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
        )
    return True


def validate_encoding(encoding: str) -> bool:
    """Validate a text encoding name.

    Raises:
        ValidationError: If Python has no codec for the name
    """
    if not isinstance(encoding, str) or not encoding:
        raise ValidationError("Encoding must be a non-empty string")

    try:
        codecs.lookup(encoding)
    except LookupError:
        raise ValidationError(f"Unknown encoding: {encoding}")
    return True


def validate_config(config: Dict[str, Any]) -> bool:
    """Validate the NoiseFilter configuration structure.

    Args:
        config: Merged configuration dictionary

    Returns:
        True if valid

    Raises:
        ValidationError: If configuration is invalid
    """
    if not isinstance(config, dict):
        raise ValidationError("Configuration must be a dictionary")

    section = config.get(ConfigKey.ROOT, {})
    if not isinstance(section, dict):
        raise ValidationError(f"'{ConfigKey.ROOT}' section must be a dictionary")

    ignore_file = section.get(ConfigKey.IGNORE_FILE)
    if ignore_file is not None:
        if not isinstance(ignore_file, str) or not ignore_file:
            raise ValidationError("Ignore file must be a non-empty string")
        if len(ignore_file) > Limits.MAX_PATH_LENGTH:
            raise ValidationError(f"Ignore file path exceeds maximum length ({Limits.MAX_PATH_LENGTH})")

    if ConfigKey.ENCODING in section:
        validate_encoding(section[ConfigKey.ENCODING])

    logging_cfg = section.get(ConfigKey.LOGGING, {})
    if not isinstance(logging_cfg, dict):
        raise ValidationError("Logging configuration must be a dictionary")

    if ConfigKey.LOG_LEVEL in logging_cfg:
        validate_log_level(logging_cfg[ConfigKey.LOG_LEVEL])

    log_file = logging_cfg.get(ConfigKey.LOG_FILE)
    if log_file is not None and (not isinstance(log_file, str) or not log_file):
        raise ValidationError("Log file must be a non-empty string")

    return True
