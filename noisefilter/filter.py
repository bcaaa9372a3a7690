"""Ignore-pattern filtering for captured console logs and network requests.

The host application loads an ignore file once (or again whenever its
configuration changes) and asks the filter, for every console message or
request URL it captures, whether the event should be suppressed.

Ignore file format, one regular expression per line::

    # Comments and blank lines are skipped
    favicon\\.ico
    ^\\[HMR\\]
    google-analytics\\.com

Patterns are case-insensitive and match anywhere in the text.
"""

import itertools
from pathlib import Path
from re import Pattern
from typing import Any, Dict, List, Optional, Union

import aiofiles

from noisefilter.core.constants import DEFAULT_ENCODING, ConfigKey
from noisefilter.core.validators import ValidationError, validate_encoding
from noisefilter.infrastructure.config_manager import ConfigManager, get_config_manager
from noisefilter.infrastructure.logger import Logger, get_logger
from noisefilter.rules.patterns import PatternMatcher, parse_pattern_line

_filter_ids = itertools.count(1)


class PatternFilter:
    """Filters console logs and network requests against ignore patterns.

    The pattern set is replaced as a whole by load(). Predicates and
    accessors are synchronous and may run while a load is suspended on
    file I/O; in that window they see the set cleared or partially refilled.
    Overlapping loads are not serialized.
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING, logger: Optional[Logger] = None):
        """Initialize an empty filter.

        Args:
            encoding: Text encoding of ignore files
            logger: Logger for load diagnostics, defaults to the package logger

        Raises:
            ValidationError: If the encoding is unknown
        """
        validate_encoding(encoding)
        self.encoding = encoding
        self.logger = logger or get_logger()
        self.ignore_file: Optional[Path] = None
        self._matcher = PatternMatcher()

    @classmethod
    def from_config(cls, config: ConfigManager) -> "PatternFilter":
        """Create a filter whose encoding and logging come from configuration.

        Args:
            config: Configuration manager to read the noisefilter section from

        Returns:
            New, empty filter
        """
        root = ConfigKey.ROOT
        logging_key = f"{root}.{ConfigKey.LOGGING}"

        # Own child logger so the package logger and other filters keep their handlers
        logger = Logger(
            name=f"{root}.filter.{next(_filter_ids)}",
            level=config.get(f"{logging_key}.{ConfigKey.LOG_LEVEL}", "INFO"),
        )
        log_file = config.get(f"{logging_key}.{ConfigKey.LOG_FILE}")
        if log_file:
            logger.add_handler(logger.create_file_handler(Path(log_file).expanduser()))

        return cls(
            encoding=config.get(f"{root}.{ConfigKey.ENCODING}", DEFAULT_ENCODING),
            logger=logger,
        )

    async def load(self, file_path: Union[str, Path]) -> None:
        """Replace the pattern set with the patterns in an ignore file.

        A missing file leaves the current patterns in place. Otherwise the
        set is cleared first and refilled line by line; invalid patterns are
        skipped, and a read failure keeps whatever was parsed before it.
        Problems are logged, never raised.

        Args:
            file_path: Path to the ignore file
        """
        path = Path(file_path)

        # Path("") resolves to the working directory
        if not file_path or not path.exists():
            self.logger.error("Ignore file not found", path=file_path)
            return

        self.logger.info("Loading ignore patterns", path=path)
        self._matcher.clear()
        self.ignore_file = path

        try:
            async with aiofiles.open(path, mode="r", encoding=self.encoding) as f:
                line_number = 0
                async for line in f:
                    line_number += 1
                    self._add_line(line, line_number)
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error("Error loading ignore patterns", path=path, error=e)
            return

        self.logger.info("Loaded ignore patterns", path=path, count=len(self._matcher))

    def _add_line(self, line: str, line_number: int) -> None:
        source = parse_pattern_line(line)
        if source is None:
            return

        try:
            self._matcher.add_pattern(source, line_number=line_number)
        except ValidationError as e:
            self.logger.error("Invalid regex pattern", pattern=source, line=line_number, error=e)
            return

        self.logger.info("Added ignore pattern", pattern=source)

    def should_ignore_console_log(self, message: str) -> bool:
        """Check if a console log should be ignored based on its message.

        Args:
            message: The console log message

        Returns:
            True if the log should be ignored
        """
        if not self._matcher or not message:
            return False
        return self._matcher.matches(message)

    def should_ignore_network_request(self, url: str) -> bool:
        """Check if a network request should be ignored based on its URL.

        Args:
            url: The network request URL

        Returns:
            True if the request should be ignored
        """
        if not self._matcher or not url:
            return False
        return self._matcher.matches(url)

    def get_pattern_count(self) -> int:
        """Get the number of loaded patterns."""
        return len(self._matcher)

    def get_patterns(self) -> List[Pattern[str]]:
        """Get all loaded patterns.

        Returns:
            New list of compiled patterns; changing it does not affect the filter
        """
        return [entry.compiled for entry in self._matcher.get_patterns()]

    def get_matching_patterns(self, text: str) -> List[str]:
        """Get the sources of all patterns that match the text.

        Args:
            text: Console message or request URL

        Returns:
            Matching pattern sources in load order
        """
        if not text:
            return []
        return self._matcher.get_matching_patterns(text)

    def get_status(self) -> Dict[str, Any]:
        """Get current filter status.

        Returns:
            Dict with filter information
        """
        return {
            "loaded": bool(self._matcher),
            "count": len(self._matcher),
            "path": str(self.ignore_file) if self.ignore_file else None,
            "patterns": [entry.pattern for entry in self._matcher.get_patterns()],
        }

    def __len__(self) -> int:
        return len(self._matcher)

    def __bool__(self) -> bool:
        return bool(self._matcher)


async def create_filter(config: Optional[ConfigManager] = None) -> PatternFilter:
    """Create a filter from configuration and load its ignore file.

    Args:
        config: Configuration manager, defaults to the global one

    Returns:
        Filter with the configured ignore file loaded, or empty if none is set
    """
    config = config or get_config_manager()
    pattern_filter = PatternFilter.from_config(config)

    ignore_file = config.get(f"{ConfigKey.ROOT}.{ConfigKey.IGNORE_FILE}")
    if ignore_file:
        await pattern_filter.load(Path(ignore_file).expanduser())

    return pattern_filter
