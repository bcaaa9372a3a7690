"""NoiseFilter - ignore-pattern filtering for captured logs and network requests.

Example:
    >>> from noisefilter import PatternFilter
    >>> pattern_filter = PatternFilter()
    >>> await pattern_filter.load(".noiseignore")
    >>> pattern_filter.should_ignore_network_request("https://example.com/favicon.ico")
"""

from noisefilter.core.constants import NOISEFILTER_VERSION
from noisefilter.filter import PatternFilter, create_filter

__version__ = NOISEFILTER_VERSION

__all__ = [
    "PatternFilter",
    "create_filter",
    "__version__",
]
