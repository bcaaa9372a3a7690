"""NoiseFilter Core - Shared constants and validation.

Import specific names from submodules:
    from noisefilter.core.constants import ErrorCode, Limits
    from noisefilter.core.validators import ValidationError
"""

from noisefilter.core import constants, validators

__all__ = [
    "constants",
    "validators",
]
