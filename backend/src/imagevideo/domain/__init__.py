"""Domain package."""

from .errors import ImageVideoError, InvalidInputError, InvalidAxisError, RegionOutOfBoundsError
from .region import ImageRegion, TemporalRegion

__all__ = [
    'ImageVideoError',
    'InvalidInputError',
    'InvalidAxisError',
    'RegionOutOfBoundsError',
    'ImageRegion',
    'TemporalRegion',
]
