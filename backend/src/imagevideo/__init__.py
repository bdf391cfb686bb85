"""Convert one axis of an N-dimensional image into a stream of (N-1)-dimensional frames."""

from .domain.errors import ImageVideoError, InvalidInputError, InvalidAxisError, RegionOutOfBoundsError
from .domain.region import ImageRegion, TemporalRegion
from .domain.image import Image
from .domain.video_stream import VideoStream
from .domain.image_to_video_filter import ImageToVideoFilter

__version__ = "0.1.0"

__all__ = [
    'ImageVideoError',
    'InvalidInputError',
    'InvalidAxisError',
    'RegionOutOfBoundsError',
    'ImageRegion',
    'TemporalRegion',
    'Image',
    'VideoStream',
    'ImageToVideoFilter',
]
