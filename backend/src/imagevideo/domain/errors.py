"""Errors raised by the image-to-video filter and its collaborators."""

from typing import List, Optional


class ImageVideoError(Exception):
    """Base class for filter errors."""
    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or [message]


class InvalidInputError(ImageVideoError):
    """No input connected, or the input has no resolvable metadata."""


class InvalidAxisError(ImageVideoError):
    """Temporal axis index is outside [0, input dimension)."""


class RegionOutOfBoundsError(ImageVideoError):
    """A requested region falls outside the data actually available."""
