"""
Image - numpy-backed N-dimensional image.

Array axis i corresponds to region axis i. The largest possible region is the
array shape offset by a start index, so pixel(index) reads
array[index - region.index]. Spacing, origin and direction carry the
physical placement of the grid and follow the data through extraction.
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from .errors import RegionOutOfBoundsError
from .region import ImageRegion
from ..ports.metadata_source_port import MetadataSourcePort


class Image(MetadataSourcePort):
    """N-dimensional image with region and physical metadata."""

    def __init__(
        self,
        array: np.ndarray,
        index: Optional[Sequence[int]] = None,
        spacing: Optional[Sequence[float]] = None,
        origin: Optional[Sequence[float]] = None,
        direction: Optional[np.ndarray] = None,
    ):
        array = np.asarray(array)
        if array.ndim < 1:
            raise ValueError("Image needs at least one axis")
        ndim = array.ndim
        self._array = array
        self._largest = ImageRegion.from_shape(array.shape, index)
        self._requested = self._largest
        self.spacing: Tuple[float, ...] = tuple(float(s) for s in (spacing if spacing is not None else (1.0,) * ndim))
        self.origin: Tuple[float, ...] = tuple(float(o) for o in (origin if origin is not None else (0.0,) * ndim))
        self.direction = np.array(direction, dtype=float) if direction is not None else np.eye(ndim)
        if len(self.spacing) != ndim or len(self.origin) != ndim:
            raise ValueError(f"Spacing and origin need {ndim} values")
        if self.direction.shape != (ndim, ndim):
            raise ValueError(f"Direction must be {ndim}x{ndim}, got {self.direction.shape}")

    @classmethod
    def from_array(cls, array, index=None, spacing=None, origin=None) -> "Image":
        """Wrap an array; the array is copied so the image owns its data."""
        return cls(np.array(array, copy=True), index=index, spacing=spacing, origin=origin)

    @property
    def array(self) -> np.ndarray:
        return self._array

    @property
    def dtype(self):
        return self._array.dtype

    @property
    def dimension(self) -> int:
        return self._array.ndim

    def get_largest_possible_region(self) -> ImageRegion:
        return self._largest

    def get_requested_region(self) -> ImageRegion:
        return self._requested

    def set_requested_region(self, region: ImageRegion) -> None:
        if region.dimension != self.dimension:
            raise ValueError(f"Requested region has {region.dimension} axes, image has {self.dimension}")
        self._requested = region

    def _offset(self, index: Sequence[int]) -> Tuple[int, ...]:
        if len(index) != self.dimension:
            raise IndexError(f"Index {tuple(index)} has wrong dimension for {self.dimension}-D image")
        offset = tuple(int(i) - s for i, s in zip(index, self._largest.index))
        for o, size in zip(offset, self._largest.size):
            if not 0 <= o < size:
                raise RegionOutOfBoundsError(f"Index {tuple(index)} outside region {self._largest.to_dict()}")
        return offset

    def pixel(self, index: Sequence[int]):
        """Get the pixel value at an index in region space."""
        return self._array[self._offset(index)]

    def set_pixel(self, index: Sequence[int], value) -> None:
        self._array[self._offset(index)] = value

    def extract(self, region: ImageRegion) -> "Image":
        """Extract region, collapsing zero-size axes. Data is copied."""
        if region.dimension != self.dimension:
            raise RegionOutOfBoundsError(
                f"Extraction region has {region.dimension} axes, image has {self.dimension}"
            )
        if not region.is_inside(self._largest):
            raise RegionOutOfBoundsError(
                f"Extraction region {region.to_dict()} outside available region {self._largest.to_dict()}"
            )
        kept = [axis for axis, size in enumerate(region.size) if size > 0]
        if not kept:
            raise RegionOutOfBoundsError("Extraction region collapses every axis")

        slices = []
        for axis, (start, size) in enumerate(zip(region.index, region.size)):
            offset = start - self._largest.index[axis]
            # size 0 means collapse: an integer index drops the axis
            slices.append(offset if size == 0 else slice(offset, offset + size))
        data = np.array(self._array[tuple(slices)], copy=True)

        # Retained axes keep their indices, so origin components carry over as-is.
        # Collapse direction to the sub-matrix of retained axes
        direction = self.direction[np.ix_(kept, kept)]
        return Image(
            data,
            index=[region.index[a] for a in kept],
            spacing=[self.spacing[a] for a in kept],
            origin=[self.origin[a] for a in kept],
            direction=direction,
        )

    def __repr__(self) -> str:
        return f"Image(dimension={self.dimension}, region={self._largest.to_dict()}, dtype={self.dtype})"
