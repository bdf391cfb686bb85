"""Frame sink port: the output video stream of the image-to-video filter."""

from abc import ABC, abstractmethod
from typing import Optional

from ..domain.region import ImageRegion, TemporalRegion


class FrameSinkPort(ABC):
    """Port interface for a stream of (N-1)-dimensional frames."""

    @abstractmethod
    def get_largest_possible_temporal_region(self) -> Optional[TemporalRegion]:
        pass

    @abstractmethod
    def set_largest_possible_temporal_region(self, region: TemporalRegion) -> None:
        pass

    @abstractmethod
    def get_requested_temporal_region(self) -> Optional[TemporalRegion]:
        """Get the requested span; defaults to the largest possible span."""
        pass

    @abstractmethod
    def set_requested_temporal_region(self, region: TemporalRegion) -> None:
        pass

    @abstractmethod
    def set_all_largest_possible_spatial_regions(self, region: ImageRegion) -> None:
        """Set one largest possible spatial region shared by every frame."""
        pass

    @abstractmethod
    def set_frame_largest_possible_spatial_region(self, index: int, region: ImageRegion) -> None:
        """Override the shared largest possible region for one frame."""
        pass

    @abstractmethod
    def get_frame_largest_possible_spatial_region(self, index: int) -> ImageRegion:
        pass

    @abstractmethod
    def get_buffered_temporal_region(self) -> Optional[TemporalRegion]:
        """Get the span of frames filled by the last successful pass, or None."""
        pass

    @abstractmethod
    def set_buffered_temporal_region(self, region: TemporalRegion) -> None:
        pass

    @abstractmethod
    def get_frame_requested_spatial_region(self, index: int) -> ImageRegion:
        """Get a frame's requested region. A zero region means unspecified."""
        pass

    @abstractmethod
    def set_frame_requested_spatial_region(self, index: int, region: ImageRegion) -> None:
        pass

    @abstractmethod
    def set_requested_region_to_largest_possible_region(self) -> None:
        """Reset temporal and per-frame spatial requests to the largest possible."""
        pass

    @abstractmethod
    def graft_frame(self, index: int, frame) -> None:
        """Take ownership of a frame's data without copying it.

        Args:
            index: Frame index in the stream
            frame: Image produced by the filter
        """
        pass

    @abstractmethod
    def get_frame(self, index: int):
        """Get the frame at index, or None if it was never populated."""
        pass
