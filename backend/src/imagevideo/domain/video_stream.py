"""
VideoStream - output side of the image-to-video filter.
Holds temporal and per-frame spatial region bookkeeping plus the frames themselves.
"""

from typing import Dict, Optional

from .image import Image
from .region import ImageRegion, TemporalRegion
from ..ports.frame_sink_port import FrameSinkPort


class VideoStream(FrameSinkPort):
    """
    Sequence of (N-1)-dimensional frames indexed by integer frame number.
    Frames are only written through graft_frame(); the stream never copies them.
    """

    def __init__(self, frame_dimension: Optional[int] = None):
        self.frame_dimension = frame_dimension
        self._largest_temporal: Optional[TemporalRegion] = None
        self._requested_temporal: Optional[TemporalRegion] = None
        self._buffered_temporal: Optional[TemporalRegion] = None
        self._shared_largest_spatial: Optional[ImageRegion] = None
        self._largest_spatial: Dict[int, ImageRegion] = {}
        self._requested_spatial: Dict[int, ImageRegion] = {}
        self._frames: Dict[int, Image] = {}

    # --- temporal regions ---

    def get_largest_possible_temporal_region(self) -> Optional[TemporalRegion]:
        return self._largest_temporal

    def set_largest_possible_temporal_region(self, region: TemporalRegion) -> None:
        self._largest_temporal = region

    def get_requested_temporal_region(self) -> Optional[TemporalRegion]:
        if self._requested_temporal is None:
            return self._largest_temporal
        return self._requested_temporal

    def set_requested_temporal_region(self, region: TemporalRegion) -> None:
        self._requested_temporal = region

    def get_buffered_temporal_region(self) -> Optional[TemporalRegion]:
        return self._buffered_temporal

    def set_buffered_temporal_region(self, region: TemporalRegion) -> None:
        self._buffered_temporal = region

    # --- spatial regions ---

    def set_all_largest_possible_spatial_regions(self, region: ImageRegion) -> None:
        self._shared_largest_spatial = region
        self._largest_spatial.clear()
        self.frame_dimension = region.dimension

    def set_frame_largest_possible_spatial_region(self, index: int, region: ImageRegion) -> None:
        """Override the shared largest possible region for one frame."""
        self._largest_spatial[index] = region

    def get_frame_largest_possible_spatial_region(self, index: int) -> ImageRegion:
        region = self._largest_spatial.get(index, self._shared_largest_spatial)
        if region is None:
            return ImageRegion.zeros(self.frame_dimension or 0)
        return region

    def get_frame_requested_spatial_region(self, index: int) -> ImageRegion:
        region = self._requested_spatial.get(index)
        if region is None:
            return ImageRegion.zeros(self.frame_dimension or 0)
        return region

    def set_frame_requested_spatial_region(self, index: int, region: ImageRegion) -> None:
        self._requested_spatial[index] = region

    def set_requested_region_to_largest_possible_region(self) -> None:
        self._requested_temporal = self._largest_temporal
        if self._largest_temporal is None:
            return
        for i in self._largest_temporal.frame_indices():
            self._requested_spatial[i] = self.get_frame_largest_possible_spatial_region(i)

    # --- frames ---

    def graft_frame(self, index: int, frame: Image) -> None:
        self._frames[index] = frame

    def get_frame(self, index: int) -> Optional[Image]:
        return self._frames.get(index)

    def frame_indices(self):
        """Indices of populated frames in increasing order."""
        return sorted(self._frames)

    def __len__(self) -> int:
        return len(self._frames)

    def get_metrics(self) -> Dict[str, object]:
        return {
            "frame_dimension": self.frame_dimension,
            "largest_temporal": self._largest_temporal.to_dict() if self._largest_temporal else None,
            "requested_temporal": (
                self.get_requested_temporal_region().to_dict()
                if self.get_requested_temporal_region() else None
            ),
            "buffered_temporal": self._buffered_temporal.to_dict() if self._buffered_temporal else None,
            "frame_count": len(self._frames),
        }
