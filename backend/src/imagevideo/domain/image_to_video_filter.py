"""
ImageToVideoFilter - turns one axis of an N-dimensional image into time.

Every index along the frame axis becomes one (N-1)-dimensional frame of the
output stream. A pass runs in the order a pull-based pipeline drives it:

  1. derive_output_metadata()         input region -> temporal + frame spatial regions
  2. resolve_requested_output_region() fill in unspecified per-frame requests
  3. compute_input_requested_region()  always the whole input
  4. generate_output_data()            extract and graft requested frames

update() runs all four; metadata is only re-derived when the input region or
frame axis changed, so consumer requests set between passes survive.
"""

from typing import Dict, Optional, Tuple

from .errors import InvalidAxisError, InvalidInputError
from .region import ImageRegion, TemporalRegion
from .region_negotiation import (
    OutputMetadata,
    check_requested_span,
    compute_input_requested_region,
    derive_output_metadata,
    extract_frames,
    resolve_requested_regions,
    validate_frame_axis,
)
from .video_stream import VideoStream
from ..ports.frame_sink_port import FrameSinkPort
from ..ports.metadata_source_port import MetadataSourcePort
from ..services.logging_service import LoggingService


class ImageToVideoFilter:
    """Converts an N-D image into a stream of (N-1)-D frames along frame_axis."""

    def __init__(
        self,
        frame_axis: int = 0,
        output: Optional[FrameSinkPort] = None,
        logger: Optional[LoggingService] = None,
    ):
        self.logger = logger or LoggingService()
        self._input: Optional[MetadataSourcePort] = None
        self._output: FrameSinkPort = output if output is not None else VideoStream()
        self._frame_axis = 0
        self._metadata: Optional[OutputMetadata] = None
        self._metadata_key: Optional[Tuple[int, ImageRegion, int]] = None
        self.frame_axis = frame_axis

    # --- configuration ---

    @property
    def frame_axis(self) -> int:
        return self._frame_axis

    @frame_axis.setter
    def frame_axis(self, value: int) -> None:
        value = int(value)
        if value < 0:
            raise InvalidAxisError(f"Frame axis must be non-negative, got {value}")
        if self._input is not None:
            validate_frame_axis(value, self._input.dimension)
        self._frame_axis = value

    def set_input(self, source: MetadataSourcePort) -> None:
        self._input = source
        self._metadata_key = None

    def get_input(self) -> MetadataSourcePort:
        if self._input is None:
            raise InvalidInputError("[Filter] No input connected")
        return self._input

    def get_output(self) -> FrameSinkPort:
        return self._output

    @property
    def output_metadata(self) -> Optional[OutputMetadata]:
        """Regions published by the last metadata derivation."""
        return self._metadata

    # --- pipeline phases ---

    def derive_output_metadata(self) -> OutputMetadata:
        """Publish largest possible temporal/spatial regions and reset requests to them."""
        source = self.get_input()
        input_region = source.get_largest_possible_region()
        if input_region is None:
            raise InvalidInputError("[Filter] Input has no largest possible region")

        metadata = derive_output_metadata(input_region, self._frame_axis)
        self._output.set_largest_possible_temporal_region(metadata.temporal_region)
        self._output.set_all_largest_possible_spatial_regions(metadata.spatial_region)
        self._output.set_requested_region_to_largest_possible_region()

        self._metadata = metadata
        self._metadata_key = (id(source), input_region, self._frame_axis)
        self.logger.info(
            f"[Filter] Axis {self._frame_axis} of {input_region.dimension}-D input -> "
            f"frames {metadata.temporal_region.frame_start}.."
            f"{metadata.temporal_region.frame_end - 1}, frame size {metadata.spatial_region.size}"
        )
        return metadata

    def update_output_information(self) -> OutputMetadata:
        """Derive metadata only if the input region or frame axis changed since last time."""
        source = self.get_input()
        key = (id(source), source.get_largest_possible_region(), self._frame_axis)
        if self._metadata is None or key != self._metadata_key:
            return self.derive_output_metadata()
        return self._metadata

    def resolve_requested_output_region(self) -> Dict[int, ImageRegion]:
        """
        Give every requested frame without an explicit spatial request its largest possible region.
        Frames outside the largest possible span are left alone; generation rejects them.
        """
        requested = self._output.get_requested_temporal_region()
        largest = self._output.get_largest_possible_temporal_region()
        if requested is None or largest is None:
            raise InvalidInputError("[Filter] Output metadata has not been derived")
        temporal = requested.crop(largest)
        resolved = resolve_requested_regions(
            temporal,
            self._output.get_frame_requested_spatial_region,
            self._output.get_frame_largest_possible_spatial_region,
        )
        for i, region in resolved.items():
            self._output.set_frame_requested_spatial_region(i, region)
        self.logger.debug(f"[Filter] Resolved spatial requests for {len(resolved)} frames")
        return resolved

    def compute_input_requested_region(self) -> ImageRegion:
        """Request the input's entire largest possible region, whatever frames are demanded."""
        source = self.get_input()
        region = compute_input_requested_region(source.get_largest_possible_region())
        source.set_requested_region(region)
        return region

    def generate_output_data(self) -> TemporalRegion:
        """
        Extract every frame of the requested temporal region and graft it onto the output.

        All requested regions are checked and all frames extracted before any
        frame is grafted; on RegionOutOfBoundsError the output is left as it was.

        Returns:
            The temporal region that was filled
        """
        source = self.get_input()
        validate_frame_axis(self._frame_axis, source.dimension)
        largest_temporal = self._output.get_largest_possible_temporal_region()
        requested_temporal = self._output.get_requested_temporal_region()
        if largest_temporal is None or requested_temporal is None:
            raise InvalidInputError("[Filter] Output metadata has not been derived")

        resolved = {
            i: self._output.get_frame_requested_spatial_region(i)
            for i in requested_temporal.frame_indices()
        }
        try:
            check_requested_span(
                requested_temporal,
                largest_temporal,
                resolved,
                self._output.get_frame_largest_possible_spatial_region,
            )
            frames = extract_frames(
                source,
                self._frame_axis,
                requested_temporal,
                source.get_largest_possible_region(),
            )
        except Exception as e:
            self.logger.error(f"[Filter] Frame extraction failed: {e}")
            raise

        for i, frame in frames:
            self._output.graft_frame(i, frame)
            if self.logger.debug_enabled:
                self.logger.debug(f"[Filter] Frame {i}: {frame.get_largest_possible_region().size}")
        self._output.set_buffered_temporal_region(requested_temporal)
        self.logger.info(
            f"[Filter] Generated {len(frames)} frames "
            f"[{requested_temporal.frame_start}, {requested_temporal.frame_end})"
        )
        return requested_temporal

    def update(self) -> FrameSinkPort:
        """Run one full pass and return the output stream."""
        self.update_output_information()
        self.resolve_requested_output_region()
        self.compute_input_requested_region()
        self.generate_output_data()
        return self._output
