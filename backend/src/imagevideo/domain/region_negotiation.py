"""
Region negotiation for the image-to-video filter.

Pure functions for each phase of a pass. Every phase takes the regions it
depends on as arguments and returns the regions it produces:

  derive_output_metadata -> resolve_requested_regions -> extract_frames

compute_input_requested_region answers what the filter needs from its input.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Tuple

from .errors import InvalidAxisError, RegionOutOfBoundsError
from .region import ImageRegion, TemporalRegion


@dataclass(frozen=True)
class OutputMetadata:
    """Largest possible regions of the output stream."""
    temporal_region: TemporalRegion
    spatial_region: ImageRegion


def validate_frame_axis(frame_axis: int, dimension: int) -> None:
    """Raise InvalidAxisError unless 0 <= frame_axis < dimension and dimension >= 2."""
    if dimension < 2:
        raise InvalidAxisError(f"Input must have at least 2 axes to produce frames, got {dimension}")
    if not 0 <= frame_axis < dimension:
        raise InvalidAxisError(f"Frame axis {frame_axis} outside [0, {dimension})")


def derive_output_metadata(input_region: ImageRegion, frame_axis: int) -> OutputMetadata:
    """
    Temporal region comes from the frame axis of the input; the frame spatial
    region is the input region with that axis dropped, other axes kept in order.
    """
    validate_frame_axis(frame_axis, input_region.dimension)
    temporal = TemporalRegion(
        frame_start=input_region.index[frame_axis],
        frame_duration=input_region.size[frame_axis],
    )
    return OutputMetadata(temporal_region=temporal, spatial_region=input_region.drop_axis(frame_axis))


def resolve_requested_regions(
    temporal_region: TemporalRegion,
    requested: Callable[[int], ImageRegion],
    largest: Callable[[int], ImageRegion],
) -> Dict[int, ImageRegion]:
    """
    Resolve the requested spatial region of every frame in temporal_region.

    A region with zero size on every axis means the caller did not specify one
    and is replaced by the frame's largest possible region. A region with only
    some zero sizes is kept as given.

    Returns:
        Map of frame index -> resolved requested spatial region
    """
    resolved: Dict[int, ImageRegion] = {}
    for i in temporal_region.frame_indices():
        region = requested(i)
        resolved[i] = largest(i) if region.is_degenerate() else region
    return resolved


def compute_input_requested_region(input_largest: ImageRegion) -> ImageRegion:
    """The filter always asks for the whole input."""
    return input_largest


def slice_region(input_region: ImageRegion, frame_axis: int, frame_index: int) -> ImageRegion:
    """Input region with frame_axis collapsed (size 0) at frame_index."""
    return input_region.with_axis(frame_axis, frame_index, 0)


def check_requested_span(
    requested_temporal: TemporalRegion,
    largest_temporal: TemporalRegion,
    resolved: Mapping[int, ImageRegion],
    largest: Callable[[int], ImageRegion],
) -> None:
    """Raise RegionOutOfBoundsError if any requested region lies outside the available data."""
    if not requested_temporal.is_inside(largest_temporal):
        raise RegionOutOfBoundsError(
            f"Requested frames [{requested_temporal.frame_start}, {requested_temporal.frame_end}) "
            f"outside available frames [{largest_temporal.frame_start}, {largest_temporal.frame_end})"
        )
    errors: List[str] = []
    for i, region in resolved.items():
        frame_largest = largest(i)
        if region.dimension != frame_largest.dimension or not _spatial_inside(region, frame_largest):
            errors.append(f"Frame {i}: requested {region.to_dict()} outside {frame_largest.to_dict()}")
    if errors:
        raise RegionOutOfBoundsError(errors[0], errors)


def _spatial_inside(region: ImageRegion, largest: ImageRegion) -> bool:
    # An explicit zero-size axis is an empty request and fits anywhere
    for start, size, l_start, l_size in zip(region.index, region.size, largest.index, largest.size):
        if size and (start < l_start or start + size > l_start + l_size):
            return False
    return True


def extract_frames(
    source,
    frame_axis: int,
    temporal_region: TemporalRegion,
    input_region: ImageRegion,
) -> List[Tuple[int, object]]:
    """
    Extract one frame per index of temporal_region, in increasing order.
    Each slice is input_region with frame_axis collapsed at the frame index.

    Nothing is written anywhere: the caller grafts the returned frames once
    every extraction has succeeded, so a failure leaves no frame half-filled.

    Raises:
        RegionOutOfBoundsError: a slice falls outside the source's data
    """
    return [
        (i, source.extract(slice_region(input_region, frame_axis, i)))
        for i in temporal_region.frame_indices()
    ]
