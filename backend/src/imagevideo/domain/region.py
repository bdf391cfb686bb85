"""
Region primitives.

ImageRegion is an N-tuple of (start, extent) pairs over integer index space.
TemporalRegion is a contiguous span of frame indices.
"""

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple


@dataclass(frozen=True)
class ImageRegion:
    """Start index and size per axis."""
    index: Tuple[int, ...]
    size: Tuple[int, ...]

    def __post_init__(self):
        index = tuple(int(v) for v in self.index)
        size = tuple(int(v) for v in self.size)
        if len(index) != len(size):
            raise ValueError(f"Index has {len(index)} axes but size has {len(size)}")
        if any(s < 0 for s in size):
            raise ValueError(f"Region size must be non-negative, got {size}")
        object.__setattr__(self, "index", index)
        object.__setattr__(self, "size", size)

    @classmethod
    def zeros(cls, dimension: int) -> "ImageRegion":
        """Zero region: the 'not specified' marker for requested regions."""
        return cls(index=(0,) * dimension, size=(0,) * dimension)

    @classmethod
    def from_shape(cls, shape: Sequence[int], index: Sequence[int] = None) -> "ImageRegion":
        if index is None:
            index = (0,) * len(shape)
        return cls(index=tuple(index), size=tuple(shape))

    @property
    def dimension(self) -> int:
        return len(self.size)

    @property
    def upper_index(self) -> Tuple[int, ...]:
        """Exclusive upper bound per axis."""
        return tuple(i + s for i, s in zip(self.index, self.size))

    @property
    def number_of_pixels(self) -> int:
        n = 1
        for s in self.size:
            n *= s
        return n

    def is_degenerate(self) -> bool:
        """True when every axis has zero extent."""
        return all(s == 0 for s in self.size)

    def drop_axis(self, axis: int) -> "ImageRegion":
        """Remove one axis, keeping the others in order."""
        if not 0 <= axis < self.dimension:
            raise IndexError(f"Axis {axis} out of range for {self.dimension}-D region")
        return ImageRegion(
            index=self.index[:axis] + self.index[axis + 1:],
            size=self.size[:axis] + self.size[axis + 1:],
        )

    def with_axis(self, axis: int, start: int, size: int) -> "ImageRegion":
        """Copy with start and size replaced on one axis."""
        if not 0 <= axis < self.dimension:
            raise IndexError(f"Axis {axis} out of range for {self.dimension}-D region")
        index = list(self.index)
        sizes = list(self.size)
        index[axis] = start
        sizes[axis] = size
        return ImageRegion(index=tuple(index), size=tuple(sizes))

    def is_inside(self, other: "ImageRegion") -> bool:
        """
        True if this region lies within other.
        A zero-extent axis is inside when its start lies within other's span on that axis.
        """
        if self.dimension != other.dimension:
            return False
        for start, size, o_start, o_size in zip(self.index, self.size, other.index, other.size):
            if size == 0:
                if not o_start <= start < o_start + o_size:
                    return False
            elif start < o_start or start + size > o_start + o_size:
                return False
        return True

    def to_dict(self) -> dict:
        return {"index": list(self.index), "size": list(self.size)}


@dataclass(frozen=True)
class TemporalRegion:
    """Contiguous span of frames [frame_start, frame_start + frame_duration)."""
    frame_start: int
    frame_duration: int

    def __post_init__(self):
        object.__setattr__(self, "frame_start", int(self.frame_start))
        object.__setattr__(self, "frame_duration", int(self.frame_duration))
        if self.frame_duration < 0:
            raise ValueError(f"Frame duration must be non-negative, got {self.frame_duration}")

    @property
    def frame_end(self) -> int:
        """Exclusive end frame."""
        return self.frame_start + self.frame_duration

    def frame_indices(self) -> Iterator[int]:
        return iter(range(self.frame_start, self.frame_end))

    def is_inside(self, other: "TemporalRegion") -> bool:
        return other.frame_start <= self.frame_start and self.frame_end <= other.frame_end

    def crop(self, other: "TemporalRegion") -> "TemporalRegion":
        """Overlap with other; zero duration when the spans do not meet."""
        start = max(self.frame_start, other.frame_start)
        end = min(self.frame_end, other.frame_end)
        return TemporalRegion(start, max(0, end - start))

    def to_dict(self) -> dict:
        return {"frame_start": self.frame_start, "frame_duration": self.frame_duration}
