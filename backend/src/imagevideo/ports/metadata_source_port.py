"""Metadata source port: the input side of the image-to-video filter."""

from abc import ABC, abstractmethod

from ..domain.region import ImageRegion


class MetadataSourcePort(ABC):
    """Port interface for an N-dimensional image the filter reads from."""

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Number of axes of the image."""
        pass

    @abstractmethod
    def get_largest_possible_region(self) -> ImageRegion:
        """Get the maximal region of data the source can provide."""
        pass

    @abstractmethod
    def get_requested_region(self) -> ImageRegion:
        """Get the region a consumer currently asks for."""
        pass

    @abstractmethod
    def set_requested_region(self, region: ImageRegion) -> None:
        """Record the region a consumer needs.

        Args:
            region: Region in the source's index space
        """
        pass

    @abstractmethod
    def extract(self, region: ImageRegion):
        """Project the source onto a lower-dimensional image.

        Axes with zero size in ``region`` are collapsed rather than kept as
        unit-length dimensions.

        Args:
            region: Extraction region in the source's index space

        Returns:
            A new Image holding the extracted data

        Raises:
            RegionOutOfBoundsError: region is not inside the available data
        """
        pass
