"""NumPy volume reader adapter: loads .npy / .npz arrays as Images."""

from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from ..domain.errors import InvalidInputError
from ..domain.image import Image
from ..services.logging_service import LoggingService


class NpyImageReader:
    """Reads an N-dimensional array from disk into an Image."""

    def __init__(self, logger: LoggingService, npz_key: Optional[str] = None):
        self.logger = logger
        self.npz_key = npz_key

    def read(
        self,
        path: str,
        spacing: Optional[Sequence[float]] = None,
        origin: Optional[Sequence[float]] = None,
    ) -> Image:
        """Load path into an Image.

        Args:
            path: .npy file, or .npz archive (first array unless npz_key is set)
            spacing: Optional per-axis spacing
            origin: Optional per-axis origin

        Returns:
            Image with region index 0 on every axis

        Raises:
            InvalidInputError: file missing or not a readable array
        """
        p = Path(path)
        if not p.is_file():
            raise InvalidInputError(f"[Reader] Input not found: {p}")
        try:
            loaded = np.load(p, allow_pickle=False)
            if isinstance(loaded, np.lib.npyio.NpzFile):
                with loaded:
                    key = self.npz_key or loaded.files[0]
                    array = loaded[key]
            else:
                array = loaded
        except (ValueError, OSError, KeyError, IndexError) as e:
            raise InvalidInputError(f"[Reader] Could not read {p}: {e}") from e

        image = Image(array, spacing=spacing, origin=origin)
        self.logger.info(f"[Reader] Loaded {p.name}: shape {array.shape}, dtype {array.dtype}")
        return image
