"""
SaveVideo / SaveImage - write the frames of a video stream to disk with OpenCV.
"""

import os
import threading
import time
from pathlib import Path
from typing import Optional, Dict, Any

import cv2
import numpy as np

from ..ports.frame_sink_port import FrameSinkPort


def to_displayable(frame: np.ndarray) -> np.ndarray:
    """Convert frame data to uint8 for writing; non-uint8 data is min-max scaled."""
    if frame.dtype == np.uint8:
        return frame
    return cv2.normalize(frame.astype(np.float32), None, 0, 255, cv2.NORM_MINMAX).astype(np.uint8)


def _buffered_indices(stream: FrameSinkPort):
    """Frame indices filled by the stream's last successful pass; none if it never ran."""
    region = stream.get_buffered_temporal_region()
    return region.frame_indices() if region is not None else iter(())


def _frame_data(frame) -> Optional[np.ndarray]:
    if frame is None:
        return None
    data = frame.array if hasattr(frame, "array") else np.asarray(frame)
    if data.size == 0 or data.ndim not in (2, 3):
        return None
    return data


class SaveVideoSink:
    """
    Writes 2-D frames to a video file.
    Opens writer on first frame; call close() when done.
    """

    def __init__(
        self,
        output_path: str,
        fps: float = 30.0,
        fourcc: str = "mp4v",
        logger: Optional[Any] = None,
    ):
        self.output_path = str(Path(output_path).resolve())
        self.fps = max(1.0, min(300.0, fps))
        self.fourcc = fourcc
        self.logger = logger
        self._writer: Optional[cv2.VideoWriter] = None
        self._size = None
        self._lock = threading.Lock()
        self._frame_count = 0
        self._created_at = time.time()

    def push_frame(self, frame) -> None:
        """Write frame (Image or array). Frames of another size than the first are skipped."""
        with self._lock:
            data = _frame_data(frame)
            if data is None:
                return
            data = to_displayable(data)
            h, w = data.shape[:2]
            if self._writer is None:
                os.makedirs(os.path.dirname(self.output_path) or ".", exist_ok=True)
                fourcc_code = cv2.VideoWriter_fourcc(*self.fourcc)
                self._writer = cv2.VideoWriter(
                    self.output_path,
                    fourcc_code,
                    self.fps,
                    (w, h),
                    isColor=(data.ndim == 3 and data.shape[2] >= 3),
                )
                self._size = (h, w)
                if not self._writer.isOpened():
                    if self.logger:
                        self.logger.error(f"[SaveVideo] Failed to open {self.output_path}")
                    return
                if self.logger:
                    self.logger.info(f"[SaveVideo] Opened {self.output_path} {w}x{h} @ {self.fps}fps")
            if (h, w) != self._size:
                if self.logger:
                    self.logger.warning(f"[SaveVideo] Skipping {w}x{h} frame, writer is {self._size[1]}x{self._size[0]}")
                return
            if self._writer.isOpened():
                self._writer.write(data)
                self._frame_count += 1

    def write_stream(self, stream: FrameSinkPort) -> int:
        """Write the frames of the stream's buffered span in index order. Returns frames written."""
        before = self._frame_count
        for i in _buffered_indices(stream):
            self.push_frame(stream.get_frame(i))
        return self._frame_count - before

    def close(self) -> None:
        """Release video writer."""
        with self._lock:
            if self._writer is not None:
                self._writer.release()
                self._writer = None
                if self.logger:
                    self.logger.info(f"[SaveVideo] Closed {self.output_path}, wrote {self._frame_count} frames")

    def get_metrics(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "output_path": self.output_path,
                "frame_count": self._frame_count,
                "is_open": self._writer is not None and self._writer.isOpened(),
                "uptime_seconds": time.time() - self._created_at,
            }


class SaveImageSink:
    """
    Writes frames to image file(s).
    Mode: overwrite = single file; sequence = frame_00000.png, ... named by frame index.
    """

    def __init__(
        self,
        output_path: str,
        mode: str = "sequence",
        logger: Optional[Any] = None,
    ):
        self._output_path = str(Path(output_path).resolve())
        self.mode = mode if mode in ("overwrite", "sequence") else "sequence"
        self.logger = logger
        self._lock = threading.Lock()
        self._frame_count = 0
        self._created_at = time.time()

    def path_for(self, index: int) -> str:
        if self.mode == "overwrite":
            return self._output_path
        base = Path(self._output_path)
        suffix = base.suffix or ".png"
        return str(base.parent / f"{base.stem}_{index:05d}{suffix}")

    def push_frame(self, frame, index: int = 0) -> None:
        """Write frame to image file."""
        with self._lock:
            data = _frame_data(frame)
            if data is None:
                return
            path = self.path_for(index)
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
            try:
                success = cv2.imwrite(path, to_displayable(data))
                if success:
                    self._frame_count += 1
                elif self.logger:
                    self.logger.warning(f"[SaveImage] Failed to write {path}")
            except cv2.error as e:
                if self.logger:
                    self.logger.error(f"[SaveImage] Error writing {path}: {e}")

    def write_stream(self, stream: FrameSinkPort) -> int:
        """Write the buffered span, one file per frame index."""
        before = self._frame_count
        for i in _buffered_indices(stream):
            self.push_frame(stream.get_frame(i), index=i)
        return self._frame_count - before

    def close(self) -> None:
        """No-op for image sink (each write is independent)."""
        pass

    def get_metrics(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "output_path": self._output_path,
                "mode": self.mode,
                "frame_count": self._frame_count,
                "uptime_seconds": time.time() - self._created_at,
            }
