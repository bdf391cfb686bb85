"""Unit tests for SaveVideo / SaveImage frame sinks."""

import os
import pytest
import numpy as np
import cv2
from pathlib import Path

from imagevideo.adapters.frame_sinks import SaveVideoSink, SaveImageSink, to_displayable
from imagevideo.domain.image import Image
from imagevideo.domain.image_to_video_filter import ImageToVideoFilter
from imagevideo.domain.region import TemporalRegion
from imagevideo.domain.video_stream import VideoStream


@pytest.fixture
def dummy_frame():
    """Create a dummy grayscale frame for testing."""
    return Image(np.zeros((48, 64), dtype=np.uint8))


@pytest.fixture
def stream():
    """Stream of 5 frames 48x64 built from a uint8 volume."""
    data = np.zeros((5, 48, 64), dtype=np.uint8)
    for k in range(5):
        data[k] = k * 40
    f = ImageToVideoFilter()
    f.set_input(Image(data))
    return f.update()


def test_to_displayable_scales_non_uint8():
    frame = np.array([[0.0, 0.5], [1.0, 2.0]], dtype=np.float64)
    out = to_displayable(frame)
    assert out.dtype == np.uint8
    assert out.min() == 0
    assert out.max() == 255


def test_to_displayable_keeps_uint8():
    frame = np.full((2, 2), 7, dtype=np.uint8)
    assert to_displayable(frame) is frame


def test_save_video_opens_on_first_frame(dummy_frame, temp_dir):
    """SaveVideoSink opens writer on first push_frame."""
    path = os.path.join(temp_dir, "out.mp4")
    sink = SaveVideoSink(output_path=path, fps=30.0)
    
    sink.push_frame(dummy_frame)
    sink.push_frame(dummy_frame)
    
    assert os.path.isfile(path)
    assert sink.get_metrics()["frame_count"] == 2
    sink.close()
    assert sink.get_metrics()["is_open"] is False


def test_save_video_writes_stream(stream, temp_dir):
    """Writing a stream produces a readable video with one frame per stream frame."""
    path = os.path.join(temp_dir, "out.mp4")
    sink = SaveVideoSink(output_path=path, fps=10.0)
    assert sink.write_stream(stream) == 5
    sink.close()
    
    cap = cv2.VideoCapture(path)
    assert cap.isOpened()
    ret, frame = cap.read()
    assert ret is True
    assert frame.shape[:2] == (48, 64)
    cap.release()


def test_save_video_skips_mismatched_size(dummy_frame, temp_dir):
    path = os.path.join(temp_dir, "out.mp4")
    sink = SaveVideoSink(output_path=path)
    sink.push_frame(dummy_frame)
    sink.push_frame(np.zeros((32, 32), dtype=np.uint8))
    assert sink.get_metrics()["frame_count"] == 1
    sink.close()


def test_save_video_ignores_empty_frame(temp_dir):
    """SaveVideoSink ignores None/empty frame."""
    path = os.path.join(temp_dir, "out.mp4")
    sink = SaveVideoSink(output_path=path)
    
    sink.push_frame(None)
    assert sink.get_metrics()["frame_count"] == 0
    sink.push_frame(np.array([]))
    assert sink.get_metrics()["frame_count"] == 0


def test_save_image_sequence_named_by_frame_index(stream, temp_dir):
    """Sequence mode writes one file per frame index."""
    path = os.path.join(temp_dir, "frame.png")
    sink = SaveImageSink(output_path=path, mode="sequence")
    assert sink.write_stream(stream) == 5
    
    base = Path(path)
    for i in range(5):
        f = base.parent / f"{base.stem}_{i:05d}{base.suffix}"
        assert f.exists(), f"Expected {f}"
    img = cv2.imread(str(base.parent / "frame_00003.png"), cv2.IMREAD_GRAYSCALE)
    assert img.shape == (48, 64)
    assert int(img[0, 0]) == 120


def test_save_image_overwrite(dummy_frame, temp_dir):
    """Overwrite mode writes a single file."""
    path = os.path.join(temp_dir, "out.png")
    sink = SaveImageSink(output_path=path, mode="overwrite")
    
    sink.push_frame(dummy_frame, index=0)
    sink.push_frame(dummy_frame, index=1)
    
    assert os.path.isfile(path)
    assert sink.get_metrics()["frame_count"] == 2
    assert sink.get_metrics()["mode"] == "overwrite"


def test_save_image_unknown_mode_falls_back(temp_dir):
    sink = SaveImageSink(output_path=os.path.join(temp_dir, "x.png"), mode="bogus")
    assert sink.mode == "sequence"


def test_write_stream_only_writes_last_pass(temp_dir):
    """After a narrower second pass only that pass's frames are written."""
    data = np.zeros((4, 48, 64), dtype=np.uint8)
    f = ImageToVideoFilter()
    f.set_input(Image(data))
    stream = f.update()
    stream.set_requested_temporal_region(TemporalRegion(1, 1))
    f.update()
    
    sink = SaveImageSink(output_path=os.path.join(temp_dir, "frame.png"))
    assert sink.write_stream(stream) == 1
    assert (temp_dir / "frame_00001.png").exists()
    assert not (temp_dir / "frame_00000.png").exists()
    assert not (temp_dir / "frame_00003.png").exists()
    
    video = SaveVideoSink(output_path=os.path.join(temp_dir, "out.mp4"))
    assert video.write_stream(stream) == 1
    video.close()


def test_write_stream_without_pass_writes_nothing(dummy_frame, temp_dir):
    stream = VideoStream()
    stream.graft_frame(0, dummy_frame)
    sink = SaveImageSink(output_path=os.path.join(temp_dir, "frame.png"))
    assert sink.write_stream(stream) == 0
    assert not (temp_dir / "frame_00000.png").exists()
