"""Adapters package."""

from .npy_image_reader import NpyImageReader
from .frame_sinks import SaveImageSink, SaveVideoSink

__all__ = ['NpyImageReader', 'SaveImageSink', 'SaveVideoSink']
