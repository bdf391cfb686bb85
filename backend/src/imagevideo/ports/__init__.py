"""Ports package."""

from .metadata_source_port import MetadataSourcePort
from .frame_sink_port import FrameSinkPort

__all__ = ['MetadataSourcePort', 'FrameSinkPort']
