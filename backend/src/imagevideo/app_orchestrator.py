"""Application orchestrator for imagevideo."""

from pathlib import Path
from typing import Any, Dict, Optional

from .services.logging_service import LoggingService
from .services.config_service import ConfigService
from .adapters.npy_image_reader import NpyImageReader
from .adapters.frame_sinks import SaveImageSink, SaveVideoSink
from .domain.image_to_video_filter import ImageToVideoFilter
from .domain.region import TemporalRegion


class AppOrchestrator:
    """Wires reader, filter and frame writers for one conversion."""
    
    def __init__(self, config_dir: Path, logger: Optional[LoggingService] = None):
        self.logger = logger or LoggingService()
        self.config_service = ConfigService(Path(config_dir), self.logger)
        self.reader = NpyImageReader(self.logger)
    
    def convert(
        self,
        input_path: str,
        output_dir: str,
        frame_axis: Optional[int] = None,
        video_name: Optional[str] = None,
        frame_start: Optional[int] = None,
        frame_count: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Split input along frame_axis and write the frames to output_dir.
        
        Args:
            input_path: .npy / .npz volume
            output_dir: Directory for frame images (and the video, if requested)
            frame_axis: Axis used as time; defaults to config "frame_axis"
            video_name: If set, also write frames to output_dir/video_name
            frame_start: First frame to produce; defaults to the first available
            frame_count: Number of frames to produce; defaults to all remaining
        
        Returns:
            Summary dict with stream metrics and sink metrics
        """
        if frame_axis is None:
            frame_axis = int(self.config_service.get("frame_axis", 0))
        image = self.reader.read(input_path)
        
        video_filter = ImageToVideoFilter(logger=self.logger)
        video_filter.set_input(image)
        video_filter.frame_axis = frame_axis
        
        # Narrow the temporal request after metadata is known
        metadata = video_filter.update_output_information()
        if frame_start is not None or frame_count is not None:
            largest = metadata.temporal_region
            start = largest.frame_start if frame_start is None else frame_start
            count = max(0, largest.frame_end - start) if frame_count is None else frame_count
            video_filter.get_output().set_requested_temporal_region(TemporalRegion(start, count))
        stream = video_filter.update()
        
        out = Path(output_dir)
        out.mkdir(parents=True, exist_ok=True)
        image_sink = SaveImageSink(
            str(out / "frame.png"),
            mode=self.config_service.get("image_mode", "sequence"),
            logger=self.logger,
        )
        image_sink.write_stream(stream)
        image_sink.close()
        
        result: Dict[str, Any] = {
            "stream": stream.get_metrics(),
            "images": image_sink.get_metrics(),
        }
        if video_name:
            video_sink = SaveVideoSink(
                str(out / video_name),
                fps=float(self.config_service.get("fps", 30.0)),
                fourcc=self.config_service.get("fourcc", "mp4v"),
                logger=self.logger,
            )
            try:
                video_sink.write_stream(stream)
            finally:
                video_sink.close()
            result["video"] = video_sink.get_metrics()
        
        self.logger.info(f"[App] Wrote {result['images']['frame_count']} frames to {out}")
        return result
