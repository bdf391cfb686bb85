"""Minimal logging service for imagevideo.

Log messages use section prefixes for filtering and debugging:
  [App] Conversion lifecycle
  [Config] Configuration load/save
  [Reader] Loading input volumes
  [Filter] Metadata derivation, region resolution, frame extraction
  [SaveVideo] / [SaveImage] Writing frames to disk

Levels: DEBUG=per-frame detail, INFO=normal flow, WARNING=recoverable, ERROR=failures.
Set LOG_LEVEL=DEBUG in environment to see per-frame messages, or pass level explicitly.
"""

import logging
import os
from typing import Optional


class LoggingService:
    """Logging service shared by the filter, adapters and orchestrator."""
    
    def __init__(self, name: str = "imagevideo", level: Optional[str] = None):
        self.logger = logging.getLogger(name)
        level_name = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
        self.set_level(level_name)
        
        # Console handler, attached once per logger name
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            self.logger.addHandler(handler)
    
    def set_level(self, level_name: str) -> None:
        """Change the level, e.g. from a --verbose flag."""
        self.logger.setLevel(getattr(logging, level_name.upper(), logging.INFO))
    
    @property
    def debug_enabled(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)
    
    def info(self, message: str, **kwargs):
        self.logger.info(message, **kwargs)
    
    def warning(self, message: str, **kwargs):
        self.logger.warning(message, **kwargs)
    
    def error(self, message: str, **kwargs):
        """Log error message (kwargs e.g. exc_info=True for traceback)."""
        self.logger.error(message, **kwargs)
    
    def debug(self, message: str, **kwargs):
        self.logger.debug(message, **kwargs)
