"""Configuration service for imagevideo."""

import json
from pathlib import Path
from typing import Any, Dict
from ..services.logging_service import LoggingService


DEFAULT_CONFIG: Dict[str, Any] = {
    "app_name": "imagevideo",
    "version": "0.1.0",
    "frame_axis": 0,
    "fps": 30.0,
    "fourcc": "mp4v",
    "image_mode": "sequence",
}


class ConfigService:
    """Service for managing conversion defaults stored in app.json."""
    
    def __init__(self, config_dir: Path, logger: LoggingService):
        self.config_dir = Path(config_dir)
        self.logger = logger
        self.config: Dict[str, Any] = {}
        self._load_config()
    
    @property
    def config_file(self) -> Path:
        return self.config_dir / "app.json"
    
    def _load_config(self):
        """Load configuration from file, falling back to defaults."""
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r') as f:
                    loaded = json.load(f)
                self.config = {**DEFAULT_CONFIG, **loaded}
                self.logger.info(f"[Config] Loaded config from {self.config_file}")
            except Exception as e:
                self.logger.error(f"[Config] Failed to load config: {e}")
                self.config = dict(DEFAULT_CONFIG)
        else:
            self.config = dict(DEFAULT_CONFIG)
            self._save_config()
    
    def _save_config(self):
        """Save configuration to file."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, 'w') as f:
                json.dump(self.config, f, indent=2)
        except Exception as e:
            self.logger.error(f"[Config] Failed to save config: {e}")
    
    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self.config.get(key, default)
    
    def set(self, key: str, value: Any):
        """Set configuration value."""
        self.config[key] = value
        self._save_config()
