"""Application settings using pydantic."""

import json
import logging
import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.geometry import DisplayRotation, Size
from .camera_profiles import DEFAULT_PROFILE

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the configuration directory for PreviewFit."""
    # XDG config directory on Linux, home/.previewfit elsewhere
    if sys.platform == "linux":
        config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        return Path(config_home) / "previewfit"
    else:
        return Path.home() / ".previewfit"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="PREVIEWFIT_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Camera settings
    camera_profile: str = Field(
        default=DEFAULT_PROFILE, description="Active camera profile key"
    )

    # Viewport settings
    display_rotation: int = Field(
        default=0, ge=0, le=3, description="Display rotation in quarter turns"
    )
    window_width: int = Field(
        default=1080, ge=0, description="Preview viewport width for headless runs"
    )
    window_height: int = Field(
        default=1920, ge=0, description="Preview viewport height for headless runs"
    )

    # Display settings
    preview_fps: int = Field(
        default=30, ge=10, le=60, description="Target preview frame rate"
    )
    show_crosshair: bool = Field(default=True, description="Show crosshair overlay")
    show_info: bool = Field(default=True, description="Show info overlay")

    # Main window geometry
    main_window_width: int = Field(default=1024, description="Main window width")
    main_window_height: int = Field(default=768, description="Main window height")
    main_window_x: int = Field(default=100, description="Main window X position")
    main_window_y: int = Field(default=100, description="Main window Y position")

    @property
    def window_size(self) -> Size:
        return Size(self.window_width, self.window_height)

    @property
    def rotation(self) -> DisplayRotation:
        return DisplayRotation(self.display_rotation)

    def ensure_directories(self) -> None:
        """Create the config directory if it doesn't exist."""
        get_config_dir().mkdir(parents=True, exist_ok=True)

    def save(self) -> None:
        """Save settings to config file."""
        config_dir = get_config_dir()
        config_dir.mkdir(parents=True, exist_ok=True)

        config_file = config_dir / "settings.json"

        with open(config_file, "w") as f:
            json.dump(self.model_dump(), f, indent=2)

        logger.info(f"Settings saved to {config_file}")

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from config file, falling back to defaults."""
        config_file = get_config_dir() / "settings.json"

        if config_file.exists():
            try:
                with open(config_file, "r") as f:
                    data = json.load(f)

                logger.info(f"Settings loaded from {config_file}")
                return cls(**data)

            except Exception as e:
                logger.warning(f"Failed to load settings: {e}, using defaults")

        return cls()
