"""Configuration module for PreviewFit."""

from .settings import Settings
from .camera_profiles import CameraProfile, CAMERA_PROFILES, DEFAULT_PROFILE, ProfileStore

__all__ = ["Settings", "CameraProfile", "CAMERA_PROFILES", "DEFAULT_PROFILE", "ProfileStore"]
