"""Shared pytest configuration and fixtures for the PreviewFit test suite."""

import sys
from pathlib import Path

import pytest

# Ensure the project root is in the path for imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from previewfit.config.camera_profiles import CAMERA_PROFILES, CameraProfile
from previewfit.core.geometry import LensFacing, Size


@pytest.fixture()
def config_dir(tmp_path, monkeypatch):
    """Redirect the settings/profile directory into a temp dir."""
    import previewfit.config.settings as settings_module

    target = tmp_path / "config"
    monkeypatch.setattr(settings_module, "get_config_dir", lambda: target)
    return target


@pytest.fixture()
def back_profile() -> CameraProfile:
    return CAMERA_PROFILES["back_portrait"]


@pytest.fixture()
def empty_profile() -> CameraProfile:
    return CameraProfile(
        name="No streams",
        sensor_orientation=90,
        lens_facing=LensFacing.BACK,
        output_sizes=(),
    )


@pytest.fixture()
def portrait_window() -> Size:
    return Size(1080, 1920)
