"""Camera capability presets and user-defined profile storage."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..core.errors import UnknownProfileError
from ..core.geometry import CameraOrientationInfo, LensFacing, Size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CameraProfile:
    """Static characteristics of a camera as reported by the device."""

    name: str
    sensor_orientation: int
    lens_facing: LensFacing
    output_sizes: Tuple[Size, ...] = field(default_factory=tuple)
    description: str = ""

    @property
    def orientation_info(self) -> CameraOrientationInfo:
        return CameraOrientationInfo(self.sensor_orientation, self.lens_facing)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "sensor_orientation": self.sensor_orientation,
            "lens_facing": self.lens_facing.value,
            "output_sizes": [list(s.to_tuple()) for s in self.output_sizes],
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CameraProfile":
        return cls(
            name=data["name"],
            sensor_orientation=int(data.get("sensor_orientation", 0)),
            lens_facing=LensFacing(data.get("lens_facing", LensFacing.BACK.value)),
            output_sizes=tuple(Size(int(w), int(h)) for w, h in data.get("output_sizes", [])),
            description=data.get("description", ""),
        )


def _sizes(*pairs: Tuple[int, int]) -> Tuple[Size, ...]:
    return tuple(Size(w, h) for w, h in pairs)


# Typical phone stream configuration, largest first
_PHONE_SIZES = _sizes(
    (1920, 1080),
    (1440, 1080),
    (1280, 960),
    (1280, 720),
    (1088, 1088),
    (960, 720),
    (720, 480),
    (640, 480),
    (352, 288),
    (320, 240),
    (176, 144),
)

CAMERA_PROFILES: Dict[str, CameraProfile] = {
    "back_portrait": CameraProfile(
        name="Back camera",
        sensor_orientation=90,
        lens_facing=LensFacing.BACK,
        output_sizes=_PHONE_SIZES,
        description="Phone rear camera, sensor mounted 90 degrees clockwise",
    ),
    "front_portrait": CameraProfile(
        name="Front camera",
        sensor_orientation=270,
        lens_facing=LensFacing.FRONT,
        output_sizes=_PHONE_SIZES,
        description="Phone selfie camera, sensor mounted 270 degrees clockwise",
    ),
    "front_90": CameraProfile(
        name="Front camera (90)",
        sensor_orientation=90,
        lens_facing=LensFacing.FRONT,
        output_sizes=_PHONE_SIZES,
        description="Selfie camera mounted like a rear one",
    ),
    "landscape_native": CameraProfile(
        name="Landscape sensor",
        sensor_orientation=0,
        lens_facing=LensFacing.EXTERNAL,
        output_sizes=_sizes((1920, 1080), (1280, 720), (800, 600), (640, 480)),
        description="Tablet or USB camera whose sensor matches the natural orientation",
    ),
}

DEFAULT_PROFILE = "back_portrait"


class ProfileStore:
    """Persists user-defined camera profiles next to the settings file."""

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        if config_dir is None:
            from .settings import get_config_dir

            config_dir = get_config_dir()
        self._config_dir = config_dir
        self._profiles: Dict[str, CameraProfile] = {}
        self._load()

    def _profiles_file(self) -> Path:
        return self._config_dir / "profiles.json"

    def _load(self) -> None:
        """Load custom profiles from file."""
        profiles_file = self._profiles_file()
        if not profiles_file.exists():
            return

        try:
            with open(profiles_file, "r") as f:
                data = json.load(f)
            self._profiles = {
                key: CameraProfile.from_dict(value) for key, value in data.items()
            }
            logger.info(f"Loaded {len(self._profiles)} custom profiles")
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"Failed to load camera profiles: {e}")
            self._profiles = {}

    def save(self) -> None:
        """Write custom profiles to file."""
        self._config_dir.mkdir(parents=True, exist_ok=True)
        with open(self._profiles_file(), "w") as f:
            json.dump(
                {key: profile.to_dict() for key, profile in self._profiles.items()},
                f,
                indent=2,
            )

    def add_profile(self, key: str, profile: CameraProfile) -> None:
        """Store a custom profile, replacing any preset with the same key."""
        self._profiles[key] = profile
        self.save()

    def remove_profile(self, key: str) -> bool:
        if key not in self._profiles:
            return False
        del self._profiles[key]
        self.save()
        return True

    def all_profiles(self) -> Dict[str, CameraProfile]:
        """Presets merged with custom profiles (custom wins)."""
        merged = dict(CAMERA_PROFILES)
        merged.update(self._profiles)
        return merged

    def get_profile(self, key: str) -> CameraProfile:
        profiles = self.all_profiles()
        if key not in profiles:
            raise UnknownProfileError(key)
        return profiles[key]

    def list_profiles(self) -> List[str]:
        return list(self.all_profiles().keys())
