"""Geometry value types shared by the selector and the transform builder."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from numbers import Integral

from .errors import InvalidDisplayRotation


@dataclass(frozen=True)
class Size:
    """Pixel dimensions of a view or a camera buffer."""

    width: int
    height: int

    def __post_init__(self) -> None:
        for value in (self.width, self.height):
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise TypeError(f"Size dimensions must be integers: {value!r}")
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Size dimensions must be non-negative: {self}")

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        """True when either side is zero."""
        return self.width == 0 or self.height == 0

    def to_tuple(self) -> tuple:
        return (self.width, self.height)

    @classmethod
    def parse(cls, text: str) -> "Size":
        """Parse ``"1920x1080"`` (``x``, ``X`` or ``*`` separated)."""
        normalized = text.strip().lower().replace("*", "x")
        parts = normalized.split("x")
        if len(parts) != 2:
            raise ValueError(f"Expected WIDTHxHEIGHT, got {text!r}")
        return cls(int(parts[0]), int(parts[1]))

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


# Returned by the selector when nothing qualifies.
EMPTY_SIZE = Size(0, 0)


class LensFacing(Enum):
    """Direction the camera lens points relative to the screen."""

    FRONT = "front"
    BACK = "back"
    EXTERNAL = "external"

    @property
    def faces_user(self) -> bool:
        return self is LensFacing.FRONT


class DisplayRotation(IntEnum):
    """Current UI rotation, in quarter turns from the natural orientation."""

    ROTATION_0 = 0
    ROTATION_90 = 1
    ROTATION_180 = 2
    ROTATION_270 = 3

    @property
    def degrees(self) -> int:
        return int(self) * 90

    @classmethod
    def coerce(cls, value) -> "DisplayRotation":
        """
        Accept a quarter-turn index or an angle in degrees.

        The two value sets only overlap at 0, which means the same thing in
        both, so ``1`` and ``90`` both give ``ROTATION_90``.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidDisplayRotation(value)
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise InvalidDisplayRotation(value) from None
        if number != value and not isinstance(value, str):
            raise InvalidDisplayRotation(value)
        if 0 <= number <= 3:
            return cls(number)
        if number in (90, 180, 270):
            return cls(number // 90)
        raise InvalidDisplayRotation(value)


@dataclass(frozen=True)
class CameraOrientationInfo:
    """Static orientation facts about a camera device."""

    sensor_orientation: int
    lens_facing: LensFacing = LensFacing.BACK

    @property
    def is_landscape_native(self) -> bool:
        """Sensor rows already run along the device's natural x axis."""
        return self.sensor_orientation == 0
