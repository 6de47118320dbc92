"""Preview transform computation.

Maps a camera buffer onto a view so the preview fills it (crop-to-fill) and
stays upright whatever the sensor mounting and the display rotation are.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .affine import AffineTransform
from .errors import InvalidPreviewSize, InvalidWindowSize
from .geometry import CameraOrientationInfo, DisplayRotation, LensFacing, Size
from .size_selector import select_best_preview_size

logger = logging.getLogger(__name__)


# (orientation.is_landscape_native, rotation_required) ->
#   (preview axis dividing window width, preview axis dividing window height)
SCALE_AXES: Dict[Tuple[bool, bool], Tuple[str, str]] = {
    (True, False): ("height", "width"),
    (True, True): ("width", "height"),
    (False, True): ("height", "width"),
    (False, False): ("width", "height"),
}


@dataclass(frozen=True)
class PreviewFit:
    """Result of a full selection + transform pass."""

    window_size: Size
    preview_size: Size
    relative_rotation: int
    rotation_required: bool
    scale_x: float
    scale_y: float
    final_scale: float
    surface_rotation_degrees: int
    transform: AffineTransform

    def to_dict(self) -> dict:
        return {
            "window_size": list(self.window_size.to_tuple()),
            "preview_size": list(self.preview_size.to_tuple()),
            "relative_rotation": self.relative_rotation,
            "rotation_required": self.rotation_required,
            "scale_x": self.scale_x,
            "scale_y": self.scale_y,
            "final_scale": self.final_scale,
            "surface_rotation_degrees": self.surface_rotation_degrees,
            "transform": self.transform.to_dict(),
        }


def compute_relative_rotation(
    sensor_orientation: int,
    device_orientation_degrees: int,
    lens_facing: LensFacing,
) -> int:
    """
    Rotation needed to bring sensor output in line with the display.

    Front cameras are mirrored, so the device orientation is reversed for them.
    """
    sign = 1 if lens_facing is LensFacing.FRONT else -1
    return (sensor_orientation - device_orientation_degrees * sign + 360) % 360


def is_rotation_required(relative_rotation: int) -> bool:
    """True when sensor and display axes are swapped (90 or 270 degrees)."""
    return relative_rotation % 180 != 0


def compute_scale_factors(
    window_size: Size,
    preview_size: Size,
    orientation: CameraOrientationInfo,
    rotation_required: bool,
) -> Tuple[float, float]:
    """Scale factors mapping the buffer axes onto the window axes."""
    x_axis, y_axis = SCALE_AXES[(orientation.is_landscape_native, rotation_required)]
    scale_x = window_size.width / getattr(preview_size, x_axis)
    scale_y = window_size.height / getattr(preview_size, y_axis)
    return scale_x, scale_y


def _validate_sizes(window_size: Size, preview_size: Size) -> None:
    if window_size.is_empty:
        raise InvalidWindowSize(window_size)
    if preview_size.is_empty:
        raise InvalidPreviewSize(preview_size)


def _compute_fit(
    window_size: Size,
    preview_size: Size,
    orientation: CameraOrientationInfo,
    display_rotation,
) -> PreviewFit:
    _validate_sizes(window_size, preview_size)

    rotation = DisplayRotation.coerce(display_rotation)
    surface_rotation_degrees = rotation.degrees

    relative_rotation = compute_relative_rotation(
        orientation.sensor_orientation, surface_rotation_degrees, orientation.lens_facing
    )
    rotation_required = is_rotation_required(relative_rotation)

    scale_x, scale_y = compute_scale_factors(
        window_size, preview_size, orientation, rotation_required
    )
    final_scale = max(scale_x, scale_y)

    window_width = float(window_size.width)
    window_height = float(window_size.height)

    if rotation_required:
        sx = final_scale / scale_x
        sy = final_scale / scale_y
    else:
        # Screen axes are cross-normalized before the crop scale
        sx = window_height / window_width / scale_y * final_scale
        sy = window_width / window_height / scale_x * final_scale

    transform = AffineTransform(
        scale_x=sx,
        scale_y=sy,
        rotation_degrees=float(-surface_rotation_degrees),
        pivot_x=window_width / 2.0,
        pivot_y=window_height / 2.0,
    )

    logger.debug(
        f"Fit {preview_size} into {window_size}: relative={relative_rotation} "
        f"swap={rotation_required} scale=({sx:.4f}, {sy:.4f}) "
        f"rotate={-surface_rotation_degrees}"
    )

    return PreviewFit(
        window_size=window_size,
        preview_size=preview_size,
        relative_rotation=relative_rotation,
        rotation_required=rotation_required,
        scale_x=scale_x,
        scale_y=scale_y,
        final_scale=final_scale,
        surface_rotation_degrees=surface_rotation_degrees,
        transform=transform,
    )


def build_preview_transform(
    window_size: Size,
    preview_size: Size,
    sensor_orientation: int,
    lens_facing: LensFacing,
    display_rotation,
) -> AffineTransform:
    """
    Build the transform that maps a preview buffer onto the window.

    Args:
        window_size: Destination view size
        preview_size: Buffer size chosen by the selector
        sensor_orientation: Clockwise sensor mounting angle in degrees
        lens_facing: Camera lens direction
        display_rotation: Quarter-turn index (0-3) or degrees

    Returns:
        Scale-then-rotate transform pivoted at the window center

    Raises:
        InvalidWindowSize: window has a zero dimension
        InvalidPreviewSize: preview has a zero dimension
        InvalidDisplayRotation: rotation is not a right angle
    """
    orientation = CameraOrientationInfo(sensor_orientation, lens_facing)
    return _compute_fit(window_size, preview_size, orientation, display_rotation).transform


def fit_preview(
    window_size: Size,
    profile,
    display_rotation,
    available_sizes: Optional[Tuple[Size, ...]] = None,
) -> PreviewFit:
    """
    Run resolution selection and transform building for a camera profile.

    Args:
        window_size: Destination view size
        profile: Object with ``orientation_info`` and ``output_sizes``
            (a CameraProfile)
        display_rotation: Quarter-turn index (0-3) or degrees
        available_sizes: Overrides ``profile.output_sizes`` when given

    Returns:
        PreviewFit for the selected buffer size
    """
    sizes = profile.output_sizes if available_sizes is None else available_sizes
    preview_size = select_best_preview_size(window_size, sizes)
    return _compute_fit(
        window_size,
        preview_size,
        profile.orientation_info,
        display_rotation,
    )
