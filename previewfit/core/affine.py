"""2D affine transform applied to a preview surface."""

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np


def _scale_matrix(sx: float, sy: float, px: float, py: float) -> np.ndarray:
    """Scale about (px, py)."""
    return np.array(
        [
            [sx, 0.0, px - sx * px],
            [0.0, sy, py - sy * py],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def _rotation_matrix(degrees: float, px: float, py: float) -> np.ndarray:
    """
    Rotate about (px, py) in screen coordinates (y axis pointing down).

    Positive angles turn clockwise as seen on screen.
    """
    radians = math.radians(degrees)
    cos_a = math.cos(radians)
    sin_a = math.sin(radians)

    # Snap right angles so 90 degree turns map pixels exactly
    if abs(cos_a) < 1e-12:
        cos_a = 0.0
    if abs(sin_a) < 1e-12:
        sin_a = 0.0

    return np.array(
        [
            [cos_a, -sin_a, px - cos_a * px + sin_a * py],
            [sin_a, cos_a, py - sin_a * px - cos_a * py],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


@dataclass(frozen=True)
class AffineTransform:
    """
    Non-uniform scale followed by a rotation, both about the same pivot.

    Attributes:
        scale_x: Horizontal scale factor
        scale_y: Vertical scale factor
        rotation_degrees: Rotation applied after the scale (clockwise on screen)
        pivot_x: Pivot x coordinate, in view pixels
        pivot_y: Pivot y coordinate, in view pixels
    """

    scale_x: float = 1.0
    scale_y: float = 1.0
    rotation_degrees: float = 0.0
    pivot_x: float = 0.0
    pivot_y: float = 0.0

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    @property
    def pivot(self) -> Tuple[float, float]:
        return (self.pivot_x, self.pivot_y)

    @property
    def matrix(self) -> np.ndarray:
        """3x3 homogeneous matrix: rotation composed after the scale."""
        scale = _scale_matrix(self.scale_x, self.scale_y, self.pivot_x, self.pivot_y)
        rotation = _rotation_matrix(self.rotation_degrees, self.pivot_x, self.pivot_y)
        return rotation @ scale

    def values(self) -> Tuple[float, ...]:
        """Row-major 3x3 matrix values."""
        return tuple(float(v) for v in self.matrix.ravel())

    def to_cv2(self) -> np.ndarray:
        """2x3 forward matrix in the layout ``cv2.warpAffine`` expects."""
        return self.matrix[:2, :].astype(np.float32)

    def map_points(self, points) -> np.ndarray:
        """
        Map an (N, 2) array-like of view coordinates through the transform.

        Returns:
            (N, 2) float64 array of mapped points
        """
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        homogeneous = np.hstack([pts, np.ones((pts.shape[0], 1))])
        mapped = homogeneous @ self.matrix.T
        return mapped[:, :2]

    def map_point(self, x: float, y: float) -> Tuple[float, float]:
        mapped = self.map_points([(x, y)])[0]
        return (float(mapped[0]), float(mapped[1]))

    def is_identity(self, tolerance: float = 1e-9) -> bool:
        return bool(np.allclose(self.matrix, np.eye(3), atol=tolerance))

    def to_dict(self) -> dict:
        return {
            "scale_x": self.scale_x,
            "scale_y": self.scale_y,
            "rotation_degrees": self.rotation_degrees,
            "pivot_x": self.pivot_x,
            "pivot_y": self.pivot_y,
            "matrix": [list(row) for row in self.matrix.tolist()],
        }
