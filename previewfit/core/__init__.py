"""Core preview-fit modules for PreviewFit."""

from .geometry import Size, EMPTY_SIZE, LensFacing, DisplayRotation, CameraOrientationInfo
from .errors import (
    PreviewFitError,
    InvalidWindowSize,
    InvalidPreviewSize,
    InvalidDisplayRotation,
    FrameSizeMismatch,
    UnknownProfileError,
)
from .affine import AffineTransform
from .size_selector import compare_sizes, select_best_preview_size
from .transform_builder import (
    PreviewFit,
    build_preview_transform,
    compute_relative_rotation,
    compute_scale_factors,
    fit_preview,
    is_rotation_required,
)
from .preview_session import PreviewSession

__all__ = [
    "Size",
    "EMPTY_SIZE",
    "LensFacing",
    "DisplayRotation",
    "CameraOrientationInfo",
    "PreviewFitError",
    "InvalidWindowSize",
    "InvalidPreviewSize",
    "InvalidDisplayRotation",
    "FrameSizeMismatch",
    "UnknownProfileError",
    "AffineTransform",
    "compare_sizes",
    "select_best_preview_size",
    "PreviewFit",
    "build_preview_transform",
    "compute_relative_rotation",
    "compute_scale_factors",
    "fit_preview",
    "is_rotation_required",
    "PreviewSession",
]
