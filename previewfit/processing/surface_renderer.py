"""Renders camera buffers onto a view surface through a preview transform."""

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np
import cv2

from ..core.errors import FrameSizeMismatch
from ..core.transform_builder import PreviewFit

logger = logging.getLogger(__name__)


@dataclass
class RenderSettings:
    """Settings for surface rendering."""

    interpolation: int = cv2.INTER_LINEAR
    background: Tuple[int, int, int] = (0, 0, 0)


class SurfaceRenderer:
    """
    Software stand-in for a texture-backed view.

    A buffer of the selected preview size is first stretched to the view
    bounds, then the preview transform is applied in view coordinates, the
    same order a texture view composes them.
    """

    def __init__(self, settings: RenderSettings = None) -> None:
        self._settings = settings or RenderSettings()
        self._frames_rendered = 0

    @property
    def settings(self) -> RenderSettings:
        return self._settings

    @property
    def frames_rendered(self) -> int:
        return self._frames_rendered

    def render(self, frame: np.ndarray, fit: PreviewFit) -> np.ndarray:
        """
        Render a buffer into a window-sized image.

        Args:
            frame: Buffer with shape (height, width[, channels]) equal to the
                fit's preview size
            fit: Preview fit to apply

        Returns:
            Array with the window's height and width

        Raises:
            FrameSizeMismatch: frame does not have the buffer size
        """
        frame_h, frame_w = frame.shape[:2]
        preview = fit.preview_size
        if (frame_w, frame_h) != (preview.width, preview.height):
            raise FrameSizeMismatch(
                f"Frame is {frame_w}x{frame_h}, buffer size is {preview}"
            )

        window = fit.window_size
        dsize = (window.width, window.height)

        stretched = cv2.resize(frame, dsize, interpolation=self._settings.interpolation)

        border = self._settings.background
        if stretched.ndim == 2:
            border = border[0]

        result = cv2.warpAffine(
            stretched,
            fit.transform.to_cv2(),
            dsize,
            flags=self._settings.interpolation,
            borderMode=cv2.BORDER_CONSTANT,
            borderValue=border,
        )

        self._frames_rendered += 1
        return result

    def coverage(self, fit: PreviewFit) -> float:
        """Fraction of the window covered by the transformed buffer."""
        window = fit.window_size
        mask = np.full((window.height, window.width), 255, dtype=np.uint8)
        warped = cv2.warpAffine(
            mask,
            fit.transform.to_cv2(),
            (window.width, window.height),
            flags=cv2.INTER_NEAREST,
            borderMode=cv2.BORDER_CONSTANT,
            borderValue=0,
        )
        return float(np.count_nonzero(warped)) / warped.size
