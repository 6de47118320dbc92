"""Recomputes the preview fit when the surface or the display changes."""

import logging
from typing import Callable, List, Optional

from .errors import PreviewFitError
from .geometry import DisplayRotation, Size
from .transform_builder import PreviewFit, fit_preview

logger = logging.getLogger(__name__)


class PreviewSession:
    """
    Tracks the viewport and display rotation for one camera profile.

    Every surface-size change, profile change, or half-turn display change
    triggers a fresh selection + transform pass. Listeners receive each new
    PreviewFit; failed passes leave the session without a fit until the next
    event.
    """

    def __init__(self, profile, display_rotation=0) -> None:
        """
        Initialize the session.

        Args:
            profile: CameraProfile supplying sensor orientation, lens facing
                and output sizes
            display_rotation: Initial rotation (quarter turns or degrees)
        """
        self._profile = profile
        self._rotation = DisplayRotation.coerce(display_rotation)
        self._window_size: Optional[Size] = None
        self._fit: Optional[PreviewFit] = None
        self._last_error: Optional[PreviewFitError] = None
        self._listeners: List[Callable[[PreviewFit], None]] = []

    @property
    def profile(self):
        return self._profile

    @property
    def display_rotation(self) -> DisplayRotation:
        return self._rotation

    @property
    def current_fit(self) -> Optional[PreviewFit]:
        """Most recent successful fit, None after a failed pass."""
        return self._fit

    @property
    def last_error(self) -> Optional[PreviewFitError]:
        return self._last_error

    @property
    def is_configured(self) -> bool:
        return self._fit is not None

    def add_listener(self, callback: Callable[[PreviewFit], None]) -> None:
        """Register a callback invoked with every new fit."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[PreviewFit], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def on_surface_available(self, width: int, height: int) -> Optional[PreviewFit]:
        return self.on_surface_size_changed(width, height)

    def on_surface_size_changed(self, width: int, height: int) -> Optional[PreviewFit]:
        self._window_size = Size(width, height)
        return self.recompute()

    def on_display_changed(self, rotation, resizes_surface: bool = True) -> Optional[PreviewFit]:
        """
        Handle a display rotation event.

        Quarter-turn changes are followed by a surface-size change which
        recomputes anyway, so only half turns recompute here. Hosts whose
        surface keeps its size on a quarter turn pass
        ``resizes_surface=False`` to recompute on every change.

        Returns:
            The new fit when a recompute happened, otherwise None
        """
        new_rotation = DisplayRotation.coerce(rotation)
        difference = int(new_rotation) - int(self._rotation)
        self._rotation = new_rotation

        if difference in (2, -2):
            logger.info(f"Display flipped to {new_rotation.degrees} degrees")
            return self.recompute()
        if difference and not resizes_surface:
            logger.info(f"Display turned to {new_rotation.degrees} degrees")
            return self.recompute()
        return None

    def set_profile(self, profile) -> Optional[PreviewFit]:
        self._profile = profile
        logger.info(f"Camera profile changed: {profile.name}")
        return self.recompute()

    def recompute(self) -> Optional[PreviewFit]:
        """
        Run a fresh selection + transform pass.

        Returns:
            The new PreviewFit, or None if the surface is not ready or the
            pass failed validation
        """
        if self._window_size is None:
            logger.debug("Surface not available yet, skipping fit")
            return None

        try:
            fit = fit_preview(self._window_size, self._profile, self._rotation)
        except PreviewFitError as e:
            logger.warning(f"Cannot configure preview: {e}")
            self._fit = None
            self._last_error = e
            return None

        self._fit = fit
        self._last_error = None
        logger.info(
            f"Preview configured: buffer {fit.preview_size} in window "
            f"{fit.window_size}, rotation {fit.surface_rotation_degrees}"
        )

        for callback in list(self._listeners):
            callback(fit)

        return fit

    def release(self) -> None:
        """Drop the current fit and listeners."""
        self._fit = None
        self._listeners.clear()
