"""Exceptions raised by the preview-fit core."""

from typing import Optional


class PreviewFitError(Exception):
    """Base class for preview fitting failures."""


class InvalidWindowSize(PreviewFitError):
    """The destination view has no usable area (not laid out yet)."""

    def __init__(self, size, message: Optional[str] = None) -> None:
        self.size = size
        super().__init__(message or f"Invalid window size: {size}")


class InvalidPreviewSize(PreviewFitError):
    """No usable capture resolution was available for the view."""

    def __init__(self, size, message: Optional[str] = None) -> None:
        self.size = size
        super().__init__(message or f"Invalid preview size: {size}")


class InvalidDisplayRotation(PreviewFitError):
    """Display rotation is neither a quarter-turn index nor a right angle."""

    def __init__(self, value) -> None:
        self.value = value
        super().__init__(
            f"Invalid display rotation: {value!r} "
            "(expected 0-3 quarter turns or 0/90/180/270 degrees)"
        )


class FrameSizeMismatch(PreviewFitError):
    """A frame handed to the renderer does not match the buffer size."""


class UnknownProfileError(PreviewFitError, KeyError):
    """Requested camera profile does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown camera profile: {name}")

    def __str__(self) -> str:
        return self.args[0]
