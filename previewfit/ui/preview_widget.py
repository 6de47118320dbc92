"""Preview widget painting camera buffers through the fit transform."""

import logging
from typing import Optional

from PySide6.QtCore import QRect, Qt, Signal, Slot
from PySide6.QtGui import QColor, QImage, QPainter, QPen, QTransform
from PySide6.QtWidgets import QSizePolicy, QWidget

from ..core.affine import AffineTransform
from ..core.transform_builder import PreviewFit

logger = logging.getLogger(__name__)


def to_qtransform(transform: AffineTransform) -> QTransform:
    """Convert to Qt's row-vector matrix layout."""
    m = transform.matrix
    return QTransform(
        m[0, 0], m[1, 0],
        m[0, 1], m[1, 1],
        m[0, 2], m[1, 2],
    )


class PreviewWidget(QWidget):
    """
    Texture-view style surface for the live preview.

    The buffer image is stretched to the widget bounds and painted with the
    current fit transform, so a correct fit fills the widget without
    distortion. Resizes are reported so the owner can recompute the fit.

    Signals:
        surface_size_changed(int, int): Widget resized to (width, height)
    """

    surface_size_changed = Signal(int, int)

    def __init__(self, parent=None) -> None:
        super().__init__(parent)

        self._current_image: Optional[QImage] = None
        self._fit: Optional[PreviewFit] = None
        self._show_crosshair = True
        self._show_info = True
        self._fps = 0.0

        self.setMinimumSize(240, 240)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

    def set_fit(self, fit: Optional[PreviewFit]) -> None:
        """Apply a new fit (None clears the surface)."""
        self._fit = fit
        if fit is None:
            self._current_image = None
        self.update()

    @Slot(object)
    def update_frame(self, qimage: QImage) -> None:
        """Display a new buffer; frames not matching the fit are dropped."""
        if self._fit is None:
            return
        preview = self._fit.preview_size
        if qimage.width() != preview.width or qimage.height() != preview.height:
            return
        self._current_image = qimage
        self.update()

    def update_fps(self, fps: float) -> None:
        self._fps = fps

    def set_show_crosshair(self, show: bool) -> None:
        """Toggle crosshair overlay visibility."""
        self._show_crosshair = show
        self.update()

    def set_show_info(self, show: bool) -> None:
        """Toggle info overlay visibility."""
        self._show_info = show
        self.update()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), QColor("#1a1a1a"))

            if self._fit is None or self._current_image is None:
                painter.setPen(QColor("#666"))
                painter.drawText(self.rect(), Qt.AlignmentFlag.AlignCenter, "No preview")
                return

            window = self._fit.window_size
            painter.save()
            painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
            painter.setTransform(to_qtransform(self._fit.transform))
            painter.drawImage(QRect(0, 0, window.width, window.height), self._current_image)
            painter.restore()

            self._draw_overlays(painter)
        finally:
            painter.end()

    def _draw_overlays(self, painter: QPainter) -> None:
        width = self.width()
        height = self.height()

        if self._show_crosshair:
            pen = QPen(QColor(0, 255, 0, 128))
            pen.setWidth(1)
            painter.setPen(pen)
            painter.drawLine(width // 2, 0, width // 2, height)
            painter.drawLine(0, height // 2, width, height // 2)

        if self._show_info and self._fit is not None:
            fit = self._fit
            painter.setPen(QPen(QColor(255, 255, 255)))
            painter.drawText(10, 20, f"Buffer: {fit.preview_size}")
            painter.drawText(10, 40, f"View: {fit.window_size}")
            painter.drawText(
                10, 60,
                f"Relative: {fit.relative_rotation}  Display: {fit.surface_rotation_degrees}",
            )
            painter.drawText(10, 80, f"Scale: {fit.final_scale:.3f}  FPS: {self._fps:.1f}")

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self.surface_size_changed.emit(self.width(), self.height())

    def resizeEvent(self, event) -> None:
        """Report the new surface size."""
        super().resizeEvent(event)
        size = event.size()
        self.surface_size_changed.emit(size.width(), size.height())
