"""Worker thread producing preview buffers at the configured size."""

import logging
import threading
import time
from typing import Optional

from PySide6.QtCore import QThread, Signal
from PySide6.QtGui import QImage

from ..core.geometry import Size
from ..processing.patterns import generate_test_card

logger = logging.getLogger(__name__)


class FrameWorker(QThread):
    """
    Generates test-card buffers at the current preview buffer size.

    Runs on a dedicated thread so the UI only has to paint. The buffer size
    follows the latest preview fit; no frames are produced while it is empty.

    Signals:
        frame_ready(object): Emitted with a QImage of the buffer size
        fps_updated(float): Emitted periodically with actual FPS
    """

    frame_ready = Signal(object)  # QImage
    fps_updated = Signal(float)

    def __init__(self, target_fps: int = 30, parent=None) -> None:
        """
        Initialize frame worker.

        Args:
            target_fps: Target frame rate
            parent: Qt parent object
        """
        super().__init__(parent)

        self._frame_interval = 1.0 / target_fps
        self._buffer_size: Optional[Size] = None
        self._lock = threading.Lock()
        self._running = False

        self._frame_count = 0
        self._fps_window_start = 0.0
        self._fps_window_frames = 0
        self._fps_update_interval = 1.0  # seconds

    def set_buffer_size(self, size: Optional[Size]) -> None:
        """Set the buffer dimensions for subsequent frames."""
        with self._lock:
            self._buffer_size = size
        logger.debug(f"Buffer size set to {size}")

    def stop(self) -> None:
        """Request worker to stop."""
        self._running = False

    def run(self) -> None:
        """Main frame loop (runs in worker thread)."""
        logger.info("Frame worker starting")

        self._running = True
        self._frame_count = 0
        self._fps_window_start = time.monotonic()
        self._fps_window_frames = 0
        next_frame_time = time.monotonic()

        while self._running:
            now = time.monotonic()
            if now < next_frame_time:
                time.sleep(next_frame_time - now)
                continue
            next_frame_time = now + self._frame_interval

            with self._lock:
                size = self._buffer_size
            if size is None or size.is_empty:
                continue

            frame = generate_test_card(size, self._frame_count)
            height, width = frame.shape[:2]

            qimage = QImage(
                frame.data,
                width,
                height,
                width * 3,
                QImage.Format.Format_BGR888,
            ).copy()  # Copy to detach from numpy buffer

            self.frame_ready.emit(qimage)
            self._frame_count += 1
            self._fps_window_frames += 1

            elapsed = now - self._fps_window_start
            if elapsed >= self._fps_update_interval:
                self.fps_updated.emit(self._fps_window_frames / elapsed)
                self._fps_window_start = now
                self._fps_window_frames = 0

        logger.info(f"Frame worker stopped. Total frames: {self._frame_count}")
