"""Main application window for PreviewFit."""

import logging
from typing import Optional

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QHBoxLayout,
    QMessageBox,
    QSplitter,
    QStatusBar,
)

from ..config.camera_profiles import DEFAULT_PROFILE, ProfileStore
from ..config.settings import Settings
from ..core.errors import PreviewFitError
from ..core.preview_session import PreviewSession
from ..core.transform_builder import PreviewFit
from ..workers.frame_worker import FrameWorker
from .controls_panel import ControlsPanel
from .preview_widget import PreviewWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        profile_store: Optional[ProfileStore] = None,
    ) -> None:
        super().__init__()

        self._settings = settings or Settings()
        self._profile_store = profile_store or ProfileStore()

        try:
            profile = self._profile_store.get_profile(self._settings.camera_profile)
        except PreviewFitError as e:
            logger.warning(f"{e}, falling back to default profile")
            self._settings.camera_profile = DEFAULT_PROFILE
            profile = self._profile_store.get_profile(DEFAULT_PROFILE)

        self._session = PreviewSession(profile, self._settings.display_rotation)
        self._session.add_listener(self._apply_fit)

        self._worker: Optional[FrameWorker] = None

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._start_worker()

    def _setup_ui(self) -> None:
        """Set up the main window UI."""
        self.setWindowTitle("PreviewFit - Camera Preview Transform")
        self.setMinimumSize(640, 480)

        central = QWidget()
        self.setCentralWidget(central)

        layout = QHBoxLayout(central)
        layout.setContentsMargins(4, 4, 4, 4)

        splitter = QSplitter(Qt.Orientation.Horizontal)

        # Preview area (left, larger)
        self._preview = PreviewWidget()
        splitter.addWidget(self._preview)

        # Controls panel (right, fixed width)
        self._controls = ControlsPanel(self._profile_store.all_profiles())
        self._controls.setMaximumWidth(280)
        splitter.addWidget(self._controls)

        splitter.setSizes([700, 280])
        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 0)

        layout.addWidget(splitter)

        self._controls.select_profile(self._settings.camera_profile)
        self._controls.select_rotation(self._settings.display_rotation)
        self._controls.crosshair_checkbox.setChecked(self._settings.show_crosshair)
        self._controls.info_checkbox.setChecked(self._settings.show_info)
        self._preview.set_show_crosshair(self._settings.show_crosshair)
        self._preview.set_show_info(self._settings.show_info)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_bar.showMessage("Waiting for surface")

    def _setup_menu(self) -> None:
        """Set up the menu bar."""
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")
        exit_action = QAction("E&xit", self)
        exit_action.setShortcut(QKeySequence.StandardKey.Quit)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        help_menu = menubar.addMenu("&Help")
        about_action = QAction("&About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

    def _connect_signals(self) -> None:
        """Connect UI signals to handlers."""
        self._preview.surface_size_changed.connect(self._on_surface_size_changed)
        self._controls.profile_changed.connect(self._on_profile_changed)
        self._controls.rotation_changed.connect(self._on_rotation_changed)

        self._controls.crosshair_checkbox.toggled.connect(
            self._preview.set_show_crosshair
        )
        self._controls.info_checkbox.toggled.connect(self._preview.set_show_info)

    def _start_worker(self) -> None:
        self._worker = FrameWorker(target_fps=self._settings.preview_fps)
        self._worker.frame_ready.connect(self._preview.update_frame)
        self._worker.fps_updated.connect(self._on_fps_updated)
        self._worker.start()

    def _stop_worker(self) -> None:
        if self._worker:
            self._worker.stop()
            self._worker.wait(2000)
            self._worker = None

    def _apply_fit(self, fit: PreviewFit) -> None:
        """Push a new fit to the surface and the buffer producer."""
        self._preview.set_fit(fit)
        if self._worker:
            self._worker.set_buffer_size(fit.preview_size)
        self._controls.update_fit(fit)
        self._status_bar.showMessage(
            f"Buffer {fit.preview_size} -> view {fit.window_size}, "
            f"rotated {-fit.surface_rotation_degrees}°"
        )

    def _report_failure(self) -> None:
        error = self._session.last_error
        if error is None:
            return
        self._preview.set_fit(None)
        if self._worker:
            self._worker.set_buffer_size(None)
        self._controls.clear_fit(type(error).__name__)
        self._status_bar.showMessage(str(error))

    @Slot(int, int)
    def _on_surface_size_changed(self, width: int, height: int) -> None:
        if self._session.on_surface_size_changed(width, height) is None:
            self._report_failure()

    @Slot(str)
    def _on_profile_changed(self, key: str) -> None:
        try:
            profile = self._profile_store.get_profile(key)
        except PreviewFitError as e:
            QMessageBox.warning(self, "Profile Error", str(e))
            return

        self._settings.camera_profile = key
        if self._session.set_profile(profile) is None:
            self._report_failure()

    @Slot(int)
    def _on_rotation_changed(self, rotation: int) -> None:
        self._settings.display_rotation = rotation
        # A desktop window keeps its size on a quarter turn
        fit = self._session.on_display_changed(rotation, resizes_surface=False)
        if fit is None:
            self._report_failure()

    @Slot(float)
    def _on_fps_updated(self, fps: float) -> None:
        self._preview.update_fps(fps)
        self._controls.update_fps(fps)

    def _show_about(self) -> None:
        QMessageBox.about(
            self,
            "About PreviewFit",
            "PreviewFit\n\n"
            "Selects a camera buffer size for a view and computes the\n"
            "scale + rotation that fills the view without distortion.",
        )

    def closeEvent(self, event) -> None:
        """Stop the worker and remember display options."""
        self._stop_worker()
        self._session.release()
        self._settings.show_crosshair = self._controls.crosshair_checkbox.isChecked()
        self._settings.show_info = self._controls.info_checkbox.isChecked()
        super().closeEvent(event)
