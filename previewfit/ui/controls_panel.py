"""Control panel widget for camera profile and display rotation."""

import logging
from typing import Dict

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QGroupBox,
    QComboBox,
    QLabel,
    QCheckBox,
)

from ..config.camera_profiles import CameraProfile, DEFAULT_PROFILE
from ..core.geometry import DisplayRotation
from ..core.transform_builder import PreviewFit

logger = logging.getLogger(__name__)


class ControlsPanel(QWidget):
    """
    Control panel for the simulated camera and display.

    Signals:
        profile_changed(str): User selected a different camera profile
        rotation_changed(int): User selected a display rotation (quarter turns)
    """

    profile_changed = Signal(str)
    rotation_changed = Signal(int)

    def __init__(self, profiles: Dict[str, CameraProfile], parent=None) -> None:
        super().__init__(parent)
        self._profiles = profiles
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the control panel layout."""
        layout = QVBoxLayout(self)

        # Camera group
        camera_group = QGroupBox("Camera")
        camera_layout = QVBoxLayout(camera_group)

        profile_layout = QHBoxLayout()
        profile_layout.addWidget(QLabel("Profile:"))
        self._profile_combo = QComboBox()
        for key, profile in self._profiles.items():
            self._profile_combo.addItem(profile.name, key)
        default_idx = self._profile_combo.findData(DEFAULT_PROFILE)
        if default_idx >= 0:
            self._profile_combo.setCurrentIndex(default_idx)
        self._profile_combo.currentIndexChanged.connect(self._on_profile_changed)
        profile_layout.addWidget(self._profile_combo)
        camera_layout.addLayout(profile_layout)

        self._sensor_label = QLabel()
        camera_layout.addWidget(self._sensor_label)
        self._facing_label = QLabel()
        camera_layout.addWidget(self._facing_label)

        layout.addWidget(camera_group)

        # Display group
        display_group = QGroupBox("Display")
        display_layout = QVBoxLayout(display_group)

        rotation_layout = QHBoxLayout()
        rotation_layout.addWidget(QLabel("Rotation:"))
        self._rotation_combo = QComboBox()
        for rotation in DisplayRotation:
            self._rotation_combo.addItem(f"{rotation.degrees}°", int(rotation))
        self._rotation_combo.currentIndexChanged.connect(self._on_rotation_changed)
        rotation_layout.addWidget(self._rotation_combo)
        display_layout.addLayout(rotation_layout)

        self._crosshair_check = QCheckBox("Show crosshair")
        self._crosshair_check.setChecked(True)
        display_layout.addWidget(self._crosshair_check)

        self._info_check = QCheckBox("Show info overlay")
        self._info_check.setChecked(True)
        display_layout.addWidget(self._info_check)

        layout.addWidget(display_group)

        # Fit status group
        status_group = QGroupBox("Fit")
        status_layout = QVBoxLayout(status_group)

        self._buffer_label = QLabel("Buffer: --")
        status_layout.addWidget(self._buffer_label)
        self._rotation_label = QLabel("Relative rotation: --")
        status_layout.addWidget(self._rotation_label)
        self._scale_label = QLabel("Scale: --")
        status_layout.addWidget(self._scale_label)
        self._fps_label = QLabel("FPS: --")
        status_layout.addWidget(self._fps_label)

        layout.addWidget(status_group)

        # Stretch to push everything to top
        layout.addStretch()

        self._update_profile_labels()

    def _on_profile_changed(self, index: int) -> None:
        """Handle profile combo box change."""
        key = self._profile_combo.currentData()
        if key:
            self._update_profile_labels()
            self.profile_changed.emit(key)

    def _on_rotation_changed(self, index: int) -> None:
        self.rotation_changed.emit(self._rotation_combo.currentData())

    def _update_profile_labels(self) -> None:
        profile = self._profiles.get(self._profile_combo.currentData())
        if profile is None:
            return
        self._sensor_label.setText(f"Sensor orientation: {profile.sensor_orientation}°")
        self._facing_label.setText(f"Lens facing: {profile.lens_facing.value}")

    def select_profile(self, key: str) -> None:
        idx = self._profile_combo.findData(key)
        if idx >= 0:
            self._profile_combo.setCurrentIndex(idx)

    def select_rotation(self, rotation: int) -> None:
        idx = self._rotation_combo.findData(int(rotation))
        if idx >= 0:
            self._rotation_combo.setCurrentIndex(idx)

    def update_fit(self, fit: PreviewFit) -> None:
        """Show the latest fit values."""
        self._buffer_label.setText(f"Buffer: {fit.preview_size}")
        self._rotation_label.setText(
            f"Relative rotation: {fit.relative_rotation}°"
            + (" (axes swapped)" if fit.rotation_required else "")
        )
        self._scale_label.setText(
            f"Scale: {fit.transform.scale_x:.3f} x {fit.transform.scale_y:.3f}"
        )

    def clear_fit(self, reason: str) -> None:
        self._buffer_label.setText(f"Buffer: -- ({reason})")
        self._rotation_label.setText("Relative rotation: --")
        self._scale_label.setText("Scale: --")

    def update_fps(self, fps: float) -> None:
        """Update FPS display."""
        self._fps_label.setText(f"FPS: {fps:.1f}")

    @property
    def crosshair_checkbox(self) -> QCheckBox:
        """Access to crosshair checkbox for connecting signals."""
        return self._crosshair_check

    @property
    def info_checkbox(self) -> QCheckBox:
        """Access to info checkbox for connecting signals."""
        return self._info_check
