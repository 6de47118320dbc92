"""UI components for PreviewFit."""

from .main_window import MainWindow
from .preview_widget import PreviewWidget, to_qtransform
from .controls_panel import ControlsPanel

__all__ = [
    "MainWindow",
    "PreviewWidget",
    "ControlsPanel",
    "to_qtransform",
]
