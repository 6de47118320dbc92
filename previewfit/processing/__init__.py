"""Processing modules for rendering preview frames."""

from .surface_renderer import SurfaceRenderer, RenderSettings
from .patterns import generate_test_card

__all__ = ["SurfaceRenderer", "RenderSettings", "generate_test_card"]
