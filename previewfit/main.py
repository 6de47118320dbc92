"""PreviewFit application entry point."""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .config.camera_profiles import ProfileStore
from .config.settings import Settings
from .core.errors import PreviewFitError
from .core.geometry import DisplayRotation, Size
from .core.transform_builder import PreviewFit, fit_preview


def setup_logging(debug: bool = False) -> None:
    """Configure application logging."""
    level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    # Reduce noise from Qt
    logging.getLogger("PySide6").setLevel(logging.WARNING)


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        description="PreviewFit - fit a camera preview to a view without distortion"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--reset-settings",
        action="store_true",
        help="Reset settings to defaults",
    )
    parser.add_argument(
        "--profile",
        help="Camera profile key (see --list-profiles)",
    )
    parser.add_argument(
        "--window",
        type=Size.parse,
        help="View size as WIDTHxHEIGHT",
    )
    parser.add_argument(
        "--rotation",
        help="Display rotation, quarter turns (0-3) or degrees",
    )
    parser.add_argument(
        "--list-profiles",
        action="store_true",
        help="List available camera profiles and exit",
    )
    parser.add_argument(
        "--print-fit",
        action="store_true",
        help="Print the computed fit as JSON and exit",
    )
    parser.add_argument(
        "--render",
        type=Path,
        metavar="PATH",
        help="Render the test card through the fit to an image file and exit",
    )
    return parser


def collect_overrides(args) -> dict:
    """Settings fields given on the command line."""
    overrides = {}
    if args.profile:
        overrides["camera_profile"] = args.profile
    if args.window is not None:
        overrides["window_width"] = args.window.width
        overrides["window_height"] = args.window.height
    if args.rotation is not None:
        overrides["display_rotation"] = int(DisplayRotation.coerce(args.rotation))
    return overrides


def persistent_settings(settings: Settings, loaded: Settings, overrides: dict) -> Settings:
    """
    Settings to write back on exit.

    Command-line overrides are one-off: any field still holding its override
    value goes back to the loaded value. Fields changed in the UI are kept.
    """
    restore = {
        key: getattr(loaded, key)
        for key, value in overrides.items()
        if getattr(settings, key) == value
    }
    return settings.model_copy(update=restore)


def compute_fit(settings: Settings, store: ProfileStore) -> PreviewFit:
    """Run the selector and the transform builder for the configured viewport."""
    profile = store.get_profile(settings.camera_profile)
    return fit_preview(settings.window_size, profile, settings.display_rotation)


def render_fit(fit: PreviewFit, path: Path) -> None:
    """Write the test card, as the view would show it, to ``path``."""
    import cv2

    from .processing.patterns import generate_test_card
    from .processing.surface_renderer import SurfaceRenderer

    frame = generate_test_card(fit.preview_size)
    image = SurfaceRenderer().render(frame, fit)
    if not cv2.imwrite(str(path), image):
        raise OSError(f"Could not write image to {path}")


def run_headless(args, settings: Settings, store: ProfileStore) -> int:
    logger = logging.getLogger(__name__)

    if args.list_profiles:
        for key, profile in store.all_profiles().items():
            sizes = ", ".join(str(s) for s in profile.output_sizes)
            print(
                f"{key}: {profile.name} (sensor {profile.sensor_orientation}°, "
                f"{profile.lens_facing.value}) [{sizes}]"
            )
        return 0

    try:
        fit = compute_fit(settings, store)
    except PreviewFitError as e:
        logger.error(f"Cannot fit preview: {e}")
        return 1

    if args.print_fit:
        print(json.dumps(fit.to_dict(), indent=2))

    if args.render:
        try:
            render_fit(fit, args.render)
        except OSError as e:
            logger.error(str(e))
            return 1
        logger.info(f"Rendered preview to {args.render}")

    return 0


def run_gui(
    settings: Settings,
    store: ProfileStore,
    loaded: Optional[Settings] = None,
    overrides: Optional[dict] = None,
) -> int:
    logger = logging.getLogger(__name__)

    from PySide6.QtWidgets import QApplication

    from .ui.main_window import MainWindow

    app = QApplication(sys.argv)
    app.setApplicationName("PreviewFit")
    app.setOrganizationName("PreviewFit")
    app.setStyle("Fusion")

    window = MainWindow(settings, store)
    window.setGeometry(
        settings.main_window_x,
        settings.main_window_y,
        settings.main_window_width,
        settings.main_window_height,
    )
    window.show()

    logger.info("Application started")

    result = app.exec()

    # Save settings on exit
    try:
        geometry = window.geometry()
        settings.main_window_x = geometry.x()
        settings.main_window_y = geometry.y()
        settings.main_window_width = geometry.width()
        settings.main_window_height = geometry.height()

        persistent_settings(settings, loaded or settings, overrides or {}).save()
        logger.info("Settings saved")
    except Exception as e:
        logger.error(f"Failed to save settings: {e}")

    return result


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(debug=args.debug)
    logger = logging.getLogger(__name__)

    logger.info("Starting PreviewFit")

    if args.reset_settings:
        loaded = Settings()
        logger.info("Using default settings")
    else:
        loaded = Settings.load()

    try:
        overrides = collect_overrides(args)
    except PreviewFitError as e:
        parser.error(str(e))
    settings = loaded.model_copy(update=overrides)

    settings.ensure_directories()
    store = ProfileStore()

    if args.list_profiles or args.print_fit or args.render:
        return run_headless(args, settings, store)

    if args.profile and args.profile not in store.list_profiles():
        parser.error(f"unknown camera profile: {args.profile}")

    return run_gui(settings, store, loaded, overrides)


if __name__ == "__main__":
    sys.exit(main())
