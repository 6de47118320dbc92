import json

import cv2
import pytest

from previewfit.config.camera_profiles import DEFAULT_PROFILE
from previewfit.config.settings import Settings
from previewfit.core.geometry import Size
from previewfit.main import build_parser, collect_overrides, main, persistent_settings


def _run(capsys, *argv):
    code = main(["--reset-settings", *argv])
    return code, capsys.readouterr().out


def test_print_fit(config_dir, capsys):
    code, out = _run(
        capsys, "--print-fit", "--profile", "back_portrait", "--window", "1080x1920", "--rotation", "0"
    )

    assert code == 0
    data = json.loads(out)
    assert data["preview_size"] == [1920, 1080]
    assert data["relative_rotation"] == 90
    assert data["rotation_required"] is True


def test_rotation_in_degrees(config_dir, capsys):
    code, out = _run(capsys, "--print-fit", "--window", "1080x1920", "--rotation", "90")

    assert code == 0
    assert json.loads(out)["transform"]["rotation_degrees"] == -90


def test_render(config_dir, tmp_path, capsys):
    target = tmp_path / "preview.png"
    code, _ = _run(capsys, "--render", str(target), "--window", "540x960")

    assert code == 0
    image = cv2.imread(str(target))
    assert image.shape == (960, 540, 3)


def test_list_profiles(config_dir, capsys):
    code, out = _run(capsys, "--list-profiles")

    assert code == 0
    assert "back_portrait:" in out
    assert "landscape_native:" in out


def test_unknown_profile_fails(config_dir, capsys):
    code, _ = _run(capsys, "--print-fit", "--profile", "nope")
    assert code == 1


def test_zero_window_fails(config_dir, capsys):
    code, out = _run(capsys, "--print-fit", "--window", "0x0")
    assert code == 1
    assert out == ""


def test_invalid_rotation_is_usage_error(config_dir):
    with pytest.raises(SystemExit) as exc_info:
        main(["--reset-settings", "--print-fit", "--rotation", "45"])
    assert exc_info.value.code == 2


def test_window_argument_parsing():
    args = build_parser().parse_args(["--window", "1280x720"])
    assert (args.window.width, args.window.height) == (1280, 720)


def test_overrides_leave_loaded_settings_untouched():
    args = build_parser().parse_args(
        ["--profile", "front_portrait", "--window", "1280x720", "--rotation", "180"]
    )
    loaded = Settings()

    overrides = collect_overrides(args)
    settings = loaded.model_copy(update=overrides)

    assert overrides == {
        "camera_profile": "front_portrait",
        "window_width": 1280,
        "window_height": 720,
        "display_rotation": 2,
    }
    assert settings.window_size == Size(1280, 720)
    assert loaded.camera_profile == DEFAULT_PROFILE
    assert loaded.window_size == Size(1080, 1920)
    assert loaded.display_rotation == 0


def test_one_off_overrides_are_not_saved(config_dir):
    Settings(camera_profile="front_portrait", display_rotation=1).save()
    loaded = Settings.load()
    overrides = collect_overrides(
        build_parser().parse_args(["--profile", "landscape_native", "--rotation", "0"])
    )
    settings = loaded.model_copy(update=overrides)
    # Changed in the UI after startup
    settings.display_rotation = 3

    persistent_settings(settings, loaded, overrides).save()

    saved = Settings.load()
    assert saved.camera_profile == "front_portrait"
    assert saved.display_rotation == 3


def test_unknown_profile_override_rejected_for_gui(config_dir):
    with pytest.raises(SystemExit) as exc_info:
        main(["--reset-settings", "--profile", "nope"])
    assert exc_info.value.code == 2
