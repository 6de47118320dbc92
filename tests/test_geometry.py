import pytest

from previewfit.core.errors import InvalidDisplayRotation
from previewfit.core.geometry import (
    EMPTY_SIZE,
    CameraOrientationInfo,
    DisplayRotation,
    LensFacing,
    Size,
)


def test_size_area_and_empty():
    assert Size(1920, 1080).area == 2073600
    assert EMPTY_SIZE.is_empty
    assert Size(0, 10).is_empty
    assert not Size(1, 1).is_empty


def test_size_rejects_negative_dimensions():
    with pytest.raises(ValueError):
        Size(-1, 10)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1920x1080", Size(1920, 1080)),
        (" 640X480 ", Size(640, 480)),
        ("1280*720", Size(1280, 720)),
    ],
)
def test_size_parse(text, expected):
    assert Size.parse(text) == expected


@pytest.mark.parametrize("text", ["1920", "axb", "1x2x3"])
def test_size_parse_rejects_garbage(text):
    with pytest.raises(ValueError):
        Size.parse(text)


def test_size_str():
    assert str(Size(1920, 1080)) == "1920x1080"


@pytest.mark.parametrize("width,height", [(1.5, 2), (2, 1080.0), (True, 2), ("640", 480), (None, 0)])
def test_size_rejects_non_integer_dimensions(width, height):
    with pytest.raises(TypeError):
        Size(width, height)


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, DisplayRotation.ROTATION_0),
        (1, DisplayRotation.ROTATION_90),
        (2, DisplayRotation.ROTATION_180),
        (3, DisplayRotation.ROTATION_270),
        (90, DisplayRotation.ROTATION_90),
        (180, DisplayRotation.ROTATION_180),
        (270, DisplayRotation.ROTATION_270),
        ("1", DisplayRotation.ROTATION_90),
        ("270", DisplayRotation.ROTATION_270),
        (DisplayRotation.ROTATION_180, DisplayRotation.ROTATION_180),
    ],
)
def test_display_rotation_coerce(value, expected):
    assert DisplayRotation.coerce(value) is expected


@pytest.mark.parametrize("value", [4, 45, -90, 360, 1.5, "left", None, True, False])
def test_display_rotation_coerce_rejects(value):
    with pytest.raises(InvalidDisplayRotation):
        DisplayRotation.coerce(value)


def test_display_rotation_degrees():
    assert [r.degrees for r in DisplayRotation] == [0, 90, 180, 270]


def test_orientation_info():
    info = CameraOrientationInfo(0, LensFacing.EXTERNAL)
    assert info.is_landscape_native
    assert not CameraOrientationInfo(90).is_landscape_native
    assert CameraOrientationInfo(90).lens_facing is LensFacing.BACK
    assert LensFacing.FRONT.faces_user
    assert not LensFacing.EXTERNAL.faces_user
