import logging

import pytest

from previewfit.config.camera_profiles import CAMERA_PROFILES
from previewfit.core.errors import InvalidPreviewSize, InvalidWindowSize
from previewfit.core.geometry import DisplayRotation, Size
from previewfit.core.preview_session import PreviewSession


@pytest.fixture()
def session(back_profile):
    return PreviewSession(back_profile)


def test_no_fit_before_surface(session):
    assert session.recompute() is None
    assert not session.is_configured


def test_surface_available_configures(session):
    fits = []
    session.add_listener(fits.append)

    fit = session.on_surface_available(1080, 1920)

    assert fit is not None
    assert fit.preview_size == Size(1920, 1080)
    assert session.current_fit is fit
    assert fits == [fit]


def test_quarter_turn_waits_for_resize(session):
    first = session.on_surface_available(1080, 1920)

    assert session.on_display_changed(1) is None
    assert session.display_rotation is DisplayRotation.ROTATION_90
    assert session.current_fit is first

    # The resize that follows a quarter turn picks up the new rotation
    resized = session.on_surface_size_changed(1920, 1080)
    assert resized.surface_rotation_degrees == 90


@pytest.mark.parametrize("start,end", [(0, 2), (2, 0), (1, 3), (3, 1)])
def test_half_turn_recomputes(back_profile, start, end):
    session = PreviewSession(back_profile, start)
    session.on_surface_available(1080, 1920)

    fit = session.on_display_changed(end)

    assert fit is not None
    assert fit.surface_rotation_degrees == end * 90


def test_three_quarter_jump_does_not_recompute(back_profile):
    session = PreviewSession(back_profile, 3)
    session.on_surface_available(1080, 1920)
    assert session.on_display_changed(0) is None


@pytest.mark.parametrize("start,end", [(0, 1), (1, 0), (3, 0), (0, 2)])
def test_fixed_surface_recomputes_on_any_turn(back_profile, start, end):
    session = PreviewSession(back_profile, start)
    session.on_surface_available(1080, 1920)
    fits = []
    session.add_listener(fits.append)

    fit = session.on_display_changed(end, resizes_surface=False)

    assert fit is not None
    assert fit.surface_rotation_degrees == end * 90
    assert fits == [fit]


def test_fixed_surface_ignores_unchanged_rotation(session):
    session.on_surface_available(1080, 1920)
    assert session.on_display_changed(0, resizes_surface=False) is None


@pytest.mark.parametrize("end", [1, 2])
def test_failed_turn_logs_warning_once(empty_profile, caplog, end):
    session = PreviewSession(empty_profile)
    session.on_surface_available(1080, 1920)
    caplog.clear()

    with caplog.at_level(logging.WARNING, logger="previewfit.core.preview_session"):
        assert session.on_display_changed(end, resizes_surface=False) is None

    warnings = [r for r in caplog.records if "Cannot configure preview" in r.getMessage()]
    assert len(warnings) == 1
    assert isinstance(session.last_error, InvalidPreviewSize)


def test_rotation_accepts_degrees(session):
    session.on_surface_available(1080, 1920)
    fit = session.on_display_changed(180)
    assert fit.surface_rotation_degrees == 180


def test_zero_surface_reports_failure(session):
    fits = []
    session.add_listener(fits.append)

    assert session.on_surface_available(0, 0) is None
    assert isinstance(session.last_error, InvalidWindowSize)
    assert session.current_fit is None
    assert fits == []

    # Retried on the next surface callback
    assert session.on_surface_size_changed(1080, 1920) is not None
    assert session.last_error is None


def test_profile_without_streams(empty_profile):
    session = PreviewSession(empty_profile)
    assert session.on_surface_available(1080, 1920) is None
    assert isinstance(session.last_error, InvalidPreviewSize)


def test_set_profile_recomputes(session):
    session.on_surface_available(1920, 1080)
    fit = session.set_profile(CAMERA_PROFILES["landscape_native"])

    assert session.profile is CAMERA_PROFILES["landscape_native"]
    assert fit.preview_size == Size(1920, 1080)
    assert not fit.rotation_required


def test_removed_listener_not_called(session):
    fits = []
    session.add_listener(fits.append)
    session.remove_listener(fits.append)
    session.on_surface_available(1080, 1920)
    assert fits == []


def test_release(session):
    fits = []
    session.add_listener(fits.append)
    session.on_surface_available(1080, 1920)
    session.release()

    assert session.current_fit is None
    session.recompute()
    assert len(fits) == 1
