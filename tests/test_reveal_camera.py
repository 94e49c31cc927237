import pytest

from globearc.core.arc import generate_arc
from globearc.core.camera import CameraOptions, build_camera_options, frame_camera
from globearc.core.geo import GeoPoint, frame_center
from globearc.core.reveal import visible_count, visible_prefix

START = GeoPoint(lon=55.2708, lat=25.2048)
END = GeoPoint(lon=78.9629, lat=20.5937)


@pytest.mark.parametrize(
    "total,progress,expected",
    [
        (201, 0.0, 2),
        (201, 0.004, 2),
        (201, 0.5, 100),
        (201, 0.999, 200),
        (201, 1.0, 201),
        (2, 0.0, 2),
    ],
)
def test_visible_count(total, progress, expected):
    assert visible_count(total, progress) == expected


@pytest.mark.parametrize("progress", [-0.1, 1.01])
def test_visible_count_rejects_progress_outside_unit_interval(progress):
    with pytest.raises(ValueError, match="progress"):
        visible_count(201, progress)


def test_visible_prefix_is_a_prefix_of_the_arc():
    arc = generate_arc(START, END, 200, 10.0)
    prefix = visible_prefix(arc, 0.25)

    assert len(prefix) == 50
    assert prefix == arc[:50]
    assert prefix[0] == START


def test_full_progress_reveals_whole_arc():
    arc = generate_arc(START, END, 200, 10.0)
    assert visible_prefix(arc, 1.0) == arc


def test_build_camera_options_is_north_up():
    opts = build_camera_options(START, 30.0)
    assert opts == CameraOptions(center=START, zoom=1.0, pitch=30.0, bearing=0.0)


def test_frame_camera_uses_frame_center():
    opts = frame_camera(START, END, north_offset=25.0, zoom=1.5)
    assert opts.center == frame_center(START, END, 25.0)
    assert opts.zoom == 1.5
    assert opts.pitch == 0.0
    assert opts.bearing == 0.0


def test_frame_camera_without_destination_centers_on_start():
    opts = frame_camera(START, None, north_offset=25.0)
    assert opts.center == GeoPoint(lon=START.lon, lat=START.lat + 25.0)
