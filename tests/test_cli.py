import json

import pytest

from globearc.cli import main


def test_cli_midpoint_json(capsys):
    rc = main(["midpoint", "--a-lon", "55.2708", "--a-lat", "25.2048", "--b-lon", "78.9629", "--b-lat", "20.5937", "--json"])
    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert 55.2708 < data["lon"] < 78.9629


def test_cli_frame_for_configured_destination(capsys):
    rc = main(["frame", "--destination", "europe", "--json"])
    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert data["bearing"] == 0.0
    assert data["center"]["lat"] > 25.0


def test_cli_arc_progress_prints_visible_prefix(capsys):
    rc = main(["arc", "--destination", "india", "--steps", "20", "--progress", "0.5", "--json"])
    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert data["total_points"] == 21
    assert data["visible_points"] == 10


def test_cli_arc_text_output(capsys):
    rc = main(["arc", "--end-lon", "78.9629", "--end-lat", "20.5937", "--steps", "4"])
    assert rc == 0
    out = capsys.readouterr().out
    assert out.startswith("arc: steps=4 height=10 visible=5/5")


def test_cli_destinations_lists_all(capsys):
    assert main(["destinations"]) == 0
    out = capsys.readouterr().out
    for name in ("dubai", "india", "africa", "europe", "australia"):
        assert name in out


def test_cli_rejects_out_of_range_coordinates(capsys):
    rc = main(["midpoint", "--a-lon", "190", "--a-lat", "0", "--b-lon", "0", "--b-lat", "0"])
    assert rc == 2
    assert "Longitude 190.0" in capsys.readouterr().err


def test_cli_rejects_unknown_destination(capsys):
    rc = main(["arc", "--destination", "mars"])
    assert rc == 2
    assert "Unknown destination 'mars'" in capsys.readouterr().err


def test_cli_rejects_zero_steps(capsys):
    rc = main(["arc", "--destination", "india", "--steps", "0"])
    assert rc == 2
    assert "steps must be >= 1" in capsys.readouterr().err


def test_cli_frame_rejects_destination_with_explicit_coordinates(capsys):
    rc = main(["frame", "--destination", "india", "--dest-lon", "10", "--dest-lat", "10"])
    assert rc == 2
    assert "--destination cannot be combined with --dest-lon/--dest-lat" in capsys.readouterr().err


def test_cli_arc_rejects_destination_with_explicit_coordinates(capsys):
    rc = main(["arc", "--destination", "india", "--end-lon", "10"])
    assert rc == 2
    assert "--destination cannot be combined with --end-lon/--end-lat" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [
        ["arc", "--destination", "india", "--height", "nan"],
        ["frame", "--north-offset", "inf"],
        ["midpoint", "--a-lon", "nan", "--a-lat", "0", "--b-lon", "0", "--b-lat", "0"],
    ],
)
def test_cli_rejects_non_finite_numbers(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
    assert "must be finite" in capsys.readouterr().err
