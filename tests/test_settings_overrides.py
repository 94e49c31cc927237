from __future__ import annotations

import pytest

from globearc.config.overrides import apply_settings_overrides
from globearc.config.settings import Settings, get_settings


def test_apply_settings_overrides_returns_same_object_when_none():
    settings = get_settings()

    # No overrides is a no-op: the cached model comes back untouched.
    assert apply_settings_overrides(settings, None) is settings
    assert apply_settings_overrides(settings, {}) is settings


def test_apply_settings_overrides_can_override_arc_and_camera_knobs():
    settings = get_settings()

    out = apply_settings_overrides(settings, {"arc": {"height_deg": 20.0}, "camera": {"north_offset_deg": 10.0}})

    assert out.arc.height_deg == 20.0
    assert out.camera.north_offset_deg == 10.0
    # Untouched sibling keys survive the merge.
    assert out.arc.steps == settings.arc.steps
    # The shared cached settings must not change.
    assert settings.arc.height_deg != 20.0


def test_apply_settings_overrides_rejects_disallowed_keys_with_clear_path():
    settings = get_settings()

    # Configured places are not tunable per request.
    with pytest.raises(ValueError, match=r"disallowed key: 'destinations'"):
        apply_settings_overrides(settings, {"destinations": []})


def test_apply_settings_overrides_rejects_wrong_value_shapes():
    settings = get_settings()

    with pytest.raises(ValueError, match=r"settings_overrides key 'arc' must be a mapping"):
        apply_settings_overrides(settings, {"arc": 1})


def test_apply_settings_overrides_revalidates_ranges():
    settings = get_settings()

    with pytest.raises(ValueError):
        apply_settings_overrides(settings, {"arc": {"steps": 0}})


def test_default_settings_match_packaged_yaml():
    settings = get_settings()

    assert settings.origin.id == "dubai"
    assert settings.origin.location.lon == 55.2708
    assert [d.id for d in settings.destinations] == ["india", "africa", "europe", "australia"]
    assert settings.camera.north_offset_deg == 25.0
    assert settings.arc.steps == 200
    assert settings.arc.height_deg == 10.0
    assert settings.find_destination(" India ") is not None
    assert settings.find_destination("mars") is None


def test_settings_reject_duplicate_destination_ids():
    payload = {
        "origin": {"id": "a", "name": "A", "location": {"lon": 0, "lat": 0}},
        "destinations": [
            {"id": "b", "name": "B", "location": {"lon": 1, "lat": 1}},
            {"id": "B", "name": "B again", "location": {"lon": 2, "lat": 2}},
        ],
    }
    with pytest.raises(ValueError, match="Duplicate destination ids: b"):
        Settings.model_validate(payload)


def test_settings_reject_out_of_range_place():
    payload = {"origin": {"id": "a", "name": "A", "location": {"lon": 200, "lat": 0}}}
    with pytest.raises(ValueError):
        Settings.model_validate(payload)


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_config_path_and_log_level_env_overrides(tmp_path, monkeypatch, fresh_settings):
    cfg = tmp_path / "globe.yaml"
    cfg.write_text(
        "origin: {id: home, name: Home, location: {lon: 1.5, lat: 2.5}}\n"
        "arc: {steps: 8, height_deg: 3.0}\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("GLOBEARC_CONFIG_PATH", str(cfg))
    monkeypatch.setenv("GLOBEARC_LOG_LEVEL", "DEBUG")

    settings = get_settings()

    assert settings.origin.id == "home"
    assert settings.arc.steps == 8
    assert settings.destinations == []
    assert settings.app.log_level == "DEBUG"


def test_config_file_must_be_a_mapping(tmp_path, monkeypatch, fresh_settings):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("- just\n- a list\n", encoding="utf-8")
    monkeypatch.setenv("GLOBEARC_CONFIG_PATH", str(cfg))

    with pytest.raises(ValueError, match="expected a mapping"):
        get_settings()


def test_apply_settings_overrides_rejects_unlisted_nested_key_with_dotted_path():
    settings = get_settings()

    # Bearing stays north-up; only offset/zoom/pitch are tunable on the camera.
    with pytest.raises(ValueError, match=r"disallowed key: 'camera\.bearing'"):
        apply_settings_overrides(settings, {"camera": {"bearing": 90.0}})


def test_apply_settings_overrides_rejects_non_finite_arc_height():
    settings = get_settings()

    with pytest.raises(ValueError):
        apply_settings_overrides(settings, {"arc": {"height_deg": float("nan")}})
    with pytest.raises(ValueError):
        apply_settings_overrides(settings, {"arc": {"height_deg": float("inf")}})
