from __future__ import annotations

from typing import Any, Mapping

from globearc.config.settings import Settings

"""
Per-request settings overrides (safe subset).

API callers can send `settings_overrides` to tune the camera or arc for a single request
(e.g. a taller arc for a long-haul route). This module:
- validates the override payload against a whitelist,
- deep-merges the safe subset onto current settings,
- re-validates with Pydantic so ranges (zoom, pitch, steps) still hold.

The configured origin and destinations are not overridable per request.
"""

# A value of True allows that key (and anything under it); a nested dict allows only the
# listed keys, recursively. Bearing is fixed north-up, so it is not listed.
ALLOWED_SETTINGS_OVERRIDES_TREE: dict[str, Any] = {
    "camera": {"north_offset_deg": True, "zoom": True, "pitch": True},
    "arc": {"steps": True, "height_deg": True},
}


def _deep_merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    # New dict so the caller's `base` (often a cached model dump) is never mutated.
    merged: dict[str, Any] = dict(base)
    for key, override_value in override.items():
        if isinstance(override_value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = _deep_merge(dict(merged[key]), override_value)
            continue
        merged[key] = override_value
    return merged


def _filter_overrides(
    overrides: Mapping[str, Any],
    *,
    allowed_tree: Mapping[str, Any],
    path: tuple[str, ...] = (),
) -> dict[str, Any]:
    filtered: dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in allowed_tree:
            dotted_path = ".".join((*path, key))
            raise ValueError(f"settings_overrides contains a disallowed key: '{dotted_path}'")

        allowed = allowed_tree[key]
        if allowed is True:
            filtered[key] = value
            continue

        if not isinstance(value, Mapping):
            dotted_path = ".".join((*path, key))
            raise ValueError(f"settings_overrides key '{dotted_path}' must be a mapping")

        filtered[key] = _filter_overrides(value, allowed_tree=allowed, path=(*path, key))
    return filtered


def apply_settings_overrides(settings: Settings, overrides: Mapping[str, Any] | None) -> Settings:
    """Return settings with the whitelisted `overrides` applied (same object when empty)."""
    if not overrides:
        return settings

    safe_overrides = _filter_overrides(overrides, allowed_tree=ALLOWED_SETTINGS_OVERRIDES_TREE)
    merged_payload = _deep_merge(settings.model_dump(mode="python"), safe_overrides)
    # pydantic.ValidationError subclasses ValueError, so bad values surface the same way.
    return Settings.model_validate(merged_payload)
