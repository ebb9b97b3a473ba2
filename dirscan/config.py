"""Persistent JSON config helpers.

Stores named scan-settings presets and the preset used by default.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .settings import ScanSettings

APP_NAME = "dirscan"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

BUILTIN_PRESETS = {
    "all": ScanSettings.all,
    "files": ScanSettings.files,
    "dirs": ScanSettings.dirs,
}


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep scans working when
    config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _settings_from_json(raw: dict[object, object]) -> ScanSettings:
    """Build settings from a stored preset, keeping only boolean flags."""
    flags = {
        name: raw[name]
        for name in ScanSettings.flag_names()
        if isinstance(raw.get(name), bool)
    }
    return ScanSettings(**flags)


def _stored_presets() -> dict[str, object]:
    value = load_config().get("presets")
    return value if isinstance(value, dict) else {}


def load_preset(name: str) -> ScanSettings | None:
    """Return settings for preset ``name``, or ``None`` when unknown.

    Stored presets take precedence over the built-in ``all``, ``files`` and
    ``dirs``. Non-boolean flag values are dropped and fall back to ``False``.
    """
    raw = _stored_presets().get(name)
    if isinstance(raw, dict):
        return _settings_from_json(raw)
    builtin = BUILTIN_PRESETS.get(name)
    return builtin() if builtin is not None else None


def save_preset(name: str, settings: ScanSettings) -> None:
    """Persist ``settings`` under preset ``name``."""
    stripped = str(name).strip()
    if not stripped:
        return
    config = load_config()
    presets = config.get("presets")
    if not isinstance(presets, dict):
        presets = {}
    presets[stripped] = settings.as_dict()
    config["presets"] = presets
    save_config(config)


def load_default_preset_name() -> str | None:
    """Load the default preset name, returning ``None`` when unset/invalid."""
    value = load_config().get("default_preset")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_default_preset_name(name: str) -> None:
    """Persist the preset used when none is given on the command line."""
    stripped = str(name).strip()
    if not stripped:
        return
    config = load_config()
    config["default_preset"] = stripped
    save_config(config)
