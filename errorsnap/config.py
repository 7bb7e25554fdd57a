from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from loguru import logger

ENV_PREFIX = "ERRORSNAP_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class SnapshotSettings:
    follow_context: bool = True
    text_indent: Optional[int] = None
    ensure_ascii: bool = False
    log_enabled: bool = False


DEFAULT_SETTINGS = SnapshotSettings()


def normalize_settings(raw: Any) -> SnapshotSettings:
    if raw is None:
        return DEFAULT_SETTINGS
    if isinstance(raw, SnapshotSettings):
        return raw
    if not isinstance(raw, Mapping):
        raise TypeError(f"Settings must be a mapping or SnapshotSettings, got {type(raw).__name__}")

    raw_dict = dict(raw)
    text_indent = raw_dict.get("text_indent")
    if text_indent is None:
        text_indent = raw_dict.get("indent")

    return SnapshotSettings(
        follow_context=_coerce_bool(raw_dict.get("follow_context"), True),
        text_indent=_coerce_indent(text_indent),
        ensure_ascii=_coerce_bool(raw_dict.get("ensure_ascii"), False),
        log_enabled=_coerce_bool(raw_dict.get("log_enabled", raw_dict.get("log")), False),
    )


def load_settings(path: str | Path) -> SnapshotSettings:
    """Read settings from a YAML or JSON file.

    The file may hold the settings at the top level or under an
    ``errorsnap`` section.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    with config_path.open("r", encoding="utf-8") as handle:
        if config_path.suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(handle)
        elif config_path.suffix == ".json":
            data = json.load(handle)
        else:
            raise ValueError(f"Unsupported settings format: {config_path.suffix}")

    if data is None:
        return DEFAULT_SETTINGS
    if not isinstance(data, Mapping):
        raise ValueError("Settings file must contain a mapping")
    section = data.get("errorsnap")
    if isinstance(section, Mapping):
        data = section
    return normalize_settings(data)


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> SnapshotSettings:
    environ = os.environ if environ is None else environ
    raw: dict[str, Any] = {}
    for key in ("follow_context", "text_indent", "ensure_ascii", "log"):
        value = environ.get(f"{ENV_PREFIX}{key.upper()}")
        if value is not None:
            raw[key] = value
    return normalize_settings(raw)


def apply_logging(settings: SnapshotSettings) -> None:
    """Turn the package's loguru output on or off."""
    if settings.log_enabled:
        logger.enable("errorsnap")
    else:
        logger.disable("errorsnap")


def _coerce_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
    return default


def _coerce_indent(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        indent = int(value)
    except (TypeError, ValueError):
        return None
    return indent if indent >= 0 else None
