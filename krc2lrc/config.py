from __future__ import annotations

import json
import logging
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_TIME_MS = 500
DEFAULT_MAX_DEPTH = 0


def _config_dir() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "krc2lrc"
    return Path.home() / ".config" / "krc2lrc"


def _config_file() -> Path:
    return _config_dir() / "config.json"


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip() not in ("", "0", "false", "False")
    return bool(value)


@dataclass(frozen=True)
class ConverterConfig:
    config_dir: Path

    # Conversion
    interval_time_ms: int  # insert a blank line when lines are further apart than this

    # Traversal
    max_depth: int  # subdirectory levels below the input directory
    save_raw: bool


def load_config() -> ConverterConfig:
    # Priority: env → config.json → defaults
    config_dir = _config_dir()
    file_values = _load_file(config_dir / "config.json")

    interval_time = os.getenv("KRC2LRC_INTERVAL_TIME", file_values.get("interval_time", DEFAULT_INTERVAL_TIME_MS))
    max_depth = os.getenv("KRC2LRC_MAX_DEPTH", file_values.get("max_depth", DEFAULT_MAX_DEPTH))
    save_raw = os.getenv("KRC2LRC_SAVE_RAW", file_values.get("save_raw", False))

    return ConverterConfig(
        config_dir=config_dir,
        interval_time_ms=int(interval_time),
        max_depth=int(max_depth),
        save_raw=_as_bool(save_raw),
    )


def _load_file(cfg_path: Path) -> dict[str, Any]:
    if not cfg_path.exists():
        return {}
    try:
        data = json.loads(cfg_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", cfg_path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", cfg_path)
        return {}
    return data


def save_config(**values: Any) -> Path:
    """Merge `values` into config.json, creating it if needed."""
    cfg_path = _config_file()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    data = _load_file(cfg_path)
    data.update(values)
    cfg_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return cfg_path
