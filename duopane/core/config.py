"""Persistent config loader/saver for duopane."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    """Panel paths, cursor cache and bookmarks kept between sessions."""

    left_path: str = ""
    right_path: str = ""
    cursor_cache: dict = field(default_factory=dict)
    bookmarks: dict = field(default_factory=dict)


def default_config_path() -> Path:
    """Return default config path (~/.config/duopane/config.toml)."""
    return Path.home() / ".config" / "duopane" / "config.toml"


def _string_map(value) -> dict:
    """Keep only str -> str pairs of a TOML table."""
    if not isinstance(value, dict):
        return {}
    return {
        str(key): item
        for key, item in value.items()
        if isinstance(item, str)
    }


def _normalize_config(raw: dict) -> AppConfig:
    panels = raw.get("panels", {})
    if not isinstance(panels, dict):
        panels = {}
    left = panels.get("left", "")
    right = panels.get("right", "")
    return AppConfig(
        left_path=left if isinstance(left, str) else "",
        right_path=right if isinstance(right, str) else "",
        cursor_cache=_string_map(raw.get("cursor_cache")),
        bookmarks=_string_map(raw.get("bookmarks")),
    )


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from TOML file; return defaults when missing/invalid."""
    cfg_path = Path(path) if path is not None else default_config_path()
    try:
        text = cfg_path.read_text(encoding="utf-8")
    except OSError:
        return AppConfig()
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError:
        LOGGER.debug("ignoring unparsable config %s", cfg_path, exc_info=True)
        return AppConfig()
    return _normalize_config(raw)


def _toml_string(value: str) -> str:
    # JSON string escapes are a subset of TOML basic string escapes; TOML
    # additionally requires DEL to be escaped.
    return json.dumps(value, ensure_ascii=False).replace("\x7f", "\\u007f")


def _encodable(value: str) -> bool:
    """False for strings holding undecodable file name bytes (lone surrogates)."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _serialize_table(name: str, mapping: dict) -> list[str]:
    lines = [f"[{name}]"]
    for key in sorted(mapping):
        if not (_encodable(key) and _encodable(mapping[key])):
            LOGGER.debug("not saving %s entry %r", name, key)
            continue
        lines.append(f"{_toml_string(key)} = {_toml_string(mapping[key])}")
    return lines


def _panel_path(path: str) -> str:
    # An empty path falls back to the start-up default on the next run.
    return path if _encodable(path) else ""


def serialize_config(config: AppConfig) -> str:
    """Serialize AppConfig as TOML text."""
    lines = [
        "# duopane state, rewritten on exit",
        "[panels]",
        f"left = {_toml_string(_panel_path(config.left_path))}",
        f"right = {_toml_string(_panel_path(config.right_path))}",
        "",
    ]
    lines += _serialize_table("cursor_cache", config.cursor_cache)
    lines.append("")
    lines += _serialize_table("bookmarks", config.bookmarks)
    return "\n".join(lines) + "\n"


def save_config(config: AppConfig, path: str | Path | None = None) -> Path:
    """Persist config atomically and return written path."""
    cfg_path = Path(path) if path is not None else default_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{cfg_path.name}.", suffix=".tmp", dir=str(cfg_path.parent)
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(serialize_config(config))
        os.replace(tmp_name, cfg_path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise
    return cfg_path
