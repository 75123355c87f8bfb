from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from infrastructure.google.calendar_service import parse_utc_offset

USER_CONFIG_PATH = Path.home() / ".dashdeck_config.yaml"

DEFAULT_TABS = ["schedule", "tasks", "virtualbox"]
DEFAULT_TASKS_URL = "https://calendar.google.com/calendar/u/0/r/tasks"


def _config_path() -> Path:
    override = os.environ.get("DASHDECK_CONFIG", "").strip()
    if override:
        return Path(override).expanduser()
    return USER_CONFIG_PATH


def _load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    target = path or _config_path()
    if not target.exists():
        return {}
    try:
        data = yaml.safe_load(target.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    target = path or _config_path()
    if not data:
        if target.exists():
            target.unlink()
        return
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def set_user_token(value: str, path: Optional[Path] = None) -> None:
    data = _load_config(path)
    value = (value or "").strip()
    if value:
        data["token"] = value
    else:
        data.pop("token", None)
    _save_config(data, path)


@dataclass
class Settings:
    bookmark_path: Path = Path("bookmark.json")
    browser: str = ""
    vboxmanage: str = "VBoxManage"
    token_path: Path = Path("token.json")
    token: str = ""
    utc_offset: str = "+09:00"
    time_zone: str = "Asia/Tokyo"
    tabs: List[str] = field(default_factory=lambda: list(DEFAULT_TABS))
    theme: str = "dark-olive"
    request_timeout: Optional[float] = None
    tasks_url: str = DEFAULT_TASKS_URL
    log_file: Optional[Path] = None


def _as_path(value: Any, default: Optional[Path]) -> Optional[Path]:
    if value in (None, ""):
        return default
    return Path(str(value)).expanduser()


def _as_offset(value: Any, default: str) -> str:
    offset = str(value or "").strip()
    if not offset:
        return default
    try:
        parse_utc_offset(offset)
    except ValueError:
        return default
    return offset


def _as_timeout(value: Any) -> Optional[float]:
    if value in (None, ""):
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return None
    return timeout if timeout > 0 else None


def load_settings(path: Optional[Path] = None) -> Settings:
    """Build Settings from the user config; unknown or broken values fall back to defaults."""
    data = _load_config(path)
    defaults = Settings()
    tabs = data.get("tabs")
    if not isinstance(tabs, list) or not tabs:
        tabs = list(defaults.tabs)
    return Settings(
        bookmark_path=_as_path(data.get("bookmark_path"), defaults.bookmark_path),
        browser=str(data.get("browser") or ""),
        vboxmanage=str(data.get("vboxmanage") or defaults.vboxmanage),
        token_path=_as_path(data.get("token_path"), defaults.token_path),
        token=str(data.get("token") or ""),
        utc_offset=_as_offset(data.get("utc_offset"), defaults.utc_offset),
        time_zone=str(data.get("time_zone") or defaults.time_zone),
        tabs=[str(tab) for tab in tabs],
        theme=str(data.get("theme") or defaults.theme),
        request_timeout=_as_timeout(data.get("request_timeout")),
        tasks_url=str(data.get("tasks_url") or defaults.tasks_url),
        log_file=_as_path(data.get("log_file"), None),
    )
