"""Application settings schema and load/save helpers.

Only window and slider settings live here; tree parameters are never saved.
"""

from __future__ import annotations

import json
import logging
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 2

logger = logging.getLogger("xmastree.config")


@dataclass
class WindowConfig:
    title: str = "Christmas Tree Configurator"
    width: int = 480
    canvas_height: int = 400
    padding: int = 16


@dataclass
class SliderConfig:
    scale_min: float = 2.0
    scale_max: float = 5.0
    ornament_min: float = 5.0
    ornament_max: float = 30.0
    steps: int = 1000


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7
    console_log: bool = True


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    window: WindowConfig = field(default_factory=WindowConfig)
    sliders: SliderConfig = field(default_factory=SliderConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


DEFAULT_CONFIG = AppConfig()


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "XmasTree"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "XmasTree"
    return Path.home() / ".config" / "xmastree"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: Any):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_window(cfg: AppConfig) -> None:
    cfg.window.width = max(200, min(4000, int(cfg.window.width)))
    cfg.window.canvas_height = max(100, min(2000, int(cfg.window.canvas_height)))
    cfg.window.padding = max(0, min(64, int(cfg.window.padding)))


def _normalize_sliders(cfg: AppConfig) -> None:
    s = cfg.sliders
    defaults = SliderConfig()
    if not float(s.scale_min) < float(s.scale_max):
        s.scale_min, s.scale_max = defaults.scale_min, defaults.scale_max
    if not float(s.ornament_min) < float(s.ornament_max):
        s.ornament_min, s.ornament_max = defaults.ornament_min, defaults.ornament_max
    s.scale_min, s.scale_max = float(s.scale_min), float(s.scale_max)
    s.ornament_min, s.ornament_max = float(s.ornament_min), float(s.ornament_max)
    s.steps = max(10, min(100000, int(s.steps)))


def _normalize_diagnostics(cfg: AppConfig) -> None:
    cfg.diagnostics.keep_log_files = max(2, int(cfg.diagnostics.keep_log_files))


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("config_version", 1))
    data = dict(raw)

    if version < 2:
        # v1 kept the canvas height at the top level.
        window = data.get("window")
        window = dict(window) if isinstance(window, dict) else {}
        if "canvas_height" in data:
            window.setdefault("canvas_height", data.pop("canvas_height"))
        data["window"] = window
        data.setdefault("sliders", {})
        data.setdefault("diagnostics", {})
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("config unreadable, using defaults: %s", exc, extra={"event": "config_unreadable"})
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    try:
        data = _migrate(raw)
        cfg = AppConfig(
            config_version=int(data.get("config_version", CONFIG_VERSION)),
            window=_merge(WindowConfig, data.get("window", {})),
            sliders=_merge(SliderConfig, data.get("sliders", {})),
            diagnostics=_merge(DiagnosticsConfig, data.get("diagnostics", {})),
        )
        _normalize_window(cfg)
        _normalize_sliders(cfg)
        _normalize_diagnostics(cfg)
    except (TypeError, ValueError) as exc:
        logger.warning("config malformed, using defaults: %s", exc, extra={"event": "config_unreadable"})
        return AppConfig()
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
