"""Doctor payload: environment, process resources, and a timed sample render."""

from __future__ import annotations

import platform
import time
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from importlib import metadata
from typing import Any

try:
    import psutil
except Exception:  # pragma: no cover
    psutil = None

from xmastree_renderer import DEFAULT_PARAMETERS, CanvasSize, RecordingSurface, draw

from .config import AppConfig, config_path
from .logging_setup import log_dir


_LIBRARIES = ("PySide6", "Pillow", "psutil")


@dataclass(frozen=True)
class ProcessSample:
    cpu_percent: float
    rss_mb: float


@dataclass(frozen=True)
class RenderTiming:
    iterations: int
    commands: int
    mean_ms: float


def library_versions() -> dict[str, str | None]:
    versions: dict[str, str | None] = {}
    for name in _LIBRARIES:
        try:
            versions[name] = metadata.version(name)
        except metadata.PackageNotFoundError:
            versions[name] = None
    return versions


def sample_process() -> ProcessSample:
    if psutil is None:
        return ProcessSample(cpu_percent=0.0, rss_mb=0.0)
    process = psutil.Process()
    return ProcessSample(
        cpu_percent=float(process.cpu_percent(interval=None)),
        rss_mb=float(process.memory_info().rss) / (1024 * 1024),
    )


def time_render(canvas: CanvasSize, iterations: int = 200) -> RenderTiming:
    iterations = max(1, iterations)
    surface = RecordingSurface()
    commands = 0
    start = time.perf_counter()
    for _ in range(iterations):
        surface.clear()
        commands = draw(DEFAULT_PARAMETERS, canvas, surface)
    elapsed = time.perf_counter() - start
    return RenderTiming(iterations=iterations, commands=commands, mean_ms=elapsed * 1000.0 / iterations)


def build_doctor_payload(cfg: AppConfig, iterations: int = 200) -> dict[str, Any]:
    canvas = CanvasSize(float(cfg.window.width), float(cfg.window.canvas_height))
    return {
        "ts_utc": datetime.now(timezone.utc).isoformat(),
        "platform": platform.platform(),
        "python": platform.python_version(),
        "libraries": library_versions(),
        "config_path": str(config_path()),
        "log_dir": str(log_dir()),
        "config": asdict(cfg),
        "process": asdict(sample_process()),
        "render": asdict(time_render(canvas, iterations)),
    }
