"""Core app services for the parameter store, settings, logging, and diagnostics."""

from .config import AppConfig, load_config, save_config
from .diagnostics import build_doctor_payload
from .store import ParameterStore, random_color

__all__ = [
    "AppConfig",
    "ParameterStore",
    "build_doctor_payload",
    "load_config",
    "random_color",
    "save_config",
]
