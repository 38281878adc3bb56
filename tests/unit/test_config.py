import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from xmastree_core.config import AppConfig, load_config, save_config


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "missing.json"
            cfg = load_config(path)
            self.assertIsInstance(cfg, AppConfig)
            self.assertEqual(cfg.window.canvas_height, 400)
            self.assertEqual(cfg.sliders.scale_min, 2.0)
            self.assertEqual(cfg.sliders.ornament_max, 30.0)

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            cfg = load_config(path)
            cfg.window.canvas_height = 520
            cfg.diagnostics.console_log = False
            save_config(cfg, path)
            reloaded = load_config(path)
            self.assertEqual(reloaded.window.canvas_height, 520)
            self.assertFalse(reloaded.diagnostics.console_log)

    def test_corrupt_file_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())

    def test_null_section_uses_section_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(json.dumps({"config_version": 2, "window": None, "sliders": [1, 2]}), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.window.canvas_height, 400)
            self.assertEqual(cfg.sliders.scale_max, 5.0)

    def test_bad_value_type_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(json.dumps({"window": {"canvas_height": "tall"}}), encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())

            path.write_text(json.dumps({"config_version": "two", "window": []}), encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())

            path.write_text(json.dumps({"config_version": 2, "sliders": {"steps": None}}), encoding="utf-8")
            self.assertEqual(load_config(path).window.canvas_height, 400)

    def test_normalizes_ranges(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "config_version": 2,
                "window": {"canvas_height": 5},
                "sliders": {"scale_min": 6.0, "scale_max": 1.0, "steps": 3},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.window.canvas_height, 100)
            self.assertEqual((cfg.sliders.scale_min, cfg.sliders.scale_max), (2.0, 5.0))
            self.assertEqual(cfg.sliders.steps, 10)

    def test_migrate_v1_shape(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            old = {"canvas_height": 450, "window": {"title": "Tree"}}
            path.write_text(json.dumps(old), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.config_version, 2)
            self.assertEqual(cfg.window.canvas_height, 450)
            self.assertEqual(cfg.window.title, "Tree")


if __name__ == "__main__":
    unittest.main()
