import io
import json
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "apps" / "desktop"))
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from xmastree_app import cli
from xmastree_app.cli import build_parser


def _run(argv):
    args = build_parser().parse_args(argv)
    buf = io.StringIO()
    with redirect_stdout(buf):
        rc = args.func(args)
    return rc, json.loads(buf.getvalue())


class CliTests(unittest.TestCase):
    def test_run_command(self):
        parser = build_parser()
        args = parser.parse_args(["run"])
        self.assertEqual(args.command, "run")

    def test_commands_arguments(self):
        parser = build_parser()
        args = parser.parse_args(["commands", "--scale", "3", "--light-color", "red"])
        self.assertEqual(args.command, "commands")
        self.assertEqual(args.scale, 3.0)
        self.assertEqual(args.light_color, "red")

    def test_commands_output(self):
        rc, payload = _run(["commands", "--scale", "1.0", "--width", "300", "--height", "400"])
        self.assertEqual(rc, 0)
        self.assertEqual(payload["count"], 26)
        self.assertEqual(payload["commands"][0]["kind"], "rect")
        self.assertAlmostEqual(payload["commands"][0]["top_left"]["x"], 127.5)
        self.assertEqual(payload["commands"][14]["color"], "#FFFF00FF")

    def test_commands_seeded_colors_are_reproducible(self):
        argv = ["commands", "--random-ornament-color", "--random-light-color", "--seed", "5"]
        _, first = _run(argv)
        _, second = _run(argv)
        self.assertEqual(first["params"], second["params"])
        self.assertNotEqual(first["params"]["ornament_color"], "#FF0000FF")

    def test_config_init(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "sub" / "config.json"
            rc, payload = _run(["config", "--init", "--path", str(path)])
            self.assertEqual(rc, 0)
            self.assertTrue(payload["exists"])
            self.assertEqual(payload["config"]["window"]["canvas_height"], 400)

    def test_doctor_command(self):
        parser = build_parser()
        args = parser.parse_args(["doctor", "--iterations", "5"])
        self.assertEqual(args.command, "doctor")
        self.assertEqual(args.iterations, 5)

    def test_run_leaves_logging_to_the_window(self):
        with mock.patch.object(cli, "configure_logging") as configure, mock.patch.object(cli, "cmd_run", return_value=0):
            self.assertEqual(cli.main(["run"]), 0)
        configure.assert_not_called()

    def test_tool_commands_configure_quiet_logging(self):
        with tempfile.TemporaryDirectory() as tmp, mock.patch.object(cli, "configure_logging") as configure:
            with redirect_stdout(io.StringIO()):
                rc = cli.main(["config", "--path", str(Path(tmp) / "config.json")])
        self.assertEqual(rc, 0)
        configure.assert_called_once_with(console=False)


if __name__ == "__main__":
    unittest.main()
