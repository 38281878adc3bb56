"""CLI entrypoints for the configurator window, draw command dumps, and diagnostics."""

from __future__ import annotations

import argparse
import json
import random
from dataclasses import asdict
from pathlib import Path

from xmastree_core import AppConfig, ParameterStore, build_doctor_payload, load_config, save_config
from xmastree_core.config import config_path
from xmastree_core.logging_setup import configure_logging
from xmastree_renderer import DEFAULT_PARAMETERS, CanvasSize, RenderParameters, get_color, list_colors, render


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def cmd_run(_args: argparse.Namespace) -> int:
    from .app import run_gui

    return run_gui()


def _params_from_args(args: argparse.Namespace) -> RenderParameters:
    store = ParameterStore(
        initial=RenderParameters(
            tree_scale=DEFAULT_PARAMETERS.tree_scale,
            tree_color=get_color(args.tree_color) if args.tree_color else DEFAULT_PARAMETERS.tree_color,
            ornament_size=DEFAULT_PARAMETERS.ornament_size,
            ornament_color=get_color(args.ornament_color) if args.ornament_color else DEFAULT_PARAMETERS.ornament_color,
            light_color=get_color(args.light_color) if args.light_color else DEFAULT_PARAMETERS.light_color,
        ),
        rng=random.Random(args.seed),
    )
    if args.scale is not None:
        store.set_tree_scale(args.scale)
    if args.ornament_size is not None:
        store.set_ornament_size(args.ornament_size)
    if args.random_ornament_color:
        store.randomize_ornament_color()
    if args.random_light_color:
        store.randomize_light_color()
    return store.snapshot


def cmd_commands(args: argparse.Namespace) -> int:
    params = _params_from_args(args)
    commands = render(params, CanvasSize(args.width, args.height))
    _print_json(
        {
            "canvas": {"width": args.width, "height": args.height},
            "params": {
                "tree_scale": params.tree_scale,
                "tree_color": params.tree_color.hex,
                "ornament_size": params.ornament_size,
                "ornament_color": params.ornament_color.hex,
                "light_color": params.light_color.hex,
            },
            "count": len(commands),
            "commands": [c.to_dict() for c in commands],
        }
    )
    return 0


def cmd_doctor(args: argparse.Namespace) -> int:
    cfg = load_config()
    _print_json(build_doctor_payload(cfg, iterations=args.iterations))
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    path = Path(args.path).expanduser() if args.path else config_path()
    if args.init:
        cfg = AppConfig()
        save_config(cfg, path)
    else:
        cfg = load_config(path)
    _print_json({"path": str(path), "exists": path.exists(), "config": asdict(cfg)})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="xmastree", description="Christmas tree configurator and tools")
    sub = parser.add_subparsers(dest="command", required=True)

    run_cmd = sub.add_parser("run", help="Run desktop app")
    run_cmd.set_defaults(func=cmd_run)

    commands_cmd = sub.add_parser("commands", help="Print the draw commands for one render as JSON")
    commands_cmd.add_argument("--scale", type=float, default=None, help="Tree scale (slider range 2.0-5.0)")
    commands_cmd.add_argument("--ornament-size", type=float, default=None, help="Ornament radius (slider range 5-30)")
    commands_cmd.add_argument("--width", type=float, default=300.0)
    commands_cmd.add_argument("--height", type=float, default=400.0)
    commands_cmd.add_argument("--tree-color", choices=list_colors(), default=None)
    commands_cmd.add_argument("--ornament-color", choices=list_colors(), default=None)
    commands_cmd.add_argument("--light-color", choices=list_colors(), default=None)
    commands_cmd.add_argument("--random-ornament-color", action="store_true")
    commands_cmd.add_argument("--random-light-color", action="store_true")
    commands_cmd.add_argument("--seed", type=int, default=None, help="Seed for the random color source")
    commands_cmd.set_defaults(func=cmd_commands)

    doctor_cmd = sub.add_parser("doctor", help="Print environment, resource, and render timing diagnostics")
    doctor_cmd.add_argument("--iterations", type=int, default=200)
    doctor_cmd.set_defaults(func=cmd_doctor)

    config_cmd = sub.add_parser("config", help="Show effective settings")
    config_cmd.add_argument("--init", action="store_true", help="Write the default settings file")
    config_cmd.add_argument("--path", default=None, help="Optional settings file location")
    config_cmd.set_defaults(func=cmd_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.func is not cmd_run:
        # The window configures logging itself from the loaded settings.
        configure_logging(console=False)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
