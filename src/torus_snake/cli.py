"""Headless command-line runner for the simulation."""

from __future__ import annotations

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="torus-snake",
        description="Run the wrap-around snake simulation without a window.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Drive a session at a fixed frame rate.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (other flags override it).",
    )
    sim_p.add_argument("--seconds", type=float, default=10.0)
    sim_p.add_argument("--frame-rate", type=float, default=60.0)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--arena-size", type=int, default=None)
    sim_p.add_argument("--window-size", type=float, default=None)
    sim_p.add_argument(
        "--steer", type=str, default="",
        help=(
            "Comma-separated keys pressed on successive frames, "
            "e.g. 'up,,,left'. Empty entries press nothing."
        ),
    )
    sim_p.add_argument(
        "--sprites", action="store_true",
        help="Include the screen-space sprite layout in the output.",
    )

    # --- dump-config ---
    dump_p = sub.add_parser(
        "dump-config", help="Write the default configuration as JSON.",
    )
    dump_p.add_argument(
        "--output", type=str, default=None,
        help="Destination file; prints to stdout when omitted.",
    )

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from dataclasses import replace

    from torus_snake.config import SimulationConfig
    from torus_snake.engine import GameEngine
    from torus_snake.latch import handle_input
    from torus_snake.render import sprites

    if args.frame_rate <= 0:
        logger.error("--frame-rate must be positive.")
        return 2

    config = (
        SimulationConfig.load(args.config)
        if args.config else SimulationConfig()
    )
    overrides: dict = {}
    flag_map = {
        "seed": "seed",
        "arena_size": "arena_size",
        "window_size": "window_size",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val
    if "arena_size" in overrides:
        size = overrides["arena_size"]
        start_fits = config.start_x < size and config.start_y < size
        if not args.config or not start_fits:
            overrides["start_x"] = size // 2
            overrides["start_y"] = size // 2
    if overrides:
        config = replace(config, **overrides)

    engine = GameEngine(config)
    script = args.steer.split(",") if args.steer else []
    frame = 1.0 / args.frame_rate
    frames = round(args.seconds * args.frame_rate)

    for i in range(frames):
        if i < len(script) and script[i]:
            handle_input(engine.latch, [script[i]])
        engine.update(frame)

    state = engine.get_state()
    if args.sprites:
        state["sprites"] = [s.to_dict() for s in sprites(engine)]
    logger.info(
        "Simulated %d frame(s): %d movement tick(s), chain length %d, "
        "%d food item(s).",
        frames, engine.tick, len(engine.chain), len(engine.food),
    )
    print(json.dumps(state))  # noqa: T201
    return 0


def _run_dump_config(args: argparse.Namespace) -> int:
    from torus_snake.config import SimulationConfig

    config = SimulationConfig()
    if args.output:
        config.save(args.output)
    else:
        print(json.dumps(config.to_dict(), indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``torus-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "dump-config": _run_dump_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
