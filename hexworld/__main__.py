"""Entry point for ``python -m hexworld``.

Loads the default YAML config, builds a simulation engine, and prints
the world as text once per tick for a fixed number of ticks, either on
a timer or waiting for Enter between ticks.
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import time
from dataclasses import replace

from hexworld.simulation.config import SimulationConfig
from hexworld.simulation.engine import SimulationEngine
from hexworld.ui.text_renderer import render

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexworld",
        description="hexworld - predator, prey and scent on a hex grid",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument("--ticks", type=int, help="Number of ticks to run")
    parser.add_argument("--seed", type=int, help="Override the RNG seed")
    parser.add_argument("--size", type=int, help="Override the world size")
    parser.add_argument(
        "--interval",
        type=float,
        help="Seconds between ticks (ignored with --step)",
    )
    parser.add_argument(
        "--step",
        action="store_true",
        help="Wait for Enter between ticks",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def load_config(args: argparse.Namespace) -> SimulationConfig:
    """Read the config file and apply command-line overrides."""
    config = SimulationConfig.from_yaml(args.config)
    overrides = {
        "ticks": args.ticks,
        "seed": args.seed,
        "world_size": args.size,
        "tick_interval": args.interval,
    }
    config = replace(
        config,
        **{key: value for key, value in overrides.items() if value is not None},
    )
    config.validate()
    return config


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, create engine, print the world each tick."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args)
    engine = SimulationEngine(config=config)

    for _ in range(config.ticks):
        print(render(engine.world))
        print(engine.summary())
        engine.step()
        print()
        if args.step:
            input()
        elif config.tick_interval > 0:
            time.sleep(config.tick_interval)

    print(render(engine.world))
    print(engine.summary())


if __name__ == "__main__":
    main()
