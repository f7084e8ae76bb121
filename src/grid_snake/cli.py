"""Command-line entry point for headless games and stats."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Grid snake simulation, statistics, and config tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play games with a computer controller.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    sim_p.add_argument("--games", type=int, default=1)
    sim_p.add_argument("--rows", type=int, default=None)
    sim_p.add_argument("--cols", type=int, default=None)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument(
        "--controller", type=str, default="greedy",
        choices=["random", "greedy"],
    )
    sim_p.add_argument(
        "--tick-ms", type=int, default=None,
        help="Delay between ticks; headless runs default to no delay.",
    )
    sim_p.add_argument(
        "--realtime", action="store_true",
        help="Keep the configured countdown and tick cadence.",
    )
    sim_p.add_argument("--max-ticks", type=int, default=10_000)
    sim_p.add_argument("--stats-file", type=str, default=None)
    sim_p.add_argument(
        "--render", action="store_true",
        help="Print the board after every tick.",
    )

    # --- stats ---
    stats_p = sub.add_parser("stats", help="Show stored statistics.")
    stats_p.add_argument("--stats-file", type=str, default="Stats.txt")

    # --- config ---
    config_p = sub.add_parser("config", help="Write a default config file.")
    config_p.add_argument("output", help="Path for the JSON config.")

    return parser


def _simulation_config(args: argparse.Namespace):
    from grid_snake.config import GameConfig

    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    if not args.realtime:
        overrides.update(
            tick_interval_ms=0, countdown_steps=0, death_frame_ms=0,
        )
    flag_map = {
        "rows": "rows",
        "cols": "cols",
        "seed": "seed",
        "tick_ms": "tick_interval_ms",
        "stats_file": "stats_path",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig(**d)
    return config


def _run_simulate(args: argparse.Namespace) -> int:
    import numpy as np

    from grid_snake.controllers import build_controller
    from grid_snake.driver import play_games
    from grid_snake.errors import InvalidConfiguration
    from grid_snake.render import game_over_summary, render
    from grid_snake.stats import StatsStore

    try:
        config = _simulation_config(args)
    except InvalidConfiguration as exc:
        logger.error("%s", exc)
        return 2

    rng = np.random.default_rng(config.seed)
    store = StatsStore(config.stats_path)

    def on_tick(engine, move) -> None:
        print(render(engine))  # noqa: T201
        print()  # noqa: T201

    results = asyncio.run(play_games(
        config,
        lambda: build_controller(args.controller, rng=rng),
        games=args.games,
        stats_store=store,
        on_tick=on_tick if args.render else None,
        max_ticks=args.max_ticks,
    ))
    for result in results:
        print(result.summary())  # noqa: T201
        if result.stats is not None:
            print(game_over_summary(result.score, result.stats))  # noqa: T201
    return 0


def _run_stats(args: argparse.Namespace) -> int:
    from grid_snake.stats import StatsStore

    stats = StatsStore(args.stats_file).load()
    print(f"BEST: {stats.top_score}")  # noqa: T201
    print(f"GAMES: {stats.games_played}")  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    from grid_snake.config import GameConfig

    GameConfig().save(args.output)
    print(f"Wrote default config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
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
        "stats": _run_stats,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
