"""Command-line entry point: serve the API or replay a sequence of moves."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace

from grid_snake.snake import Direction

logger = logging.getLogger(__name__)

_NO_INPUT = "keep"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Grid snake rule engine tools.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- serve ---
    serve_p = sub.add_parser("serve", help="Run the HTTP/WebSocket API.")
    serve_p.add_argument("--host", type=str, default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8000)

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play a fixed list of moves and print the results.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON game config (flags override its values).",
    )
    sim_p.add_argument("--width", type=int, default=None)
    sim_p.add_argument("--height", type=int, default=None)
    sim_p.add_argument("--speed", type=int, default=None)
    sim_p.add_argument("--length", type=int, default=None)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument(
        "--moves", type=str, default="",
        help=(
            "Comma-separated moves: up, down, left, right, or "
            f"'{_NO_INPUT}' to keep the current direction."
        ),
    )

    return parser


def _parse_moves(raw: str) -> list[Direction | None]:
    moves: list[Direction | None] = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        if token.lower() == _NO_INPUT:
            moves.append(None)
        else:
            moves.append(Direction.parse(token))
    return moves


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "grid_snake.server.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
    )
    return 0


def _run_simulate(args: argparse.Namespace) -> int:
    from grid_snake.config import GameConfig
    from grid_snake.game import Game

    config = GameConfig.load(args.config) if args.config else GameConfig()

    flag_map = {
        "width": "width",
        "height": "height",
        "speed": "speed",
        "length": "initial_length",
        "seed": "seed",
    }
    overrides = {
        cfg_name: getattr(args, cli_name)
        for cli_name, cfg_name in flag_map.items()
        if getattr(args, cli_name) is not None
    }
    if overrides:
        config = replace(config, **overrides)

    try:
        moves = _parse_moves(args.moves)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    game = Game.from_config(config)
    for move in moves:
        result = game.tick(move)
        print(json.dumps(result.to_dict()))  # noqa: T201
    print(json.dumps(game.get_state()))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "serve": _run_serve,
        "simulate": _run_simulate,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
