from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import load_settings, with_overrides
from .errors import ConfigurationError
from .render import render_ascii
from .rng import SeededRandom
from .session import GameSession

logger = logging.getLogger(__name__)


def _seed(value: str):
    try:
        return int(value)
    except ValueError:
        return value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="rl7d", description="Rooms-and-corridors dungeon playground")
    parser.add_argument("--config", help="YAML settings file (default: $RL7D_CONFIG)")
    parser.add_argument("--seed", type=_seed, help="Seed for map generation (int or string)")
    parser.add_argument("--width", type=int, help="Map width in tiles")
    parser.add_argument("--height", type=int, help="Map height in tiles")
    parser.add_argument("--max-rooms", type=int, help="Number of room placement attempts")
    parser.add_argument("--room-min-size", type=int, help="Smallest room side")
    parser.add_argument("--room-max-size", type=int, help="Largest room side")
    parser.add_argument("--fullscreen", action="store_true", default=None, help="Start in fullscreen")
    parser.add_argument("--ascii", action="store_true", help="Print the map instead of opening a window")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    try:
        generation, window = load_settings(args.config, validate=False)
        generation = with_overrides(
            generation,
            seed=args.seed,
            width=args.width,
            height=args.height,
            max_rooms=args.max_rooms,
            room_min_size=args.room_min_size,
            room_max_size=args.room_max_size,
        )
        generation.validate()
        window.validate()
        rng = SeededRandom(generation.seed)
        fullscreen = window.fullscreen if args.fullscreen is None else True
        session = GameSession(generation, rng, fullscreen=fullscreen)
    except (ConfigurationError, FileNotFoundError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    if args.ascii:
        for line in render_ascii(session.grid, session.player_pos):
            print(line)
        print(f"seed={rng.effective_seed} rooms={len(session.rooms)} attempts={generation.max_rooms}")
        return 0

    from .app.window import run

    run(session, window)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
