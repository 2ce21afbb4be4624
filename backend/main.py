"""
Command line entry point.

Usage:
    python main.py play
    python main.py simulate --seconds 60 --player random --seed 7 --gif run.gif
"""

import argparse
import json
import logging
import random
from typing import Any, Dict, List, Optional

from config import Settings, get_settings
from players import AVAILABLE_PLAYERS
from services.game_engine import SnakeGame
from services.renderer import ImageRenderer, save_animation

logger = logging.getLogger(__name__)


def run_simulation(settings: Settings, game_params: argparse.Namespace) -> Dict[str, Any]:
    """
    Plays one headless game with an autopilot player on the virtual clock.

    Args:
        settings: field and rendering settings
        game_params: An object (like argparse.Namespace) with seconds, player,
                     and optional seed, output, gif and frame_every.

    Returns:
        A dictionary summarizing the game.
    """
    seed = game_params.seed if game_params.seed is not None else settings.seed
    rng = random.Random(seed)

    renderer = ImageRenderer(
        settings.field_width,
        settings.field_height,
        settings.block_size,
        background_color=settings.background_color,
        block_border=settings.block_border
    )
    game = SnakeGame(
        width=settings.field_width,
        height=settings.field_height,
        renderer=renderer,
        block_size=settings.block_size,
        rng=rng
    )
    player = AVAILABLE_PLAYERS[game_params.player](rng=rng)

    frames: List = []
    frame_every = max(1, getattr(game_params, 'frame_every', 1) or 1)
    gif_path: Optional[str] = getattr(game_params, 'gif', None)

    game.start()
    ticks = 0
    while game.playing and game.scheduler.now < game_params.seconds:
        game.push_direction(player.get_move(game.state))
        game.scheduler.advance(game.tick_interval_ms / 1000)
        ticks += 1
        if gif_path and ticks % frame_every == 0:
            frames.append(renderer.render())

    alive = game.playing
    if alive:
        game.game_over()

    output_path = getattr(game_params, 'output', None)
    if output_path:
        renderer.save(output_path)
    if gif_path:
        save_animation(frames, gif_path)

    summary = game.state.summary()
    summary.update({
        "alive": alive,
        "ticks": ticks,
        "player": game_params.player,
        "seed": seed,
    })
    return summary


def play(settings: Settings) -> None:
    from services.pygame_frontend import PygameFrontend

    PygameFrontend(settings).run()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Snake with timed, perishable food."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("play", help="Open the game window (N starts, arrows/WASD/HJKL steer)")

    sim = subparsers.add_parser("simulate", help="Play a headless game with an autopilot")
    sim.add_argument("--seconds", type=float, default=60.0,
                     help="Stop after this many seconds of game time")
    sim.add_argument("--player", choices=sorted(AVAILABLE_PLAYERS), default="random",
                     help="Autopilot steering the snake")
    sim.add_argument("--seed", type=int, default=None,
                     help="Random seed (defaults to SNAKE_SEED, else random)")
    sim.add_argument("--output", type=str, default=None,
                     help="Save the final frame as an image")
    sim.add_argument("--gif", type=str, default=None,
                     help="Save the game as an animated GIF")
    sim.add_argument("--frame-every", dest="frame_every", type=int, default=1,
                     help="Keep one GIF frame every N ticks")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if args.command == "play":
        play(settings)
        return 0

    result = run_simulation(settings, args)
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
