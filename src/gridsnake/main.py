# main.py
from __future__ import annotations
from pathlib import Path
from typing import List, Optional
import argparse
import logging

import pygame  # type: ignore

from .config import CFG, SPEED_CONFIG, Config
from .controls import handle_events
from .game import GameState, SnakeGame
from .render import PygameRenderer, TextRenderer
from .storage import ScoreStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Classic grid snake.")
    parser.add_argument(
        "--speed",
        choices=sorted(SPEED_CONFIG),
        default=None,
        help="Speed preset (saved as the new preference). Defaults to the saved one.",
    )
    parser.add_argument("--seed", type=int, default=CFG.seed, help="Seed for food placement.")
    parser.add_argument(
        "--store",
        type=Path,
        default=None,
        help="JSON file for best score and speed (default: $GRIDSNAKE_STORE or ~/.gridsnake.json)",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="No window: run the game straight ahead and print the final board.",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=100,
        help="Max ticks for --headless runs.",
    )
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING, ...")
    return parser


def make_game(args: argparse.Namespace) -> SnakeGame:
    config = Config(seed=args.seed, store_path=args.store or CFG.store_path)
    game = SnakeGame(config, store=ScoreStore(config.store_path))
    if args.speed is not None:
        game.change_speed(args.speed)
    return game


def run_headless(game: SnakeGame, ticks: int) -> int:
    """Advance one tick per step with no real-time gating."""
    out = TextRenderer(game.grid)
    game.start()
    steps = 0
    while game.state is GameState.RUNNING and steps < ticks:
        game.tick()
        steps += 1
    out.draw(game.snapshot())
    return steps


def run_window(game: SnakeGame) -> None:
    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(game.config.window_size)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    renderer = PygameRenderer(screen, game.grid, game.config.cell_size, font)
    game.subscribe(renderer.draw)
    renderer.draw(game.snapshot())

    running = True
    while running:
        # 1) input
        running = handle_events(game, pygame.event.get())
        if not running:
            break

        # 2) update (listeners redraw on every tick and transition)
        game.update()

        # 3) present
        pygame.display.flip()
        clock.tick(60)  # high FPS; movement gated by the game clock

    pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    game = make_game(args)
    if args.headless:
        steps = run_headless(game, args.ticks)
        logger.info("Headless run finished after %d tick(s), score %d", steps, game.score)
    else:
        run_window(game)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
