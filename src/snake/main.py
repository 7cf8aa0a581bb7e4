# main.py
import argparse
import logging
from typing import Optional, Sequence

import pygame # type: ignore

from .config import Config, GRID_W, GRID_H
from .game import Direction, GameState, RunState
from .render import Renderer

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1
FPS = 60

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def arm_timer(tick_ms: int) -> None:
    pygame.time.set_timer(TICK_EVENT, tick_ms)


def disarm_timer() -> None:
    pygame.time.set_timer(TICK_EVENT, 0)


def restart(game: GameState) -> None:
    game.reset()
    arm_timer(game.config.tick_ms)
    logger.info("new game started")


def handle_event(game: GameState, renderer: Renderer, event: pygame.event.Event) -> bool:
    """Route one pygame event to the game. Return False to quit."""
    if event.type == pygame.QUIT:
        return False

    if event.type == TICK_EVENT:
        if game.tick() is RunState.GAME_OVER:
            disarm_timer()
        return True

    if event.type == pygame.KEYDOWN:
        if event.key in KEY_DIRECTIONS:
            game.set_direction(KEY_DIRECTIONS[event.key])
        elif event.key == pygame.K_r and not game.running:
            restart(game)
        return True

    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        if not game.running and renderer.button_hit(event.pos):
            restart(game)
    return True


def run(cfg: Config) -> None:
    pygame.init()
    try:
        screen = pygame.display.set_mode((cfg.screen_width, cfg.screen_height))
        pygame.display.set_caption("Snake")
        clock = pygame.time.Clock()

        game = GameState(cfg)
        renderer = Renderer(screen, cfg)
        arm_timer(cfg.tick_ms)

        running = True
        while running:
            for event in pygame.event.get():
                if not handle_event(game, renderer, event):
                    running = False
                    break

            renderer.draw(game.snapshot())
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="snake", description=f"Classic Snake on a {GRID_W}x{GRID_H} grid.")
    parser.add_argument("--seed", type=int, default=None, help="seed for apple placement")
    parser.add_argument("--tick-ms", type=int, default=175, help="milliseconds between game ticks")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        cfg = Config(seed=args.seed, tick_ms=args.tick_ms)
    except ValueError as exc:
        raise SystemExit(f"snake: {exc}")

    run(cfg)


if __name__ == "__main__":
    main()
