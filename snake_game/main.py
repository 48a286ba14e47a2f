"""
Snake: menu-driven Pygame snake with a persistent high score.

Controls
- Arrow keys: move / navigate menus
- Enter: select
- Esc: pause / back

Run
    python -m snake_game [--highscore-file PATH] [--seed N] [--log-level LEVEL]
"""
import argparse
import logging
import random
import sys

import pygame

from .highscore import HighScoreStore
from .render import Renderer
from .session import Key, Session
from .settings import FPS, HIGHSCORE_FILE, WINDOW_H, WINDOW_W

logger = logging.getLogger(__name__)

KEY_MAP = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="snake-game", description="Grid snake with menus and a high score.")
    parser.add_argument("--highscore-file", default=HIGHSCORE_FILE,
                        help=f"where the high score is kept (default: {HIGHSCORE_FILE})")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    session = Session(HighScoreStore(args.highscore_file), rng=random.Random(args.seed))

    pygame.init()
    screen = pygame.display.set_mode((WINDOW_W, WINDOW_H))
    pygame.display.set_caption("Snake Game")
    clock = pygame.time.Clock()
    renderer = Renderer(screen)

    while not session.exit_requested:
        dt = clock.tick(FPS)  # limit to ~60 FPS and get elapsed ms
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                session.request_exit()
            elif event.type == pygame.KEYDOWN:
                session.handle_key(KEY_MAP.get(event.key))
            if session.exit_requested:
                break

        session.advance_time(dt)
        renderer.draw(session.view())
        pygame.display.flip()

    pygame.quit()
    return 0

