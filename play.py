from __future__ import annotations

import argparse
import logging

import pygame

from snake.controls import InputController
from snake.game import SnakeGame
from snake.loop import GameLoop
from snake.render import PygameRenderer

logger = logging.getLogger("snake.play")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake with the arrow keys or WASD")
    parser.add_argument("--cell-size", type=int, default=20, help="Cell size in pixels")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate of the render/poll loop")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    game = SnakeGame(seed=args.seed)
    controls = InputController(game)
    renderer = PygameRenderer(cell_size=args.cell_size)
    loop = GameLoop(game, clock=pygame.time.get_ticks)
    loop.start()

    running = True
    while running:
        # input first, so a tick sees every key pressed before it
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    controls.handle_key(pygame.key.name(event.key))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                button = renderer.button_at(event.pos)
                if button is not None:
                    controls.press_button(button)

        if not running:
            break

        loop.poll()
        renderer.draw(game.snapshot())
        renderer.tick(args.fps)

    loop.stop()
    logger.info("Quit with score %d", game.score)
    renderer.close()


if __name__ == "__main__":
    main()
