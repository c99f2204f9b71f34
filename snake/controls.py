from __future__ import annotations

import logging

from snake.game import Direction, SnakeGame

logger = logging.getLogger(__name__)

# Browser key values and pygame key names, lower-cased.
DIRECTION_KEYS = {
    "arrowup": Direction.UP,
    "up": Direction.UP,
    "w": Direction.UP,
    "arrowdown": Direction.DOWN,
    "down": Direction.DOWN,
    "s": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "left": Direction.LEFT,
    "a": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "right": Direction.RIGHT,
    "d": Direction.RIGHT,
}

START_KEYS = frozenset({" ", "space", "enter", "return"})

BUTTONS = ("start", "pause", "restart")


class InputController:
    """Translates key presses and button clicks into SnakeGame operations."""

    def __init__(self, game: SnakeGame) -> None:
        self.game = game

    def handle_key(self, key: str) -> bool:
        """Apply a key press. Returns True if the key had an effect."""
        name = key.lower()

        if not self.game.active:
            if name in START_KEYS:
                self.game.init_game()
                return True
            logger.debug("Ignoring key %r outside a session", key)
            return False

        if name in START_KEYS:
            return self.game.toggle_pause()

        direction = DIRECTION_KEYS.get(name)
        if direction is None:
            logger.debug("Ignoring unknown key %r", key)
            return False
        return self.game.set_direction(direction)

    def press_button(self, button: str) -> bool:
        if button in ("start", "restart"):
            self.game.init_game()
            return True
        if button == "pause":
            # disabled outside a running session
            return self.game.toggle_pause()
        logger.debug("Ignoring unknown button %r", button)
        return False
