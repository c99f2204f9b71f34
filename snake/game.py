from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Deque, Iterable, List, NamedTuple, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)

GRID_SIZE = 20
INITIAL_SPEED = 150  # ms between ticks
MIN_SPEED = 50
SPEED_STEP = 2
FOOD_SCORE = 10

EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3


class Position(NamedTuple):
    x: int
    y: int

    def shifted(self, direction: Direction) -> Position:
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)

    def in_bounds(self) -> bool:
        return 0 <= self.x < GRID_SIZE and 0 <= self.y < GRID_SIZE


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class GamePhase(Enum):
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


INITIAL_SNAKE = (Position(10, 10), Position(9, 10), Position(8, 10))


def generate_food(snake: Iterable[Position], rng: random.Random = random) -> Position:
    """Pick a uniformly random free cell.

    Samples are rejected until one misses the snake. There is no retry bound, so
    a snake covering the whole board never returns.
    """
    occupied = set(snake)
    while True:
        candidate = Position(rng.randrange(GRID_SIZE), rng.randrange(GRID_SIZE))
        if candidate not in occupied:
            return candidate


@dataclass(frozen=True)
class GameSnapshot:
    snake: Tuple[Position, ...]
    food: Position
    direction: Direction
    score: int
    speed: int
    phase: GamePhase

    @property
    def playing(self) -> bool:
        return self.phase is not GamePhase.NOT_STARTED

    @property
    def paused(self) -> bool:
        return self.phase is GamePhase.PAUSED

    @property
    def over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def speed_percent(self) -> int:
        return round((INITIAL_SPEED - self.speed + MIN_SPEED) / (INITIAL_SPEED - MIN_SPEED) * 100)

    def to_grid(self) -> np.ndarray:
        """Board as a (GRID_SIZE, GRID_SIZE) array indexed [y, x]."""
        grid = np.full((GRID_SIZE, GRID_SIZE), EMPTY, dtype=np.int8)
        for x, y in self.snake:
            if 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE:
                grid[y, x] = BODY
        fx, fy = self.food
        grid[fy, fx] = FOOD
        hx, hy = self.head
        if 0 <= hx < GRID_SIZE and 0 <= hy < GRID_SIZE:
            grid[hy, hx] = HEAD
        return grid


Listener = Callable[[GameSnapshot], None]


class SnakeGame:
    """Owns the game state and advances it one tick at a time.

    The scheduler and the input controller both read and write through a single
    instance, so the direction seen by the reversal guard is always the one most
    recently set.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.random = random.Random(seed)

        self.snake: Deque[Position] = deque(INITIAL_SNAKE)
        self.direction = Direction.RIGHT
        self.food = generate_food(self.snake, self.random)
        self.score = 0
        self.speed = INITIAL_SPEED
        self.phase = GamePhase.NOT_STARTED
        self.session = 0

        self._listeners: List[Listener] = []

    @property
    def active(self) -> bool:
        return self.phase in (GamePhase.PLAYING, GamePhase.PAUSED)

    def add_listener(self, callback: Listener) -> None:
        self._listeners.append(callback)

    def init_game(self) -> GameSnapshot:
        self.snake = deque(INITIAL_SNAKE)
        self.direction = Direction.RIGHT
        self.score = 0
        self.speed = INITIAL_SPEED
        self.food = generate_food(self.snake, self.random)
        self.phase = GamePhase.PLAYING
        self.session += 1
        logger.info("Session %d started, food at %s", self.session, tuple(self.food))
        return self._changed()

    def set_direction(self, requested: Direction) -> bool:
        if not self.active:
            return False
        if requested is self.direction.opposite:
            logger.debug("Ignoring reversal from %s to %s", self.direction.name, requested.name)
            return False
        if requested is not self.direction:
            self.direction = requested
            self._changed()
        return True

    def toggle_pause(self) -> bool:
        if self.phase is GamePhase.PLAYING:
            self.phase = GamePhase.PAUSED
            logger.info("Paused")
        elif self.phase is GamePhase.PAUSED:
            self.phase = GamePhase.PLAYING
            logger.info("Resumed")
        else:
            return False
        self._changed()
        return True

    def tick(self) -> GameSnapshot:
        if self.phase is not GamePhase.PLAYING:
            return self.snapshot()

        new_head = self.snake[0].shifted(self.direction)

        if not new_head.in_bounds():
            return self._game_over("wall", new_head)
        # the tail cell counts even though it is about to vacate
        if new_head in self.snake:
            return self._game_over("self", new_head)

        self.snake.appendleft(new_head)

        if new_head == self.food:
            self.score += FOOD_SCORE
            self.food = generate_food(self.snake, self.random)
            self.speed = max(MIN_SPEED, self.speed - SPEED_STEP)
            logger.debug("Ate food: score=%d speed=%d", self.score, self.speed)
        else:
            self.snake.pop()

        return self._changed()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            snake=tuple(self.snake),
            food=self.food,
            direction=self.direction,
            score=self.score,
            speed=self.speed,
            phase=self.phase,
        )

    def _game_over(self, cause: str, target: Position) -> GameSnapshot:
        self.phase = GamePhase.GAME_OVER
        logger.info("Game over (%s collision at %s), final score %d", cause, tuple(target), self.score)
        return self._changed()

    def _changed(self) -> GameSnapshot:
        snap = self.snapshot()
        for callback in self._listeners:
            callback(snap)
        return snap
