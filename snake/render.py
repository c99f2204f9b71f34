from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import numpy as np
import pygame

from snake.game import BODY, FOOD, GRID_SIZE, HEAD, GamePhase, GameSnapshot

BACKGROUND = (17, 24, 39)
CELL = (31, 41, 55)
GRID_LINE = (55, 65, 81)
SNAKE_HEAD = (34, 197, 94)
SNAKE_BODY = (74, 222, 128)
FOOD_COLOR = (239, 68, 68)
TEXT = (229, 231, 235)
SCORE_TEXT = (74, 222, 128)
SPEED_TEXT = (96, 165, 250)
BUTTON = (37, 99, 235)
BUTTON_DISABLED = (75, 85, 99)
RESTART_BUTTON = (22, 163, 74)

HUD_HEIGHT = 32
BUTTON_BAR_HEIGHT = 48


def overlay_lines(snap: GameSnapshot) -> List[str]:
    """Banner text drawn over the board for the current phase."""
    if snap.phase is GamePhase.NOT_STARTED:
        return [
            "Snake Game",
            "Eat the red food to grow and earn points!",
            "Avoid walls and yourself!",
            "Press Space or Enter to start",
        ]
    if snap.phase is GamePhase.PAUSED:
        return ["PAUSED"]
    if snap.phase is GamePhase.GAME_OVER:
        return ["Game Over!", f"Final Score: {snap.score}", "Press Space or Enter to play again"]
    return []


class PygameRenderer:
    def __init__(self, cell_size: int = 20, title: str = "Snake Game") -> None:
        self.cell_size = cell_size
        self.board_px = GRID_SIZE * cell_size

        pygame.init()
        width_px = self.board_px
        height_px = HUD_HEIGHT + self.board_px + BUTTON_BAR_HEIGHT
        self._window = pygame.display.set_mode((width_px, height_px))
        pygame.display.set_caption(title)
        self._clock = pygame.time.Clock()
        self._font = pygame.font.SysFont(None, 24)
        self._big_font = pygame.font.SysFont(None, 36)

        self._buttons: Dict[str, pygame.Rect] = {}

    def button_at(self, pos: Tuple[int, int]) -> Optional[str]:
        for name, rect in self._buttons.items():
            if rect.collidepoint(pos):
                return name
        return None

    def draw(self, snap: GameSnapshot) -> None:
        self._window.fill(BACKGROUND)
        self._buttons = {}
        self._draw_hud(snap)
        self._draw_board(snap.to_grid())
        self._draw_overlay(snap)
        self._draw_buttons(snap)
        pygame.display.flip()

    def tick(self, fps: int) -> None:
        self._clock.tick(fps)

    def close(self) -> None:
        pygame.quit()

    def _cell_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(
            x * self.cell_size,
            HUD_HEIGHT + y * self.cell_size,
            self.cell_size,
            self.cell_size,
        )

    def _draw_hud(self, snap: GameSnapshot) -> None:
        score = self._font.render(f"Score: {snap.score}", True, SCORE_TEXT)
        speed = self._font.render(f"Speed: {snap.speed_percent}%", True, SPEED_TEXT)
        self._window.blit(score, (8, 8))
        self._window.blit(speed, speed.get_rect(topright=(self.board_px - 8, 8)))

    def _draw_board(self, grid: np.ndarray) -> None:
        radius = self.cell_size // 2
        for (y, x), code in np.ndenumerate(grid):
            rect = self._cell_rect(x, y)
            if code == HEAD:
                pygame.draw.rect(self._window, SNAKE_HEAD, rect, border_radius=radius)
            elif code == BODY:
                pygame.draw.rect(self._window, SNAKE_BODY, rect)
            elif code == FOOD:
                pygame.draw.rect(self._window, FOOD_COLOR, rect, border_radius=radius)
            else:
                pygame.draw.rect(self._window, CELL, rect)
            pygame.draw.rect(self._window, GRID_LINE, rect, 1)

    def _draw_overlay(self, snap: GameSnapshot) -> None:
        lines = overlay_lines(snap)
        if not lines:
            return

        overlay = pygame.Surface((self.board_px, self.board_px), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180 if snap.paused else 205))
        self._window.blit(overlay, (0, HUD_HEIGHT))

        center_x = self.board_px // 2
        y = HUD_HEIGHT + self.board_px // 2 - 20 * len(lines)
        for i, line in enumerate(lines):
            font = self._big_font if i == 0 else self._font
            surface = font.render(line, True, TEXT)
            self._window.blit(surface, surface.get_rect(center=(center_x, y)))
            y += 36 if i == 0 else 26

        if snap.phase is GamePhase.NOT_STARTED:
            self._draw_button("start", "Start Game", (center_x, y + 24), RESTART_BUTTON)
        elif snap.over:
            self._draw_button("start", "Play Again", (center_x, y + 24), RESTART_BUTTON)

    def _draw_buttons(self, snap: GameSnapshot) -> None:
        bar_y = HUD_HEIGHT + self.board_px + BUTTON_BAR_HEIGHT // 2
        quarter = self.board_px // 4
        pause_enabled = snap.phase in (GamePhase.PLAYING, GamePhase.PAUSED)
        self._draw_button(
            "pause",
            "Resume" if snap.paused else "Pause",
            (quarter, bar_y),
            BUTTON if pause_enabled else BUTTON_DISABLED,
            enabled=pause_enabled,
        )
        self._draw_button("restart", "Restart", (3 * quarter, bar_y), RESTART_BUTTON)

    def _draw_button(
        self,
        name: str,
        label: str,
        center: Tuple[int, int],
        color: Tuple[int, int, int],
        enabled: bool = True,
    ) -> None:
        text = self._font.render(label, True, TEXT)
        rect = text.get_rect(center=center).inflate(24, 12)
        pygame.draw.rect(self._window, color, rect, border_radius=8)
        self._window.blit(text, text.get_rect(center=center))
        if enabled:
            self._buttons[name] = rect
