"""
renderer.py: Pygame drawing of a FrameSnapshot, plus the thread-safe frame handoff.
"""

import threading
from typing import Optional

import pygame

from .constants import (
    SKY_COLOR, PIPE_COLOR, BIRD_COLOR, EYE_COLOR, BEAK_COLOR, TEXT_COLOR,
    TEXT_SIZE_DIVISOR
)
from .data_models import FrameSnapshot, GameState, Rect


class FrameBuffer:
    """Holds the latest snapshot published by the loop thread."""

    def __init__(self):
        self._frame: Optional[FrameSnapshot] = None
        self.frame_lock = threading.Lock()

    def publish(self, frame: FrameSnapshot):
        with self.frame_lock:
            self._frame = frame

    def fetch(self) -> Optional[FrameSnapshot]:
        with self.frame_lock:
            return self._frame


def _to_pygame_rect(rect: Rect) -> pygame.Rect:
    left, top, right, bottom = rect
    return pygame.Rect(left, top, right - left, bottom - top)


class Renderer:
    """Draws snapshots onto a pygame surface. Knows nothing about the game rules."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.Font(None, max(1, int(surface.get_height() / TEXT_SIZE_DIVISOR)))

    def draw(self, frame: FrameSnapshot):
        screen = self.surface
        screen.fill(SKY_COLOR)

        for pipe in frame.pipes:
            pygame.draw.rect(screen, PIPE_COLOR, _to_pygame_rect(pipe.top))
            pygame.draw.rect(screen, PIPE_COLOR, _to_pygame_rect(pipe.bottom))

        self._draw_bird(frame)

        # HUD
        score_text = self.font.render(str(frame.score), True, TEXT_COLOR)
        screen.blit(score_text, (frame.width / 2, frame.height / 8))

        if frame.state is GameState.WAITING:
            self._draw_centered("Tap to Play", frame.height / 2)
        elif frame.state is GameState.GAME_OVER:
            self._draw_centered("Game Over", frame.height / 2)
            self._draw_centered("Tap to Restart", frame.height / 2 + frame.height / 10)
            self._draw_centered(f"Score: {frame.final_score}", frame.height / 2 - frame.height / 10)

    def _draw_bird(self, frame: FrameSnapshot):
        bird = frame.bird
        size = bird.radius
        center = (int(bird.x), int(bird.y))
        pygame.draw.circle(self.surface, BIRD_COLOR, center, int(size))

        # Eye and beak
        pygame.draw.circle(self.surface, EYE_COLOR,
                           (int(bird.x + size / 2), int(bird.y - size / 3)), int(size / 5))
        beak = pygame.Rect(int(bird.x + size / 2), int(bird.y), int(size * 0.7), int(size / 3))
        pygame.draw.rect(self.surface, BEAK_COLOR, beak)

    def _draw_centered(self, text: str, y: float):
        surf = self.font.render(text, True, TEXT_COLOR)
        x = (self.surface.get_width() - surf.get_width()) / 2
        self.surface.blit(surf, (x, y))
