"""
data_models.py: Data structures for the game state and its render snapshot.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .constants import (
    GRAVITY, JUMP_IMPULSE, BIRD_X_DIVISOR, BIRD_RADIUS_DIVISOR
)

Rect = Tuple[int, int, int, int]  # (left, top, right, bottom)


class GameState(Enum):
    WAITING = "waiting"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class Bird:
    """The player-controlled body. Only y and velocity change after construction."""
    x: float
    y: float
    radius: float
    velocity: float = 0.0

    @classmethod
    def spawn(cls, width: int, height: int) -> "Bird":
        """Creates a bird at its starting spot for the given viewport."""
        return cls(
            x=float(width // BIRD_X_DIVISOR),
            y=float(height // 2),
            radius=float(width // BIRD_RADIUS_DIVISOR),
        )

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    def integrate(self):
        """Applies one tick of gravity, then moves by the new velocity."""
        self.velocity += GRAVITY
        self.y += self.velocity

    def jump(self):
        self.velocity = JUMP_IMPULSE


@dataclass
class Pipe:
    """A top/bottom pipe pair with a vertical gap starting at gap_top."""
    x: int
    gap_top: int
    width: int
    gap_height: int
    passed: bool = False

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def gap_bottom(self) -> int:
        return self.gap_top + self.gap_height

    def update(self, speed: int):
        self.x -= speed

    def recycle(self, new_x: int, new_gap_top: int):
        """Moves a pipe that scrolled off the left edge back in as a fresh one."""
        self.x = new_x
        self.gap_top = new_gap_top
        self.passed = False

    def collides_with(self, bird: Bird) -> bool:
        # Bird is approximated by its bounding box; touching an edge is not a hit.
        if bird.x + bird.radius > self.x and bird.x - bird.radius < self.right:
            if bird.y - bird.radius < self.gap_top or bird.y + bird.radius > self.gap_bottom:
                return True
        return False

    def top_rect(self) -> Rect:
        return (self.x, 0, self.right, self.gap_top)

    def bottom_rect(self, viewport_height: int) -> Rect:
        return (self.x, self.gap_bottom, self.right, viewport_height)


@dataclass(frozen=True)
class BirdView:
    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class PipeView:
    top: Rect
    bottom: Rect


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything the renderer needs for one frame, copied out of the game."""
    width: int
    height: int
    bird: BirdView
    pipes: Tuple[PipeView, ...]
    score: int
    state: GameState

    @property
    def final_score(self) -> Optional[int]:
        if self.state is GameState.GAME_OVER:
            return self.score
        return None
