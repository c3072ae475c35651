"""
game.py: The single guarded game-state container and its state machine.
"""

import random
import threading
from typing import Optional

from .constants import (
    GAME_SPEED, PIPE_WIDTH_DIVISOR, PIPE_GAP_DIVISOR, GAP_TOP_RANGE_DIVISOR
)
from .data_models import Bird, BirdView, FrameSnapshot, GameState, PipeView
from .physics_core import PhysicsCore
from .pipe_pool import PipePool


class Game:
    """
    Owns the bird, the pipe pool, the score and the current GameState.

    Every public method takes the same lock, so the loop thread, the input
    thread and the renderer always see a consistent game.
    """

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport must be positive, got {width}x{height}.")
        if (width // PIPE_WIDTH_DIVISOR < 1
                or height // PIPE_GAP_DIVISOR < 1
                or height // GAP_TOP_RANGE_DIVISOR < 1):
            raise ValueError(f"Viewport {width}x{height} is too small to place pipes.")

        self.width = width
        self.height = height
        self._lock = threading.RLock()

        self._core = PhysicsCore(height)
        self._pool = PipePool(width, height, rng if rng is not None else random.Random())
        self._bird = Bird.spawn(width, height)
        self._score = 0
        self._state = GameState.WAITING

    @property
    def state(self) -> GameState:
        with self._lock:
            return self._state

    @property
    def score(self) -> int:
        with self._lock:
            return self._score

    def on_primary_action(self) -> GameState:
        """Applies one tap/click against the current state and returns the new state."""
        with self._lock:
            if self._state is GameState.WAITING:
                self._state = GameState.PLAYING
            elif self._state is GameState.PLAYING:
                self._bird.jump()
            else:
                self.reset()
            return self._state

    def reset(self):
        """Starts a fresh round: new bird, reseeded pipes, zero score, WAITING."""
        with self._lock:
            self._bird = Bird.spawn(self.width, self.height)
            self._pool.reset()
            self._score = 0
            self._state = GameState.WAITING

    def step(self):
        """Advances the simulation by one tick. Does nothing unless PLAYING."""
        with self._lock:
            if self._state is not GameState.PLAYING:
                return

            self._bird.integrate()
            if self._core.out_of_bounds(self._bird):
                self._end_round()
                return

            self._pool.advance(GAME_SPEED)

            # Score before recycling so a pipe that crosses the bird and the
            # left edge in the same tick still counts.
            collided, scored = self._core.resolve(self._bird, self._pool.pipes)
            self._score += scored
            if collided:
                self._end_round()
                return

            self._pool.recycle_expired()

    def _end_round(self):
        self._state = GameState.GAME_OVER
        print(f"Round over. Final score: {self._score}")

    def snapshot(self) -> FrameSnapshot:
        """Copies out what the renderer needs for one frame."""
        with self._lock:
            return FrameSnapshot(
                width=self.width,
                height=self.height,
                bird=BirdView(self._bird.x, self._bird.y, self._bird.radius),
                pipes=tuple(
                    PipeView(pipe.top_rect(), pipe.bottom_rect(self.height))
                    for pipe in self._pool.pipes
                ),
                score=self._score,
                state=self._state,
            )
