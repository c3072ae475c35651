"""
pipe_pool.py: The fixed set of pipes that scrolls past the bird forever.
"""

import random
from dataclasses import dataclass, field
from typing import List

from .constants import (
    PIPE_COUNT, PIPE_WIDTH_DIVISOR, PIPE_GAP_DIVISOR,
    GAP_TOP_MIN_DIVISOR, GAP_TOP_RANGE_DIVISOR
)
from .data_models import Pipe


@dataclass
class PipePool:
    """
    Owns exactly PIPE_COUNT pipes. Pipes that leave the screen on the left
    are recycled in place to the right of the farthest one.
    """
    width: int
    height: int
    rng: random.Random = field(default_factory=random.Random)
    pipes: List[Pipe] = field(init=False, default_factory=list)

    def __post_init__(self):
        self.pipe_width = self.width // PIPE_WIDTH_DIVISOR
        self.gap_height = self.height // PIPE_GAP_DIVISOR
        self.spacing = self.width // 2
        self.reset()

    def _random_gap_top(self) -> int:
        return (self.height // GAP_TOP_MIN_DIVISOR
                + self.rng.randrange(self.height // GAP_TOP_RANGE_DIVISOR))

    def reset(self):
        """Places every pipe off the right edge, evenly staggered, with new gaps."""
        self.pipes[:] = [
            Pipe(
                x=self.width + i * (self.spacing + self.pipe_width),
                gap_top=self._random_gap_top(),
                width=self.pipe_width,
                gap_height=self.gap_height,
            )
            for i in range(PIPE_COUNT)
        ]

    @property
    def farthest_x(self) -> int:
        return max(pipe.x for pipe in self.pipes)

    def advance(self, speed: int):
        """Moves every pipe left by speed. Expired pipes stay put until recycle_expired()."""
        for pipe in self.pipes:
            pipe.update(speed)

    def recycle_expired(self):
        """Recycles every pipe whose right edge has crossed the left edge."""
        for pipe in self.pipes:
            if pipe.right < 0:
                # Re-read the maximum each time so a second recycle lands after the first.
                pipe.recycle(self.farthest_x + self.spacing, self._random_gap_top())
