"""
physics_core.py: Boundary, collision and scoring checks run once per tick.
"""

from typing import List, Tuple

from .data_models import Bird, Pipe


class PhysicsCore:
    """
    Stateless collision and scoring rules for one viewport height.
    """

    def __init__(self, viewport_height: int):
        self.viewport_height = viewport_height

    def out_of_bounds(self, bird: Bird) -> bool:
        """Checks for ceiling or ground breach."""
        return bird.y <= 0 or bird.y >= self.viewport_height

    def resolve(self, bird: Bird, pipes: List[Pipe]) -> Tuple[bool, int]:
        """
        Walks the pool in order, returning (collided, points scored).
        Stops at the first pipe the bird hits; points from earlier pipes are kept.
        """
        scored = 0
        for pipe in pipes:
            if pipe.collides_with(bird):
                return True, scored

            if not pipe.passed and pipe.right < bird.x:
                pipe.passed = True
                scored += 1

        return False, scored
