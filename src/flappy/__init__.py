"""
Flappy Bird: fixed-step simulation core with a pygame shell.
"""

from .data_models import Bird, FrameSnapshot, GameState, Pipe
from .game import Game
from .game_loop import GameLoop
from .pipe_pool import PipePool

__all__ = ["Bird", "FrameSnapshot", "Game", "GameLoop", "GameState", "Pipe", "PipePool"]
