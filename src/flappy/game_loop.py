"""
game_loop.py: Background thread that ticks the game and hands frames to the renderer.
"""

import threading
from typing import Callable, Optional

from .constants import TICK_INTERVAL
from .data_models import FrameSnapshot
from .game import Game


class GameLoop:
    """
    Runs update -> render -> sleep on its own thread until stopped.
    Can be started again after a stop (pause / resume).
    """

    def __init__(self, game: Game, render: Callable[[FrameSnapshot], None],
                 interval: float = TICK_INTERVAL):
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}.")
        self.game = game
        self.render = render
        self.interval = interval

        # Threading
        self.running = threading.Event()
        self._wake = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self.running.is_set()

    def start(self):
        """Start the loop on a fresh thread. No-op if already running."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._wake.clear()
        self.running.set()
        self._thread = threading.Thread(target=self._run, name="game-loop", daemon=True)
        self._thread.start()

    def stop(self):
        """Stop the loop and wait for the current iteration to finish."""
        self.running.clear()
        self._wake.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
            print("Game loop stopped.")

    def _run(self):
        print(f"Game loop started. Tick rate: {1 / self.interval:.0f} Hz.")
        try:
            while self.running.is_set():
                self.game.step()
                self.render(self.game.snapshot())

                # An early wake-up just means re-checking the running flag.
                self._wake.wait(self.interval)
        finally:
            self.running.clear()
