#!/usr/bin/env python3
"""
client.py

Pygame shell: owns the window, turns taps/clicks/keys into the primary
action and pauses the game loop while the window is out of focus.
"""

import argparse
import random
from typing import Optional, Sequence

import pygame

from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, RENDER_FPS, WINDOW_TITLE
from .game import Game
from .game_loop import GameLoop
from .renderer import FrameBuffer, Renderer


def is_primary_action(event: pygame.event.Event) -> bool:
    """True for the input events that all count as a single tap."""
    if event.type == pygame.KEYDOWN:
        return event.key in (pygame.K_SPACE, pygame.K_UP)
    return event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN)


class FlappyClient:
    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 fullscreen: bool = False, seed: Optional[int] = None):
        rng = random.Random(seed)
        if fullscreen:
            # Let the display decide the viewport size.
            pygame.init()
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            try:
                self.game = Game(*self.screen.get_size(), rng)
            except ValueError:
                pygame.quit()
                raise
        else:
            # Reject a bad --width/--height before a window is opened for it.
            self.game = Game(width, height, rng)
            pygame.init()
            self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(WINDOW_TITLE)

        # --- Game Logic ---
        self.frames = FrameBuffer()
        self.loop = GameLoop(self.game, self.frames.publish)

        # --- Rendering ---
        self.renderer = Renderer(self.screen)
        self.clock = pygame.time.Clock()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Processes one pygame event. Returns False when the client should quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False

        if is_primary_action(event):
            self.game.on_primary_action()
        elif event.type == pygame.WINDOWFOCUSLOST:
            self.loop.stop()
        elif event.type == pygame.WINDOWFOCUSGAINED:
            self.loop.start()
        return True

    def run(self):
        """The main client execution loop."""
        self.loop.start()

        running = True
        try:
            while running:
                self.clock.tick(RENDER_FPS)

                for event in pygame.event.get():
                    if not self.handle_event(event):
                        running = False

                frame = self.frames.fetch()
                if frame is not None:
                    self.renderer.draw(frame)
                    pygame.display.flip()
        finally:
            self.loop.stop()
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None):
    parser = argparse.ArgumentParser(description="Tap to keep the bird between the pipes.")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    parser.add_argument("--fullscreen", action="store_true",
                        help="use the full display size instead of --width/--height")
    parser.add_argument("--seed", type=int, default=None, help="seed for pipe gap positions")
    args = parser.parse_args(argv)

    client = FlappyClient(args.width, args.height, args.fullscreen, args.seed)
    client.run()


if __name__ == "__main__":
    main()
