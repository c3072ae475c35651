"""Tests for flappy.game — Game state machine and tick."""
from __future__ import annotations

import random
import threading

import pytest

from flappy.constants import JUMP_IMPULSE
from flappy.data_models import GameState
from flappy.game import Game


def make_game(seed: int = 7) -> Game:
    return Game(400, 800, random.Random(seed))


def pipe_xs(game: Game) -> list:
    return [view.top[0] for view in game.snapshot().pipes]


def playing_game() -> Game:
    game = make_game()
    game.on_primary_action()
    return game


class TestConstruction:
    @pytest.mark.parametrize("size", [(0, 800), (400, 0), (-1, 800), (400, -10)])
    def test_non_positive_viewport_rejected(self, size: tuple) -> None:
        with pytest.raises(ValueError):
            Game(*size)

    @pytest.mark.parametrize("size", [(5, 800), (400, 1), (400, 3)])
    def test_degenerate_viewport_rejected(self, size: tuple) -> None:
        with pytest.raises(ValueError):
            Game(*size)

    def test_initial_state(self) -> None:
        game = make_game()
        assert game.state is GameState.WAITING
        assert game.score == 0
        assert pipe_xs(game) == [400, 666, 932]
        snap = game.snapshot()
        assert (snap.bird.x, snap.bird.y, snap.bird.radius) == (100.0, 400.0, 26.0)
        assert snap.width == 400 and snap.height == 800

    def test_default_rng(self) -> None:
        assert Game(400, 800).state is GameState.WAITING


class TestStateMachine:
    def test_waiting_action_starts_play_without_moving_anything(self) -> None:
        game = make_game()
        before = game.snapshot()
        assert game.on_primary_action() is GameState.PLAYING
        after = game.snapshot()
        assert after.bird == before.bird
        assert after.pipes == before.pipes
        assert game._bird.velocity == 0.0

    def test_playing_action_jumps(self) -> None:
        game = playing_game()
        game.step()
        assert game.on_primary_action() is GameState.PLAYING
        assert game._bird.velocity == JUMP_IMPULSE

    def test_game_over_action_resets_to_waiting(self) -> None:
        game = playing_game()
        for _ in range(20):
            game.step()
        game._score = 4
        game._state = GameState.GAME_OVER

        assert game.on_primary_action() is GameState.WAITING
        assert game.score == 0
        snap = game.snapshot()
        assert (snap.bird.x, snap.bird.y) == (100.0, 400.0)
        assert game._bird.velocity == 0.0
        assert pipe_xs(game) == [400, 666, 932]
        assert not any(p.passed for p in game._pool.pipes)

    def test_step_is_ignored_outside_play(self) -> None:
        game = make_game()
        before = game.snapshot()
        game.step()
        assert game.snapshot() == before

    def test_concurrent_actions_are_each_applied_once(self) -> None:
        game = make_game()
        threads = [threading.Thread(target=game.on_primary_action) for _ in range(32)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        # One action started the round, the rest were jumps.
        assert game.state is GameState.PLAYING
        assert game._bird.velocity == JUMP_IMPULSE


class TestStep:
    def test_one_tick_of_physics(self) -> None:
        game = playing_game()
        game._bird.velocity = 3.0
        game.step()
        assert game._bird.velocity == pytest.approx(3.8)
        assert game._bird.y == pytest.approx(403.8)
        assert pipe_xs(game) == [390, 656, 922]

    def test_ground_breach_ends_round_and_freezes_score(self) -> None:
        game = playing_game()
        game._score = 5
        game._bird.y = 799.5
        game.step()
        assert game.state is GameState.GAME_OVER
        # Breach aborts the tick before pipes move.
        assert pipe_xs(game) == [400, 666, 932]

        game.step()
        assert game.score == 5
        assert game.snapshot().final_score == 5

    def test_ceiling_breach_ends_round(self) -> None:
        game = playing_game()
        game._bird.y = 1.0
        game._bird.jump()
        game.step()
        assert game.state is GameState.GAME_OVER

    def test_pipe_collision_ends_round(self) -> None:
        game = playing_game()
        pipe = game._pool.pipes[0]
        pipe.x = 100
        pipe.gap_top = 0
        game.step()
        assert game.state is GameState.GAME_OVER

    def test_passing_a_pipe_scores_once(self) -> None:
        game = playing_game()
        pipe = game._pool.pipes[0]
        pipe.x = 30
        pipe.gap_top = 300

        game.step()
        assert game.state is GameState.PLAYING
        assert game.score == 1
        game.step()
        assert game.score == 1

    def test_expired_pipe_recycled_within_tick(self) -> None:
        game = playing_game()
        pipe = game._pool.pipes[0]
        pipe.x = -60
        pipe.gap_top = 0
        pipe.passed = True
        game.step()
        assert game.state is GameState.PLAYING
        assert pipe.x == 922 + 200
        assert not pipe.passed

    def test_narrow_viewport_scores_pipe_that_jumps_past_bird_and_edge(self) -> None:
        # Bird x is 6 and the pipes move 10 per tick, so a pipe goes from
        # right >= bird.x to right < 0 in a single tick.
        game = Game(24, 800, random.Random(1))
        game.on_primary_action()
        for pipe in game._pool.pipes:
            pipe.gap_top = 300
        first = game._pool.pipes[0]

        game.step()
        game.step()
        assert first.right == 8
        assert game.score == 0

        game.step()
        assert game.state is GameState.PLAYING
        assert game.score == 1
        # Recycled after scoring, to the right of the farthest pipe at x = 26.
        assert first.x == 26 + 12
        assert not first.passed


class TestEndToEnd:
    def test_free_fall_until_round_ends(self) -> None:
        game = make_game()
        assert game.state is GameState.WAITING
        assert pipe_xs(game) == [400, 400 + (200 + 66), 400 + 2 * (200 + 66)]
        assert game.on_primary_action() is GameState.PLAYING

        prev_y = game.snapshot().bird.y
        for _ in range(100):
            game.step()
            if game.state is not GameState.PLAYING:
                break
            y = game.snapshot().bird.y
            assert y > prev_y
            prev_y = y
        assert game.state is GameState.GAME_OVER
