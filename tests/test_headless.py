"""Tests for headless runs and the frame-rate analysis helpers."""

from dataclasses import replace

from pong.config import DEFAULT_CONFIG, LAUNCH_RANDOM
from pong.controls import P1_DOWN
from pong.types import ScoreEvent
from sim.analysis import collision_window, count_tunnels, wall_paddle_config
from sim.headless import SAMPLE_COLUMNS, run_headless


def test_samples_one_row_per_frame():
    result = run_headless(fps=60, seconds=1.0)
    assert result.frames == 61
    assert result.samples.shape == (61, len(SAMPLE_COLUMNS))
    assert result.duration == 1.0


def test_auto_serve_puts_ball_in_play():
    result = run_headless(fps=60, seconds=0.5)
    # Ball launched on the first frame and has travelled since
    assert result.samples[-1, 1] > DEFAULT_CONFIG.ball_center[0]


def test_without_serve_ball_stays_parked():
    result = run_headless(fps=60, seconds=0.5, auto_serve=False)
    assert (result.samples[:, 1] == DEFAULT_CONFIG.ball_center[0]).all()
    assert result.points == []


def test_default_session_scores_points():
    """Parked paddles miss the fixed launch, so points keep coming."""
    result = run_headless(fps=60, seconds=30.0)
    assert len(result.points) > 0
    assert all(isinstance(p, ScoreEvent) for p in result.points)
    assert result.game.p1_score + result.game.p2_score == len(result.points)


def test_tape_moves_paddle():
    result = run_headless(fps=10, seconds=1.0, tape={0: {P1_DOWN: True}, 7: {P1_DOWN: False}})
    # Six 0.1s frames at 1000px/s would carry it 600px; the bottom wall stops it at 520
    assert result.game.player1.y == DEFAULT_CONFIG.height - DEFAULT_CONFIG.paddle_height


def test_full_height_paddles_never_miss_at_60fps():
    result = run_headless(wall_paddle_config(), fps=60, seconds=30.0)
    assert result.points == []
    assert result.paddle_hits > 0


def test_low_frame_rate_tunnels():
    """At 4.5 FPS the ball steps 44px per frame, more than the 40px window."""
    assert DEFAULT_CONFIG.ball_speed / 4.5 > collision_window()
    tunnels = count_tunnels(fps_values=[60, 4.5], seconds=10.0)
    assert tunnels[0] == 0
    assert tunnels[1] >= 1


def test_random_launch_runs_clean():
    config = replace(DEFAULT_CONFIG, launch=LAUNCH_RANDOM)
    result = run_headless(config, fps=60, seconds=20.0)
    assert result.frames == 1201
