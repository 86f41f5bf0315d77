"""Tests for the frame driver and headless schedulers."""

import pytest

from pong.controls import CONFIRM, InputState
from pong.game import PongGame
from pong.loop import (
    FixedStepScheduler,
    FrameLoop,
    TimestampScheduler,
    delta_seconds,
)
from pong.types import PLAY


def test_first_frame_delta_is_zero():
    assert delta_seconds(None, 12345.0) == 0.0


def test_delta_in_seconds():
    assert delta_seconds(1000.0, 1016.0) == pytest.approx(0.016)


def test_backwards_timestamp_gives_zero():
    assert delta_seconds(2000.0, 1500.0) == 0.0


def test_large_gap_passed_through():
    """A stalled frame is not capped."""
    assert delta_seconds(0.0, 5000.0) == 5.0


def test_loop_feeds_deltas_to_game():
    deltas = []
    game = PongGame()
    original_update = game.update

    def spy(dt, inputs):
        deltas.append(dt)
        return original_update(dt, inputs)

    game.update = spy
    scheduler = TimestampScheduler([100.0, 116.0, 150.0, 140.0, 200.0])
    loop = FrameLoop(game, scheduler)
    loop.start()
    assert scheduler.run() == 5
    assert deltas == pytest.approx([0.0, 0.016, 0.034, 0.0, 0.05])
    assert loop.frames == 5


def test_render_follows_update():
    calls = []
    game = PongGame()
    original_update = game.update

    def spy(dt, inputs):
        calls.append("update")
        return original_update(dt, inputs)

    game.update = spy
    scheduler = FixedStepScheduler(fps=60, max_frames=3)
    loop = FrameLoop(
        game, scheduler,
        poll=lambda inputs: calls.append("poll"),
        render=lambda g: calls.append("render"),
    )
    loop.start()
    scheduler.run()
    assert calls == ["poll", "update", "render"] * 3


def test_poll_refreshes_input_before_update():
    game = PongGame()
    scheduler = FixedStepScheduler(fps=60, max_frames=2)

    def poll(inputs):
        if loop.frames == 0:
            inputs.press(CONFIRM)

    loop = FrameLoop(game, scheduler, poll=poll)
    loop.start()
    scheduler.run()
    assert game.state == PLAY


def test_stop_halts_scheduling():
    """stop() from a render sink ends the run after the current frame."""
    game = PongGame()
    scheduler = FixedStepScheduler(fps=60)  # unbounded

    def render(g):
        if loop.frames == 9:
            loop.stop()

    loop = FrameLoop(game, scheduler, render=render)
    loop.start()
    assert scheduler.run() == 10
    assert loop.frames == 10
    assert loop.running is False


def test_stop_from_poll_skips_update():
    game = PongGame()
    scheduler = FixedStepScheduler(fps=60, max_frames=5)
    loop = FrameLoop(game, scheduler, poll=lambda inputs: loop.stop())
    loop.start()
    scheduler.run()
    assert game.frame == 0
    assert loop.frames == 0


def test_fixed_step_timestamps():
    seen = []
    scheduler = FixedStepScheduler(fps=50, max_frames=4)

    def callback(ts):
        seen.append(ts)
        scheduler.request_next_frame(callback)

    scheduler.request_next_frame(callback)
    scheduler.run()
    assert seen == pytest.approx([0.0, 20.0, 40.0, 60.0])


def test_fixed_step_rejects_bad_fps():
    with pytest.raises(ValueError):
        FixedStepScheduler(fps=0)


def test_debug_loop_checks_invariants():
    game = PongGame()
    game.player2.y = 10_000
    scheduler = FixedStepScheduler(fps=60, max_frames=1)
    loop = FrameLoop(game, scheduler, inputs=InputState(), debug=True)
    loop.start()
    # The paddle is out of bounds before the first frame; with no input it stays there
    with pytest.raises(AssertionError):
        scheduler.run()
