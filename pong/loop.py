"""Frame driver — delta time, one update + render per scheduled frame.

A FrameScheduler hands the loop a timestamp in milliseconds once per frame.
The loop turns consecutive timestamps into delta seconds, lets the host
refresh the input snapshot, updates the game, renders, and asks for the next
frame. Headless schedulers below replay timestamps synchronously, so tests
and batch runs drive the exact same code path as the pygame window.
"""

import itertools
from typing import Callable, Iterable, Optional, Protocol

from pong.controls import InputState
from pong.game import PongGame

FrameCallback = Callable[[float], None]


class FrameScheduler(Protocol):
    def request_next_frame(self, callback: FrameCallback) -> None:
        ...


def delta_seconds(previous_ms: Optional[float], current_ms: float) -> float:
    """Elapsed seconds between two frame timestamps.

    The first frame has no predecessor and gets 0. Timestamps that go
    backwards also give 0. Long gaps are passed through as they are.
    """
    if previous_ms is None:
        return 0.0
    return max(0.0, (current_ms - previous_ms) / 1000.0)


class FrameLoop:
    """Drives a PongGame from a FrameScheduler until stopped."""

    def __init__(
        self,
        game: PongGame,
        scheduler: FrameScheduler,
        inputs: Optional[InputState] = None,
        render: Optional[Callable[[PongGame], None]] = None,
        poll: Optional[Callable[[InputState], None]] = None,
        debug: bool = False,
    ):
        self.game = game
        self.scheduler = scheduler
        self.inputs = inputs if inputs is not None else InputState()
        self.render = render
        self.poll = poll
        self.debug = debug

        self.running = False
        self.last_time: Optional[float] = None
        self.last_dt = 0.0
        self.frames = 0
        self.events: list = []

    def start(self):
        self.running = True
        self.last_time = None
        self.scheduler.request_next_frame(self.tick)

    def stop(self):
        """No further frames are requested after the current one."""
        self.running = False

    def tick(self, timestamp_ms: float):
        if not self.running:
            return

        dt = delta_seconds(self.last_time, timestamp_ms)
        # Ignore timestamps that run backwards so the next delta stays sane
        if self.last_time is None or timestamp_ms >= self.last_time:
            self.last_time = timestamp_ms
        self.last_dt = dt

        if self.poll is not None:
            self.poll(self.inputs)
        # The poll hook may have asked us to stop
        if not self.running:
            return

        self.events.extend(self.game.update(dt, self.inputs))
        if self.debug:
            self.game.check_invariants()
        if self.render is not None:
            self.render(self.game)
        self.frames += 1

        if self.running:
            self.scheduler.request_next_frame(self.tick)


class TimestampScheduler:
    """Delivers a fixed sequence of timestamps, one per requested frame."""

    def __init__(self, timestamps: Iterable[float]):
        self._timestamps = iter(timestamps)
        self._pending: Optional[FrameCallback] = None

    def request_next_frame(self, callback: FrameCallback) -> None:
        self._pending = callback

    def run(self) -> int:
        """Run until nothing is pending or timestamps run out. Returns frames delivered."""
        delivered = 0
        while self._pending is not None:
            timestamp = next(self._timestamps, None)
            if timestamp is None:
                break
            callback, self._pending = self._pending, None
            callback(timestamp)
            delivered += 1
        return delivered


class FixedStepScheduler(TimestampScheduler):
    """Evenly spaced timestamps at `fps`, for headless runs and tests."""

    def __init__(self, fps: float = 60, max_frames: Optional[int] = None):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.fps = fps
        step_ms = 1000.0 / fps
        frames = itertools.count() if max_frames is None else range(max_frames)
        super().__init__(i * step_ms for i in frames)
