"""Headless sessions — fixed-timestep runs driven by a scripted input tape."""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from pong.config import DEFAULT_CONFIG, GameConfig
from pong.controls import CONFIRM, InputState
from pong.game import PongGame
from pong.loop import FixedStepScheduler, FrameLoop
from pong.types import START, BounceEvent, ScoreEvent

SAMPLE_COLUMNS = ("t", "x", "y", "dx", "dy")


@dataclass
class HeadlessResult:
    """Outcome of a headless run."""
    game: PongGame
    fps: float
    frames: int
    samples: np.ndarray  # one row per frame, see SAMPLE_COLUMNS
    events: list = field(default_factory=list)

    @property
    def duration(self) -> float:
        return float(self.samples[-1, 0]) if len(self.samples) else 0.0

    @property
    def points(self) -> list[ScoreEvent]:
        return [e for e in self.events if isinstance(e, ScoreEvent)]

    @property
    def paddle_hits(self) -> int:
        return sum(1 for e in self.events if isinstance(e, BounceEvent) and e.kind == "paddle")

    @property
    def wall_bounces(self) -> int:
        return sum(1 for e in self.events if isinstance(e, BounceEvent) and e.kind != "paddle")


def run_headless(
    config: GameConfig = DEFAULT_CONFIG,
    fps: float = 60,
    seconds: float = 10.0,
    tape: Optional[dict] = None,
    auto_serve: bool = True,
    debug: bool = True,
) -> HeadlessResult:
    """Run a session without a window.

    Args:
        config: Session configuration.
        fps: Frame rate; every frame advances 1/fps seconds.
        seconds: Simulated duration.
        tape: frame index -> {action: held}, applied before that frame's update.
        auto_serve: Press confirm whenever the game waits in "start".
        debug: Check game invariants after every frame.

    Returns:
        HeadlessResult with the final game, events and per-frame samples.
    """
    tape = tape or {}
    max_frames = int(round(seconds * fps)) + 1  # frame 0 has dt = 0
    game = PongGame(config)
    scheduler = FixedStepScheduler(fps=fps, max_frames=max_frames)
    rows = []

    def poll(inputs: InputState):
        frame = game.frame
        for action, held in tape.get(frame, {}).items():
            if held:
                inputs.press(action)
            else:
                inputs.release(action)
        if auto_serve and game.state == START:
            inputs.press(CONFIRM)

    def record(g: PongGame):
        rows.append((loop.frames / fps, g.ball.x, g.ball.y, g.ball.dx, g.ball.dy))

    loop = FrameLoop(game, scheduler, render=record, poll=poll, debug=debug)
    loop.start()
    scheduler.run()
    loop.stop()

    samples = np.array(rows, dtype=float).reshape(-1, len(SAMPLE_COLUMNS))
    return HeadlessResult(
        game=game,
        fps=fps,
        frames=loop.frames,
        samples=samples,
        events=list(loop.events),
    )
