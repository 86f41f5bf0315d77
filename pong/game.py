"""Game state machine — launches, points and paddle control for one session.

Per-frame order:
- Confirm input (edge-triggered): start -> play, or play -> start with the
  ball back at centre
- Ball physics, only while playing
- Scoring, in every state: ball past the left edge is a point for Player 2,
  past the right edge a point for Player 1; the ball is re-centred and the
  game returns to start
- Paddle movement from held input, in every state
"""

from typing import Callable, Optional

from pong.ball import Ball
from pong.config import DEFAULT_CONFIG, GameConfig
from pong.controls import CONFIRM, P1_DOWN, P1_UP, P2_DOWN, P2_UP, InputState
from pong.paddle import Paddle
from pong.scoring import create_score, score_point
from pong.types import PLAY, START, BounceEvent, ScoreEvent


class PongGame:
    """Owns the paddles, the ball, the score and the start/play state."""

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        on_score: Optional[Callable[[ScoreEvent], None]] = None,
        on_bounce: Optional[Callable[[BounceEvent], None]] = None,
    ):
        self.config = config
        self.on_score = on_score
        self.on_bounce = on_bounce

        self.player1 = Paddle(
            x=config.paddle1_x,
            y=config.paddle1_y,
            width=config.paddle_width,
            height=config.paddle_height,
            speed=config.paddle_speed,
            field_height=config.height,
        )
        self.player2 = Paddle(
            x=config.paddle2_x,
            y=config.paddle2_y,
            width=config.paddle_width,
            height=config.paddle_height,
            speed=config.paddle_speed,
            field_height=config.height,
        )
        cx, cy = config.ball_center
        self.ball = Ball(
            x=cx,
            y=cy,
            width=config.ball_width,
            height=config.ball_height,
            field_width=config.width,
            field_height=config.height,
            speed=config.ball_speed,
            launch=config.launch,
            speedup=config.ball_speedup,
        )
        self.score = create_score()
        self.state = START
        self.frame = 0

    @property
    def p1_score(self) -> int:
        return self.score.p1_score

    @property
    def p2_score(self) -> int:
        return self.score.p2_score

    def reset_ball(self):
        self.ball.reset(*self.config.ball_center)

    def new_session(self):
        """Back to 0-0 with everything in its starting place."""
        self.player1.y = self.config.paddle1_y
        self.player2.y = self.config.paddle2_y
        self.player1.stop()
        self.player2.stop()
        self.reset_ball()
        self.score = create_score()
        self.state = START
        self.frame = 0

    def update(self, dt: float, inputs: InputState) -> list:
        """Advance the session by one frame of `dt` seconds.

        Returns the BounceEvent and ScoreEvent records produced this frame.
        """
        self.frame += 1
        events: list = []

        if inputs.consume(CONFIRM):
            if self.state == START:
                self.state = PLAY
            else:
                self.state = START
                self.reset_ball()

        if self.state == PLAY:
            for bounce in self.ball.update(dt, self.player1, self.player2):
                bounce.frame = self.frame
                events.append(bounce)
                if self.on_bounce is not None:
                    self.on_bounce(bounce)

        scored = self._check_score()
        if scored is not None:
            events.append(scored)
            if self.on_score is not None:
                self.on_score(scored)

        self._move_paddle(self.player1, inputs.is_held(P1_UP), inputs.is_held(P1_DOWN), dt)
        self._move_paddle(self.player2, inputs.is_held(P2_UP), inputs.is_held(P2_DOWN), dt)

        return events

    def _check_score(self) -> Optional[ScoreEvent]:
        if self.ball.x < 0:
            side = "left"
        elif self.ball.x > self.ball.field_width - self.ball.width:
            side = "right"
        else:
            return None

        self.score = score_point(self.score, side, frame=self.frame)
        self.reset_ball()
        self.state = START
        return ScoreEvent(
            scorer=2 if side == "left" else 1,
            side=side,
            p1_score=self.score.p1_score,
            p2_score=self.score.p2_score,
            frame=self.frame,
        )

    @staticmethod
    def _move_paddle(paddle: Paddle, up: bool, down: bool, dt: float):
        # Both directions held cancel out
        if up and not down:
            paddle.move_up(dt)
        elif down and not up:
            paddle.move_down(dt)
        else:
            paddle.stop()

    def snapshot(self) -> dict:
        """Read-only view of what a renderer needs."""
        return {
            "width": self.config.width,
            "height": self.config.height,
            "player1": self.player1.rect,
            "player2": self.player2.rect,
            "ball": self.ball.rect,
            "scores": self.score.as_tuple(),
            "state": self.state,
            "frame": self.frame,
        }

    def check_invariants(self):
        """Assert the conditions every frame must leave intact."""
        for paddle in (self.player1, self.player2):
            assert 0 <= paddle.y <= paddle.max_y, f"paddle out of bounds: y={paddle.y}"
        assert self.p1_score >= 0 and self.p2_score >= 0
        assert self.state in (START, PLAY), f"unknown state {self.state!r}"
        if self.ball.speedup == 1.0:
            assert abs(self.ball.dx) == self.ball.speed, f"|dx| drifted: {self.ball.dx}"
        assert abs(self.ball.dy) == self.ball.speed, f"|dy| drifted: {self.ball.dy}"
