"""Ball motion — paddle and wall collisions, delta-time integration, resets.

Collision is discrete: the ball is tested where it stands at the start of a
frame and then moved by dx*dt, dy*dt. A frame long enough for the ball to
travel past a paddle (more than paddle width + ball width along x) lets it
pass straight through. Walls are clamped on the next frame, so a stalled
frame can also carry the ball briefly outside the top/bottom edge.
"""

import random
from dataclasses import dataclass, field

from pong.config import LAUNCH_FIXED, LAUNCH_RANDOM
from pong.paddle import Paddle
from pong.types import BounceEvent


def _launch_velocity(speed: float, launch: str) -> tuple[float, float]:
    if launch == LAUNCH_RANDOM:
        return random.choice((-1, 1)) * speed, random.choice((-1, 1)) * speed
    return speed, speed


@dataclass
class Ball:
    x: float
    y: float
    width: float
    height: float
    field_width: float
    field_height: float
    speed: float = 200.0
    launch: str = LAUNCH_FIXED
    speedup: float = 1.0
    dx: float = field(default=0.0, init=False)
    dy: float = field(default=0.0, init=False)

    def __post_init__(self):
        self.dx, self.dy = _launch_velocity(self.speed, self.launch)

    @property
    def rect(self) -> tuple[float, float, float, float]:
        return self.x, self.y, self.width, self.height

    def reset(self, x: float, y: float):
        """Place the ball at (x, y) with a fresh launch velocity."""
        self.x = x
        self.y = y
        self.dx, self.dy = _launch_velocity(self.speed, self.launch)

    def did_collide(self, paddle: Paddle) -> bool:
        """Strict AABB overlap; rectangles that only touch do not collide."""
        return (
            self.x < paddle.x + paddle.width
            and paddle.x < self.x + self.width
            and self.y < paddle.y + paddle.height
            and paddle.y < self.y + self.height
        )

    def update(self, dt: float, player1: Paddle, player2: Paddle) -> list[BounceEvent]:
        """Advance one frame. Only the ball is mutated.

        Returns the bounces of this frame so hosts can react to them.
        """
        events: list[BounceEvent] = []

        if self.did_collide(player1) or self.did_collide(player2):
            self.dx = -self.dx * self.speedup
            events.append(BounceEvent(kind="paddle", x=self.x, y=self.y))

        if self.y <= 0:
            self.y = 0
            self.dy = -self.dy
            events.append(BounceEvent(kind="top", x=self.x, y=self.y))

        bottom = self.field_height - self.height
        if self.y >= bottom:
            self.y = bottom
            self.dy = -self.dy
            events.append(BounceEvent(kind="bottom", x=self.x, y=self.y))

        self.x += self.dx * dt
        self.y += self.dy * dt
        return events
