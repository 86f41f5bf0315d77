"""Paddle — a vertically moving rectangle clamped to the playfield."""

from dataclasses import dataclass


@dataclass
class Paddle:
    x: float
    y: float
    width: float
    height: float
    speed: float
    field_height: float
    dy: float = 0.0  # -speed moving up, +speed moving down, 0 idle

    @property
    def max_y(self) -> float:
        return self.field_height - self.height

    @property
    def rect(self) -> tuple[float, float, float, float]:
        return self.x, self.y, self.width, self.height

    def move_up(self, dt: float):
        """Move towards the top wall, stopping at y = 0."""
        self.dy = -self.speed
        self.y = max(0, self.y - self.speed * dt)

    def move_down(self, dt: float):
        """Move towards the bottom wall, stopping at field_height - height."""
        self.dy = self.speed
        self.y = min(self.max_y, self.y + self.speed * dt)

    def stop(self):
        self.dy = 0.0
