"""Playfield, paddle and ball constants, and the GameConfig built from them.

Distances in pixels, speeds in pixels per second, time in seconds.
"""

from dataclasses import dataclass

# Playfield
FIELD_WIDTH = 1280
FIELD_HEIGHT = 720

# Paddles
PADDLE_WIDTH = 20
PADDLE_HEIGHT = 200
PADDLE_SPEED = 1000
PADDLE_MARGIN = 30  # gap between a paddle and its side wall
PADDLE_OFFSET = 30  # P1 starts this far from the top, P2 this far from the bottom

# Ball
BALL_WIDTH = 20
BALL_HEIGHT = 20
BALL_SPEED = 200  # per axis, so the launch is a 45 degree diagonal
BALL_SPEEDUP = 1.0  # dx multiplier on a paddle hit; 1.0 keeps |dx| constant

# Launch direction after a reset
LAUNCH_FIXED = "fixed"  # always (+speed, +speed)
LAUNCH_RANDOM = "random"  # random sign on each axis
LAUNCH_POLICIES = (LAUNCH_FIXED, LAUNCH_RANDOM)

# Display refresh used by hosts and headless runs
FPS = 60


@dataclass(frozen=True)
class GameConfig:
    """Every tunable of a session in one place."""
    width: int = FIELD_WIDTH
    height: int = FIELD_HEIGHT
    paddle_width: int = PADDLE_WIDTH
    paddle_height: int = PADDLE_HEIGHT
    paddle_speed: float = PADDLE_SPEED
    paddle_margin: int = PADDLE_MARGIN
    paddle_offset: int = PADDLE_OFFSET
    ball_width: int = BALL_WIDTH
    ball_height: int = BALL_HEIGHT
    ball_speed: float = BALL_SPEED
    ball_speedup: float = BALL_SPEEDUP
    launch: str = LAUNCH_FIXED
    fps: int = FPS

    def __post_init__(self):
        for name in ("width", "height", "paddle_width", "paddle_height",
                     "ball_width", "ball_height", "fps"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.paddle_speed < 0 or self.ball_speed < 0:
            raise ValueError("speeds must not be negative")
        if self.ball_speedup <= 0:
            raise ValueError(f"ball_speedup must be positive, got {self.ball_speedup}")
        if self.paddle_height > self.height:
            raise ValueError(
                f"paddle_height {self.paddle_height} exceeds field height {self.height}"
            )
        if self.ball_width > self.width or self.ball_height > self.height:
            raise ValueError("ball does not fit inside the playfield")
        if self.paddle_margin < 0 or self.paddle_offset < 0:
            raise ValueError("paddle_margin and paddle_offset must not be negative")
        if self.paddle1_x + self.paddle_width > self.paddle2_x:
            raise ValueError("paddles overlap; playfield too narrow for the margin")
        if self.launch not in LAUNCH_POLICIES:
            raise ValueError(
                f"Unknown launch policy {self.launch!r}, expected one of {LAUNCH_POLICIES}"
            )

    @property
    def paddle1_x(self) -> float:
        return self.paddle_margin

    @property
    def paddle2_x(self) -> float:
        return self.width - self.paddle_margin - self.paddle_width

    @property
    def paddle1_y(self) -> float:
        return min(self.paddle_offset, self.height - self.paddle_height)

    @property
    def paddle2_y(self) -> float:
        return max(0, self.height - self.paddle_height - self.paddle_offset)

    @property
    def ball_center(self) -> tuple[float, float]:
        """Top-left corner that puts the ball in the middle of the field."""
        return (self.width - self.ball_width) / 2, (self.height - self.ball_height) / 2


DEFAULT_CONFIG = GameConfig()
