"""Core data types for the Pong simulation."""

from dataclasses import dataclass, field

# Game states
START = "start"  # ball parked at centre, waiting for the confirm input
PLAY = "play"    # ball in motion
GAME_STATES = (START, PLAY)


@dataclass
class BounceEvent:
    """The ball changed direction against a paddle or a wall."""
    kind: str  # "paddle", "top" or "bottom"
    x: float
    y: float
    frame: int = 0


@dataclass
class ScoreEvent:
    """The ball crossed a side boundary and a point was awarded."""
    scorer: int  # 1 or 2
    side: str    # "left" or "right", the boundary the ball crossed
    p1_score: int
    p2_score: int
    frame: int = 0


@dataclass
class Score:
    """Running score of a session."""
    p1_score: int = 0
    p2_score: int = 0
    history: list = field(default_factory=list)

    def as_tuple(self) -> tuple[int, int]:
        return self.p1_score, self.p2_score
