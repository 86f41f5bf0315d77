"""Score bookkeeping — which player a boundary crossing rewards."""

from pong.types import Score


def scorer_for_side(side: str) -> int:
    """Ball out on the 'left' passed Player 1, so Player 2 scores, and vice versa."""
    if side == "left":
        return 2
    if side == "right":
        return 1
    raise ValueError(f"Unknown side {side!r}, expected 'left' or 'right'")


def score_point(score: Score, side: str, frame: int = 0) -> Score:
    """Return a new Score with one point added for the ball leaving on `side`.

    The input is left untouched. Each call records the point in `history`.
    """
    s = Score(
        p1_score=score.p1_score,
        p2_score=score.p2_score,
        history=list(score.history),
    )

    if scorer_for_side(side) == 2:
        s.p2_score += 1
    else:
        s.p1_score += 1

    s.history.append({
        "p1": s.p1_score,
        "p2": s.p2_score,
        "side": side,
        "frame": frame,
    })
    return s


def create_score() -> Score:
    """Create a fresh 0-0 score."""
    return Score()
