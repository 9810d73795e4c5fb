# auction_api/overs.py
from __future__ import annotations

from typing import Union

BALLS_PER_OVER = 6
MAX_WICKETS = 10
OversLike = Union[str, int, float]


def overs_to_balls(overs: OversLike) -> int:
    """
    Converts cricket overs notation to balls.

    Supported inputs:
    - "20.0", "18.3", "7.2" (string overs notation)
    - 20 (int overs)
    - 18.3 (float) -> treated as "18.3"

    Rule: ".x" means x balls (0-5). Example: 18.3 = 18*6 + 3 = 111 balls.
    """
    if overs is None:
        raise ValueError("Overs cannot be None")

    s = str(overs).strip()
    if not s:
        raise ValueError("Overs cannot be empty")

    if "." not in s:
        ov_i = int(s)
        if ov_i < 0:
            raise ValueError(f"Invalid overs: {overs}")
        return ov_i * BALLS_PER_OVER

    ov_part, ball_part = s.split(".", 1)
    ov_i = int(ov_part) if ov_part else 0

    ball_part = ball_part.strip()
    balls_i = int(ball_part) if ball_part else 0

    if ov_i < 0:
        raise ValueError(f"Invalid overs: {overs}")
    if balls_i < 0 or balls_i >= BALLS_PER_OVER:
        raise ValueError(f"Invalid overs format: {overs} (balls part must be 0-5)")

    return ov_i * BALLS_PER_OVER + balls_i


def balls_to_overs(balls: int) -> float:
    """
    Balls -> overs notation. 111 -> 18.3, 114 -> 19.0.
    The fractional digit is a ball count, not a decimal fraction of an over.
    """
    if balls < 0:
        raise ValueError("Balls cannot be negative")
    full, rem = divmod(balls, BALLS_PER_OVER)
    return round(full + rem / 10.0, 1)


def run_rate(runs: int, balls: int) -> float:
    if balls <= 0:
        return 0.0
    return runs / (balls / BALLS_PER_OVER)


def add_delivery(balls: int, runs: int, wickets: int, *, runs_scored: int, is_wicket: bool):
    """
    Applies one scoring event to an innings (runs, wickets, balls).

    - wickets are clamped at MAX_WICKETS
    - a ball is only counted when something happened (runs or wicket);
      dot balls are not recorded by the live feed
    """
    if runs_scored < 0:
        raise ValueError("runs_scored cannot be negative")

    new_runs = runs + runs_scored
    new_wickets = min(MAX_WICKETS, wickets + 1) if is_wicket else wickets
    new_balls = balls + 1 if (is_wicket or runs_scored > 0) else balls
    return new_balls, new_runs, new_wickets
