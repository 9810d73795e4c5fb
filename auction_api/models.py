from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

from auction_api.overs import balls_to_overs, run_rate


# -----------------------------
# Closed enumerations
# -----------------------------
Role = Literal["Batsman", "Bowler", "All-Rounder", "Wicket-Keeper"]
ROLES: Tuple[str, ...] = ("Batsman", "Bowler", "All-Rounder", "Wicket-Keeper")

MatchStatus = Literal["upcoming", "live", "completed"]
MATCH_STATUSES: Tuple[str, ...] = ("upcoming", "live", "completed")

Side = Literal["team1", "team2"]


# -----------------------------
# Player
# -----------------------------
@dataclass(frozen=True)
class PlayerStats:
    matches: int
    runs: Optional[int] = None
    wickets: Optional[int] = None
    avg: Optional[float] = None


@dataclass(frozen=True)
class Player:
    id: int
    name: str
    role: Role
    country: str
    base_price: int
    current_bid: int
    stats: PlayerStats

    # Auction outcome; set once on sale
    sold_to: Optional[str] = None
    sold_to_team_id: Optional[int] = None

    @property
    def is_sold(self) -> bool:
        return self.sold_to is not None


# -----------------------------
# Team
# -----------------------------
@dataclass(frozen=True)
class Team:
    id: int
    name: str
    short_name: str
    color: str
    budget: int
    initial_budget: int
    # Frozen player snapshots, acquisition order
    players: Tuple[Player, ...] = field(default_factory=tuple)

    @property
    def spent(self) -> int:
        return sum(p.current_bid for p in self.players)


# -----------------------------
# Match
# -----------------------------
@dataclass(frozen=True)
class InningsScore:
    """
    Runs/wickets plus an explicit ball counter.
    Overs are always derived from balls, never stored.
    """
    runs: int = 0
    wickets: int = 0
    balls: int = 0

    @property
    def overs(self) -> float:
        return balls_to_overs(self.balls)

    @property
    def run_rate(self) -> float:
        return run_rate(self.runs, self.balls)


@dataclass(frozen=True)
class Match:
    id: int
    team1: str
    team2: str
    team1_score: InningsScore
    team2_score: InningsScore
    status: MatchStatus = "upcoming"

    # Only populated once completed
    result: Optional[str] = None
    winning_team_id: Optional[int] = None

    def score(self, side: Side) -> InningsScore:
        return self.team1_score if side == "team1" else self.team2_score

    def involves(self, team_name: str) -> bool:
        return team_name in (self.team1, self.team2)


# -----------------------------
# Standings
# -----------------------------
@dataclass(frozen=True)
class StandingRow:
    pos: int
    team_id: int
    team: str
    short_name: str
    played: int
    wins: int
    losses: int
    points: int
