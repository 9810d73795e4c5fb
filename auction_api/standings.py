# auction_api/standings.py
from __future__ import annotations

from typing import Dict, Iterable, List

from auction_api.models import Match, StandingRow, Team

POINTS_PER_WIN = 2


def compute_standings(teams: Iterable[Team], matches: Iterable[Match]) -> List[StandingRow]:
    """
    Points table derived from completed matches. Pure: never mutates inputs.

    Rules:
    - played: completed matches where the team is team1 or team2 (by name)
    - wins  : completed matches with winning_team_id == team.id
    - losses: played - wins (ties and no-results count as not won)
    - points: 2 per win

    Ordering is a stable sort on points (desc) only. There is no NRR
    tie-break, so level teams keep their input order.
    """
    teams = list(teams)
    completed = [m for m in matches if m.status == "completed"]

    counts: Dict[int, Dict[str, int]] = {}
    for t in teams:
        played = sum(1 for m in completed if m.involves(t.name))
        wins = sum(1 for m in completed if m.winning_team_id == t.id and m.involves(t.name))
        counts[t.id] = {"played": played, "wins": wins}

    ordered = sorted(teams, key=lambda t: counts[t.id]["wins"] * POINTS_PER_WIN, reverse=True)

    out: List[StandingRow] = []
    for idx, t in enumerate(ordered, start=1):
        played = counts[t.id]["played"]
        wins = counts[t.id]["wins"]
        out.append(StandingRow(
            pos=idx,
            team_id=t.id,
            team=t.name,
            short_name=t.short_name,
            played=played,
            wins=wins,
            losses=played - wins,
            points=wins * POINTS_PER_WIN,
        ))
    return out
