# auction_api/seed.py
from __future__ import annotations

import logging
from typing import Any, List, Optional

import pandas as pd

from auction_api.models import ROLES, InningsScore, Match, Player, PlayerStats, Team
from auction_api.overs import overs_to_balls

logger = logging.getLogger(__name__)


def _innings(runs: int, wickets: int, overs: str) -> InningsScore:
    return InningsScore(runs=runs, wickets=wickets, balls=overs_to_balls(overs))


def _player(
    player_id: int,
    name: str,
    role: str,
    country: str,
    base_price: int,
    stats: PlayerStats,
) -> Player:
    # Bidding opens at the base price
    return Player(player_id, name, role, country, base_price, base_price, stats)  # type: ignore[arg-type]


def create_seed_players() -> List[Player]:
    return [
        _player(1, "Virat Kohli", "Batsman", "IND", 200, PlayerStats(237, runs=7263, avg=37.25)),
        _player(2, "Jasprit Bumrah", "Bowler", "IND", 150, PlayerStats(120, wickets=145, avg=23.5)),
        _player(3, "Ben Stokes", "All-Rounder", "ENG", 180, PlayerStats(104, runs=2924, wickets=74)),
        _player(4, "Jos Buttler", "Wicket-Keeper", "ENG", 160, PlayerStats(89, runs=2838, avg=41.14)),
        _player(5, "Pat Cummins", "Bowler", "AUS", 140, PlayerStats(76, wickets=98, avg=28.3)),
        _player(6, "Rashid Khan", "Bowler", "AFG", 120, PlayerStats(92, wickets=112, avg=21.8)),
        _player(7, "Suryakumar Yadav", "Batsman", "IND", 130, PlayerStats(65, runs=2141, avg=44.6)),
        _player(8, "Mitchell Starc", "Bowler", "AUS", 150, PlayerStats(68, wickets=89, avg=26.1)),
    ]


def create_seed_teams(initial_budget: int = 1000) -> List[Team]:
    return [
        Team(1, "Royal Strikers", "RST", "#E91E63", initial_budget, initial_budget),
        Team(2, "Thunder Kings", "THK", "#9C27B0", initial_budget, initial_budget),
        Team(3, "Phoenix Warriors", "PHW", "#FF5722", initial_budget, initial_budget),
        Team(4, "Ocean Titans", "OCT", "#00BCD4", initial_budget, initial_budget),
    ]


def create_seed_matches() -> List[Match]:
    return [
        Match(1, "Royal Strikers", "Thunder Kings", _innings(187, 4, "20"), _innings(156, 8, "18.3"), "live"),
        Match(2, "Phoenix Warriors", "Ocean Titans", InningsScore(), InningsScore(), "upcoming"),
        Match(
            3,
            "Royal Strikers",
            "Phoenix Warriors",
            _innings(165, 6, "20"),
            _innings(168, 3, "18.4"),
            "completed",
            result="Phoenix Warriors won by 7 wickets",
            winning_team_id=3,
        ),
    ]


# -----------------------------
# CSV import
# -----------------------------
def _safe_int(value: Any, default: Optional[int] = 0) -> Optional[int]:
    if value is None or pd.isna(value) or (isinstance(value, str) and not value.strip()):
        return default
    try:
        return int(float(value))
    except (ValueError, TypeError):
        return default


def _safe_float(value: Any, default: Optional[float] = None) -> Optional[float]:
    if value is None or pd.isna(value) or (isinstance(value, str) and not value.strip()):
        return default
    try:
        return float(value)
    except (ValueError, TypeError):
        return default


def _safe_str(value: Any, default: str = "") -> str:
    if value is None or pd.isna(value):
        return default
    return str(value).strip()


def load_players_csv(filepath: str) -> List[Player]:
    """
    Reads the player pool from CSV.

    Required columns: id, name, role, base_price
    Optional columns: country, matches, runs, wickets, avg

    Rows with a missing name/id, an unknown role or a duplicate id are skipped.
    """
    df = pd.read_csv(filepath)
    logger.info("Reading players from %s (%d rows)", filepath, len(df))

    missing = {"id", "name", "role", "base_price"} - set(df.columns)
    if missing:
        raise ValueError(f"Player CSV missing columns: {sorted(missing)}")

    players: List[Player] = []
    seen_ids = set()

    for index, row in df.iterrows():
        line_no = index + 2  # header + 0-based index
        name = _safe_str(row.get("name"))
        player_id = _safe_int(row.get("id"), None)

        if not name or player_id is None:
            logger.warning("Skipping row %d: missing id or name", line_no)
            continue
        if player_id in seen_ids:
            logger.warning("Skipping row %d: duplicate player id %d", line_no, player_id)
            continue

        role = _safe_str(row.get("role"))
        if role not in ROLES:
            logger.warning("Skipping row %d (%s): unknown role %r", line_no, name, role)
            continue

        base_price = _safe_int(row.get("base_price"), 0) or 0
        if base_price <= 0:
            logger.warning("Skipping row %d (%s): base_price must be positive", line_no, name)
            continue

        stats = PlayerStats(
            matches=_safe_int(row.get("matches"), 0) or 0,
            runs=_safe_int(row.get("runs"), None),
            wickets=_safe_int(row.get("wickets"), None),
            avg=_safe_float(row.get("avg")),
        )

        seen_ids.add(player_id)
        players.append(_player(player_id, name, role, _safe_str(row.get("country")), base_price, stats))

    logger.info("Loaded %d players from %s", len(players), filepath)
    return players
