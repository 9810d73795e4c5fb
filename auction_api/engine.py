# auction_api/engine.py
from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from auction_api.errors import (
    AlreadySold,
    InsufficientBudget,
    InvalidAmount,
    InvalidMatchTransition,
    MatchNotFound,
    MatchNotLive,
    PlayerNotFound,
    TeamNotFound,
)
from auction_api.models import MATCH_STATUSES, InningsScore, Match, Player, Side, StandingRow, Team
from auction_api.overs import MAX_WICKETS, add_delivery
from auction_api.seed import (
    create_seed_matches,
    create_seed_players,
    create_seed_teams,
    load_players_csv,
)
from auction_api.standings import compute_standings

logger = logging.getLogger(__name__)


class AuctionEngine:
    """
    In-memory auction state: players, teams and matches keyed by id.

    Every mutation validates first, then swaps the new frozen snapshots in
    under the engine lock, so a rejected call leaves state untouched and
    partial effects are never visible. Multi-collection reads
    (standings, ledger_ok) take the same lock so they never mix a reset
    with older state.
    """

    def __init__(self, players: Iterable[Player], teams: Iterable[Team], matches: Iterable[Match]):
        self._seed = (tuple(players), tuple(teams), tuple(matches))
        self._lock = threading.Lock()
        self._load(*self._seed)

    @classmethod
    def from_seed(cls, initial_budget: int = 1000, players_csv: Optional[str] = None) -> "AuctionEngine":
        players = load_players_csv(players_csv) if players_csv else create_seed_players()
        return cls(players, create_seed_teams(initial_budget), create_seed_matches())

    def _load(self, players, teams, matches) -> None:
        self._players: Dict[int, Player] = {p.id: p for p in players}
        self._teams: Dict[int, Team] = {t.id: t for t in teams}
        self._matches: Dict[int, Match] = {m.id: m for m in matches}

    def reset(self) -> None:
        with self._lock:
            self._load(*self._seed)
        logger.info("Auction state reset to seed")

    # -----------------------
    # Lookups
    # -----------------------
    def get_player(self, player_id: int) -> Player:
        p = self._players.get(player_id)
        if p is None:
            raise PlayerNotFound(player_id)
        return p

    def get_team(self, team_id: int) -> Team:
        t = self._teams.get(team_id)
        if t is None:
            raise TeamNotFound(team_id)
        return t

    def get_match(self, match_id: int) -> Match:
        m = self._matches.get(match_id)
        if m is None:
            raise MatchNotFound(match_id)
        return m

    def players(self, status: Optional[str] = None) -> List[Player]:
        players = list(self._players.values())
        if status == "sold":
            return [p for p in players if p.is_sold]
        if status == "unsold":
            return [p for p in players if not p.is_sold]
        return players

    def teams(self) -> List[Team]:
        return list(self._teams.values())

    def matches(self, status: Optional[str] = None) -> List[Match]:
        matches = list(self._matches.values())
        if status is None:
            return matches
        if status not in MATCH_STATUSES:
            raise ValueError(f"Unknown match status: {status}")
        return [m for m in matches if m.status == status]

    def standings(self) -> List[StandingRow]:
        with self._lock:
            teams, matches = self.teams(), self.matches()
        return compute_standings(teams, matches)

    def ledger_ok(self) -> bool:
        """budget + spent == initial budget, and budget >= 0, for every team."""
        with self._lock:
            teams = self.teams()
        return all(t.budget >= 0 and t.budget + t.spent == t.initial_budget for t in teams)

    def _team_by_name(self, name: str) -> Optional[Team]:
        for t in self._teams.values():
            if t.name == name:
                return t
        return None

    # -----------------------
    # Auction
    # -----------------------
    def place_bid(self, player_id: int, increment: int) -> Player:
        if increment <= 0:
            raise InvalidAmount(f"Bid increment must be positive, got {increment}")

        with self._lock:
            player = self.get_player(player_id)
            if player.is_sold:
                raise AlreadySold(player.name, player.sold_to)

            updated = replace(player, current_bid=player.current_bid + increment)
            self._players[player_id] = updated

        logger.info("Bid on %s: %d -> %d", player.name, player.current_bid, updated.current_bid)
        return updated

    def sell_player(self, player_id: int, team_id: int) -> Team:
        with self._lock:
            player = self.get_player(player_id)
            team = self.get_team(team_id)

            if player.is_sold:
                raise AlreadySold(player.name, player.sold_to)

            price = player.current_bid
            if team.budget < price:
                raise InsufficientBudget(team.name, team.budget, price)

            sold = replace(player, sold_to=team.name, sold_to_team_id=team.id)
            updated_team = replace(team, budget=team.budget - price, players=team.players + (sold,))

            self._players[player_id] = sold
            self._teams[team_id] = updated_team

        logger.info("SOLD %s to %s for %d (budget left %d)", player.name, team.name, price, updated_team.budget)
        return updated_team

    # -----------------------
    # Matches
    # -----------------------
    def update_live_score(self, match_id: int, side: Side, runs_scored: int, is_wicket: bool = False) -> InningsScore:
        if side not in ("team1", "team2"):
            raise InvalidAmount(f"side must be 'team1' or 'team2', got {side!r}")
        if runs_scored < 0:
            raise InvalidAmount(f"runs_scored cannot be negative, got {runs_scored}")

        with self._lock:
            match = self.get_match(match_id)
            if match.status != "live":
                raise MatchNotLive(match_id, match.status)

            current = match.score(side)
            balls, runs, wickets = add_delivery(
                current.balls,
                current.runs,
                current.wickets,
                runs_scored=runs_scored,
                is_wicket=is_wicket,
            )
            score = InningsScore(runs=runs, wickets=wickets, balls=balls)
            field_name = "team1_score" if side == "team1" else "team2_score"
            self._matches[match_id] = replace(match, **{field_name: score})

        logger.info(
            "Match %d %s: %d/%d (%.1f)", match_id, side, score.runs, score.wickets, score.overs
        )
        return score

    def start_match(self, match_id: int) -> Match:
        with self._lock:
            match = self.get_match(match_id)
            if match.status != "upcoming":
                raise InvalidMatchTransition(f"Match {match_id} cannot go live from status={match.status}")
            updated = replace(match, status="live")
            self._matches[match_id] = updated

        logger.info("Match %d is live: %s vs %s", match_id, match.team1, match.team2)
        return updated

    def complete_match(
        self,
        match_id: int,
        winning_team_id: Optional[int] = None,
        result: Optional[str] = None,
    ) -> Match:
        """
        live -> completed. Completed is terminal.

        Without an explicit winner the higher score wins; equal scores are a tie.
        Without an explicit result text one is generated from the scores.
        """
        with self._lock:
            match = self.get_match(match_id)
            if match.status != "live":
                raise InvalidMatchTransition(f"Match {match_id} cannot complete from status={match.status}")

            if winning_team_id is not None:
                winner = self.get_team(winning_team_id)
                if not match.involves(winner.name):
                    raise InvalidMatchTransition(f"{winner.name} did not play match {match_id}")
                winner_name: Optional[str] = winner.name
            else:
                winner_name = _winner_by_runs(match)
                if winner_name is not None:
                    found = self._team_by_name(winner_name)
                    winning_team_id = found.id if found else None

            if result is None:
                result = _result_text(match, winner_name)

            updated = replace(match, status="completed", result=result, winning_team_id=winning_team_id)
            self._matches[match_id] = updated

        logger.info("Match %d completed: %s", match_id, result)
        return updated


def _winner_by_runs(match: Match) -> Optional[str]:
    if match.team1_score.runs > match.team2_score.runs:
        return match.team1
    if match.team2_score.runs > match.team1_score.runs:
        return match.team2
    return None


def _result_text(match: Match, winner_name: Optional[str]) -> str:
    """team1 bats first: a team1 win is by runs, a team2 win (chase) is by wickets."""
    if winner_name is None:
        return "Match tied"
    if winner_name == match.team2:
        margin = MAX_WICKETS - match.team2_score.wickets
        if margin > 0:
            return f"{winner_name} won by {margin} wicket{'s' if margin != 1 else ''}"
        return f"{winner_name} won"
    margin = match.team1_score.runs - match.team2_score.runs
    if margin > 0:
        return f"{winner_name} won by {margin} run{'s' if margin != 1 else ''}"
    return f"{winner_name} won"
