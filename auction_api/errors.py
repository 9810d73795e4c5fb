# auction_api/errors.py
from __future__ import annotations


class AuctionError(Exception):
    """Base class for rejected engine operations. State is left unchanged."""
    code = "AuctionError"


class NotFound(AuctionError):
    code = "NotFound"


class PlayerNotFound(NotFound):
    code = "PlayerNotFound"

    def __init__(self, player_id: int):
        super().__init__(f"Unknown player: {player_id}")
        self.player_id = player_id


class TeamNotFound(NotFound):
    code = "TeamNotFound"

    def __init__(self, team_id: int):
        super().__init__(f"Unknown team: {team_id}")
        self.team_id = team_id


class MatchNotFound(NotFound):
    code = "MatchNotFound"

    def __init__(self, match_id: int):
        super().__init__(f"Unknown match: {match_id}")
        self.match_id = match_id


class AlreadySold(AuctionError):
    code = "AlreadySold"

    def __init__(self, player_name: str, sold_to: str):
        super().__init__(f"{player_name} is already sold to {sold_to}")
        self.player_name = player_name
        self.sold_to = sold_to


class InsufficientBudget(AuctionError):
    code = "InsufficientBudget"

    def __init__(self, team_name: str, budget: int, price: int):
        super().__init__(f"{team_name} has {budget} left, cannot pay {price}")
        self.team_name = team_name
        self.budget = budget
        self.price = price


class MatchNotLive(AuctionError):
    code = "MatchNotLive"

    def __init__(self, match_id: int, status: str):
        super().__init__(f"Match {match_id} is not live (status={status})")
        self.match_id = match_id
        self.status = status


class InvalidMatchTransition(AuctionError):
    code = "InvalidMatchTransition"


class InvalidAmount(AuctionError, ValueError):
    code = "InvalidAmount"
