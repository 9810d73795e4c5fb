# auction_api/commands.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from auction_api.engine import AuctionEngine
from auction_api.errors import AuctionError
from auction_api.models import Side

logger = logging.getLogger(__name__)


# -----------------------------
# Commands (one per user action)
# -----------------------------
@dataclass(frozen=True)
class PlaceBid:
    player_id: int
    amount: int


@dataclass(frozen=True)
class SellPlayer:
    player_id: int
    team_id: int


@dataclass(frozen=True)
class UpdateScore:
    match_id: int
    side: Side
    runs: int
    is_wicket: bool = False


@dataclass(frozen=True)
class StartMatch:
    match_id: int


@dataclass(frozen=True)
class CompleteMatch:
    match_id: int
    winning_team_id: Optional[int] = None
    result: Optional[str] = None


Command = Union[PlaceBid, SellPlayer, UpdateScore, StartMatch, CompleteMatch]


@dataclass(frozen=True)
class CommandResult:
    ok: bool
    value: Any = None
    error: Optional[str] = None
    error_code: Optional[str] = None


def dispatch(engine: AuctionEngine, command: Command) -> CommandResult:
    """
    Runs one command against the engine.

    Domain rejections come back as CommandResult(ok=False, ...) with the
    error class name in error_code; the engine state is unchanged.
    """
    try:
        if isinstance(command, PlaceBid):
            value: Any = engine.place_bid(command.player_id, command.amount)
        elif isinstance(command, SellPlayer):
            value = engine.sell_player(command.player_id, command.team_id)
        elif isinstance(command, UpdateScore):
            value = engine.update_live_score(command.match_id, command.side, command.runs, command.is_wicket)
        elif isinstance(command, StartMatch):
            value = engine.start_match(command.match_id)
        elif isinstance(command, CompleteMatch):
            value = engine.complete_match(command.match_id, command.winning_team_id, command.result)
        else:
            raise TypeError(f"Unknown command: {type(command).__name__}")
    except AuctionError as e:
        logger.warning("Rejected %s: %s", type(command).__name__, e)
        return CommandResult(ok=False, error=str(e), error_code=e.code)

    return CommandResult(ok=True, value=value)
