# main.py
from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import Any, Dict, Literal, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from pydantic import BaseModel, Field

from auction_api.commands import (
    CommandResult,
    CompleteMatch,
    PlaceBid,
    SellPlayer,
    StartMatch,
    UpdateScore,
    dispatch,
)
from auction_api.config import INITIAL_TEAM_BUDGET, LOG_LEVEL, SEED_PLAYERS_CSV, validate_config
from auction_api.engine import AuctionEngine
from auction_api.errors import NotFound
from auction_api.logging_utils import setup_logging
from auction_api.models import InningsScore, Match, Player, Team

# -----------------------
# App
# -----------------------
app = FastAPI(
    title="Cricket Auction API",
    version="0.1.0",
    description="In-memory cricket auction: bidding, team purses, live scores and standings",
)


@app.on_event("startup")
def on_startup():
    validate_config()
    setup_logging(LOG_LEVEL)
    app.state.engine = AuctionEngine.from_seed(
        initial_budget=INITIAL_TEAM_BUDGET,
        players_csv=SEED_PLAYERS_CSV or None,
    )


def get_engine(request: Request) -> AuctionEngine:
    return request.app.state.engine


@app.get("/health")
def health_check():
    return {"status": "ok", "time": datetime.utcnow().isoformat() + "Z"}


# -----------------------
# Serialization helpers
# -----------------------
def _player_out(p: Player) -> Dict[str, Any]:
    out = asdict(p)
    out["is_sold"] = p.is_sold
    return out


def _team_out(t: Team) -> Dict[str, Any]:
    return {
        "id": t.id,
        "name": t.name,
        "short_name": t.short_name,
        "color": t.color,
        "budget": t.budget,
        "initial_budget": t.initial_budget,
        "spent": t.spent,
        "players": [_player_out(p) for p in t.players],
    }


def _score_out(s: InningsScore) -> Dict[str, Any]:
    return {
        "runs": s.runs,
        "wickets": s.wickets,
        "balls": s.balls,
        "overs": s.overs,
        "run_rate": round(s.run_rate, 2),
    }


def _match_out(m: Match) -> Dict[str, Any]:
    return {
        "id": m.id,
        "team1": m.team1,
        "team2": m.team2,
        "team1_score": _score_out(m.team1_score),
        "team2_score": _score_out(m.team2_score),
        "status": m.status,
        "result": m.result,
        "winning_team_id": m.winning_team_id,
    }


def _raise_for(result: CommandResult) -> None:
    if result.ok:
        return
    code = result.error_code or "AuctionError"
    if code.endswith("NotFound"):
        status = 404
    elif code == "InvalidAmount":
        status = 400
    else:
        status = 409
    raise HTTPException(status_code=status, detail={"error": code, "message": result.error})


def _lookup(fn, *args):
    try:
        return fn(*args)
    except NotFound as e:
        raise HTTPException(status_code=404, detail={"error": e.code, "message": str(e)})


# -----------------------
# Read endpoints
# -----------------------
@app.get("/api/players")
def list_players(
    status: Optional[Literal["sold", "unsold"]] = None,
    engine: AuctionEngine = Depends(get_engine),
):
    return {"players": [_player_out(p) for p in engine.players(status)]}


@app.get("/api/players/{player_id}")
def get_player(player_id: int, engine: AuctionEngine = Depends(get_engine)):
    return _player_out(_lookup(engine.get_player, player_id))


@app.get("/api/teams")
def list_teams(engine: AuctionEngine = Depends(get_engine)):
    return {"teams": [_team_out(t) for t in engine.teams()]}


@app.get("/api/teams/{team_id}")
def get_team(team_id: int, engine: AuctionEngine = Depends(get_engine)):
    return _team_out(_lookup(engine.get_team, team_id))


@app.get("/api/matches")
def list_matches(
    status: Optional[Literal["upcoming", "live", "completed"]] = None,
    engine: AuctionEngine = Depends(get_engine),
):
    return {"matches": [_match_out(m) for m in engine.matches(status)]}


@app.get("/api/matches/{match_id}")
def get_match(match_id: int, engine: AuctionEngine = Depends(get_engine)):
    return _match_out(_lookup(engine.get_match, match_id))


@app.get("/api/standings")
def get_standings(engine: AuctionEngine = Depends(get_engine)):
    return {"standings": [asdict(row) for row in engine.standings()]}


# -----------------------
# Auction endpoints
# -----------------------
class BidRequest(BaseModel):
    player_id: int
    amount: int = Field(..., gt=0, description="Bid increment, e.g. 10 / 25 / 50")


@app.post("/api/bids")
def place_bid(req: BidRequest, engine: AuctionEngine = Depends(get_engine)):
    result = dispatch(engine, PlaceBid(player_id=req.player_id, amount=req.amount))
    _raise_for(result)
    return {"ok": True, "player_id": req.player_id, "current_bid": result.value.current_bid}


class SaleRequest(BaseModel):
    player_id: int
    team_id: int


@app.post("/api/sales")
def sell_player(req: SaleRequest, engine: AuctionEngine = Depends(get_engine)):
    result = dispatch(engine, SellPlayer(player_id=req.player_id, team_id=req.team_id))
    _raise_for(result)
    return {"ok": True, "team": _team_out(result.value)}


# -----------------------
# Match endpoints
# -----------------------
class ScoreRequest(BaseModel):
    match_id: int
    side: Literal["team1", "team2"]
    runs: int = Field(0, ge=0, description="Runs off this ball")
    is_wicket: bool = False


@app.post("/api/scores")
def update_score(req: ScoreRequest, engine: AuctionEngine = Depends(get_engine)):
    result = dispatch(
        engine,
        UpdateScore(match_id=req.match_id, side=req.side, runs=req.runs, is_wicket=req.is_wicket),
    )
    _raise_for(result)
    return {"ok": True, "match_id": req.match_id, "side": req.side, "score": _score_out(result.value)}


@app.post("/api/matches/{match_id}/start")
def start_match(match_id: int, engine: AuctionEngine = Depends(get_engine)):
    result = dispatch(engine, StartMatch(match_id=match_id))
    _raise_for(result)
    return {"ok": True, "match": _match_out(result.value)}


class CompleteRequest(BaseModel):
    winning_team_id: Optional[int] = Field(None, description="Omit to derive the winner from runs")
    result: Optional[str] = Field(None, description="Omit to generate e.g. 'X won by 5 wickets'")


@app.post("/api/matches/{match_id}/complete")
def complete_match(
    match_id: int,
    req: Optional[CompleteRequest] = None,
    engine: AuctionEngine = Depends(get_engine),
):
    req = req or CompleteRequest()
    result = dispatch(
        engine,
        CompleteMatch(match_id=match_id, winning_team_id=req.winning_team_id, result=req.result),
    )
    _raise_for(result)
    return {"ok": True, "match": _match_out(result.value)}


@app.post("/api/reset")
def reset(engine: AuctionEngine = Depends(get_engine)):
    engine.reset()
    return {"ok": True}
