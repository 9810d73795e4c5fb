"""Pytest configuration and fixtures for the auction engine tests."""

import os

import pytest

# Keep a developer .env from changing the seed under test
os.environ["AUCTION_INITIAL_BUDGET"] = "1000"
os.environ["AUCTION_SEED_PLAYERS_CSV"] = ""
os.environ.setdefault("AUCTION_LOG_LEVEL", "WARNING")

from auction_api.engine import AuctionEngine  # noqa: E402
from auction_api.models import InningsScore, Match  # noqa: E402
from auction_api.seed import create_seed_players, create_seed_teams  # noqa: E402


@pytest.fixture
def engine():
    """Engine built from the built-in seed data."""
    return AuctionEngine.from_seed(initial_budget=1000)


@pytest.fixture
def make_engine():
    """Factory for engines with custom teams budget and/or matches."""
    def _make(initial_budget=1000, matches=None, players=None):
        return AuctionEngine(
            players if players is not None else create_seed_players(),
            create_seed_teams(initial_budget),
            matches if matches is not None else [],
        )
    return _make


@pytest.fixture
def live_match():
    return Match(
        10,
        "Royal Strikers",
        "Thunder Kings",
        InningsScore(runs=150, wickets=5, balls=120),
        InningsScore(runs=100, wickets=2, balls=65),
        "live",
    )


@pytest.fixture
def client():
    """HTTP client with startup events run (engine attached to app.state)."""
    from fastapi.testclient import TestClient
    from main import app

    with TestClient(app) as c:
        yield c
