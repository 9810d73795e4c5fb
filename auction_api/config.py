# auction_api/config.py
from __future__ import annotations

import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()


def _get_env(name: str, default: str = "") -> str:
    return os.getenv(name, default).strip()


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


# -------------------------
# Auction config
# -------------------------
# Every franchise starts with the same purse (in lakhs)
INITIAL_TEAM_BUDGET: int = _get_env_int("AUCTION_INITIAL_BUDGET", 1000)

# Optional CSV with the player pool; built-in seed players are used when empty
SEED_PLAYERS_CSV: str = _get_env("AUCTION_SEED_PLAYERS_CSV")

# -------------------------
# Logging
# -------------------------
LOG_LEVEL: str = _get_env("AUCTION_LOG_LEVEL", "INFO").upper()

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def validate_config() -> None:
    if INITIAL_TEAM_BUDGET <= 0:
        raise RuntimeError("AUCTION_INITIAL_BUDGET must be positive")

    if SEED_PLAYERS_CSV and not os.path.isfile(SEED_PLAYERS_CSV):
        raise RuntimeError(f"AUCTION_SEED_PLAYERS_CSV points to a missing file: {SEED_PLAYERS_CSV}")

    if LOG_LEVEL not in _VALID_LOG_LEVELS:
        raise RuntimeError(f"AUCTION_LOG_LEVEL must be one of {sorted(_VALID_LOG_LEVELS)}")
