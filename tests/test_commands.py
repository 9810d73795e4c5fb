"""Tests for the command dispatcher."""

import pytest

from auction_api.commands import (
    CompleteMatch,
    PlaceBid,
    SellPlayer,
    StartMatch,
    UpdateScore,
    dispatch,
)


def test_successful_commands_return_values(engine):
    result = dispatch(engine, PlaceBid(player_id=1, amount=10))
    assert result.ok
    assert result.value.current_bid == 210

    result = dispatch(engine, SellPlayer(player_id=1, team_id=2))
    assert result.ok
    assert result.value.budget == 790

    result = dispatch(engine, UpdateScore(match_id=1, side="team1", runs=6))
    assert result.ok
    assert result.value.runs == 193

    result = dispatch(engine, StartMatch(match_id=2))
    assert result.ok and result.value.status == "live"

    result = dispatch(engine, CompleteMatch(match_id=2, winning_team_id=4))
    assert result.ok and result.value.winning_team_id == 4


@pytest.mark.parametrize("command, code", [
    (PlaceBid(player_id=99, amount=10), "PlayerNotFound"),
    (PlaceBid(player_id=1, amount=0), "InvalidAmount"),
    (SellPlayer(player_id=1, team_id=99), "TeamNotFound"),
    (UpdateScore(match_id=2, side="team1", runs=4), "MatchNotLive"),
    (UpdateScore(match_id=99, side="team1", runs=4), "MatchNotFound"),
    (StartMatch(match_id=3), "InvalidMatchTransition"),
    (CompleteMatch(match_id=2), "InvalidMatchTransition"),
])
def test_rejections_never_raise(engine, command, code):
    result = dispatch(engine, command)
    assert not result.ok
    assert result.error_code == code
    assert result.error


def test_double_sale_reported_as_already_sold(engine):
    assert dispatch(engine, SellPlayer(player_id=2, team_id=1)).ok
    result = dispatch(engine, SellPlayer(player_id=2, team_id=1))
    assert result.error_code == "AlreadySold"
    assert engine.get_team(1).budget == 850


def test_unknown_command_is_a_programming_error(engine):
    with pytest.raises(TypeError):
        dispatch(engine, object())
