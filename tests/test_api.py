"""HTTP tests for the FastAPI app."""


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_list_endpoints(client):
    assert len(client.get("/api/players").json()["players"]) == 8
    assert len(client.get("/api/teams").json()["teams"]) == 4
    matches = client.get("/api/matches", params={"status": "live"}).json()["matches"]
    assert [m["id"] for m in matches] == [1]
    assert matches[0]["team2_score"]["overs"] == 18.3


def test_bid_and_sell_flow(client):
    client.post("/api/reset")

    resp = client.post("/api/bids", json={"player_id": 1, "amount": 25})
    assert resp.status_code == 200
    resp = client.post("/api/bids", json={"player_id": 1, "amount": 25})
    assert resp.json() == {"ok": True, "player_id": 1, "current_bid": 250}

    resp = client.post("/api/sales", json={"player_id": 1, "team_id": 1})
    assert resp.status_code == 200
    team = resp.json()["team"]
    assert team["budget"] == 750
    assert team["spent"] == 250
    assert team["players"][0]["sold_to"] == "Royal Strikers"

    resp = client.post("/api/sales", json={"player_id": 1, "team_id": 2})
    assert resp.status_code == 409
    assert resp.json()["detail"]["error"] == "AlreadySold"
    assert client.get("/api/teams/1").json()["budget"] == 750

    sold = client.get("/api/players", params={"status": "sold"}).json()["players"]
    assert [p["id"] for p in sold] == [1]


def test_not_found_and_validation(client):
    assert client.get("/api/players/99").status_code == 404
    assert client.get("/api/teams/99").status_code == 404
    assert client.get("/api/matches/99").status_code == 404

    resp = client.post("/api/bids", json={"player_id": 99, "amount": 10})
    assert resp.status_code == 404
    assert resp.json()["detail"]["error"] == "PlayerNotFound"

    # schema rejects non-positive increments
    assert client.post("/api/bids", json={"player_id": 1, "amount": 0}).status_code == 422
    assert client.post("/api/scores", json={"match_id": 1, "side": "team3", "runs": 1}).status_code == 422


def test_scores_and_standings(client):
    client.post("/api/reset")

    resp = client.post("/api/scores", json={"match_id": 1, "side": "team2", "runs": 4})
    assert resp.status_code == 200
    assert resp.json()["score"]["runs"] == 160
    assert resp.json()["score"]["overs"] == 18.4

    resp = client.post("/api/scores", json={"match_id": 2, "side": "team1", "runs": 4})
    assert resp.status_code == 409
    assert resp.json()["detail"]["error"] == "MatchNotLive"

    resp = client.post("/api/matches/1/complete", json={})
    assert resp.status_code == 200
    assert resp.json()["match"]["winning_team_id"] == 1

    assert client.post("/api/matches/1/complete").status_code == 409

    standings = client.get("/api/standings").json()["standings"]
    top = standings[:2]
    assert {r["team"] for r in top} == {"Royal Strikers", "Phoenix Warriors"}
    assert all(r["points"] == 2 * r["wins"] for r in standings)


def test_start_match(client):
    client.post("/api/reset")
    resp = client.post("/api/matches/2/start")
    assert resp.status_code == 200
    assert resp.json()["match"]["status"] == "live"
    assert client.post("/api/matches/2/start").status_code == 409
