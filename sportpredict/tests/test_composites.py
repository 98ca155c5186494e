"""
@file: test_composites.py
@description:
Tests for the read-model shapes assembled from base rows: GameWithDetails,
TeamWithStats and GameStatsDetails.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from sportpredict.schemas import (
    Game,
    GameStatsDetails,
    GameWithDetails,
    HeadToHead,
    LiveScore,
    PlayerStats,
    Prediction,
    Sport,
    Team,
    TeamStats,
    TeamWithStats,
)
from sportpredict.services.record_service import create_record


@pytest.fixture
def rows():
    sport = Sport(id=1, name="Basketball", short_name="NBA", color="#c9082a")
    home = Team(id=2, name="Los Angeles Lakers", short_name="LAL", sport_id=1)
    away = Team(id=3, name="Boston Celtics", short_name="BOS", sport_id=1)
    game = Game(
        id=10,
        sport_id=1,
        home_team_id=2,
        away_team_id=3,
        game_time=datetime(2026, 10, 21, 19, 30),
        status="live",
    )
    return {"sport": sport, "home": home, "away": away, "game": game}


def team_stats(team_id, stats_id, wins):
    return TeamStats(id=stats_id, team_id=team_id, sport_id=1, games_played=wins + 2, wins=wins, losses=2)


def test_game_with_details_optional_parts(rows):
    details = GameWithDetails(
        **rows["game"].model_dump(),
        sport=rows["sport"],
        home_team=rows["home"],
        away_team=rows["away"],
    )

    assert details.prediction is None
    assert details.live_score is None
    assert details.home_team.short_name == "LAL"

    data = details.model_dump(by_alias=True, mode="json")
    assert data["homeTeam"]["shortName"] == "LAL"
    assert data["awayTeam"]["sportId"] == 1
    assert data["gameTime"] == "2026-10-21T19:30:00"
    assert data["prediction"] is None
    assert data["liveScore"] is None


def test_game_with_details_requires_both_teams(rows):
    with pytest.raises(ValidationError) as exc_info:
        GameWithDetails(**rows["game"].model_dump(), sport=rows["sport"], home_team=rows["home"])

    assert exc_info.value.errors()[0]["loc"] == ("awayTeam",)


def test_team_with_stats(rows):
    team = TeamWithStats(**rows["home"].model_dump(), stats=team_stats(2, 1, wins=5), sport=rows["sport"])

    data = team.model_dump(by_alias=True)
    assert data["stats"]["gamesPlayed"] == 7
    assert data["sport"]["shortName"] == "NBA"
    assert data["isActive"] is None


def test_game_stats_details(rows):
    details = GameStatsDetails(
        game=GameWithDetails(
            **rows["game"].model_dump(),
            sport=rows["sport"],
            home_team=rows["home"],
            away_team=rows["away"],
            prediction=Prediction(id=1, game_id=10, predicted_winner_id=2, confidence=68.0),
            live_score=LiveScore(id=1, game_id=10, home_team_score=54, away_team_score=49, period="Q3"),
        ),
        home_team_stats=team_stats(2, 1, wins=5),
        away_team_stats=team_stats(3, 2, wins=4),
        home_players=[PlayerStats(id=1, name="LeBron James", team_id=2, sport_id=1, is_injured=False)],
        away_players=[],
        head_to_head=HeadToHead(total_games=4, home_wins=2, away_wins=1, draws=1),
    )

    data = details.model_dump(by_alias=True)
    assert data["game"]["prediction"]["predictedWinnerId"] == 2
    assert data["game"]["liveScore"]["homeTeamScore"] == 54
    assert data["homeTeamStats"]["wins"] == 5
    assert data["awayTeamStats"]["teamId"] == 3
    assert data["homePlayers"][0]["isInjured"] is False
    assert data["awayPlayers"] == []
    assert data["headToHead"] == {"totalGames": 4, "homeWins": 2, "awayWins": 1, "draws": 1}


def test_game_stats_details_from_camel_case_input(rows):
    game = GameWithDetails(
        **rows["game"].model_dump(),
        sport=rows["sport"],
        home_team=rows["home"],
        away_team=rows["away"],
    )
    payload = {
        "game": game.model_dump(by_alias=True),
        "homeTeamStats": team_stats(2, 1, wins=5).model_dump(by_alias=True),
        "awayTeamStats": team_stats(3, 2, wins=4).model_dump(by_alias=True),
        "homePlayers": [],
        "awayPlayers": [],
        "headToHead": {"totalGames": 0, "homeWins": 0, "awayWins": 0, "draws": 0},
    }

    details = GameStatsDetails.model_validate(payload)

    assert details.game.away_team.short_name == "BOS"
    assert details.head_to_head.total_games == 0


def test_composites_from_stored_rows(db_session, payloads):
    sport = create_record(db_session, "sports", payloads["sports"])
    home = create_record(db_session, "teams", payloads["teams"])
    away = create_record(db_session, "teams", {**payloads["teams"], "name": "Boston Celtics", "shortName": "BOS"})
    game = create_record(db_session, "games", {
        **payloads["games"],
        "homeTeamId": home.id,
        "awayTeamId": away.id,
    })
    stats = create_record(db_session, "team_stats", {"teamId": home.id, "sportId": sport.id})

    details = GameWithDetails(**game.model_dump(), sport=sport, home_team=home, away_team=away)
    team = TeamWithStats(**home.model_dump(), stats=stats, sport=sport)

    assert details.home_team.id == 1
    assert details.away_team.id == 2
    assert details.created_at is not None
    assert team.stats.wins == 0
