"""
@file: conftest.py
@description:
Pytest fixtures shared by the test suite.

Fixtures include:
- An in-memory SQLite engine with every table created
- A database session bound to that engine
- Valid payloads for each table, keyed by table name
- Test settings applied to the global settings object

@notes:
- Each test gets a fresh database, so ids always start at 1
- Patched settings are restored after every test
"""

from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from sportpredict.core.config import settings
from sportpredict.db.init_db import init_db
from sportpredict.db.session import get_db, get_engine


@pytest.fixture
def engine():
    """
    Fixture that returns a SQLite engine holding an empty copy of the schema.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """
    Fixture that yields a session on the test engine and rolls back afterwards.
    """
    gen = get_db(engine)
    session = next(gen)
    yield session
    session.rollback()
    gen.close()


@pytest.fixture
def payloads():
    """
    Fixture with one complete, valid insert payload per table, using the
    camelCase API names and every optional field.
    """
    return {
        "sports": {
            "name": "Basketball",
            "shortName": "NBA",
            "color": "#c9082a",
            "isActive": True,
        },
        "teams": {
            "name": "Los Angeles Lakers",
            "shortName": "LAL",
            "sportId": 1,
            "logo": "https://cdn.example.com/lal.png",
            "ranking": 4,
            "country": "USA",
            "isActive": True,
        },
        "games": {
            "sportId": 1,
            "homeTeamId": 2,
            "awayTeamId": 3,
            "gameTime": datetime(2026, 10, 21, 19, 30),
            "venue": "Crypto.com Arena",
            "weather": "Indoor",
            "temperature": "21C",
            "status": "live",
            "homeScore": 54,
            "awayScore": 49,
            "currentPeriod": "Q3",
            "gameData": {"attendance": 18997, "broadcast": ["ESPN"]},
        },
        "predictions": {
            "gameId": 1,
            "predictedWinnerId": 2,
            "confidence": 72.5,
            "factors": {"form": 0.4, "injuries": ["player-23"]},
            "teamFormFactor": 0.4,
            "headToHeadFactor": 0.2,
            "injuryFactor": -0.1,
            "homeAdvantage": 0.3,
            "weatherFactor": 0.0,
        },
        "team_stats": {
            "teamId": 2,
            "sportId": 1,
            "gamesPlayed": 10,
            "wins": 6,
            "losses": 3,
            "draws": 1,
            "winPercentage": 60.0,
            "averageScore": 112.4,
            "recentForm": "WWLWD",
            "homeWinRate": 0.7,
            "awayWinRate": 0.5,
        },
        "player_stats": {
            "name": "LeBron James",
            "teamId": 2,
            "sportId": 1,
            "position": "SF",
            "isInjured": True,
            "injuryDetails": "Ankle sprain, day-to-day",
            "performanceRating": 8.7,
            "statsData": {"ppg": 25.1, "rpg": 7.4},
        },
        "live_scores": {
            "gameId": 1,
            "homeTeamScore": 54,
            "awayTeamScore": 49,
            "period": "Q3",
            "timeRemaining": "04:12",
        },
    }


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """
    Fixture that points the global settings at an in-memory database.
    This fixture runs automatically for each test.

    settings is built once at import time, so the values are patched on the
    object itself. The cached engine is dropped before and after so it is
    rebuilt from the patched values.
    """
    monkeypatch.setattr(settings, "APP_ENV", "test")
    monkeypatch.setattr(settings, "DATABASE_URL", "sqlite://")
    monkeypatch.setattr(settings, "DB_ECHO", False)
    get_engine.cache_clear()

    yield

    get_engine.cache_clear()
