"""
@file: models.py
@description:
SQLAlchemy ORM models for the sports prediction data model. Seven tables are
declared: sports, teams, games, predictions, team_stats, player_stats and
live_scores.

@notes:
- Primary keys are auto-incrementing integers.
- Defaults are server defaults, so they apply to any INSERT that omits the
  column, whether it comes from the ORM or from raw SQL.
- Free-form blobs (game_data, factors, stats_data) are JSONB on PostgreSQL and
  plain JSON on other dialects.
- Columns such as sport_id, team_id and game_id reference other tables by
  convention only. No foreign keys, check constraints or unique constraints
  are declared: referential integrity, the 0-100 confidence range and
  non-negative counters are left to application logic.

@dependencies:
- SQLAlchemy: for defining ORM models.
- sportpredict.db.base: provides the Base class.
"""

from sqlalchemy import (
    JSON,
    REAL,
    Boolean,
    Column,
    DateTime,
    Integer,
    Text,
    false,
    func,
    text,
    true,
)
from sqlalchemy.dialects.postgresql import JSONB

from sportpredict.db.base import Base

# JSONB where the dialect has it, JSON everywhere else. Python None is SQL NULL.
JSONBlob = JSON(none_as_null=True).with_variant(JSONB(none_as_null=True), "postgresql")

ZERO = text("0")


def _created_at() -> Column:
    return Column(DateTime, server_default=func.now(), doc="Timestamp of when the record was created.")


def _updated_at(doc: str = "Timestamp of the last update to this record.") -> Column:
    return Column(DateTime, server_default=func.now(), onupdate=func.now(), doc=doc)


class Sport(Base):
    """
    @class Sport
    @description
    A sport category (e.g. basketball). Teams, games and stat rows point at a
    sport through their sport_id.
    """
    __tablename__ = "sports"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, doc="Display name, e.g. 'Basketball'.")
    short_name = Column(Text, nullable=False, doc="Abbreviation, e.g. 'NBA'.")
    color = Column(Text, nullable=False, doc="Theme color used by clients.")
    is_active = Column(Boolean, server_default=true())

    def __repr__(self) -> str:
        return f"<Sport id={self.id} short_name={self.short_name!r}>"


class Team(Base):
    """
    @class Team
    @description
    A competing team. Belongs to exactly one sport.
    """
    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    short_name = Column(Text, nullable=False)
    sport_id = Column(Integer, nullable=False, doc="References sports.id.")
    logo = Column(Text, doc="Logo URL.")
    ranking = Column(Integer)
    country = Column(Text)
    is_active = Column(Boolean, server_default=true())

    def __repr__(self) -> str:
        return f"<Team id={self.id} name={self.name!r}>"


class Game(Base):
    """
    @class Game
    @description
    A scheduled, live, completed or cancelled match between a home team and an
    away team.

    @attributes:
        status (Text): Open string. Values in use are "scheduled", "live",
            "completed" and "cancelled"; defaults to "scheduled".
        game_data (JSON): Additional game-specific data.
    """
    __tablename__ = "games"

    id = Column(Integer, primary_key=True, autoincrement=True)
    sport_id = Column(Integer, nullable=False)
    home_team_id = Column(Integer, nullable=False, doc="References teams.id.")
    away_team_id = Column(Integer, nullable=False, doc="References teams.id.")
    game_time = Column(DateTime, nullable=False, doc="Scheduled start time.")
    venue = Column(Text)
    weather = Column(Text)
    temperature = Column(Text)
    status = Column(Text, server_default="scheduled")
    home_score = Column(Integer)
    away_score = Column(Integer)
    current_period = Column(Text, doc="Period label while the game is live, e.g. 'Q3'.")
    game_data = Column(JSONBlob, doc="Additional game-specific data.")
    created_at = _created_at()
    updated_at = _updated_at()

    def __repr__(self) -> str:
        return (
            f"<Game id={self.id} home={self.home_team_id} "
            f"away={self.away_team_id} status={self.status!r}>"
        )


class Prediction(Base):
    """
    @class Prediction
    @description
    A generated forecast for a game's outcome. The schema does not enforce one
    prediction per game.

    @attributes:
        confidence (REAL): Confidence score, 0 to 100 by convention.
        factors (JSON): Prediction factors and weights.
        team_form_factor, head_to_head_factor, injury_factor,
        home_advantage, weather_factor (REAL): Named factor weights.
    """
    __tablename__ = "predictions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    game_id = Column(Integer, nullable=False, doc="References games.id.")
    predicted_winner_id = Column(Integer, nullable=False, doc="References teams.id.")
    confidence = Column(REAL, nullable=False, doc="Confidence score ranging from 0 to 100.")
    factors = Column(JSONBlob, doc="Prediction factors and weights.")
    team_form_factor = Column(REAL)
    head_to_head_factor = Column(REAL)
    injury_factor = Column(REAL)
    home_advantage = Column(REAL)
    weather_factor = Column(REAL)
    created_at = _created_at()
    updated_at = _updated_at()


class TeamStats(Base):
    """
    @class TeamStats
    @description
    Rolling aggregate performance of a team within a sport. Counters and
    rates default to zero.
    """
    __tablename__ = "team_stats"

    id = Column(Integer, primary_key=True, autoincrement=True)
    team_id = Column(Integer, nullable=False)
    sport_id = Column(Integer, nullable=False)
    games_played = Column(Integer, server_default=ZERO)
    wins = Column(Integer, server_default=ZERO)
    losses = Column(Integer, server_default=ZERO)
    draws = Column(Integer, server_default=ZERO)
    win_percentage = Column(REAL, server_default=ZERO)
    average_score = Column(REAL, server_default=ZERO)
    recent_form = Column(Text, doc="Most recent results, newest last, e.g. 'WWLWD'.")
    home_win_rate = Column(REAL, server_default=ZERO)
    away_win_rate = Column(REAL, server_default=ZERO)
    last_updated = _updated_at("Timestamp of the last recalculation.")


class PlayerStats(Base):
    """
    @class PlayerStats
    @description
    A player's current status and performance. Belongs to a team.
    """
    __tablename__ = "player_stats"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    team_id = Column(Integer, nullable=False)
    sport_id = Column(Integer, nullable=False)
    position = Column(Text)
    is_injured = Column(Boolean, server_default=false())
    injury_details = Column(Text)
    performance_rating = Column(REAL)
    stats_data = Column(JSONBlob, doc="Sport-specific stats.")
    last_updated = _updated_at()


class LiveScore(Base):
    """
    @class LiveScore
    @description
    Real-time score snapshot for an in-progress game. One row tracks the
    latest state of a game and is overwritten rather than appended to.
    """
    __tablename__ = "live_scores"

    id = Column(Integer, primary_key=True, autoincrement=True)
    game_id = Column(Integer, nullable=False)
    home_team_score = Column(Integer, server_default=ZERO)
    away_team_score = Column(Integer, server_default=ZERO)
    period = Column(Text)
    time_remaining = Column(Text, doc="Clock display, e.g. '04:12'.")
    last_updated = _updated_at()
