"""
@file: games.py
@description:
Pydantic schemas for games.

Schemas:
- GameBase: columns a caller may supply
- InsertGame: insert-validator; drops "id", "createdAt" and "updatedAt"
- Game: a selected games row, timestamps included

@notes:
- status is an open string. It defaults to "scheduled"; GameStatus lists the
  values in use, but any string is accepted.
- gameData is stored as-is. Its shape varies per sport.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from sportpredict.schemas.common import CamelModel, GameStatus, InsertModel


class GameBase(CamelModel):
    sport_id: int = Field(..., description="Identifier of the sport.")
    home_team_id: int = Field(..., description="Identifier of the home team.")
    away_team_id: int = Field(..., description="Identifier of the away team.")
    # JSON has no date type, so ISO strings are parsed even in strict mode
    game_time: datetime = Field(..., strict=False, description="Scheduled start time.")
    venue: Optional[str] = None
    weather: Optional[str] = None
    temperature: Optional[str] = None
    status: Optional[str] = Field(
        GameStatus.SCHEDULED.value,
        description="One of 'scheduled', 'live', 'completed' or 'cancelled'.",
    )
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    current_period: Optional[str] = Field(None, description="Period label while live, e.g. 'Q3'.")
    game_data: Optional[Any] = Field(None, description="Additional game-specific data.")


class InsertGame(InsertModel, GameBase):
    """
    Fields accepted when creating a game. The id and both timestamps are
    managed by the database.
    """
    pass


class Game(GameBase):
    id: int
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
