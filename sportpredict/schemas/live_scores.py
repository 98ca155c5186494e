"""
@file: live_scores.py
@description:
Pydantic schemas for live score snapshots. A single row holds the latest
state of a game.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from sportpredict.schemas.common import CamelModel, InsertModel


class LiveScoreBase(CamelModel):
    game_id: int
    home_team_score: Optional[int] = 0
    away_team_score: Optional[int] = 0
    period: Optional[str] = None
    time_remaining: Optional[str] = Field(None, description="Clock display, e.g. '04:12'.")


class InsertLiveScore(InsertModel, LiveScoreBase):
    pass


class LiveScore(LiveScoreBase):
    id: int
    home_team_score: Optional[int] = None
    away_team_score: Optional[int] = None
    last_updated: Optional[datetime] = None
