"""
@file: team_stats.py
@description:
Pydantic schemas for the rolling per-team aggregates.

@notes:
- Counters and rates default to 0 when omitted.
- games_played is expected to equal wins + losses + draws. Like the other
  domain invariants this is not checked here.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from sportpredict.schemas.common import CamelModel, InsertModel


class TeamStatsBase(CamelModel):
    team_id: int
    sport_id: int
    games_played: Optional[int] = 0
    wins: Optional[int] = 0
    losses: Optional[int] = 0
    draws: Optional[int] = 0
    win_percentage: Optional[float] = 0.0
    average_score: Optional[float] = 0.0
    recent_form: Optional[str] = Field(None, description="Most recent results, e.g. 'WWLWD'.")
    home_win_rate: Optional[float] = 0.0
    away_win_rate: Optional[float] = 0.0


class InsertTeamStats(InsertModel, TeamStatsBase):
    pass


class TeamStats(TeamStatsBase):
    """
    A selected team_stats row. Columns the row was built without stay None
    rather than taking the insert defaults.
    """
    id: int
    games_played: Optional[int] = None
    wins: Optional[int] = None
    losses: Optional[int] = None
    draws: Optional[int] = None
    win_percentage: Optional[float] = None
    average_score: Optional[float] = None
    home_win_rate: Optional[float] = None
    away_win_rate: Optional[float] = None
    last_updated: Optional[datetime] = None
