"""
@file: player_stats.py
@description:
Pydantic schemas for player status and performance.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from sportpredict.schemas.common import CamelModel, InsertModel


class PlayerStatsBase(CamelModel):
    name: str = Field(..., description="Player name.")
    team_id: int
    sport_id: int
    position: Optional[str] = None
    is_injured: Optional[bool] = False
    injury_details: Optional[str] = None
    performance_rating: Optional[float] = None
    stats_data: Optional[Any] = Field(None, description="Sport-specific stats.")


class InsertPlayerStats(InsertModel, PlayerStatsBase):
    pass


class PlayerStats(PlayerStatsBase):
    id: int
    is_injured: Optional[bool] = None
    last_updated: Optional[datetime] = None
