"""
Schemas Package for the sports prediction data layer.

This package contains the Pydantic models used for:
- Insert validation (Insert<Entity>)
- Selected-row types (<Entity>)
- Composite read models returned by the API
"""

from sportpredict.schemas.common import CamelModel, GameStatus, InsertModel
from sportpredict.schemas.composites import (
    GameStatsDetails,
    GameWithDetails,
    HeadToHead,
    TeamWithStats,
)
from sportpredict.schemas.games import Game, InsertGame
from sportpredict.schemas.live_scores import InsertLiveScore, LiveScore
from sportpredict.schemas.player_stats import InsertPlayerStats, PlayerStats
from sportpredict.schemas.predictions import InsertPrediction, Prediction
from sportpredict.schemas.sports import InsertSport, Sport
from sportpredict.schemas.team_stats import InsertTeamStats, TeamStats
from sportpredict.schemas.teams import InsertTeam, Team

__all__ = [
    "CamelModel",
    "InsertModel",
    "GameStatus",
    # Selected rows
    "Sport",
    "Team",
    "Game",
    "Prediction",
    "TeamStats",
    "PlayerStats",
    "LiveScore",
    # Insert validators
    "InsertSport",
    "InsertTeam",
    "InsertGame",
    "InsertPrediction",
    "InsertTeamStats",
    "InsertPlayerStats",
    "InsertLiveScore",
    # Read models
    "GameWithDetails",
    "TeamWithStats",
    "HeadToHead",
    "GameStatsDetails",
]
