"""
@file: composites.py
@description:
Read-model shapes returned by the API. None of them are persisted: they are
projections assembled by joining base rows.

Schemas:
- GameWithDetails: a game with its sport, both teams and, when present, its
  prediction and live score
- TeamWithStats: a team with its sport and aggregate stats
- HeadToHead: summary of previous meetings between two teams
- GameStatsDetails: everything a game detail view needs
"""

from typing import List, Optional

from sportpredict.schemas.common import CamelModel
from sportpredict.schemas.games import Game
from sportpredict.schemas.live_scores import LiveScore
from sportpredict.schemas.player_stats import PlayerStats
from sportpredict.schemas.predictions import Prediction
from sportpredict.schemas.sports import Sport
from sportpredict.schemas.team_stats import TeamStats
from sportpredict.schemas.teams import Team


class GameWithDetails(Game):
    sport: Sport
    home_team: Team
    away_team: Team
    prediction: Optional[Prediction] = None
    live_score: Optional[LiveScore] = None


class TeamWithStats(Team):
    stats: TeamStats
    sport: Sport


class HeadToHead(CamelModel):
    total_games: int
    home_wins: int
    away_wins: int
    draws: int


class GameStatsDetails(CamelModel):
    game: GameWithDetails
    home_team_stats: TeamStats
    away_team_stats: TeamStats
    home_players: List[PlayerStats]
    away_players: List[PlayerStats]
    head_to_head: HeadToHead
