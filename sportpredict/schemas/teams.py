"""
@file: teams.py
@description:
Pydantic schemas for teams: TeamBase, InsertTeam and the selected-row Team.
"""

from typing import Optional

from pydantic import Field

from sportpredict.schemas.common import CamelModel, InsertModel


class TeamBase(CamelModel):
    name: str
    short_name: str
    sport_id: int = Field(..., description="Identifier of the sport the team plays.")
    logo: Optional[str] = Field(None, description="Logo URL.")
    ranking: Optional[int] = None
    country: Optional[str] = None
    is_active: Optional[bool] = True


class InsertTeam(InsertModel, TeamBase):
    pass


class Team(TeamBase):
    id: int
    is_active: Optional[bool] = None
