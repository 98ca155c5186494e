"""
@file: sports.py
@description:
Pydantic schemas for sports.

Schemas:
- SportBase: columns a caller may supply
- InsertSport: insert-validator (drops "id")
- Sport: a selected sports row
"""

from typing import Optional

from pydantic import Field

from sportpredict.schemas.common import CamelModel, InsertModel


class SportBase(CamelModel):
    name: str = Field(..., description="Display name, e.g. 'Basketball'.")
    short_name: str = Field(..., description="Abbreviation, e.g. 'NBA'.")
    color: str = Field(..., description="Theme color used by clients.")
    is_active: Optional[bool] = Field(True, description="Whether the sport is listed.")


class InsertSport(InsertModel, SportBase):
    """
    Fields accepted when creating a sport. The id is generated by the database.
    """
    pass


class Sport(SportBase):
    id: int
    is_active: Optional[bool] = None
