"""
@file: predictions.py
@description:
Pydantic schemas for game outcome predictions.

Schemas:
- PredictionBase: columns a caller may supply
- InsertPrediction: insert-validator; drops "id", "createdAt" and "updatedAt"
- Prediction: a selected predictions row

@notes:
- confidence is on a 0 to 100 scale by convention. The value is not
  range-checked here, matching the table, which declares no constraint.
- factors holds the full factor breakdown; the five named weights are kept
  as separate columns for querying.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from sportpredict.schemas.common import CamelModel, InsertModel


class PredictionBase(CamelModel):
    """
    Shared fields between insert and row models.
    """
    game_id: int = Field(..., description="Identifier of the predicted game.")
    predicted_winner_id: int = Field(..., description="Identifier of the team predicted to win.")
    confidence: float = Field(..., description="Confidence score from 0 to 100.")
    factors: Optional[Any] = Field(None, description="Prediction factors and weights.")
    team_form_factor: Optional[float] = None
    head_to_head_factor: Optional[float] = None
    injury_factor: Optional[float] = None
    home_advantage: Optional[float] = None
    weather_factor: Optional[float] = None


class InsertPrediction(InsertModel, PredictionBase):
    """
    Fields accepted when creating a prediction. This matches the table
    except for the id and timestamps, which the database generates.
    """
    pass


class Prediction(PredictionBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
