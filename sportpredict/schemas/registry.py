"""
@file: registry.py
@description:
Ties each table to its ORM model, its insert-validator and its row schema,
and validates candidate records by table name.

@notes:
- server_managed lists the columns the database fills in and the
  insert-validator therefore drops: always "id", plus the timestamps of
  the table.
- The insertable columns of a table are its columns minus server_managed;
  every insert-validator declares exactly those fields.
"""

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Mapping, Type

from pydantic import ValidationError

from sportpredict.core.errors import InsertValidationError, UnknownEntityError
from sportpredict.core.logger import setup_logger
from sportpredict.db import models
from sportpredict.db.base import Base
from sportpredict.schemas.common import CamelModel, InsertModel
from sportpredict.schemas.games import Game, InsertGame
from sportpredict.schemas.live_scores import InsertLiveScore, LiveScore
from sportpredict.schemas.player_stats import InsertPlayerStats, PlayerStats
from sportpredict.schemas.predictions import InsertPrediction, Prediction
from sportpredict.schemas.sports import InsertSport, Sport
from sportpredict.schemas.team_stats import InsertTeamStats, TeamStats
from sportpredict.schemas.teams import InsertTeam, Team

logger = setup_logger("sportpredict.schemas.registry")


@dataclass(frozen=True)
class Entity:
    model: Type[Base]
    insert_schema: Type[InsertModel]
    row_schema: Type[CamelModel]
    server_managed: FrozenSet[str]

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    @property
    def insertable_columns(self) -> FrozenSet[str]:
        return frozenset(self.model.__table__.columns.keys()) - self.server_managed


_ID = frozenset({"id"})
_TIMESTAMPS = frozenset({"id", "created_at", "updated_at"})
_LAST_UPDATED = frozenset({"id", "last_updated"})

ENTITIES: Dict[str, Entity] = {
    entity.table_name: entity
    for entity in (
        Entity(models.Sport, InsertSport, Sport, _ID),
        Entity(models.Team, InsertTeam, Team, _ID),
        Entity(models.Game, InsertGame, Game, _TIMESTAMPS),
        Entity(models.Prediction, InsertPrediction, Prediction, _TIMESTAMPS),
        Entity(models.TeamStats, InsertTeamStats, TeamStats, _LAST_UPDATED),
        Entity(models.PlayerStats, InsertPlayerStats, PlayerStats, _LAST_UPDATED),
        Entity(models.LiveScore, InsertLiveScore, LiveScore, _LAST_UPDATED),
    )
}


def get_entity(table_name: str) -> Entity:
    """
    Look up an entity by table name.

    Raises:
        UnknownEntityError: If no table of that name exists.
    """
    try:
        return ENTITIES[table_name]
    except KeyError:
        raise UnknownEntityError(table_name) from None


def validate_insert(table_name: str, payload: Mapping[str, Any]) -> InsertModel:
    """
    Validate a candidate record for insertion into a table.

    Args:
        table_name: Name of the target table, e.g. "games".
        payload: Untyped input such as a request body. Keys may use the
            camelCase API names or the column names.

    Returns:
        InsertModel: The record narrowed to the insertable shape. Unknown and
        server-managed keys are dropped.

    Raises:
        UnknownEntityError: If the table does not exist.
        InsertValidationError: If a required field is missing or a value has
            the wrong type.
    """
    entity = get_entity(table_name)
    try:
        return entity.insert_schema.model_validate(payload)
    except ValidationError as e:
        error = InsertValidationError.from_pydantic(table_name, e, entity.insert_schema)
        logger.warning(f"Rejected {table_name} insert: {', '.join(error.fields)}")
        raise error from e
