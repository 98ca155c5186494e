"""
@file: common.py
@description:
Shared building blocks for the Pydantic schemas of the data model.

- CamelModel: base for every schema. Fields are snake_case in Python and
  camelCase on the wire ("sport_id" <-> "sportId"); either spelling is
  accepted on input. ORM rows convert with Model.model_validate(row).
- InsertModel: base for insert-validators. Unknown keys, including
  server-managed columns such as "id" or "createdAt", are ignored. Values
  are not coerced across types: "1" is not an int and "no" is not a bool.
- GameStatus: the game states in use. Game.status itself stays an open
  string; these constants name the known values.

@dependencies:
- pydantic: for data validation and serialization
"""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class InsertModel(CamelModel):
    """
    Base for the insert-validation schemas.
    """
    model_config = ConfigDict(extra="ignore", strict=True)

    def to_row(self) -> Dict[str, Any]:
        """
        Column values for an INSERT, keyed by column name.

        Only fields the caller supplied are included, so omitted columns take
        their database defaults.
        """
        return self.model_dump(exclude_unset=True)


class GameStatus(str, Enum):
    SCHEDULED = "scheduled"
    LIVE = "live"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
