"""
@file: record_service.py
@description
Service-level function that creates rows of the data model. A candidate
record is validated against the insert-validator of its table, written
through the ORM, and returned as a selected-row schema with the
database-generated id, timestamps and defaults filled in.

@dependencies
- sqlalchemy: For the session the row is written through.
- sportpredict.schemas.registry: For table lookup and insert validation.
- sportpredict.core.logger: For logging.

@notes
- The session is flushed, not committed. Committing (or rolling back) is up
  to the caller that owns the session.
- Referential integrity is not checked: a game may name a sport_id that
  does not exist.
"""

from typing import Any, Mapping, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sportpredict.core.logger import setup_logger
from sportpredict.schemas.common import CamelModel, InsertModel
from sportpredict.schemas.registry import get_entity, validate_insert

# Initialize logger
logger = setup_logger("sportpredict.services.record_service")


def create_record(
    db: Session,
    table_name: str,
    record_in: Union[InsertModel, Mapping[str, Any]],
) -> CamelModel:
    """
    Insert a new row into a table.

    Args:
        db: Open database session.
        table_name: Target table, e.g. "predictions".
        record_in: An insert model of that table, or raw input to validate.

    Returns:
        CamelModel: The stored row as the table's row schema.

    Raises:
        UnknownEntityError: If the table does not exist.
        InsertValidationError: If record_in does not validate.
        SQLAlchemyError: If the database rejects the row.
    """
    entity = get_entity(table_name)
    if not isinstance(record_in, entity.insert_schema):
        record_in = validate_insert(table_name, record_in)

    row = entity.model(**record_in.to_row())
    try:
        db.add(row)
        db.flush()
        db.refresh(row)
    except SQLAlchemyError as e:
        logger.error(f"Failed to insert into {table_name}: {str(e)}")
        raise

    logger.info(f"Inserted {table_name} row with ID: {row.id}")
    return entity.row_schema.model_validate(row)
