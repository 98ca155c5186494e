"""
@file: errors.py
@description:
Exceptions raised by the data layer and the conversion of Pydantic
validation errors into structured field errors.

A field error is a dict with:
- field: dotted path of the offending input, using the camelCase API names
- reason: human-readable message from the validator
- type: machine-readable error code (e.g. "missing", "int_parsing")

@dependencies:
- pydantic: ValidationError is the source of every field error
"""

from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError


class UnknownEntityError(KeyError):
    """Raised when a table name does not belong to the data model."""

    def __init__(self, table_name: str):
        self.table_name = table_name
        super().__init__(table_name)

    def __str__(self) -> str:
        return f"Unknown entity: {self.table_name!r}"


class InsertValidationError(ValueError):
    """
    Raised when a candidate record does not match the insert shape of an entity.

    Attributes:
        entity: Table name the record was validated for.
        errors: Structured field errors (field, reason, type).
    """

    def __init__(self, entity: str, errors: List[Dict[str, Any]]):
        self.entity = entity
        self.errors = errors
        details = "; ".join(f"{e['field']}: {e['reason']}" for e in errors)
        super().__init__(f"Invalid {entity} record: {details}")

    @property
    def fields(self) -> List[str]:
        """Field paths that failed validation, in error order."""
        return [e["field"] for e in self.errors]

    @classmethod
    def from_pydantic(
        cls,
        entity: str,
        exc: ValidationError,
        model: Optional[Type[BaseModel]] = None,
    ) -> "InsertValidationError":
        return cls(entity, field_errors(exc, model))


def _field_path(loc: tuple, model: Optional[Type[BaseModel]]) -> str:
    parts = [str(part) for part in loc]
    if model is not None and parts:
        field = model.model_fields.get(parts[0])
        if field is not None and field.alias:
            parts[0] = field.alias
    return ".".join(parts)


def field_errors(exc: ValidationError, model: Optional[Type[BaseModel]] = None) -> List[Dict[str, Any]]:
    """
    Convert a Pydantic ValidationError into structured field errors.

    Args:
        exc: The validation error.
        model: The model that was validated. When given, field names in error
            locations are reported by their alias.

    Returns:
        List of {"field", "reason", "type"} dicts.
    """
    return [
        {
            "field": _field_path(error["loc"], model),
            "reason": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
