"""
SQLAlchemy Base Definition Module.

This module defines the SQLAlchemy declarative base that every table of the
sports prediction data model inherits from. Its metadata is what a
persistence layer uses to create and query storage.
"""

from sqlalchemy.orm import declarative_base, registry

# Create a new SQLAlchemy mapper registry
mapper_registry = registry()

# Create the base class for declarative class definitions
Base = declarative_base(metadata=mapper_registry.metadata)
