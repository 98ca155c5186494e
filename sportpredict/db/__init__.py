"""
Database Package for the sports prediction data layer.

This package handles all database-related declarations including:
- Table definitions using SQLAlchemy ORM
- Engine and session management
- Table creation for a fresh database
"""
