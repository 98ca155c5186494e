"""
Services Package for the sports prediction data layer.

This package holds the operations built on top of the table declarations:
- Record creation through the insert-validators
"""

from sportpredict.services.record_service import create_record

__all__ = ["create_record"]
