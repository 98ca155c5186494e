"""
Sports prediction data model.

Table declarations (sportpredict.db.models), insert-validators and row types
(sportpredict.schemas), and record creation (sportpredict.services).
"""

__version__ = "0.1.0"
