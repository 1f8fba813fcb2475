"""
Database client for the intake endpoints.

Tables and migrations are owned by the database project; this package
only writes rows.
"""

from core.db.store import RecordStore

__all__ = ["RecordStore"]
