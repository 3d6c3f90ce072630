"""
Database module - engine, unit of work and table definitions.
"""
from jobhunter.db.postgres import check_database_connection, engine, get_db_session
from jobhunter.db.tables import metadata

__all__ = [
    "engine",
    "get_db_session",
    "metadata",
    "check_database_connection",
]
