"""
Database module for the SocialNet API
"""

from .connection import (
    check_database_connection,
    close_database,
    get_client,
    get_database,
    init_database,
    reset_database,
)
from .ids import parse_object_id

__all__ = [
    "check_database_connection",
    "close_database",
    "get_client",
    "get_database",
    "init_database",
    "parse_object_id",
    "reset_database",
]
