"""
Database module for Menagerie backend
"""

from .connection import create_schema, get_async_session, init_database

__all__ = ["create_schema", "get_async_session", "init_database"]
