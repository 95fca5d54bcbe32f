"""Reusable FastAPI dependencies."""

from .database import get_container, get_db_session
from .account import get_account_repository, get_auth_service

__all__ = [
    "get_container",
    "get_db_session",
    "get_account_repository",
    "get_auth_service",
]
