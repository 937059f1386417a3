"""
API dependencies.

The ConnectionManager and QueryRouter are built once in ``create_app`` and
kept on ``app.state``; routes receive them through these dependencies.
"""

from fastapi import Request

from app.core.database import ConnectionManager
from app.services.query_router import QueryRouter


def get_connection_manager(request: Request) -> ConnectionManager:
    return request.app.state.connection_manager


def get_query_router(request: Request) -> QueryRouter:
    return request.app.state.query_router
