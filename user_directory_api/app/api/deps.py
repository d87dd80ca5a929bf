"""
FastAPI dependencies shared by the endpoints.

The upstream client is created once at application startup and kept on
``app.state``.  ``get_user_service`` wraps it in a ``UserService`` for
each request; tests replace it through ``app.dependency_overrides``.
"""

from fastapi import Request

from user_directory_api.app.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    return UserService(request.app.state.user_client)
