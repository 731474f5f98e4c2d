"""
FastAPI Dependency Providers for the Exercise Tracker API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request
- Request bodies are read as JSON or HTML form posts

Usage in routers:
    from api.deps import get_user_repo
    from application.ports import UserRepository

    @router.get("/api/users")
    def list_users(user_repo: UserRepository = Depends(get_user_repo)):
        return user_repo.list_all()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_user_repo] = lambda: FakeUserRepository()
"""

import json
import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import ExerciseRepository, UserRepository

# Concrete implementations
from infrastructure import SupabaseExerciseRepository, SupabaseUserRepository

from backend.settings import Settings, get_settings as _get_settings

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings the first
    time it is called and reuses it for the lifetime of the process.
    Returns None if credentials are not configured.

    For testing, clear the cache with get_supabase_client.cache_clear().

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        logger.warning("Supabase credentials not configured. Persistence is disabled.")
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.
    Raises HTTPException 503 if database is not available.

    Returns:
        Client: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_user_repo(
    client: Client = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> UserRepository:
    """
    Get UserRepository implementation.

    Returns a SupabaseUserRepository instance with injected client.
    The return type is the Protocol to enable easy mocking.

    Args:
        client: Supabase client (injected)
        settings: Application settings (injected)

    Returns:
        UserRepository: Repository for user persistence
    """
    return SupabaseUserRepository(client, table=settings.users_table)


def get_exercise_repo(
    client: Client = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> ExerciseRepository:
    """
    Get ExerciseRepository implementation.

    Returns a SupabaseExerciseRepository instance with injected client.

    Args:
        client: Supabase client (injected)
        settings: Application settings (injected)

    Returns:
        ExerciseRepository: Repository for exercise entry persistence
    """
    return SupabaseExerciseRepository(client, table=settings.exercises_table)


# =============================================================================
# Request Body Provider
# =============================================================================


async def get_request_payload(request: Request) -> Dict[str, Any]:
    """
    Read the request body as a flat dict.

    Accepts JSON objects and HTML form posts (urlencoded or multipart).
    File parts of multipart bodies are ignored. An empty, malformed or
    non-object body yields an empty dict, so field validation reports the
    missing fields.

    Returns:
        Dict of body fields
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    body = await request.body()
    if not body:
        return {}
    try:
        payload = json.loads(body)
    except ValueError:
        logger.info("Ignoring malformed JSON body on %s", request.url.path)
        return {}
    return payload if isinstance(payload, dict) else {}


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_user_repo",
    "get_exercise_repo",
    # Request
    "get_request_payload",
]
