"""
Test Fixtures and Helpers for Fake Repositories.

This module provides pytest fixtures and helper functions for overriding
FastAPI dependencies with fake repository implementations.

Usage:
    def test_something(app_with_fake_repos, api_client):
        app_with_fake_repos["user_repo"].seed([{"username": "ada"}])
        response = api_client.get("/api/users")
        assert response.status_code == 200

Or use the standalone functions:
    from tests.fakes.conftest import override_dependency, reset_overrides

    def test_something():
        reset_overrides()
        override_dependency(get_user_repo, FakeUserRepository())

        # Test code here...

        reset_overrides()
"""

from typing import Any, Callable, Dict, Type

import pytest
from fastapi.testclient import TestClient

from api import deps
from application.ports import ExerciseRepository, UserRepository


# Type for repository dependency getters
RepoGetter = Callable[..., Any]


# =============================================================================
# Reset and Override Functions
# =============================================================================


def reset_overrides() -> None:
    """
    Reset all FastAPI dependency overrides.

    Call this in test setup/teardown to ensure clean state.
    """
    from backend.main import app

    app.dependency_overrides.clear()


def override_dependency(getter: RepoGetter, implementation: Any) -> None:
    """
    Override a FastAPI dependency with a fake implementation.

    Args:
        getter: The dependency getter function (e.g., get_user_repo)
        implementation: The fake implementation instance or factory
    """
    from backend.main import app

    if callable(implementation) and not isinstance(implementation, type):
        app.dependency_overrides[getter] = implementation
    else:
        app.dependency_overrides[getter] = lambda: implementation


def override_with_fake(getter: RepoGetter, fake_class: Type, **kwargs) -> Any:
    """
    Create and override with a fake repository instance.

    Returns:
        The created fake instance (for seeding data etc.)
    """
    fake_instance = fake_class(**kwargs)
    override_dependency(getter, fake_instance)
    return fake_instance


# =============================================================================
# pytest Fixtures
# =============================================================================


@pytest.fixture
def override_deps() -> Callable[[RepoGetter, Any], Any]:
    """
    Fixture that provides a dependency override helper.

    Resets overrides before each test and cleans up after.
    """
    reset_overrides()

    def _override(getter: RepoGetter, implementation: Any) -> Any:
        override_dependency(getter, implementation)
        return implementation

    yield _override

    reset_overrides()


@pytest.fixture
def fake_user_repo() -> UserRepository:
    """Fixture providing a fresh FakeUserRepository."""
    from tests.fakes import FakeUserRepository
    return FakeUserRepository()


@pytest.fixture
def fake_exercise_repo() -> ExerciseRepository:
    """Fixture providing a fresh FakeExerciseRepository."""
    from tests.fakes import FakeExerciseRepository
    return FakeExerciseRepository()


@pytest.fixture
def app_with_fake_repos(
    fake_user_repo: UserRepository,
    fake_exercise_repo: ExerciseRepository,
) -> Dict[str, Any]:
    """
    Fixture that overrides both repository dependencies with fakes.

    Returns:
        Dict mapping dependency names to fake instances
    """
    reset_overrides()

    override_dependency(deps.get_user_repo, fake_user_repo)
    override_dependency(deps.get_exercise_repo, fake_exercise_repo)

    yield {
        "user_repo": fake_user_repo,
        "exercise_repo": fake_exercise_repo,
    }

    reset_overrides()


@pytest.fixture
def api_client(app_with_fake_repos) -> TestClient:
    """
    TestClient for the default app, wired to fake repositories.

    Server exceptions are rendered as responses so 500 paths can be asserted.
    """
    from backend.main import app

    return TestClient(app, raise_server_exceptions=False)
