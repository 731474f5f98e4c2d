"""
Shared pytest fixtures.

Fake repository fixtures live in tests/fakes/conftest.py and are exposed to
every test module from here.
"""
from tests.fakes.conftest import (  # noqa: F401
    api_client,
    app_with_fake_repos,
    fake_exercise_repo,
    fake_user_repo,
    override_deps,
)
