"""
Users router for user registration and exercise logging.

This router provides endpoints for:
- Registering users (idempotent per username) and listing them
- Logging exercises against a user
- Reading a user's exercise log with date bounds and a row cap

Body fields are read from JSON or form posts via get_request_payload and
validated by the use cases, so bad input yields 400 ``{"error": ...}``
rather than FastAPI's 422 validation response.
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Path, Query

from api.deps import get_exercise_repo, get_request_payload, get_user_repo
from api.schemas.users import (
    ErrorResponse,
    ExerciseLogResponse,
    ExerciseResponse,
    UserResponse,
)
from application.ports import ExerciseRepository, UserRepository
from application.use_cases import (
    AddExerciseUseCase,
    CreateUserUseCase,
    GetLogsUseCase,
    ListUsersUseCase,
)

router = APIRouter(
    prefix="/api/users",
    tags=["Users"],
)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid or missing input"},
    500: {"model": ErrorResponse, "description": "Persistence failure"},
}


# =============================================================================
# User Endpoints
# =============================================================================


@router.post("", response_model=UserResponse, responses=ERROR_RESPONSES)
def create_user(
    payload: Dict[str, Any] = Depends(get_request_payload),
    user_repo: UserRepository = Depends(get_user_repo),
) -> UserResponse:
    """
    Register a username.

    Returns the existing user when the username is already registered.
    """
    use_case = CreateUserUseCase(user_repo=user_repo)
    user = use_case.execute(payload.get("username"))
    return UserResponse.from_user(user)


@router.get("", response_model=List[UserResponse], responses={500: ERROR_RESPONSES[500]})
def list_users(
    user_repo: UserRepository = Depends(get_user_repo),
) -> List[UserResponse]:
    """List every registered user."""
    users = ListUsersUseCase(user_repo=user_repo).execute()
    return [UserResponse.from_user(u) for u in users]


# =============================================================================
# Exercise Endpoints
# =============================================================================


@router.post(
    "/{user_id}/exercises",
    response_model=ExerciseResponse,
    responses={**ERROR_RESPONSES, 404: {"model": ErrorResponse, "description": "User not found"}},
)
def add_exercise(
    user_id: str = Path(..., description="Owning user's id"),
    payload: Dict[str, Any] = Depends(get_request_payload),
    user_repo: UserRepository = Depends(get_user_repo),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
) -> ExerciseResponse:
    """
    Log an exercise for a user.

    Body fields: ``description`` (required), ``duration`` (required,
    integer), ``date`` (optional, defaults to now). Dates must be ISO-8601
    or the rendered ``"Mon Jan 01 2024"`` form; anything else is a 400.
    """
    use_case = AddExerciseUseCase(user_repo=user_repo, exercise_repo=exercise_repo)
    result = use_case.execute(
        user_id,
        description=payload.get("description"),
        duration=payload.get("duration"),
        date=payload.get("date"),
    )
    return ExerciseResponse.from_result(result)


@router.get(
    "/{user_id}/logs",
    response_model=ExerciseLogResponse,
    responses={**ERROR_RESPONSES, 404: {"model": ErrorResponse, "description": "User not found"}},
)
def get_logs(
    user_id: str = Path(..., description="Owning user's id"),
    date_from: Optional[str] = Query(None, alias="from", description="Inclusive lower date bound"),
    date_to: Optional[str] = Query(None, alias="to", description="Inclusive upper date bound"),
    limit: Optional[str] = Query(None, description="Maximum number of entries to return"),
    user_repo: UserRepository = Depends(get_user_repo),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
) -> ExerciseLogResponse:
    """
    Read a user's exercise log, oldest first.

    ``count`` is the number of entries matching the date bounds, even when
    ``limit`` returns fewer. ``from`` and ``to`` take ISO-8601 or the
    rendered ``"Mon Jan 01 2024"`` form; other date forms are a 400.
    """
    use_case = GetLogsUseCase(user_repo=user_repo, exercise_repo=exercise_repo)
    result = use_case.execute(
        user_id,
        date_from=date_from,
        date_to=date_to,
        limit=limit,
    )
    return ExerciseLogResponse.from_result(result)
