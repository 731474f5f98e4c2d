"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
"""

from fastapi import APIRouter

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint for the exercise tracker.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}
