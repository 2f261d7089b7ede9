"""
FastAPI dependencies resolving the services built in the application lifespan.
"""

from fastapi import HTTPException, Request, status

from . import config
from .pagination import Paginate
from .services import CommentService, ProfileService, TaskManager


def get_task_service(request: Request) -> TaskManager:
    return request.app.state.task_service


def get_comment_service(request: Request) -> CommentService:
    return request.app.state.comment_service


def get_profile_service(request: Request) -> ProfileService:
    return request.app.state.profile_service


async def account_interceptor(request: Request) -> None:
    """Hook for /account routes. Authentication is handled upstream; nothing is checked here."""


async def validate_owner_id(profiles: ProfileService, owner_id: str) -> None:
    """Reject mutations from owners without a profile."""
    if not owner_id.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid owner id")
    profile = await profiles.get_profile(owner_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid owner id")


def pagination_params(page: int = 1, limit: int = 10) -> Paginate:
    if page < 1:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid page number")
    if limit < 1:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid limit number")
    if limit > config.PAGINATION_MAX_LIMIT:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Limit cannot be more than {config.PAGINATION_MAX_LIMIT}",
        )
    return Paginate(page, limit)
