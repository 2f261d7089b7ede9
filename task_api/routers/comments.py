from fastapi import APIRouter, Depends, HTTPException, status

from ..deps import account_interceptor, get_comment_service, get_profile_service, pagination_params, validate_owner_id
from ..pagination import Paginate
from ..schemas.comment import CommentCreate
from ..schemas.common import DataResponse
from ..services import CommentService, ProfileService

router = APIRouter()
account_router = APIRouter(dependencies=[Depends(account_interceptor)])


@router.get("/tasks/{task_id}/comments", response_model=DataResponse)
async def get_topic_comments(
    task_id: str,
    paginate: Paginate = Depends(pagination_params),
    comments: CommentService = Depends(get_comment_service),
):
    return DataResponse(data=await comments.get_topic_comments(task_id, paginate.page, paginate.limit))


@account_router.post(
    "/{owner_id}/tasks/{task_id}/comments",
    response_model=DataResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    owner_id: str,
    task_id: str,
    payload: CommentCreate,
    comments: CommentService = Depends(get_comment_service),
    profiles: ProfileService = Depends(get_profile_service),
):
    """Comment on a task. The task is not checked for existence."""
    await validate_owner_id(profiles, owner_id)

    content = payload.content.strip()
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Content is required")

    return DataResponse(data=await comments.create_comment(owner_id, task_id, content))
