from fastapi import APIRouter, Depends, HTTPException, status

from ..deps import (
    account_interceptor,
    get_profile_service,
    get_task_service,
    pagination_params,
    validate_owner_id,
)
from ..models import TaskStatus
from ..pagination import Paginate
from ..schemas.common import DataResponse
from ..schemas.task import TaskCreate, TaskUpdate
from ..services import ProfileService, TaskManager

router = APIRouter()
account_router = APIRouter(dependencies=[Depends(account_interceptor)])


@router.get("/tasks", response_model=DataResponse)
async def get_all_task(
    paginate: Paginate = Depends(pagination_params),
    tasks: TaskManager = Depends(get_task_service),
):
    """List tasks that are not archived."""
    return DataResponse(data=await tasks.get_all_task(paginate.page, paginate.limit))


@router.get("/tasks/{task_id}", response_model=DataResponse)
async def get_task(task_id: str, tasks: TaskManager = Depends(get_task_service)):
    return DataResponse(data=await tasks.get_task(task_id))


@account_router.post("/{owner_id}/tasks", response_model=DataResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    owner_id: str,
    payload: TaskCreate,
    tasks: TaskManager = Depends(get_task_service),
    profiles: ProfileService = Depends(get_profile_service),
):
    """Create a new task for the owner."""
    await validate_owner_id(profiles, owner_id)

    topic = payload.topic.strip()
    description = payload.description.strip()
    if not topic:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Topic is required")
    if not description:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Description is required")

    return DataResponse(data=await tasks.create_task(owner_id, topic, description))


@account_router.patch("/{owner_id}/tasks/{task_id}", response_model=DataResponse)
async def update_task(
    owner_id: str,
    task_id: str,
    payload: TaskUpdate,
    tasks: TaskManager = Depends(get_task_service),
):
    """Update a task. Only status can be changed; a non-matching task is not reported."""
    if payload.status is None:
        raise HTTPException(status_code=status.HTTP_501_NOT_IMPLEMENTED, detail="Not implemented")
    if not TaskStatus.OPEN <= payload.status <= TaskStatus.DONE:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid status")

    await tasks.update_task_status(owner_id, task_id, TaskStatus(payload.status))
    return DataResponse(data="Task status updated successfully")


@account_router.delete("/{owner_id}/tasks/{task_id}", response_model=DataResponse)
async def archive_task(
    owner_id: str,
    task_id: str,
    tasks: TaskManager = Depends(get_task_service),
):
    matched = await tasks.archive_task(owner_id, task_id)
    if matched == 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Task or account not found")
    return DataResponse(data="Task archived successfully")
