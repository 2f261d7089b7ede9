from fastapi import APIRouter, Depends, HTTPException, status

from .. import config
from ..deps import get_profile_service
from ..schemas.common import DataResponse
from ..services import ProfileService

router = APIRouter()


@router.get("/profiles/{owner_id}", response_model=DataResponse)
async def get_profile(owner_id: str, profiles: ProfileService = Depends(get_profile_service)):
    profile = await profiles.get_profile(owner_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid owner id")
    return DataResponse(data=profile)


@router.get("/profiles", response_model=DataResponse)
async def get_profile_list(owner_id: str = "", profiles: ProfileService = Depends(get_profile_service)):
    """Batch lookup by a comma separated ``owner_id`` query parameter."""
    if not owner_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid owner id")
    owner_ids = owner_id.split(",")
    if len(owner_ids) > config.MAX_GET_PROFILE_LIMIT:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Limit cannot be more than {config.MAX_GET_PROFILE_LIMIT}",
        )
    return DataResponse(data=await profiles.get_profile_list(owner_ids))
