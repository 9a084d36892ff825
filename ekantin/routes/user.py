"""routes/user.py – POST /api/user/profile (upsert by id)"""
from typing import Optional

from fastapi import APIRouter, Depends

from ..core.profile import ProfileService
from ..deps import get_profiles
from ..errors import to_http_error
from ..models import SuccessResponse, UserProfileRequest

router = APIRouter(prefix="/api/user", tags=["User"])


@router.post("/profile", response_model=SuccessResponse)
async def upsert_profile(
    req: Optional[UserProfileRequest] = None,
    profiles: ProfileService = Depends(get_profiles),
):
    req = req or UserProfileRequest()
    try:
        await profiles.upsert(req.id, req.email, req.full_name, req.avatar_url)
        return SuccessResponse(success=True)
    except Exception as e:
        raise to_http_error("profile", e)
