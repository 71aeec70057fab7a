"""Profile endpoints for the logged-in account."""
from fastapi import APIRouter, Depends

from hr_portal.interfaces.http.deps import get_portal
from hr_portal.schemas import AccountResponse, ProfileUpdate
from hr_portal.services import PortalService

router = APIRouter()


@router.get("", response_model=AccountResponse, summary="Show the current profile")
async def get_profile(portal: PortalService = Depends(get_portal)):
    return AccountResponse.model_validate(portal.profile())


@router.put("", response_model=AccountResponse, summary="Edit the current profile")
async def update_profile(payload: ProfileUpdate, portal: PortalService = Depends(get_portal)):
    account = portal.update_profile(payload.first_name, payload.last_name, payload.new_password)
    return AccountResponse.model_validate(account)
