"""View resolution for client-side navigation."""
from fastapi import APIRouter, Depends

from hr_portal.interfaces.http.deps import get_portal
from hr_portal.schemas import ViewResponse
from hr_portal.services import PortalService

router = APIRouter()


@router.get("", response_model=ViewResponse, summary="Resolve the default view")
async def resolve_home(portal: PortalService = Depends(get_portal)):
    return ViewResponse.model_validate(portal.navigate(None))


@router.get("/{view}", response_model=ViewResponse, summary="Resolve which view the session may see")
async def resolve(view: str, portal: PortalService = Depends(get_portal)):
    return ViewResponse.model_validate(portal.navigate(view))
