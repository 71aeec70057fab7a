"""Employee request endpoints."""
from fastapi import APIRouter, Depends, status

from hr_portal.interfaces.http.deps import get_portal
from hr_portal.schemas import RequestCreate, RequestResponse
from hr_portal.services import PortalService

router = APIRouter()


@router.get("", response_model=list[RequestResponse], summary="List my requests")
async def my_requests(portal: PortalService = Depends(get_portal)):
    return [RequestResponse.model_validate(request) for request in portal.my_requests()]


@router.post("", response_model=RequestResponse, status_code=status.HTTP_201_CREATED, summary="Submit a request")
async def submit_request(payload: RequestCreate, portal: PortalService = Depends(get_portal)):
    request = portal.submit_request(payload.type, [item.model_dump() for item in payload.items])
    return RequestResponse.model_validate(request)
