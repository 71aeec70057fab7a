"""Department management endpoints."""
from fastapi import APIRouter, Depends, status

from hr_portal.interfaces.http.deps import get_portal
from hr_portal.schemas import DepartmentCreate, DepartmentResponse, DepartmentUpdate, SuccessResponse
from hr_portal.services import PortalService

router = APIRouter()


@router.get("", response_model=list[DepartmentResponse], summary="List departments")
async def list_departments(portal: PortalService = Depends(get_portal)):
    return [DepartmentResponse.model_validate(dept) for dept in portal.list_departments()]


@router.post(
    "",
    response_model=DepartmentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a department",
)
async def create_department(payload: DepartmentCreate, portal: PortalService = Depends(get_portal)):
    department = portal.save_department(payload.name, payload.description, department_id=payload.id)
    return DepartmentResponse.model_validate(department)


@router.put("/{department_id}", response_model=DepartmentResponse, summary="Edit a department")
async def update_department(
    department_id: int,
    payload: DepartmentUpdate,
    portal: PortalService = Depends(get_portal),
):
    department = portal.save_department(payload.name, payload.description, editing_id=department_id)
    return DepartmentResponse.model_validate(department)


@router.delete("/{department_id}", response_model=SuccessResponse, summary="Delete a department")
async def delete_department(department_id: int, portal: PortalService = Depends(get_portal)):
    portal.delete_department(department_id)
    return SuccessResponse(message="Department deleted successfully")
