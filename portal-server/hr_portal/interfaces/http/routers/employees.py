"""Employee management endpoints."""
from fastapi import APIRouter, Depends, status

from hr_portal.interfaces.http.deps import get_portal
from hr_portal.modules.employees import Employee, EmployeeInput
from hr_portal.schemas import DepartmentResponse, EmployeeResponse, EmployeeSave, SuccessResponse
from hr_portal.services import PortalService

router = APIRouter()


def _to_schema(employee: Employee, portal: PortalService) -> EmployeeResponse:
    department = portal.employee_department(employee)
    return EmployeeResponse(
        id=employee.id,
        email=employee.email,
        position=employee.position,
        department_id=employee.department_id,
        hire_date=employee.hire_date,
        department_name=department.name if department else None,
    )


def _to_input(payload: EmployeeSave) -> EmployeeInput:
    return EmployeeInput(
        id=payload.id,
        email=payload.email,
        position=payload.position,
        department_id=payload.department_id,
        hire_date=payload.hire_date,
    )


@router.get("", response_model=list[EmployeeResponse], summary="List employees")
async def list_employees(portal: PortalService = Depends(get_portal)):
    return [_to_schema(employee, portal) for employee in portal.list_employees()]


@router.get(
    "/departments",
    response_model=list[DepartmentResponse],
    summary="Departments an employee may be assigned to",
)
async def eligible_departments(portal: PortalService = Depends(get_portal)):
    return [DepartmentResponse.model_validate(dept) for dept in portal.eligible_departments()]


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED, summary="Add an employee")
async def create_employee(payload: EmployeeSave, portal: PortalService = Depends(get_portal)):
    return _to_schema(portal.save_employee(_to_input(payload)), portal)


@router.put("/{employee_id}", response_model=EmployeeResponse, summary="Edit an employee")
async def update_employee(employee_id: str, payload: EmployeeSave, portal: PortalService = Depends(get_portal)):
    employee = portal.save_employee(_to_input(payload), editing_id=employee_id)
    return _to_schema(employee, portal)


@router.delete("/{employee_id}", response_model=SuccessResponse, summary="Delete an employee")
async def delete_employee(employee_id: str, portal: PortalService = Depends(get_portal)):
    portal.delete_employee(employee_id)
    return SuccessResponse(message="Employee deleted successfully")
