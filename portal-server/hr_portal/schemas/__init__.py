"""Pydantic schemas used by the HTTP interface."""
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from hr_portal.modules.requests import RequestStatus


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


class RegisterRequest(BaseModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""


class AccountResponse(BaseModel):
    first_name: str
    last_name: str
    email: str
    role: str
    verified: bool

    model_config = ConfigDict(from_attributes=True)


class SessionResponse(BaseModel):
    authenticated: bool
    account: Optional[AccountResponse] = None
    pending_email: Optional[str] = None


class ViewResponse(BaseModel):
    view: str
    requested: str
    redirected: bool = False
    reason: Optional[str] = None
    show_verified_notice: bool = False

    model_config = ConfigDict(from_attributes=True)


class ProfileUpdate(BaseModel):
    first_name: str = ""
    last_name: str = ""
    new_password: Optional[str] = None


class AccountSave(BaseModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: Optional[str] = None
    role: str = "user"
    verified: bool = False


class PasswordReset(BaseModel):
    new_password: str = ""


class DepartmentCreate(BaseModel):
    name: str = ""
    description: str = ""
    id: Optional[int] = None


class DepartmentUpdate(BaseModel):
    name: str = ""
    description: str = ""


class DepartmentResponse(BaseModel):
    id: int
    name: str
    description: str

    model_config = ConfigDict(from_attributes=True)


class EmployeeSave(BaseModel):
    id: Union[int, str] = ""
    email: str = ""
    position: str = ""
    department_id: Optional[Union[int, str]] = None
    hire_date: Optional[str] = None


class EmployeeResponse(BaseModel):
    id: Union[int, str]
    email: str
    position: str
    department_id: Union[int, str]
    hire_date: Optional[str] = None
    department_name: Optional[str] = None


class RequestItemPayload(BaseModel):
    name: str = ""
    qty: Any = 1


class RequestCreate(BaseModel):
    type: str = ""
    items: list[RequestItemPayload] = Field(default_factory=list)


class RequestItemResponse(BaseModel):
    name: str
    qty: int

    model_config = ConfigDict(from_attributes=True)


class RequestResponse(BaseModel):
    type: str
    items: list[RequestItemResponse]
    status: RequestStatus
    date: str
    employee_email: str

    model_config = ConfigDict(from_attributes=True)


class SuccessResponse(BaseModel):
    success: bool = True
    message: str = "OK"
    data: Optional[Any] = None


class ErrorResponse(BaseModel):
    detail: str
    error: str
