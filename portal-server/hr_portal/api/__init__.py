from fastapi import APIRouter

from hr_portal.interfaces.http.errors import error_responses
from hr_portal.interfaces.http.routers import accounts, auth, departments, employees, profile, requests, views


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix, responses=error_responses())
    router.include_router(auth.router, prefix="/auth", tags=["auth"])
    router.include_router(views.router, prefix="/views", tags=["views"])
    router.include_router(profile.router, prefix="/profile", tags=["profile"])
    router.include_router(accounts.router, prefix="/accounts", tags=["accounts"])
    router.include_router(departments.router, prefix="/departments", tags=["departments"])
    router.include_router(employees.router, prefix="/employees", tags=["employees"])
    router.include_router(requests.router, prefix="/requests", tags=["requests"])
    return router


__all__ = [
    "create_api_router",
]
