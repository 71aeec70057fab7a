"""Container and portal dependency providers."""

from fastapi import Depends, Request

from hr_portal.core.container import ApplicationContainer
from hr_portal.services import PortalService


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_portal(container: ApplicationContainer = Depends(get_container)) -> PortalService:
    return container.portal


__all__ = ["get_container", "get_portal"]
