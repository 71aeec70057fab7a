"""Application services composed from the domain modules."""

from .portal import PortalService

__all__ = ["PortalService"]
