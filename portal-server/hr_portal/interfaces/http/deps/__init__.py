"""Reusable FastAPI dependencies."""

from .container import get_container, get_portal

__all__ = ["get_container", "get_portal"]
