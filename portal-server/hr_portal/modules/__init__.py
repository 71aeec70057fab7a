"""Domain modules and shared exports."""

from . import accounts, auth, common, departments, employees, requests, store

__all__ = [
    "accounts",
    "auth",
    "common",
    "departments",
    "employees",
    "requests",
    "store",
]
