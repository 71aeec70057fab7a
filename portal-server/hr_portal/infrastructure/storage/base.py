"""Declarative base for storage tables."""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
