"""Delivery interfaces (HTTP)."""
