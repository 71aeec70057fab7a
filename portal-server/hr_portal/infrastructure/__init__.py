"""Infrastructure adapters (persistence backends)."""
