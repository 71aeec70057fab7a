"""HTTP interface for the portal."""
