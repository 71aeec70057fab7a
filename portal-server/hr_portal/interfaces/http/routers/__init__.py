"""HTTP routers for the portal surface."""
