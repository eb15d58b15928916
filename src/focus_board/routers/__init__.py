"""HTTP routers for the Focus Board API."""
