"""HTTP API for the text formatter (FastAPI)."""
