"""HTTP API over an ADR repository (Starlette, served by uvicorn)."""
