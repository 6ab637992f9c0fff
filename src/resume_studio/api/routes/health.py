"""Health check routes."""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """Report API status and whether the database resource is open."""
    database = request.app.state.database
    return {"status": "healthy", "database": "open" if database.is_open else "closed"}
