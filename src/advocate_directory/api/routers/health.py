"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter
from sqlalchemy import text

from advocate_directory.api.deps import OpContext

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check."""
    return {"status": "healthy"}


@router.get("/health/ready")
def readiness_check(ctx: OpContext):
    """
    Readiness check - verifies database connectivity.
    """
    try:
        ctx.session.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as e:
        db_status = f"error: {type(e).__name__}"

    return {
        "status": "ready" if db_status == "connected" else "not_ready",
        "database": db_status,
    }
