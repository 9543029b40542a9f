"""
FastAPI dependency injection: shared singletons and per-request factories.

Usage in routers::

    from advocate_directory.api.deps import OpContext

    @router.get("/advocates")
    def list_all(ctx: OpContext):
        ...
"""

from __future__ import annotations

import uuid
from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from advocate_directory.config import DirectorySettings
from advocate_directory.config import get_settings as _load_settings
from advocate_directory.ops.context import OperationContext

# ── Settings (singleton) ─────────────────────────────────────────────────


def get_settings() -> DirectorySettings:
    """Process-wide settings; ``create_app`` overrides this per app."""
    return _load_settings()


# ── Database session (per-request) ───────────────────────────────────────


def get_session(request: Request) -> Generator[Session, None, None]:
    """Yield a session from the app's session factory for the request lifespan."""
    session = request.app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


# ── Operation context (per-request) ──────────────────────────────────────


def get_operation_context(
    request: Request,
    session: Annotated[Session, Depends(get_session)],
) -> OperationContext:
    """Build an :class:`OperationContext` from the current request."""
    request_id = getattr(request.state, "request_id", str(uuid.uuid4()))
    return OperationContext(session=session, request_id=request_id, caller="api")


# ── Annotated aliases for router signatures ──────────────────────────────

OpContext = Annotated[OperationContext, Depends(get_operation_context)]
Settings = Annotated[DirectorySettings, Depends(get_settings)]
