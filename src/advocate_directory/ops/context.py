"""
Request-scoped context for operations.

Every operation function receives an :class:`OperationContext` as its first
argument.  The context carries the database session, caller identity and
arbitrary metadata for logging.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.orm import Session


@dataclass
class OperationContext:
    """Context passed to every operation function.

    Attributes:
        session: SQLAlchemy session for this request.
        request_id: Unique ID for this operation invocation (auto-generated).
        caller: Origin of the request: ``"api"``, ``"cli"`` or ``"sdk"``.
        metadata: Arbitrary key/value pairs forwarded to logging.
    """

    session: Session
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    caller: str = "sdk"
    metadata: dict[str, Any] = field(default_factory=dict)
