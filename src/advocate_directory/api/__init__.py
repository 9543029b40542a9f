"""
REST API layer for the advocate directory.

All business logic lives in ``advocate_directory.ops``; this package handles
only HTTP transport concerns: parameter parsing, serialisation, error mapping
and request context.

Quick start::

    from advocate_directory.api import create_app

    app = create_app()  # ready for uvicorn
"""

from advocate_directory.api.app import create_app

__all__ = ["create_app"]
