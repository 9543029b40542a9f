"""Declarative base for the advocate directory ORM models.

Uses SQLAlchemy 2.0 ``DeclarativeBase``.  Every column in
:mod:`advocate_directory.core.orm.tables` names its SA type explicitly.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class DirectoryBase(DeclarativeBase):
    """Shared declarative base for every directory table."""
