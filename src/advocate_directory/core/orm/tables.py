"""ORM table definitions.

Column names are snake_case in storage; the public camelCase names live in
:mod:`advocate_directory.core.columns` and the API schemas.
"""

from __future__ import annotations

import datetime

from sqlalchemy import JSON, BigInteger, DateTime, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from advocate_directory.core.orm.base import DirectoryBase


class AdvocateTable(DirectoryBase):
    __tablename__ = "advocates"
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str] = mapped_column(Text, nullable=False)
    degree: Mapped[str] = mapped_column(Text, nullable=False)
    specialties: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    years_of_experience: Mapped[int] = mapped_column(Integer, nullable=False)
    phone_number: Mapped[int] = mapped_column(BigInteger, nullable=False)
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"AdvocateTable(id={self.id!r}, name={self.first_name!r} {self.last_name!r})"
