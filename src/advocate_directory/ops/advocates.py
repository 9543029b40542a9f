"""
Advocate operations: search/sort listing and seeding.

Storage failures are logged here, with their cause, and re-raised as
generic :class:`~advocate_directory.core.errors.StorageError` subclasses.
Nothing is retried.
"""

from __future__ import annotations

import time
from collections.abc import Iterable, Mapping
from typing import Any

from advocate_directory.core.errors import ListingFailedError, SeedFailedError, StorageError
from advocate_directory.core.logging import get_logger
from advocate_directory.core.query import SearchQuery, build_search_statement
from advocate_directory.core.repositories import AdvocateRepository
from advocate_directory.core.seed_data import seed_records
from advocate_directory.ops.context import OperationContext
from advocate_directory.ops.responses import AdvocateRecord, SeedResult

logger = get_logger(__name__)

SEED_MESSAGE = "Seeded advocates successfully"


def _advocate_repo(ctx: OperationContext) -> AdvocateRepository:
    return AdvocateRepository(ctx.session)


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


# ------------------------------------------------------------------ #
# Listing
# ------------------------------------------------------------------ #


def list_advocates(
    ctx: OperationContext,
    query: SearchQuery | None = None,
) -> list[AdvocateRecord]:
    """Return advocates matching *query*'s keyword, in its sort order.

    Raises:
        ListingFailedError: the storage query failed.
    """
    query = query or SearchQuery()
    start = time.perf_counter()

    try:
        rows = _advocate_repo(ctx).search(build_search_statement(query))
    except Exception as exc:
        logger.exception(
            "advocate_listing_failed",
            request_id=ctx.request_id,
            caller=ctx.caller,
            error=str(exc),
        )
        raise ListingFailedError(cause=exc).with_context(
            keyword=query.keyword,
            sort_by=query.sort.key,
        ) from exc

    records = [AdvocateRecord.from_row(row) for row in rows]
    logger.info(
        "advocates_listed",
        request_id=ctx.request_id,
        caller=ctx.caller,
        keyword=query.keyword,
        sort_by=query.sort.resolved_key,
        sort_dir=query.sort.direction.value,
        count=len(records),
        elapsed_ms=_elapsed_ms(start),
    )
    return records


def count_advocates(ctx: OperationContext) -> int:
    """Total number of stored advocates."""
    try:
        return _advocate_repo(ctx).count()
    except Exception as exc:
        logger.exception("advocate_count_failed", request_id=ctx.request_id, error=str(exc))
        raise StorageError("Could not count advocates", cause=exc) from exc


# ------------------------------------------------------------------ #
# Seeding
# ------------------------------------------------------------------ #


def seed_advocates(
    ctx: OperationContext,
    records: Iterable[Mapping[str, Any]] | None = None,
) -> SeedResult:
    """Replace every advocate with *records* (the built-in dataset by default).

    Delete and insert share one transaction: on failure the session is
    rolled back and the previous rows survive.

    Raises:
        SeedFailedError: the delete or insert failed.
    """
    payload = list(records) if records is not None else seed_records()
    session = ctx.session
    start = time.perf_counter()

    try:
        repo = _advocate_repo(ctx)
        deleted = repo.delete_all()
        rows = repo.insert_many(payload)
        session.commit()
    except Exception as exc:
        session.rollback()
        logger.exception(
            "advocate_seed_failed",
            request_id=ctx.request_id,
            caller=ctx.caller,
            error=str(exc),
        )
        raise SeedFailedError(cause=exc) from exc

    inserted = [AdvocateRecord.from_row(row) for row in rows]
    logger.info(
        "advocates_seeded",
        request_id=ctx.request_id,
        caller=ctx.caller,
        deleted=deleted,
        count=len(inserted),
        elapsed_ms=_elapsed_ms(start),
    )
    return SeedResult(message=SEED_MESSAGE, count=len(inserted), records=inserted, deleted=deleted)
