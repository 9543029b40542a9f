"""
Seed router: replace the advocates table with the built-in dataset.

Endpoints:
    POST /seed    Delete every advocate and insert the seed dataset
"""

from __future__ import annotations

from fastapi import APIRouter

from advocate_directory.api.deps import OpContext
from advocate_directory.api.schemas.advocates import AdvocateSchema, ErrorEnvelope, SeedEnvelope
from advocate_directory.ops.advocates import seed_advocates

router = APIRouter()


@router.post(
    "/seed",
    response_model=SeedEnvelope,
    responses={500: {"model": ErrorEnvelope}},
)
def post_seed(ctx: OpContext):
    """Replace all advocates with the seed dataset (single transaction)."""
    result = seed_advocates(ctx)
    return SeedEnvelope(
        message=result.message,
        count=result.count,
        records=[AdvocateSchema.model_validate(r) for r in result.records],
    )
