"""POST /api/sizes/match: rank existing sizes against a requested one."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from autoadapt.dependencies import get_adapt_config
from autoadapt.engine.config import AdaptConfig
from autoadapt.engine.size_matching import (
    find_best_reference_size,
    find_closest_size_objects_with_matches,
)
from autoadapt.models.requests import SizeMatchRequest
from autoadapt.models.responses import SizeMatchOut, SizeMatchResponse

router = APIRouter()


@router.post("/sizes/match", response_model=SizeMatchResponse)
async def match_sizes(
    req: SizeMatchRequest, config: AdaptConfig = Depends(get_adapt_config)
) -> SizeMatchResponse:
    sizes = {size_id: entry.model_dump() for size_id, entry in req.sizes.items()}
    best = find_best_reference_size(sizes, req.target, req.requested_id)
    ranked = find_closest_size_objects_with_matches(sizes, req.target, config)
    return SizeMatchResponse(
        best_size_id=best,
        matches=[
            SizeMatchOut(size_id=m.size_id, size=m.size, percentage=m.percentage)
            for m in ranked.matches
        ],
    )
