"""POST /api/adapt and /api/layout: element adaptation."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from autoadapt.dependencies import get_adapt_config
from autoadapt.document.layout import generate_base_layout_for_size
from autoadapt.engine.config import AdaptConfig
from autoadapt.engine.context import AdaptContext
from autoadapt.engine.driver import PASS, create_driver
from autoadapt.engine.registry import AdaptMode
from autoadapt.models.requests import AdaptRequest, LayoutRequest
from autoadapt.models.responses import AdaptResponse, LayoutResponse

router = APIRouter()


@router.post("/adapt", response_model=AdaptResponse)
async def adapt(req: AdaptRequest, config: AdaptConfig = Depends(get_adapt_config)) -> AdaptResponse:
    start = time.perf_counter()

    ctx = AdaptContext.create(req.objects, req.reference_size, req.target_size, config)
    ctx = create_driver().run(ctx)

    elapsed = (time.perf_counter() - start) * 1000

    return AdaptResponse(
        objects=ctx.adapted,
        decisions=ctx.decisions,
        processing_time_ms=round(elapsed, 1),
        skewed=ctx.count(AdaptMode.SKEW.value),
        non_skewed=ctx.count(AdaptMode.NON_SKEW.value),
        passed_through=ctx.count(PASS),
    )


@router.post("/layout", response_model=LayoutResponse)
async def layout(req: LayoutRequest, config: AdaptConfig = Depends(get_adapt_config)) -> LayoutResponse:
    result = generate_base_layout_for_size(
        req.variant, req.target_size, req.reference_size_id, config
    )
    return LayoutResponse(
        reference_size_id=result.reference_size_id,
        target_size=result.target_size,
        objects=result.objects,
    )
