from __future__ import annotations

from fastapi import APIRouter, Depends

from menu_api.api.dependencies import get_hit_counter
from menu_api.models.schemas import MetricsResponse
from menu_api.observability.metrics import HitCounter


router = APIRouter(prefix="/api", tags=["metrics"])


@router.get("/metrics", response_model=MetricsResponse)
async def metrics(hits: HitCounter = Depends(get_hit_counter)) -> MetricsResponse:
    return MetricsResponse.model_validate({"hits": hits.snapshot()})
