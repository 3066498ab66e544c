"""POST /v1/recommendations - affordable and top-ranked vehicles for a buyer"""

import time
from typing import Tuple

from fastapi import APIRouter, Depends, Request

from autofinance.api.dependencies import get_catalog, get_request_id
from autofinance.api.v1.schemas import RecommendationRequest, RecommendationResponse
from autofinance.config import settings
from autofinance.domain.models import Vehicle
from autofinance.domain.recommender import affordable_vehicle_ids, top3_recommended_vehicle_ids
from autofinance.infrastructure.catalog import parse_catalog
from autofinance.infrastructure.observability.logging import log_recommendation
from autofinance.infrastructure.observability.metrics import record_calculation

router = APIRouter()


@router.post("/recommendations", response_model=RecommendationResponse, name="recommendations")
def recommend_vehicles(
    request_body: RecommendationRequest,
    request: Request,
    default_catalog: Tuple[Vehicle, ...] = Depends(get_catalog),
):
    """
    Filter and rank vehicles for a buyer.

    Flow:
    1. Use the request's catalog, or the built-in lineup
    2. Collect every affordable vehicle (cheapest three as fallback)
    3. Rank by budget impact, closeness to target payment, and risk
    """
    start_time = time.time()

    catalog = (
        parse_catalog(v.model_dump() for v in request_body.catalog)
        if request_body.catalog is not None
        else default_catalog
    )
    profile = request_body.profile.to_domain()
    option = request_body.option.to_domain()

    affordable = affordable_vehicle_ids(catalog, profile, option)
    top = top3_recommended_vehicle_ids(catalog, profile, option, limit=settings.recommendation_limit)

    # Sets are unordered; report affordable ids in catalog order
    affordable_ordered = [v.id for v in catalog if v.id in affordable]

    duration_ms = (time.time() - start_time) * 1000
    record_calculation("recommendations")
    log_recommendation(get_request_id(request), len(catalog), len(affordable_ordered), top, duration_ms)

    return RecommendationResponse(affordable_vehicle_ids=affordable_ordered, top_vehicle_ids=top)
