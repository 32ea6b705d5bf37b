"""GET /v1/risk/galaxy - Fragility scores for every tracked file"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from risk_galaxy.api.v1.schemas import GalaxyResponse, RiskRecordSchema, SummarySchema
from risk_galaxy.api.dependencies import get_pipeline, get_request_id
from risk_galaxy.domain.galaxy import GalaxyPipeline, summarize_galaxy
from risk_galaxy.domain.exceptions import InvalidSignalError, SignalProviderError
from risk_galaxy.infrastructure.observability.metrics import (
    invalid_signal_counter,
    provider_fetch_failures_counter,
    record_galaxy_run,
)
from risk_galaxy.infrastructure.observability.logging import log_galaxy_computed

router = APIRouter()


@router.get("/risk/galaxy", response_model=GalaxyResponse)
async def get_risk_galaxy(request: Request, pipeline: GalaxyPipeline = Depends(get_pipeline)):
    """
    Score all files from the signal provider.

    Flow:
    1. Fetch signal snapshot from provider
    2. Score each file (churn, expertise debt, complexity)
    3. Summarize status distribution
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        records = await pipeline.compute_galaxy()

    except SignalProviderError as e:
        provider_fetch_failures_counter.inc()
        logging.error(f"Signal provider error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Signal provider unavailable")

    except InvalidSignalError as e:
        invalid_signal_counter.inc()
        logging.error(f"Invalid signal: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    summary = summarize_galaxy(records)

    duration_ms = (time.time() - start_time) * 1000
    record_galaxy_run("galaxy", records)
    log_galaxy_computed(request_id, summary, duration_ms)

    return GalaxyResponse(
        files=[RiskRecordSchema.from_record(r) for r in records],
        summary=SummarySchema.from_summary(summary),
    )
