"""GET /v1/risk/predict/{file_id} - Single-file risk with advisory text"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from risk_galaxy.api.v1.schemas import PredictionResponse
from risk_galaxy.api.dependencies import get_pipeline, get_request_id
from risk_galaxy.domain.galaxy import GalaxyPipeline
from risk_galaxy.domain.exceptions import InvalidSignalError, NotFoundError, SignalProviderError
from risk_galaxy.infrastructure.observability.metrics import (
    invalid_signal_counter,
    provider_fetch_failures_counter,
    record_galaxy_run,
)

router = APIRouter()


@router.get("/risk/predict/{file_id}", response_model=PredictionResponse)
async def get_prediction(file_id: str, request: Request, pipeline: GalaxyPipeline = Depends(get_pipeline)):
    """
    Retrieve one file's risk record plus a static prediction and recommendation.

    Returns:
        404 if the file id is not in the current signal snapshot
    """
    request_id = get_request_id(request)

    try:
        result = await pipeline.compute_prediction(file_id)

    except NotFoundError:
        raise HTTPException(status_code=404, detail="File not found")

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

    record_galaxy_run("prediction", [result.record])
    return PredictionResponse.from_prediction(result)
