"""
Read-only endpoints exposing recorded measurements.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from perfutils.api.deps import get_registry
from perfutils.core.logging import get_logger
from perfutils.schemas.measurements import MeasurementDetail, MeasurementsResponse, TimerStatus
from perfutils.services.timer_registry import TimerRegistry

router = APIRouter()
logger = get_logger(__name__)


def _create_error_response(
    code: str,
    message: str,
    request_id: str,
    status_code: int
) -> JSONResponse:
    """
    Create a consistent JSON error response.
    
    Args:
        code: Error code
        message: Error message
        request_id: Request ID
        status_code: HTTP status code
        
    Returns:
        JSONResponse with error format
    """
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "requestId": request_id
            }
        }
    )


@router.get("/measurements", response_model=MeasurementsResponse)
async def list_measurements(registry: TimerRegistry = Depends(get_registry)) -> MeasurementsResponse:
    """Return every recorded measurement."""
    return MeasurementsResponse(
        measurements={name: record.raw for name, record in registry.measurements.items()}
    )


@router.get("/measurements/{name:path}", response_model=MeasurementDetail)
async def get_measurement(
    name: str,
    http_request: Request,
    registry: TimerRegistry = Depends(get_registry),
):
    """
    Return the recorded runs for one timer name.
    
    Args:
        name: Timer name (may contain slashes)
        http_request: FastAPI request object for accessing request_id
        registry: Timer registry
        
    Returns:
        MeasurementDetail, or a 404 error response when nothing was recorded
    """
    request_id = getattr(http_request.state, "request_id", None) or "unknown"
    
    record = registry.get(name)
    if record is None:
        logger.info(f"No measurement recorded for: {name}", extra={"request_id": request_id})
        return _create_error_response(
            code="MEASUREMENT_NOT_FOUND",
            message=f"No measurement recorded for '{name}'",
            request_id=request_id,
            status_code=404
        )
    
    return MeasurementDetail(
        name=name,
        values=list(record.values),
        runs=record.runs,
        last=record.last,
        active=registry.is_active(name),
        updatable=name in registry.updatable_names
    )


@router.get("/timers/{name:path}", response_model=TimerStatus)
async def get_timer_status(name: str, registry: TimerRegistry = Depends(get_registry)) -> TimerStatus:
    """Return whether a timer is running or still updatable."""
    return TimerStatus(
        name=name,
        active=registry.is_active(name),
        updatable=name in registry.updatable_names
    )
