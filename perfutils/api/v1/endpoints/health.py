"""
Health check endpoint.
"""
from fastapi import APIRouter, Depends

from perfutils.api.deps import get_registry
from perfutils.schemas.measurements import HealthResponse
from perfutils.services.timer_registry import TimerRegistry

router = APIRouter()


@router.get("/", response_model=HealthResponse)
async def health_check(registry: TimerRegistry = Depends(get_registry)):
    """
    Health check endpoint.
    
    Returns:
        HealthResponse with status and timer counts
    """
    return HealthResponse(
        status="ok",
        activeTimers=len(registry.active_names),
        measuredTimers=len(registry.measurements)
    )
