"""
Pydantic schemas for the measurement reporting endpoints.
"""
from typing import Dict, List, Union
from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Health check response schema."""
    
    status: str
    activeTimers: int = Field(..., description="Number of timers currently running")
    measuredTimers: int = Field(..., description="Number of names with recorded measurements")


class MeasurementsResponse(BaseModel):
    """All recorded measurements, as recorded."""
    
    measurements: Dict[str, Union[float, List[float]]] = Field(
        ...,
        description="Duration in milliseconds, or list of durations when a name ran more than once"
    )
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "measurements": {
                    "Open file: /src/main.py": 12.5,
                    "GET /api/v1/health": [1.2, 0.8, 0.9]
                }
            }
        }
    )


class MeasurementDetail(BaseModel):
    """Recorded runs for a single timer name."""
    
    name: str = Field(..., description="Timer name")
    values: List[float] = Field(..., description="Recorded durations in milliseconds, oldest first")
    runs: int = Field(..., description="Number of recorded runs")
    last: float = Field(..., description="Most recent duration in milliseconds")
    active: bool = Field(..., description="Whether the timer is currently running")
    updatable: bool = Field(..., description="Whether the latest run may still be overwritten")


class TimerStatus(BaseModel):
    """Tracking state of a timer name."""
    
    name: str
    active: bool
    updatable: bool
