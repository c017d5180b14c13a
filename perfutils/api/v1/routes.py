"""
API v1 router configuration.
"""
from fastapi import APIRouter

from perfutils.api.v1.endpoints import health, measurements

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(measurements.router, tags=["measurements"])
