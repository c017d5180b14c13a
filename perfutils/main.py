"""
Main FastAPI application entry point.
"""
import uuid
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from perfutils.core.config import settings
from perfutils.core.logging import setup_logging, get_logger
from perfutils.api.v1.routes import api_router
from perfutils.services.timer_registry import TimerRegistry
from perfutils.utils.clock import Stopwatch

setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT or None)
logger = get_logger(__name__)


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Middleware to generate request IDs and record request timings."""
    
    def __init__(self, app, registry: TimerRegistry, track_timings: bool = True):
        super().__init__(app)
        self.registry = registry
        self.track_timings = track_timings
    
    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        
        logger.info(
            f"Request started: {request.method} {request.url.path}",
            extra={"request_id": request_id}
        )
        
        timer_name = f"{request.method} {request.url.path}"
        # A concurrent request to the same path already owns the timer
        use_registry = self.track_timings and not self.registry.is_active(timer_name)
        
        if use_registry:
            self.registry.start(timer_name)
        
        try:
            with Stopwatch() as stopwatch:
                response = await call_next(request)
        finally:
            if use_registry:
                latency_ms = self.registry.stop(timer_name)
            else:
                latency_ms = stopwatch.elapsed_ms

        response.headers["X-Request-Id"] = request_id
        
        logger.info(
            f"Request completed: {request.method} {request.url.path} "
            f"status={response.status_code} latency_ms={latency_ms:.2f}",
            extra={"request_id": request_id}
        )
        
        return response


def create_app(registry: Optional[TimerRegistry] = None) -> FastAPI:
    """
    Build the application around a timer registry.
    
    Args:
        registry: Registry to report on and record requests into
            (a new one is created when omitted)
        
    Returns:
        FastAPI application
    """
    registry = registry or TimerRegistry()
    
    application = FastAPI(
        title=f"{settings.APP_NAME} API",
        version=settings.VERSION,
        description=(
            "Read-only reporting API for in-process timing measurements. "
            "Exposes recorded timer durations and the state of running timers."
        ),
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
    )
    application.state.registry = registry
    
    application.add_middleware(
        RequestTimingMiddleware,
        registry=registry,
        track_timings=settings.TRACK_REQUEST_TIMINGS
    )
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    
    application.include_router(api_router, prefix=settings.API_V1_STR)
    
    @application.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": f"{settings.APP_NAME} API",
            "version": settings.VERSION,
            "docs": "/docs",
        }
    
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "perfutils.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
