"""
Shared API dependencies.
"""
from fastapi import Request

from perfutils.services.timer_registry import TimerRegistry


def get_registry(request: Request) -> TimerRegistry:
    """Registry the running application reports on."""
    return request.app.state.registry
