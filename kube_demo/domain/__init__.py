"""Domain models used across application layer boundaries."""

from .models import (
    APPLICATION_NAME,
    APPLICATION_VERSION,
    HEALTH_MESSAGE,
    HEALTH_STATUS_OK,
    UNAVAILABLE_PLACEHOLDER,
    WELCOME_MESSAGE,
    AppInfo,
    HealthStatus,
    MemorySnapshot,
    RootInfo,
    RouteRequest,
    RouteResponse,
)

__all__ = [
    "APPLICATION_NAME",
    "APPLICATION_VERSION",
    "HEALTH_MESSAGE",
    "HEALTH_STATUS_OK",
    "UNAVAILABLE_PLACEHOLDER",
    "WELCOME_MESSAGE",
    "AppInfo",
    "HealthStatus",
    "MemorySnapshot",
    "RootInfo",
    "RouteRequest",
    "RouteResponse",
]
