"""Typed domain models shared across runtime layers.

This module provides the request/response contracts exchanged between the
HTTP transport and the route handlers, plus the payload shapes each endpoint
returns. Payload keys are camelCase on the wire.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

APPLICATION_NAME = "Express Kubernetes Demo"
APPLICATION_VERSION = "1.0.0"
WELCOME_MESSAGE = "Hello from Kubernetes! 🚀"
HEALTH_STATUS_OK = "OK"
HEALTH_MESSAGE = "Health check passed"
UNAVAILABLE_PLACEHOLDER = "unavailable"


@dataclass(frozen=True)
class RouteRequest:
    """Transport-independent view of one inbound HTTP request.

    Attributes:
        method: Upper-case HTTP method.
        path: Request path without query string.
        headers: Header mapping keyed by lower-case header name.
    """

    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)

    def header(self, name: str) -> str | None:
        """Return one header value by case-insensitive name, or None when absent."""

        return self.headers.get(name.lower())


@dataclass(frozen=True)
class RouteResponse:
    """Handler result rendered by the transport as a JSON response.

    Attributes:
        status_code: HTTP status code.
        body: JSON-serializable response body.
    """

    status_code: int
    body: dict[str, Any]


@dataclass(frozen=True)
class MemorySnapshot:
    """Point-in-time memory usage of the current process.

    Attributes:
        rss_bytes: Resident set size.
        vms_bytes: Total virtual memory allocated.
        allocated_blocks: Interpreter heap blocks currently allocated.
    """

    rss_bytes: int
    vms_bytes: int
    allocated_blocks: int

    def to_payload(self) -> dict[str, int]:
        return {
            "rss": self.rss_bytes,
            "vms": self.vms_bytes,
            "allocatedBlocks": self.allocated_blocks,
        }


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by the liveness endpoint.

    Attributes:
        timestamp: ISO-8601 UTC time of handling.
        uptime_seconds: Elapsed seconds since process start.
        status: Overall status text.
        message: Human-readable status detail.
    """

    timestamp: str
    uptime_seconds: float
    status: str = HEALTH_STATUS_OK
    message: str = HEALTH_MESSAGE

    def to_payload(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "timestamp": self.timestamp,
            "uptimeSeconds": self.uptime_seconds,
            "message": self.message,
        }


@dataclass(frozen=True)
class RootInfo:
    """Greeting payload for the root endpoint.

    Attributes:
        environment: Runtime environment label.
        host: Echo of the client `Host` header, None when absent.
        server: Description of the serving stack.
        message: Fixed greeting.
        version: Fixed application version.
    """

    environment: str
    host: str | None
    server: str
    message: str = WELCOME_MESSAGE
    version: str = APPLICATION_VERSION

    def to_payload(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "version": self.version,
            "environment": self.environment,
            "host": self.host,
            "server": self.server,
        }


@dataclass(frozen=True)
class AppInfo:
    """Runtime metadata payload for the info endpoint.

    Fields that could not be read carry `UNAVAILABLE_PLACEHOLDER` instead.

    Attributes:
        runtime_version: Interpreter version string.
        platform: Operating-system platform identifier.
        memory: Memory snapshot or placeholder.
        env: Runtime environment label.
        app: Fixed application name.
    """

    runtime_version: str
    platform: str
    memory: MemorySnapshot | str
    env: str
    app: str = APPLICATION_NAME

    def to_payload(self) -> dict[str, Any]:
        memory_payload = self.memory.to_payload() if isinstance(self.memory, MemorySnapshot) else self.memory
        return {
            "app": self.app,
            "runtimeVersion": self.runtime_version,
            "platform": self.platform,
            "memory": memory_payload,
            "env": self.env,
        }
