"""Route handlers for the health, root and info endpoints.

Handlers are plain functions over `RouteRequest` and return `RouteResponse`.
They never touch the transport, and every process fact comes from the
injected `RuntimeInfoPort`.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, TypeVar

from kube_demo.domain import (
    UNAVAILABLE_PLACEHOLDER,
    AppInfo,
    HealthStatus,
    MemorySnapshot,
    RootInfo,
    RouteRequest,
    RouteResponse,
)
from kube_demo.runtime import RuntimeInfoPort, RuntimeInfoUnavailableError

logger = logging.getLogger(__name__)

SERVER_FRAMEWORK_LABEL = "FastAPI"

_FactT = TypeVar("_FactT")


def _handler_format_timestamp(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _handler_read_fact(fact_name: str, reader: Callable[[], _FactT]) -> _FactT | str:
    try:
        return reader()
    except RuntimeInfoUnavailableError as error:
        logger.warning("Runtime fact %s unavailable: %s", fact_name, error)
        return UNAVAILABLE_PLACEHOLDER


def handler_server_description(runtime_info: RuntimeInfoPort) -> str:
    """Describe the serving stack, for example `FastAPI on Python 3.12.4`.

    Args:
        runtime_info: Runtime provider used for the interpreter version.

    Returns:
        str: Server description, with a placeholder version when unavailable.
    """

    runtime_version = _handler_read_fact("runtime_version", runtime_info.runtime_version)
    return f"{SERVER_FRAMEWORK_LABEL} on Python {runtime_version}"


def handler_health(request: RouteRequest, runtime_info: RuntimeInfoPort) -> RouteResponse:
    """Return liveness status with the current time and process uptime.

    Args:
        request: Inbound request, not inspected.
        runtime_info: Clock and uptime source.

    Returns:
        RouteResponse: HTTP 200 with a HealthStatus body.
    """

    _ = request
    health = HealthStatus(
        timestamp=_handler_format_timestamp(runtime_info.runtime_now_utc()),
        uptime_seconds=max(0.0, runtime_info.runtime_uptime_seconds()),
    )
    return RouteResponse(status_code=200, body=health.to_payload())


def handler_root(request: RouteRequest, runtime_info: RuntimeInfoPort, environment_name: str) -> RouteResponse:
    """Return the greeting payload echoing the client `Host` header.

    The header is returned verbatim and is None when the client sent none.

    Args:
        request: Inbound request providing the `Host` header.
        runtime_info: Runtime provider used for the server description.
        environment_name: Environment label resolved at startup.

    Returns:
        RouteResponse: HTTP 200 with a RootInfo body.
    """

    root_info = RootInfo(
        environment=environment_name,
        host=request.header("host"),
        server=handler_server_description(runtime_info),
    )
    return RouteResponse(status_code=200, body=root_info.to_payload())


def handler_info(request: RouteRequest, runtime_info: RuntimeInfoPort, environment_name: str) -> RouteResponse:
    """Return runtime metadata, degrading unreadable facts to a placeholder.

    Args:
        request: Inbound request, not inspected.
        runtime_info: Source of interpreter, platform and memory facts.
        environment_name: Environment label resolved at startup.

    Returns:
        RouteResponse: HTTP 200 with an AppInfo body.
    """

    _ = request
    memory: MemorySnapshot | str = _handler_read_fact("memory", runtime_info.runtime_memory_snapshot)
    app_info = AppInfo(
        runtime_version=_handler_read_fact("runtime_version", runtime_info.runtime_version),
        platform=_handler_read_fact("platform", runtime_info.runtime_platform),
        memory=memory,
        env=environment_name,
    )
    return RouteResponse(status_code=200, body=app_info.to_payload())
