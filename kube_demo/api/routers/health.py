"""Health endpoint router composition for liveness checks."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from kube_demo.api.transport import api_build_route_request, api_render_route_response
from kube_demo.handlers import handler_health
from kube_demo.runtime import RuntimeInfoPort


def api_create_health_router(runtime_info: RuntimeInfoPort) -> APIRouter:
    """Create health-check router reporting process liveness and uptime.

    Args:
        runtime_info: Runtime provider for clock and uptime.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when runtime_info is invalid.
    """

    if runtime_info is None:
        raise ValueError("runtime_info must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status(request: Request) -> JSONResponse:
        """Return liveness payload for orchestrator probes.

        Returns:
            JSONResponse: HTTP 200 health payload.
        """

        return api_render_route_response(handler_health(api_build_route_request(request), runtime_info))

    return router
