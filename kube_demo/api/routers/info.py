"""Info endpoint router composition for runtime metadata."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from kube_demo.api.transport import api_build_route_request, api_render_route_response
from kube_demo.config import AppSettings
from kube_demo.handlers import handler_info
from kube_demo.runtime import RuntimeInfoPort


def api_create_info_router(settings: AppSettings, runtime_info: RuntimeInfoPort) -> APIRouter:
    """Create router exposing interpreter, platform and memory metadata.

    Args:
        settings: Validated settings providing the environment label.
        runtime_info: Runtime provider for process facts.

    Returns:
        APIRouter: Router exposing `/info` endpoint.

    Raises:
        ValueError: Raised when a dependency is invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if runtime_info is None:
        raise ValueError("runtime_info must not be None")

    router = APIRouter(tags=["info"])

    @router.get("/info")
    def api_runtime_info(request: Request) -> JSONResponse:
        route_response = handler_info(
            api_build_route_request(request),
            runtime_info,
            environment_name=settings.environment_name,
        )
        return api_render_route_response(route_response)

    return router
