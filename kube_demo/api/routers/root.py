"""Root endpoint router composition for connectivity verification."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from kube_demo.api.transport import api_build_route_request, api_render_route_response
from kube_demo.config import AppSettings
from kube_demo.handlers import handler_root
from kube_demo.runtime import RuntimeInfoPort


def api_create_root_router(settings: AppSettings, runtime_info: RuntimeInfoPort) -> APIRouter:
    """Create router for the greeting endpoint.

    Args:
        settings: Validated settings providing the environment label.
        runtime_info: Runtime provider used for the server description.

    Returns:
        APIRouter: Router exposing `/` endpoint.

    Raises:
        ValueError: Raised when a dependency is invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if runtime_info is None:
        raise ValueError("runtime_info must not be None")

    router = APIRouter(tags=["foundation"])

    @router.get("/")
    def api_root_index(request: Request) -> JSONResponse:
        """Return greeting, version, environment and the echoed host header."""

        route_response = handler_root(
            api_build_route_request(request),
            runtime_info,
            environment_name=settings.environment_name,
        )
        return api_render_route_response(route_response)

    return router
