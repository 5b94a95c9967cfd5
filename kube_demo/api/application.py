"""FastAPI application factory for the demo service.

This module defines API application composition: routers, JSON body parsing
and not-found handling.
"""

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from kube_demo import __version__
from kube_demo.config import AppSettings
from kube_demo.runtime import RuntimeInfoPort

from .errors import api_route_not_found_handler
from .middleware import JsonBodyMiddleware
from .routers import api_create_health_router, api_create_info_router, api_create_root_router


def create_api_application(settings: AppSettings, runtime_info: RuntimeInfoPort) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        runtime_info: Runtime provider shared by all handlers.

    Returns:
        FastAPI: Framework application instance with all routes registered.

    Raises:
        ValueError: Raised when a router dependency is invalid.
    """

    application = FastAPI(
        title="Kubernetes Demo",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    application.add_middleware(JsonBodyMiddleware, limit_bytes=settings.json_body_limit_bytes)
    application.add_exception_handler(StarletteHTTPException, api_route_not_found_handler)

    application.include_router(api_create_health_router(runtime_info=runtime_info))
    application.include_router(api_create_root_router(settings=settings, runtime_info=runtime_info))
    application.include_router(api_create_info_router(settings=settings, runtime_info=runtime_info))

    return application
