"""Adapters between Starlette requests and transport-independent handler contracts."""

from fastapi import Request
from fastapi.responses import JSONResponse

from kube_demo.domain import RouteRequest, RouteResponse


def api_build_route_request(request: Request) -> RouteRequest:
    """Snapshot method, path and lower-cased headers of an inbound request.

    Args:
        request: Starlette request object.

    Returns:
        RouteRequest: Read-only request view for handlers.
    """

    return RouteRequest(
        method=request.method.upper(),
        path=request.url.path,
        headers={name.lower(): value for name, value in request.headers.items()},
    )


def api_render_route_response(route_response: RouteResponse) -> JSONResponse:
    return JSONResponse(content=route_response.body, status_code=route_response.status_code)
