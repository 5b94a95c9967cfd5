"""HTTP error handling for unmatched routes."""

from fastapi import Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

NOT_FOUND_DETAIL = "Not Found"


async def api_route_not_found_handler(request: Request, error: StarletteHTTPException) -> Response:
    """Answer unmatched paths and methods with a uniform JSON 404.

    Starlette reports a known path with an unregistered method as 405; both
    cases are answered as not found.

    Args:
        request: Request that failed routing.
        error: HTTP exception raised by routing or a handler.

    Returns:
        Response: JSON 404 for routing misses, FastAPI's default rendering otherwise.
    """

    if error.status_code not in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return await http_exception_handler(request, error)

    payload = {
        "detail": NOT_FOUND_DETAIL,
        "method": request.method,
        "path": request.url.path,
    }
    return JSONResponse(content=payload, status_code=status.HTTP_404_NOT_FOUND)
