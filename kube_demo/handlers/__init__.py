"""Route handler package mapping requests to JSON responses."""

from .routes import handler_health, handler_info, handler_root, handler_server_description

__all__ = ["handler_health", "handler_info", "handler_root", "handler_server_description"]
