"""Server lifecycle: socket binding, readiness logging, serving and termination.

The listener socket is bound before uvicorn starts so a bind failure surfaces
as `BindFailureError` instead of uvicorn's own exit path. SIGTERM ends the
process immediately with status 0 without unwinding the event loop or waiting
for in-flight requests; SIGINT keeps uvicorn's graceful shutdown.
"""

import logging
import os
import signal
import socket
import sys
from enum import Enum
from types import FrameType
from typing import Callable

import uvicorn
from fastapi import FastAPI

from kube_demo.config import AppSettings

logger = logging.getLogger(__name__)


def lifecycle_exit_process(status_code: int) -> None:
    """Flush log handlers and terminate the process at once with the given status."""

    logging.shutdown()
    sys.stdout.flush()
    sys.stderr.flush()
    os._exit(status_code)


class BindFailureError(RuntimeError):
    """Raised when the listener cannot acquire the configured host and port."""


class LifecycleState(str, Enum):
    """Process lifecycle states."""

    RUNNING = "running"
    STOPPED = "stopped"


class _LifecycleUvicornServer(uvicorn.Server):
    """Uvicorn server routing SIGTERM to the lifecycle controller."""

    def __init__(self, config: uvicorn.Config, lifecycle: "ServerLifecycle"):
        super().__init__(config=config)
        self._lifecycle = lifecycle

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        if sig == signal.SIGTERM:
            self._lifecycle.lifecycle_handle_termination(sig, frame)
            self.should_exit = True
            self.force_exit = True
            return
        super().handle_exit(sig, frame)


class ServerLifecycle:
    """Two-state lifecycle controller around one uvicorn server."""

    def __init__(
        self,
        settings: AppSettings,
        application: FastAPI,
        exit_callback: Callable[[int], object] = lifecycle_exit_process,
    ):
        """Initialize lifecycle controller.

        Args:
            settings: Validated settings providing host, port and log level.
            application: ASGI application to serve.
            exit_callback: Process exit function invoked on termination.

        Raises:
            ValueError: Raised when settings or application is None.
        """

        if settings is None:
            raise ValueError("settings must not be None")
        if application is None:
            raise ValueError("application must not be None")
        self._settings = settings
        self._application = application
        self._exit_callback = exit_callback
        self._state = LifecycleState.STOPPED

    @property
    def state(self) -> LifecycleState:
        return self._state

    def lifecycle_bind(self) -> socket.socket:
        """Bind the listener socket and log readiness.

        Returns:
            socket.socket: Bound, not yet listening, TCP socket.

        Raises:
            BindFailureError: Raised when the address cannot be bound.
        """

        host = self._settings.application_host
        port = self._settings.application_port
        family = socket.AF_INET6 if ":" in host else socket.AF_INET
        sock = socket.socket(family=family, type=socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((host, port))
        except OSError as error:
            sock.close()
            raise BindFailureError(f"Failed to bind listener on {host}:{port}: {error}") from error
        sock.set_inheritable(True)

        bound_port = sock.getsockname()[1]
        base_url = f"http://{host}:{bound_port}"
        logger.info("Server running on %s", base_url)
        logger.info("Health check: %s/health", base_url)
        logger.info("Main endpoint: %s/", base_url)
        self._state = LifecycleState.RUNNING
        return sock

    def lifecycle_serve(self, sock: socket.socket) -> None:
        """Serve the application on an already bound socket until shutdown.

        Args:
            sock: Socket returned by `lifecycle_bind`.
        """

        config = uvicorn.Config(
            self._application,
            host=self._settings.application_host,
            port=sock.getsockname()[1],
            log_level=self._settings.log_level,
        )
        server = _LifecycleUvicornServer(config=config, lifecycle=self)
        try:
            server.run(sockets=[sock])
        finally:
            self._state = LifecycleState.STOPPED

    def lifecycle_start(self) -> None:
        """Bind and serve.

        Raises:
            BindFailureError: Raised when the address cannot be bound.
        """

        self.lifecycle_serve(self.lifecycle_bind())

    def lifecycle_handle_termination(self, signum: int, frame: FrameType | None = None) -> None:
        """Log the shutdown notice and exit with status 0 without draining.

        Args:
            signum: Received signal number.
            frame: Interrupted stack frame, unused.
        """

        _ = frame
        logger.info("%s received, shutting down gracefully", signal.Signals(signum).name)
        self._state = LifecycleState.STOPPED
        self._exit_callback(0)
