"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from kube_demo.api import create_api_application
from kube_demo.config import AppSettings
from kube_demo.lifecycle import ServerLifecycle
from kube_demo.runtime import ProcessRuntimeInfoProvider


def bootstrap_create_application(settings: AppSettings) -> FastAPI:
    """Assemble the runtime application from validated startup settings.

    Args:
        settings: Validated startup settings.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.
    """

    runtime_info = ProcessRuntimeInfoProvider()
    return create_api_application(settings=settings, runtime_info=runtime_info)


def bootstrap_create_lifecycle(settings: AppSettings) -> ServerLifecycle:
    """Build lifecycle controller around a freshly assembled application.

    Returns:
        ServerLifecycle: Controller in the stopped state.
    """

    application = bootstrap_create_application(settings=settings)
    return ServerLifecycle(settings=settings, application=application)
