"""Main module entrypoint for local and container runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import logging

from kube_demo.bootstrap import bootstrap_create_lifecycle
from kube_demo.config import AppSettings, config_load_settings
from kube_demo.lifecycle import BindFailureError

logger = logging.getLogger(__name__)

LIFECYCLE_LOGGER_NAME = "kube_demo.lifecycle"


def main_configure_logging(settings: AppSettings) -> None:
    """Configure root logging at the configured level.

    Readiness and shutdown notices of the lifecycle logger stay visible at
    levels above info.

    Args:
        settings: Validated settings providing the log level.
    """

    configured_level = logging.getLevelName(settings.log_level.upper())
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(configured_level)
    logging.getLogger(LIFECYCLE_LOGGER_NAME).setLevel(min(configured_level, logging.INFO))


def main() -> None:
    """Start the service with validated startup configuration.

    Returns:
        None: Runs until the process is terminated.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with status 1 when the listener cannot bind.
    """

    settings = config_load_settings()
    main_configure_logging(settings)
    lifecycle = bootstrap_create_lifecycle(settings)
    try:
        lifecycle.lifecycle_start()
    except BindFailureError as error:
        logger.error("%s", error)
        raise SystemExit(1) from error


if __name__ == "__main__":
    main()
