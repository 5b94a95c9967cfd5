"""Runtime introspection package for process-local facts."""

from .interfaces import RuntimeInfoPort, RuntimeInfoUnavailableError
from .provider import ProcessRuntimeInfoProvider

__all__ = ["ProcessRuntimeInfoProvider", "RuntimeInfoPort", "RuntimeInfoUnavailableError"]
