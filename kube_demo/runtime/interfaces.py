"""Typed interfaces for runtime introspection services.

All process, interpreter and platform queries must remain in the runtime
package so handlers can be exercised with deterministic test doubles.
"""

from datetime import datetime
from typing import Protocol

from kube_demo.domain import MemorySnapshot


class RuntimeInfoUnavailableError(RuntimeError):
    """Raised when one runtime fact cannot be read on the current platform."""


class RuntimeInfoPort(Protocol):
    """Port definition for clock and process statistics."""

    def runtime_now_utc(self) -> datetime:
        """Return the current wall-clock time.

        Returns:
            datetime: Timezone-aware UTC datetime.
        """

    def runtime_uptime_seconds(self) -> float:
        """Return elapsed seconds since process start.

        Returns:
            float: Non-negative, non-decreasing uptime.
        """

    def runtime_version(self) -> str:
        """Return the interpreter version string.

        Returns:
            str: Interpreter version, for example `3.12.4`.

        Raises:
            RuntimeInfoUnavailableError: Raised when the version cannot be determined.
        """

    def runtime_platform(self) -> str:
        """Return the operating-system platform identifier.

        Returns:
            str: Platform identifier, for example `linux`.

        Raises:
            RuntimeInfoUnavailableError: Raised when the platform cannot be determined.
        """

    def runtime_memory_snapshot(self) -> MemorySnapshot:
        """Return current process memory usage.

        Returns:
            MemorySnapshot: Resident, virtual and heap figures.

        Raises:
            RuntimeInfoUnavailableError: Raised when memory statistics are unsupported.
        """
