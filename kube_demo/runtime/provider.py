"""Process runtime provider backed by psutil and interpreter introspection."""

import logging
import os
import platform
import sys
import time
from datetime import datetime, timezone

import psutil

from kube_demo.domain import MemorySnapshot

from .interfaces import RuntimeInfoPort, RuntimeInfoUnavailableError

logger = logging.getLogger(__name__)


class ProcessRuntimeInfoProvider(RuntimeInfoPort):
    """Runtime provider reading live statistics of the current process.

    Uptime is anchored to the process creation time reported by the OS and
    advanced with the monotonic clock, so wall-clock adjustments never make it
    go backwards.
    """

    def __init__(self, pid: int | None = None):
        """Initialize runtime provider.

        Args:
            pid: Process id to inspect, defaults to the current process.
        """

        self._pid = pid if pid is not None else os.getpid()
        self._anchor_monotonic = time.monotonic()
        self._uptime_at_anchor = self._read_uptime_at_anchor()

    def _read_uptime_at_anchor(self) -> float:
        try:
            created_at = psutil.Process(self._pid).create_time()
        except (psutil.Error, OSError) as error:
            logger.warning("Process start time unavailable, uptime counts from provider creation: %s", error)
            return 0.0
        return max(0.0, time.time() - created_at)

    def runtime_now_utc(self) -> datetime:
        return datetime.now(timezone.utc)

    def runtime_uptime_seconds(self) -> float:
        return self._uptime_at_anchor + (time.monotonic() - self._anchor_monotonic)

    def runtime_version(self) -> str:
        version = platform.python_version()
        if not version:
            raise RuntimeInfoUnavailableError("interpreter version is unavailable")
        return version

    def runtime_platform(self) -> str:
        if not sys.platform:
            raise RuntimeInfoUnavailableError("platform identifier is unavailable")
        return sys.platform

    def runtime_memory_snapshot(self) -> MemorySnapshot:
        """Read resident and virtual memory through psutil.

        Returns:
            MemorySnapshot: Current memory figures in bytes and heap blocks.

        Raises:
            RuntimeInfoUnavailableError: Raised when psutil cannot read process memory.
        """

        try:
            memory_info = psutil.Process(self._pid).memory_info()
        except (psutil.Error, OSError, NotImplementedError) as error:
            raise RuntimeInfoUnavailableError("process memory statistics are unavailable") from error
        return MemorySnapshot(
            rss_bytes=int(memory_info.rss),
            vms_bytes=int(memory_info.vms),
            allocated_blocks=sys.getallocatedblocks(),
        )
