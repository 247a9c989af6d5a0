"""Runtime metrics snapshot: interpreter version, live threads, resident memory, uptime."""

import logging
import platform
import threading
from typing import Any, Dict

import psutil

from src.core.uptime import Uptime

logger = logging.getLogger(__name__)

_BYTES_PER_MB = 1024 * 1024


def runtime_version() -> str:
    return f"python{platform.python_version()}"


def resident_mb() -> int:
    """Resident set size of this process in whole megabytes."""
    return psutil.Process().memory_info().rss // _BYTES_PER_MB


def runtime_snapshot(uptime: Uptime) -> Dict[str, Any]:
    """Read counters fresh (no caching). Key names are part of the /metrics wire format."""
    snapshot = {
        "go_version": runtime_version(),
        "goroutines": threading.active_count(),
        "alloc_mb": resident_mb(),
        "uptime": uptime.format(),
    }
    logger.debug("metrics " + " ".join(f"{k}={v}" for k, v in snapshot.items()))
    return snapshot
