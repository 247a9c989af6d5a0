"""Dependency scan: run the configured listing command and capture combined stdout/stderr."""

import logging
import signal
import subprocess
import time
from typing import Optional, Sequence

from src.core.logging_utils import log_scan_result, log_scan_start, new_trace_id

logger = logging.getLogger(__name__)

SCAN_ERROR_PREFIX = "Erreur d'analyse des dépendances: "


class ScanError(Exception):
    """Scan subprocess could not be spawned, exited non-zero, or timed out."""


def _exit_reason(returncode: int) -> str:
    if returncode >= 0:
        return f"exit status {returncode}"
    try:
        name = signal.Signals(-returncode).name
    except ValueError:
        name = str(-returncode)
    return f"signal: {name}"


def run_dependency_scan(
    command: Sequence[str],
    timeout_sec: Optional[float] = None,
    trace_id: Optional[str] = None,
) -> bytes:
    """Run command and return its combined output. Raises ScanError on any failure.

    timeout_sec=None waits for the command indefinitely. Start and result log lines share trace_id
    (generated when not given).
    """
    trace_id = trace_id or new_trace_id()
    log_scan_start(command, timeout_sec, trace_id)
    t0 = time.monotonic()
    try:
        proc = subprocess.run(
            list(command),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            timeout=timeout_sec,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        error = f"timed out after {timeout_sec:g}s"
        log_scan_result(command, ok=False, elapsed_ms=(time.monotonic() - t0) * 1000, error=error, trace_id=trace_id)
        raise ScanError(error) from e
    except OSError as e:
        error = str(e)
        log_scan_result(command, ok=False, elapsed_ms=(time.monotonic() - t0) * 1000, error=error, trace_id=trace_id)
        raise ScanError(error) from e

    elapsed_ms = (time.monotonic() - t0) * 1000
    if proc.returncode != 0:
        error = _exit_reason(proc.returncode)
        log_scan_result(command, ok=False, elapsed_ms=elapsed_ms, output_bytes=len(proc.stdout), error=error, trace_id=trace_id)
        raise ScanError(error)
    log_scan_result(command, ok=True, elapsed_ms=elapsed_ms, output_bytes=len(proc.stdout), trace_id=trace_id)
    return proc.stdout
