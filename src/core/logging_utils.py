"""Logging setup (colored stream handler) and structured key-value event lines."""

import logging
import sys
import uuid
from typing import Optional, Sequence

logger = logging.getLogger(__name__)

# ANSI color codes
_RESET = "\033[0m"
_BOLD = "\033[1m"
_GRAY = "\033[90m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_CYAN = "\033[36m"

_LEVEL_COLORS = {
    logging.DEBUG: _GRAY,
    logging.INFO: _CYAN,
    logging.WARNING: _YELLOW,
    logging.ERROR: _RED + _BOLD,
    logging.CRITICAL: _RED + _BOLD,
}


class ColoredFormatter(logging.Formatter):
    """Formatter that adds colors per log level."""

    def format(self, record: logging.LogRecord) -> str:
        color = _LEVEL_COLORS.get(record.levelno, _RESET)
        record.levelname = f"{color}[{record.levelname}]{_RESET}"
        return super().format(record)


def setup_logging(debug: bool = False) -> None:
    """Configure colorful logging on stdout; DEBUG level when debug is set."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        ColoredFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logging.root.handlers.clear()
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.DEBUG if debug else logging.INFO)


def new_trace_id() -> str:
    return str(uuid.uuid4())[:8]


def log_scan_start(command: Sequence[str], timeout_sec: Optional[float], trace_id: str) -> None:
    extra = {"trace_id": trace_id, "command": " ".join(command), "timeout_sec": timeout_sec}
    logger.info("scan_start " + " ".join(f"{k}={v}" for k, v in sorted(extra.items())))


def log_scan_result(
    command: Sequence[str],
    ok: bool,
    elapsed_ms: float,
    trace_id: str,
    output_bytes: Optional[int] = None,
    error: Optional[str] = None,
) -> None:
    """Log one dependency scan result under the trace_id of its scan_start line: INFO on success, WARNING on failure."""
    extra: dict = {"trace_id": trace_id}
    extra["command"] = " ".join(command)
    extra["ok"] = ok
    extra["elapsed_ms"] = f"{elapsed_ms:.0f}"
    if output_bytes is not None:
        extra["output_bytes"] = output_bytes
    if error:
        extra["error"] = error
    msg = "scan " + " ".join(f"{k}={v}" for k, v in sorted(extra.items()))
    if ok:
        logger.info(msg)
    else:
        logger.warning(msg)
