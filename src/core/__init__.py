"""Core helpers: uptime, runtime metrics, PNG rendering, logging."""

from src.core.imaging import solid_png
from src.core.uptime import Uptime, format_duration

__all__ = ["Uptime", "format_duration", "solid_png"]
