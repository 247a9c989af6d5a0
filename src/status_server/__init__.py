"""Demo HTTP services: dashboard (home, health, metrics, scan, badge) and minimal app (home, blue)."""

from src.status_server.app import SERVICES, create_app, run_server

__all__ = ["SERVICES", "create_app", "run_server"]
