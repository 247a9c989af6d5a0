#!/usr/bin/env python3
"""Entry point: run the dev dashboard (default) or the minimal app (--app).

Usage: run_server.py [config_path] [--app] [--debug]. Listen port: PORT env, else server.port (8090)."""

import os
import sys

# Project root: always resolve relative to script location, not cwd
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _PROJECT_ROOT)
os.chdir(_PROJECT_ROOT)  # Ensure config paths resolve from project root


def main() -> None:
    from src.config.settings import read_config
    from src.core.logging_utils import setup_logging
    from src.status_server.app import run_server

    setup_logging(debug="--debug" in sys.argv)
    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    config_path = args[0] if args else None
    if config_path and not os.path.isabs(config_path):
        config_path = os.path.join(_PROJECT_ROOT, config_path)
    config, _ = read_config(config_path)
    service = "app" if "--app" in sys.argv else "dashboard"
    run_server(config, service)


if __name__ == "__main__":
    main()
