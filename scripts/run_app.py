#!/usr/bin/env python3
"""Entry point: run the minimal app (GET /, /blue). Same as run_server.py --app."""

import os
import sys

_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _PROJECT_ROOT)

from scripts.run_server import main  # noqa: E402

if __name__ == "__main__":
    if "--app" not in sys.argv:
        sys.argv.append("--app")
    main()
