"""FastAPI app factory for both demo services.

dashboard: GET /, /health, /metrics, /scan, /badge. app: GET /, /blue. Each service is a set of
routes registered on the same generic responder; unregistered paths get the framework's 404."""

import logging
from pathlib import Path
from string import Template
from typing import Any, Callable, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response

from src.config.settings import get_scan_config, get_server_config
from src.core.metrics import runtime_snapshot
from src.core.uptime import Uptime
from src.status_server.badge import render_badge, render_blue
from src.status_server.scan import SCAN_ERROR_PREFIX, ScanError, run_dependency_scan

logger = logging.getLogger(__name__)

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
_TEMPLATES: Dict[str, Template] = {}

HEALTH_PAYLOAD = {"status": "ok", "message": "Service healthy"}


def _load_template(name: str) -> Template:
    tpl = _TEMPLATES.get(name)
    if tpl is None:
        tpl = Template((_TEMPLATES_DIR / name).read_text(encoding="utf-8"))
        _TEMPLATES[name] = tpl
    return tpl


def _register_dashboard(app: FastAPI, config: Dict[str, Any], uptime: Uptime) -> None:
    scan_cfg = get_scan_config(config)

    @app.get("/", response_class=HTMLResponse)
    def get_home() -> HTMLResponse:
        """Dashboard page with links and current uptime."""
        page = _load_template("dashboard.html").safe_substitute(uptime=uptime.format())
        return HTMLResponse(page)

    @app.get("/health")
    def get_health() -> JSONResponse:
        return JSONResponse(HEALTH_PAYLOAD)

    @app.get("/metrics")
    def get_metrics() -> Dict[str, Any]:
        """Runtime version, live threads, process RSS in MB (alloc_mb) and uptime, read fresh per request."""
        return runtime_snapshot(uptime)

    @app.get("/scan", response_class=PlainTextResponse)
    def get_scan() -> Response:
        """Run the dependency listing command; 500 with the failure text when it fails."""
        try:
            out = run_dependency_scan(scan_cfg["command"], scan_cfg["timeout_sec"])
        except ScanError as e:
            return PlainTextResponse(SCAN_ERROR_PREFIX + str(e), status_code=500)
        return Response(content=out, media_type="text/plain")

    @app.get("/badge")
    def get_badge(request: Request) -> Response:
        """PNG badge for ?status=ok|warn|other. Repeated parameters: the first value wins."""
        values = request.query_params.getlist("status")
        status = values[0] if values else None
        return Response(content=render_badge(status), media_type="image/png")


def _register_minimal(app: FastAPI, config: Dict[str, Any], uptime: Uptime) -> None:
    @app.get("/", response_class=HTMLResponse)
    def get_home() -> HTMLResponse:
        return HTMLResponse(_load_template("app.html").template)

    @app.get("/blue")
    def get_blue() -> Response:
        return Response(content=render_blue(), media_type="image/png")


SERVICES: Dict[str, Callable[[FastAPI, Dict[str, Any], Uptime], None]] = {
    "dashboard": _register_dashboard,
    "app": _register_minimal,
}

_TITLES = {
    "dashboard": "Python Dev Dashboard",
    "app": "Minimal App",
}


def create_app(
    service: str = "dashboard",
    config: Optional[Dict[str, Any]] = None,
    uptime: Optional[Uptime] = None,
) -> FastAPI:
    """Build the FastAPI app for one service. uptime is captured here unless provided."""
    register = SERVICES.get(service)
    if register is None:
        raise ValueError(f"unknown service {service!r}; expected one of {sorted(SERVICES)}")
    # Only the service's own routes are exposed
    app = FastAPI(title=_TITLES[service], docs_url=None, redoc_url=None, openapi_url=None)
    register(app, config or {}, uptime or Uptime())
    return app


def run_server(config: dict, service: str = "dashboard") -> None:
    """Start one service with uvicorn on server.host and PORT (or server.port). Blocks until shutdown."""
    import uvicorn

    server_cfg = get_server_config(config)
    uptime = Uptime()
    app = create_app(service, config, uptime)
    host, port = server_cfg["host"], server_cfg["port"]
    logger.info(
        "🚀 %s running on %s:%s (started %s)", _TITLES[service], host, port, uptime.started_at.isoformat()
    )
    uvicorn.run(app, host=host, port=port, log_level=server_cfg["log_level"])
