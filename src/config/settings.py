"""Unified config: server (host, port, log level) and dependency scan (command, timeout).

Defaults: loaded from config/config.yaml.example (single source of truth, no code-level defaults).
Env overrides: PORT for the listen port, DEVDASH_CONFIG for the config file path.
"""

import os
import shlex
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_EXAMPLE_PATH = _PROJECT_ROOT / "config" / "config.yaml.example"

# Lazy-loaded example config (single source of truth for defaults)
_EXAMPLE_CONFIG: Optional[Dict[str, Any]] = None


def _load_example_config() -> Dict[str, Any]:
    """Load config.yaml.example as defaults. No code-level defaults."""
    global _EXAMPLE_CONFIG
    if _EXAMPLE_CONFIG is None:
        with open(_EXAMPLE_PATH, encoding="utf-8") as f:
            _EXAMPLE_CONFIG = yaml.safe_load(f) or {}
    return _EXAMPLE_CONFIG


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge override into base. Override values take precedence."""
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _merged_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Merge config with example so missing keys come from config file."""
    return _deep_merge(_load_example_config(), cfg)


def _section(cfg: Dict[str, Any], section: str) -> Dict[str, Any]:
    value = cfg.get(section)
    return value if isinstance(value, dict) else {}


def read_config(config_path: Optional[str] = None) -> Tuple[dict, str]:
    """Load YAML config. Returns (config, resolved_path).

    Path order: argument, DEVDASH_CONFIG, config/config.yaml; falls back to the example file when missing.
    """
    config_path = config_path or os.environ.get("DEVDASH_CONFIG") or str(_PROJECT_ROOT / "config" / "config.yaml")
    if not Path(config_path).exists():
        config_path = str(_EXAMPLE_PATH)
    config_path = str(Path(config_path).resolve())
    with open(config_path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}
    return config, config_path


def get_server_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return server config (host, port, log_level). PORT env wins over server.port when non-empty."""
    merged = _merged_config(config or {})
    server = _section(merged, "server")
    port = os.environ.get("PORT") or server.get("port")
    return {
        "host": server.get("host"),
        "port": int(port),
        "log_level": server.get("log_level"),
    }


def default_scan_command() -> List[str]:
    """Dependency listing for the running interpreter: installed packages with newer releases."""
    return [sys.executable, "-m", "pip", "list", "--outdated"]


def get_scan_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return scan config: command (argv list) and timeout_sec (None = no timeout)."""
    merged = _merged_config(config or {})
    scan = _section(merged, "scan")
    command = scan.get("command")
    if isinstance(command, str):
        command = shlex.split(command)
    timeout = scan.get("timeout_sec")
    return {
        "command": [str(c) for c in command] if command else default_scan_command(),
        "timeout_sec": float(timeout) if timeout is not None else None,
    }
