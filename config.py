"""
config.py — Runtime Settings
=============================
Loaded into Flask with `app.config.from_object(Config)`.  Every value can be
overridden through a TRACE_* environment variable read at import time.
"""

import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Config:
    LOG_LEVEL    = os.environ.get("TRACE_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT   = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    DEBUG        = _env_bool("TRACE_DEBUG", False)
    HOST         = os.environ.get("TRACE_HOST", "127.0.0.1")
    PORT         = int(os.environ.get("TRACE_PORT", "5000"))

    # how ±∞ distances are spelled in JSON (JSON has no Infinity literal)
    JSON_INFINITY = "∞"


class TestingConfig(Config):
    TESTING   = True
    LOG_LEVEL = "WARNING"
