from __future__ import annotations

from flask import current_app
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

__all__ = [
    "db",
    "migrate",
    "limiter",
]

db = SQLAlchemy()
migrate = Migrate(compare_type=True, render_as_batch=True)


def _default_rate_limits():
    """Resolve default rate limits from config or fall back to safe defaults."""
    config_value = current_app.config.get("RATELIMIT_DEFAULT")
    if isinstance(config_value, str) and config_value.strip():
        normalized = (
            config_value.replace(",", ";")
            .replace("|", ";")
            .split(";")
        )
        limits = [entry.strip() for entry in normalized if entry.strip()]
        if limits:
            return limits
    return ["2000 per hour", "300 per minute"]


limiter = Limiter(
    key_func=get_remote_address,
    default_limits=_default_rate_limits,
)
