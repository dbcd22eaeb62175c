import logging
import os
from typing import Any

from flask import Flask, request
from sqlalchemy.pool import StaticPool

from .blueprints_registry import register_blueprints
from .config import ENV_DIAGNOSTICS
from .extensions import db, limiter, migrate
from .logging_config import configure_logging

logger = logging.getLogger(__name__)

_AUTO_SEED_SKIP_PREFIXES = ("/api/admin", "/api/health", "/static")


def create_app(config: dict[str, Any] | None = None) -> Flask:
    app = Flask(__name__)
    os.makedirs(app.instance_path, exist_ok=True)

    _load_base_config(app, config)
    _apply_sqlalchemy_env_overrides(app)
    _configure_sqlite_engine_options(app)

    db.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)

    register_blueprints(app)
    from . import models  # noqa: F401  # ensure models registered for Alembic

    configure_logging(app)
    _install_global_resilience_handlers(app)

    from .services.dictionary_seed import init_dictionary_seed

    init_dictionary_seed(app)
    _install_auto_seed(app)

    from .management import register_commands

    register_commands(app)
    _run_optional_create_all(app)

    return app


def _load_base_config(app: Flask, config: dict[str, Any] | None) -> None:
    app.config.from_object("diccionario.config.Config")
    if config:
        app.config.update(config)
    app.config["ENV_DIAGNOSTICS"] = ENV_DIAGNOSTICS
    for warning in ENV_DIAGNOSTICS.get("warnings", ()):
        logger.warning("Environment configuration warning: %s", warning)

    if config and "DATABASE_URL" in config:
        app.config["SQLALCHEMY_DATABASE_URI"] = config["DATABASE_URL"]
    if not app.config.get("SQLALCHEMY_DATABASE_URI"):
        raise RuntimeError("DATABASE_URL (or DATABASE_INTERNAL_URL) must be set outside development and testing.")


def _apply_sqlalchemy_env_overrides(app: Flask) -> None:
    engine_opts = dict(app.config.get("SQLALCHEMY_ENGINE_OPTIONS", {}) or {})
    changed = False

    def _apply_int(env_key: str, option_key: str):
        nonlocal changed
        value = os.environ.get(env_key)
        if value in (None, ""):
            return
        try:
            engine_opts[option_key] = int(value)
            changed = True
        except ValueError:
            logger.warning("Invalid integer for %s: %s", env_key, value)

    _apply_int("SQLALCHEMY_POOL_SIZE", "pool_size")
    _apply_int("SQLALCHEMY_MAX_OVERFLOW", "max_overflow")
    _apply_int("SQLALCHEMY_POOL_TIMEOUT", "pool_timeout")

    if changed:
        app.config["SQLALCHEMY_ENGINE_OPTIONS"] = engine_opts


def _configure_sqlite_engine_options(app):
    """Configure SQLite engine options for testing/memory databases"""
    uri = app.config.get("SQLALCHEMY_DATABASE_URI", "")
    if uri.startswith("sqlite"):
        opts = dict(app.config.get("SQLALCHEMY_ENGINE_OPTIONS", {}))
        # SQLite pools reject these arguments
        for key in ("pool_size", "max_overflow", "pool_timeout"):
            opts.pop(key, None)
        if uri == "sqlite:///:memory:":
            opts["poolclass"] = StaticPool
            opts["connect_args"] = {"check_same_thread": False}
        app.config["SQLALCHEMY_ENGINE_OPTIONS"] = opts


def _install_global_resilience_handlers(app):
    """Install global DB rollback and JSON error handlers."""
    from sqlalchemy.exc import DBAPIError, OperationalError

    from .services.dictionary_seed.errors import PersistenceFailure
    from .utils.api_responses import APIResponse

    @app.teardown_request
    def _rollback_on_error(exc):
        if exc is not None:
            db.session.rollback()

    @app.errorhandler(OperationalError)
    @app.errorhandler(DBAPIError)
    def _db_error_handler(e):
        db.session.rollback()
        logger.error("Database error while handling %s: %s", request.path, e)
        return APIResponse.unavailable()

    @app.errorhandler(PersistenceFailure)
    def _persistence_failure_handler(e):
        logger.error("Dictionary persistence failure while handling %s: %s", request.path, e)
        return APIResponse.unavailable("Database temporarily unavailable")

    @app.errorhandler(429)
    def _rate_limited(e):
        return APIResponse.error(f"Rate limit exceeded: {e.description}", status_code=429)


def _install_auto_seed(app):
    """Seed the dictionary on incoming requests until the catalog is fully stored."""
    if not app.config.get("DICTIONARY_AUTO_SEED"):
        return

    state = {"done": False}

    @app.before_request
    def _auto_seed_dictionary():
        if state["done"] or request.path.startswith(_AUTO_SEED_SKIP_PREFIXES):
            return None
        from .services.dictionary_seed import get_seed_coordinator

        result = get_seed_coordinator(app).ensure_seeded()
        if result is None or result.completed:
            state["done"] = True
        return None


def _run_optional_create_all(app: Flask) -> None:
    def _env_flag(key: str):
        value = os.environ.get(key)
        if value is None:
            return None
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        return None

    create_all_flag = _env_flag("SQLALCHEMY_CREATE_ALL")
    if create_all_flag is None:
        logger.info("db.create_all() not enabled; Alembic migrations are the source of truth")
        return
    if create_all_flag is False:
        logger.info("db.create_all() disabled via SQLALCHEMY_CREATE_ALL=0")
        return
    logger.info("Local dev: creating tables via db.create_all() (SQLALCHEMY_CREATE_ALL)")
    with app.app_context():
        db.create_all()
        logger.info("Database tables created/verified")
