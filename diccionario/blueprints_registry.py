import logging

logger = logging.getLogger(__name__)


def register_blueprints(app):
    """Register all blueprints with the Flask app."""
    from .blueprints.admin import admin_api_bp
    from .blueprints.api import api_bp

    for description, blueprint in (('API', api_bp), ('Admin API', admin_api_bp)):
        app.register_blueprint(blueprint)
        logger.debug("Registered blueprint: %s (%s)", description, blueprint.url_prefix)
