from flask import Blueprint

admin_api_bp = Blueprint('admin_api', __name__, url_prefix='/api/admin')

# Import routes to register them with the blueprint
from . import seed_routes  # noqa: E402,F401
