from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

# Import route modules to register them
from . import routes  # noqa: E402,F401
