from flask import Blueprint

# JSON admin API, mounted under /api
api_bp = Blueprint('api', __name__)
# Role sign-in and self-service endpoints, mounted at the root
portal_bp = Blueprint('portal', __name__)

from . import routes, portal_routes  # noqa: E402,F401
