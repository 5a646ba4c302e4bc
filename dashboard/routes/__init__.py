from flask import Blueprint, request
from dashboard.version import API_PREFIX
from dashboard.utils import check_basic_auth

api_bp = Blueprint("api", __name__, url_prefix=API_PREFIX)


@api_bp.before_request
def _enforce_basic_auth():
    """Ensure the requester holds the admin credentials."""
    # Browsers send CORS preflights without credentials
    if request.method == "OPTIONS":
        return None
    return check_basic_auth()


from . import items  # noqa: E402,F401
from . import bundles  # noqa: E402,F401

__all__ = ['api_bp']
