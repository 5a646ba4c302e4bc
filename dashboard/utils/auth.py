import base64
import hmac
from flask import current_app, request, g, make_response
from .responses import error

REALM = 'Basic realm="Inventory Dashboard"'


def _challenge(message):
    resp = make_response(message, 401)
    resp.headers["WWW-Authenticate"] = REALM
    return resp


def check_basic_auth():
    """Return an error response when the request lacks valid admin credentials."""
    configured_user = current_app.config.get("ADMIN_USER")
    configured_pass = current_app.config.get("ADMIN_PASS")
    if not configured_user or not configured_pass:
        return error("Missing ADMIN_USER/ADMIN_PASS environment configuration.", status=500)

    header = request.headers.get("Authorization", "")
    if not header.startswith("Basic "):
        return _challenge("Authentication required")
    try:
        decoded = base64.b64decode(header[6:]).decode("utf-8")
    except (ValueError, UnicodeDecodeError):
        return _challenge("Invalid authorization header")
    user, sep, password = decoded.partition(":")
    if not sep:
        return _challenge("Invalid authorization header")

    user_ok = hmac.compare_digest(user.encode(), configured_user.encode())
    pass_ok = hmac.compare_digest(password.encode(), configured_pass.encode())
    if not (user_ok and pass_ok):
        return _challenge("Invalid credentials")
    g.user = user
    return None
