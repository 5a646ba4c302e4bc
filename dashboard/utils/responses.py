import logging
from flask import jsonify

from dashboard.exceptions import status_for


def ok(data=None, status=200):
    return jsonify(data if data is not None else {"success": True}), status


def error(message, status=400):
    return jsonify({"error": message}), status


def failure(label, exc, fallback="Request failed"):
    """Log ``exc`` for the route ``label`` and turn it into a JSON error."""
    status = status_for(exc)
    if status >= 500:
        logging.error("%s failed: %s", label, exc, exc_info=True)
    else:
        logging.warning("%s failed: %s", label, exc)
    return error(str(exc) or fallback, status=status)


def internal_error_response():
    return error("An unexpected error occurred, please try again later", 500)
