import logging
from flask import Blueprint
from werkzeug.exceptions import HTTPException

from dashboard.exceptions import InventoryError
from dashboard.utils.responses import error, internal_error_response

errors_bp = Blueprint("errors_bp", __name__)


@errors_bp.app_errorhandler(HTTPException)
def handle_http_exception(e):
    msg = e.description or getattr(e, "name", "HTTP Error")
    return error(msg, status=e.code)


@errors_bp.app_errorhandler(InventoryError)
def handle_inventory_error(e):
    if e.status_code >= 500:
        logging.error("Inventory error: %s", e.message)
    return error(e.message, status=e.status_code)


@errors_bp.app_errorhandler(Exception)
def handle_unexpected_exception(e):
    logging.exception("Unhandled exception")
    return internal_error_response()
