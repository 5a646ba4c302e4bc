import re


MISSING_OR_NOT_FOUND = re.compile(r"Missing|not found", re.IGNORECASE)


class InventoryError(Exception):
    """Base class for failures surfaced to API callers."""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ConfigurationError(InventoryError):
    status_code = 500


class ValidationError(InventoryError):
    status_code = 400


class NotFoundError(InventoryError):
    status_code = 400


class UpstreamError(InventoryError):
    status_code = 500


def status_for(exc) -> int:
    if isinstance(exc, InventoryError):
        return exc.status_code
    return 400 if MISSING_OR_NOT_FOUND.search(str(exc) or "") else 500
