from .responses import ok, error, failure, internal_error_response
from .auth import check_basic_auth
from .validation import validate_schema

__all__ = [
    'ok',
    'error',
    'failure',
    'internal_error_response',
    'check_basic_auth',
    'validate_schema',
]
