from functools import wraps
from flask import request
from pydantic import ValidationError
from .responses import error


def validate_schema(schema):
    """Decorator to parse request JSON with a Pydantic schema into ``request.validated_data``."""

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                obj = schema.model_validate(request.get_json(silent=True) or {})
            except ValidationError as ve:
                fields = ", ".join(
                    ".".join(str(part) for part in entry.get("loc", ())) or "body"
                    for entry in ve.errors()
                )
                return error(f"Invalid request body: {fields}", status=400)
            request.validated_data = obj
            return fn(*args, **kwargs)
        return wrapper

    return decorator
