from flask import request
from prometheus_client import Histogram, Counter

# Histogram buckets for Sheets API call durations
SHEETS_CALL_DURATION = Histogram(
    "sheets_call_duration_seconds",
    "Google Sheets API call duration in seconds",
    ["operation"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10, 30),
)

# Counter for HTTP errors
ERROR_COUNTER = Counter(
    "flask_error_total",
    "Count of HTTP responses with status >= 400",
    ["endpoint", "method", "code"],
)


def init_app(app):
    """Attach metric hooks to the app."""

    @app.after_request
    def track_errors(resp):
        if resp.status_code >= 400:
            endpoint = request.endpoint or "unknown"
            ERROR_COUNTER.labels(endpoint, request.method, resp.status_code).inc()
        return resp
