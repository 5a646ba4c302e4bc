from flask import Flask, request, g
from dashboard.config import get_config_class
from dashboard.logging import configure_logging
from dashboard.errors import errors_bp
from dashboard.cli import register_cli
from dashboard.api import register_api
from dashboard.version import API_PREFIX
from dashboard import metrics as app_metrics
from dashboard import sheets
from flask_cors import CORS
from flasgger import Swagger
from prometheus_client import CollectorRegistry
from prometheus_flask_exporter import PrometheusMetrics
from dashboard.extensions import limiter
import os
import uuid
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator


def create_app(config_object=None, sheets_client=None):
    """Application factory.

    ``sheets_client`` replaces the Google Sheets client, which is otherwise
    built on first use from ``SPREADSHEET_ID``.
    """
    app = Flask(__name__)

    if config_object is not None:
        app.config.from_object(config_object)
    else:
        app.config.from_object(get_config_class())

    configure_logging(app)
    register_cli(app)
    sheets.init_app(app, sheets_client)

    limiter.init_app(app)
    app.limiter = limiter

    Swagger(
        app,
        config={
            "headers": [],
            "specs": [
                {
                    "endpoint": "apispec",
                    "route": "/apispec.json",
                    "rule_filter": lambda rule: rule.rule.startswith(
                        f"{API_PREFIX}/"
                    ),
                    "model_filter": lambda tag: True,
                }
            ],
            "swagger_ui": True,
            "specs_route": "/docs/",
        },
        template={
            "tags": [
                {"name": "Inventory", "description": "Spreadsheet-backed items"},
                {"name": "Bundles", "description": "SKU bundles"},
            ]
        },
    )
    # Separate registries keep repeated test apps from clashing on metric names
    registry = CollectorRegistry(auto_describe=True) if app.config.get("TESTING") else None
    metrics = PrometheusMetrics(app, path="/metrics", registry=registry)
    if not app.config.get("TESTING") and not os.environ.get("METRICS_APP_INFO_SET"):
        metrics.info("app_info", "Application info", version="1.0.0")
        os.environ["METRICS_APP_INFO_SET"] = "1"
    app_metrics.init_app(app)

    # Configure CORS
    allowed = app.config.get("CORS_ALLOWED_ORIGINS", "*")
    if isinstance(allowed, str):
        allowed = allowed.strip()
        origins = "*" if allowed == "*" else [o.strip() for o in allowed.split(",") if o.strip()]
    else:
        origins = allowed or "*"
    CORS(
        app,
        origins=origins,
        supports_credentials=True,
        expose_headers=["X-Request-ID"],
    )

    app.register_blueprint(errors_bp)
    if app.config.get("TESTING"):
        from dashboard.test_support import test_support_bp
        app.register_blueprint(test_support_bp)

    register_api(app)

    @app.before_request
    def _set_request_id():
        incoming = request.headers.get("X-Request-ID")
        rid = (incoming or uuid.uuid4().hex)[:100]
        g.request_id = rid
        app.logger.info(f"request start {request.method} {request.path}")

    @app.after_request
    def _add_request_id_header(resp):
        rid = getattr(g, "request_id", None)
        if rid:
            resp.headers["X-Request-ID"] = rid
        return resp

    @app.after_request
    def _set_security_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        existing = resp.headers.get("Access-Control-Expose-Headers", "")
        for name in ("X-Request-ID", "traceparent"):
            if name not in existing:
                existing = (
                    existing
                    + ("," if existing and not existing.endswith(",") else "")
                    + name
                ).strip(",")
        resp.headers["Access-Control-Expose-Headers"] = existing
        return resp

    @app.after_request
    def _add_trace_header(resp):
        carrier = {}
        TraceContextTextMapPropagator().inject(carrier)
        tp = carrier.get("traceparent")
        if tp:
            resp.headers["traceparent"] = tp
        return resp

    if app.config.get("TRACING_ENABLED"):
        from dashboard.telemetry import init_tracing
        init_tracing(app)

    @app.route("/healthz")
    def healthz():
        return {"success": True}, 200

    return app
