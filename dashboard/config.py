import os

from dotenv import load_dotenv

load_dotenv()


def _flag(name, default="false"):
    return (os.getenv(name, default) or "").lower() in ("1", "true", "yes")


class BaseConfig:
    JSON_SORT_KEYS = False
    SPREADSHEET_ID = os.getenv("SPREADSHEET_ID")
    SHEET_NAME = os.getenv("SHEET_NAME", "WebsiteItems")
    BUNDLES_SHEET_NAME = os.getenv("BUNDLES_SHEET_NAME", "Bundles")
    GOOGLE_APPLICATION_CREDENTIALS = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
    SHEETS_TIMEOUT_SECONDS = int(os.getenv("SHEETS_TIMEOUT_SECONDS", 30))
    ADMIN_USER = os.getenv("ADMIN_USER")
    ADMIN_PASS = os.getenv("ADMIN_PASS")
    CORS_ALLOWED_ORIGINS = os.getenv("CORS_ALLOWED_ORIGINS", "*")
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URL", "memory://")
    RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", "600 per hour")
    TRACING_ENABLED = _flag("TRACING_ENABLED")
    OTEL_SERVICE_NAME = os.getenv("OTEL_SERVICE_NAME", "inventory-dashboard")
    OTEL_EXPORTER_OTLP_ENDPOINT = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4318/v1/traces")


class DevelopmentConfig(BaseConfig):
    DEBUG = True


class TestingConfig(BaseConfig):
    TESTING = True
    SPREADSHEET_ID = "test-spreadsheet"
    SHEET_NAME = "WebsiteItems"
    BUNDLES_SHEET_NAME = "Bundles"
    ADMIN_USER = "admin"
    ADMIN_PASS = "secret"
    RATELIMIT_ENABLED = False
    TRACING_ENABLED = False


class ProductionConfig(BaseConfig):
    DEBUG = False
    TESTING = False

    @staticmethod
    def validate():
        missing = [
            name
            for name in ("SPREADSHEET_ID", "ADMIN_USER", "ADMIN_PASS")
            if not os.getenv(name)
        ]
        if missing:
            raise RuntimeError(
                f"Missing required env vars in production: {', '.join(missing)}"
            )


def get_config_class():
    env = os.getenv("APP_ENV", "development").lower()
    if env == "production":
        ProductionConfig.validate()
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
