from dataclasses import dataclass

from flask import current_app

from dashboard.exceptions import ConfigurationError
from .client import SheetsClient, SHEETS_ENDPOINT

EXTENSION_KEY = "sheets_client"


@dataclass(frozen=True)
class SheetSettings:
    item_sheet: str
    bundle_sheet: str


def init_app(app, client=None):
    """Register the Sheets client on ``app``; built lazily when not supplied."""
    app.extensions[EXTENSION_KEY] = client


def get_sheets_client():
    client = current_app.extensions.get(EXTENSION_KEY)
    if client is None:
        spreadsheet_id = current_app.config.get("SPREADSHEET_ID")
        if not spreadsheet_id:
            raise ConfigurationError("Missing required environment variable: SPREADSHEET_ID")
        client = SheetsClient(
            spreadsheet_id,
            timeout=int(current_app.config.get("SHEETS_TIMEOUT_SECONDS", 30)),
            credentials_path=current_app.config.get("GOOGLE_APPLICATION_CREDENTIALS"),
        )
        current_app.extensions[EXTENSION_KEY] = client
    return client


def get_sheet_settings() -> SheetSettings:
    return SheetSettings(
        item_sheet=current_app.config.get("SHEET_NAME") or "WebsiteItems",
        bundle_sheet=current_app.config.get("BUNDLES_SHEET_NAME") or "Bundles",
    )


__all__ = [
    "SheetsClient",
    "SheetSettings",
    "SHEETS_ENDPOINT",
    "init_app",
    "get_sheets_client",
    "get_sheet_settings",
]
