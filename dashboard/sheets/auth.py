"""Authorised HTTP sessions for the Google Sheets API."""

from __future__ import annotations

import os
from typing import Final, Iterable

import google.auth
from google.auth.exceptions import DefaultCredentialsError
from google.auth.transport.requests import AuthorizedSession
from google.oauth2 import service_account

from dashboard.exceptions import ConfigurationError

_SCOPES: Final[Iterable[str]] = ("https://www.googleapis.com/auth/spreadsheets",)


def google_session(creds_path: str | None = None) -> AuthorizedSession:
    """Return an :class:`AuthorizedSession` scoped for Sheets read/write.

    Args:
        creds_path: Optional path to a service account JSON file. When omitted,
            :envvar:`GOOGLE_APPLICATION_CREDENTIALS` is tried, then the
            application default credentials.

    Raises:
        ConfigurationError: No usable credentials could be resolved.
    """

    resolved_path = creds_path or os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
    if resolved_path:
        credentials = service_account.Credentials.from_service_account_file(
            resolved_path, scopes=list(_SCOPES)
        )
        return AuthorizedSession(credentials)
    try:
        credentials, _ = google.auth.default(scopes=list(_SCOPES))
    except DefaultCredentialsError as exc:
        raise ConfigurationError(f"Missing Google credentials: {exc}") from exc
    return AuthorizedSession(credentials)
