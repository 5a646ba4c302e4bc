"""Thin Google Sheets v4 REST client used by the inventory services."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Mapping, Optional, Sequence
from urllib.parse import quote

from requests import Response, Session

from dashboard.exceptions import UpstreamError
from dashboard.metrics import SHEETS_CALL_DURATION
from .auth import google_session


logger = logging.getLogger(__name__)

SHEETS_ENDPOINT = "https://sheets.googleapis.com/v4/spreadsheets"


def _encode_range(range_a1: str) -> str:
    return quote(range_a1, safe="!:'(),$&=*-_.~")


def _stringify_rows(values_raw) -> List[List[str]]:
    values: List[List[str]] = []
    if isinstance(values_raw, Sequence):
        for row in values_raw:
            if isinstance(row, Sequence) and not isinstance(row, str):
                values.append(["" if cell is None else str(cell) for cell in row])
            else:
                values.append([str(row)])
    return values


class SheetsClient:
    """Issue authorised requests against one spreadsheet."""

    def __init__(
        self,
        spreadsheet_id: str,
        *,
        session: Optional[Session] = None,
        timeout: int = 30,
        credentials_path: Optional[str] = None,
    ) -> None:
        self.spreadsheet_id = spreadsheet_id
        self.timeout = timeout
        self._session = session
        self._credentials_path = credentials_path

    @property
    def session(self) -> Session:
        if self._session is None:
            self._session = google_session(self._credentials_path)
        return self._session

    # ------------------------------------------------------------------
    # Transport

    def _request(
        self,
        method: str,
        url: str,
        *,
        operation: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        session = self.session
        started = time.perf_counter()
        try:
            response: Response = session.request(
                method,
                url,
                params=params,
                json=body,
                timeout=self.timeout,
            )
        except Exception as exc:
            raise UpstreamError(f"Sheets request failed: {exc}") from exc
        finally:
            SHEETS_CALL_DURATION.labels(operation).observe(time.perf_counter() - started)
        if response.status_code >= 400:
            detail = response.text.strip() or response.reason
            logger.warning("Sheets %s returned %s", operation, response.status_code)
            raise UpstreamError(f"Sheets API error {response.status_code}: {detail}")
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(f"Invalid JSON from Sheets API: {exc}") from exc

    def _values_url(self, range_a1: str, suffix: str = "") -> str:
        return f"{SHEETS_ENDPOINT}/{self.spreadsheet_id}/values/{_encode_range(range_a1)}{suffix}"

    # ------------------------------------------------------------------
    # Values API

    def get_values(self, range_a1: str) -> List[List[str]]:
        """Read ``range_a1`` as a list of string rows (trailing blanks omitted)."""
        payload = self._request(
            "GET",
            self._values_url(range_a1),
            operation="values.get",
            params={"majorDimension": "ROWS", "valueRenderOption": "FORMATTED_VALUE"},
        )
        return _stringify_rows(payload.get("values"))

    def update_values(
        self,
        range_a1: str,
        values: List[List[Any]],
        *,
        value_input_option: str = "USER_ENTERED",
    ) -> Dict[str, Any]:
        return self._request(
            "PUT",
            self._values_url(range_a1),
            operation="values.update",
            params={"valueInputOption": value_input_option},
            body={"range": range_a1, "majorDimension": "ROWS", "values": values},
        )

    def append_values(
        self,
        range_a1: str,
        values: List[List[Any]],
        *,
        value_input_option: str = "USER_ENTERED",
    ) -> Dict[str, Any]:
        """Append rows after the last row of the table found in ``range_a1``."""
        return self._request(
            "POST",
            self._values_url(range_a1, ":append"),
            operation="values.append",
            params={"valueInputOption": value_input_option, "insertDataOption": "INSERT_ROWS"},
            body={"majorDimension": "ROWS", "values": values},
        )

    # ------------------------------------------------------------------
    # Spreadsheet structure

    def get_metadata(self) -> Dict[str, Any]:
        payload = self._request(
            "GET",
            f"{SHEETS_ENDPOINT}/{self.spreadsheet_id}",
            operation="spreadsheets.get",
            params={
                "includeGridData": "false",
                "fields": "spreadsheetId,properties.title,sheets(properties(sheetId,title,index))",
            },
        )
        properties = payload.get("properties") if isinstance(payload.get("properties"), Mapping) else {}
        sheets = []
        for entry in payload.get("sheets") or []:
            props = entry.get("properties") if isinstance(entry, Mapping) else None
            if isinstance(props, Mapping):
                sheets.append(
                    {
                        "sheetId": props.get("sheetId"),
                        "title": props.get("title"),
                        "index": props.get("index"),
                    }
                )
        return {
            "spreadsheetId": payload.get("spreadsheetId", self.spreadsheet_id),
            "title": properties.get("title"),
            "sheets": sheets,
        }

    def sheet_id(self, title: str) -> Optional[int]:
        for entry in self.get_metadata()["sheets"]:
            if entry.get("title") == title:
                return entry.get("sheetId")
        return None

    def _batch_update(self, requests_: List[Dict[str, Any]], operation: str) -> Dict[str, Any]:
        return self._request(
            "POST",
            f"{SHEETS_ENDPOINT}/{self.spreadsheet_id}:batchUpdate",
            operation=operation,
            body={"requests": requests_},
        )

    def add_sheet(self, title: str) -> Optional[int]:
        payload = self._batch_update(
            [{"addSheet": {"properties": {"title": title}}}],
            operation="sheets.add",
        )
        replies = payload.get("replies") or [{}]
        return ((replies[0].get("addSheet") or {}).get("properties") or {}).get("sheetId")

    def delete_row(self, title: str, row_number: int) -> None:
        """Remove the physical sheet row ``row_number`` (1-based) from ``title``."""
        sheet_id = self.sheet_id(title)
        if sheet_id is None:
            raise UpstreamError(f"Sheet {title} is missing from the spreadsheet")
        self._batch_update(
            [
                {
                    "deleteDimension": {
                        "range": {
                            "sheetId": sheet_id,
                            "dimension": "ROWS",
                            "startIndex": row_number - 1,
                            "endIndex": row_number,
                        }
                    }
                }
            ],
            operation="rows.delete",
        )
