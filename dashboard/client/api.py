"""HTTP client for the dashboard API, used by headless dashboards and scripts."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import requests

from dashboard.models import Item
from dashboard.sheets.columns import META_FIELDS

# Values an empty cell reads back as
READ_DEFAULTS = Item().to_dict()


class ApiError(RuntimeError):
    """Raised when the dashboard API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class InventoryApiClient:
    def __init__(
        self,
        base_url: str,
        *,
        username: Optional[str] = None,
        password: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: int = 30,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.auth = (username, password) if username is not None else None
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        response = self.session.request(
            method,
            f"{self.base_url}{path}",
            auth=self.auth,
            timeout=self.timeout,
            **kwargs,
        )
        if not response.ok:
            message = ""
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, Mapping):
                message = str(body.get("error") or "")
            message = message or response.text or f"Request failed ({response.status_code})"
            raise ApiError(message, response.status_code)
        return response.json()

    # Items

    def get_inventory(self) -> Dict[str, Any]:
        return self._request("GET", "/api/inventory")

    def get_variants(self, parent_sku: str) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/variants", params={"parentSku": parent_sku})["variants"]

    def create_item(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/items", json=dict(payload))

    def classify(self, sku: str, category: str, parent_id: str) -> Dict[str, Any]:
        return self._request(
            "POST",
            "/api/items/classify",
            json={"sku": sku, "category": category, "parentId": parent_id},
        )

    def save_meta(self, item: Mapping[str, Any]) -> Dict[str, Any]:
        """Send the whole category..sortOrder block of ``item``.

        Values equal to what an empty cell reads back as are sent blank so
        unset cells stay empty in the sheet.
        """
        payload = {"sku": item.get("sku")}
        for name in META_FIELDS:
            value = item.get(name)
            payload[name] = "" if value is None or value == READ_DEFAULTS[name] else value
        return self._request("POST", "/api/items/meta", json=payload)

    def set_image(self, sku: str, image_url: str) -> Dict[str, Any]:
        return self._request("POST", "/api/items/image", json={"sku": sku, "imageUrl": image_url})

    # Bundles

    def list_bundles(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/bundles")["bundles"]

    def create_bundle(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/bundles", json=dict(payload))["bundle"]

    def update_bundle(self, bundle_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/api/bundles/{bundle_id}", json=dict(payload))["bundle"]

    def delete_bundle(self, bundle_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/bundles/{bundle_id}")


def make_writer(api: InventoryApiClient):
    """Return a ``write(item, field)`` callable for :class:`DashboardState`."""

    def write(item: Mapping[str, Any], field: str) -> Dict[str, Any]:
        if field == "imageUrl":
            return api.set_image(item.get("sku"), item.get("imageUrl"))
        if field in ("category", "parentId"):
            return api.classify(item.get("sku"), item.get("category"), item.get("parentId"))
        return api.save_meta(item)

    return write
