"""Client-side inventory state with optimistic per-field saves.

Each editable (sku, field) pair moves ``saved -> saving -> saved | error``.
An edit is applied locally before the write is sent; a failed write restores
the value captured when the edit began. Responses are not cancelled, so when
two edits to one field overlap, whichever resolves last decides the outcome.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from dashboard.sheets.columns import META_FIELDS
from .views import ViewFilters, derive_view

logger = logging.getLogger(__name__)

SAVED = "saved"
SAVING = "saving"
ERROR = "error"

EDITABLE_FIELDS = frozenset(META_FIELDS) | {"imageUrl"}

Writer = Callable[[Mapping, str], Any]


@dataclass
class FieldStatus:
    state: str = SAVED
    message: str = ""


@dataclass
class PendingEdit:
    sku: str
    field: str
    previous: Any
    value: Any


@dataclass
class DashboardState:
    items: List[dict] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)
    filters: ViewFilters = field(default_factory=ViewFilters)
    statuses: Dict[Tuple[str, str], FieldStatus] = field(default_factory=dict)

    def load(self, payload: Mapping) -> None:
        """Replace local data with a ``GET /api/inventory`` response."""
        self.items = [dict(item) for item in payload.get("items") or []]
        self.summary = dict(payload.get("summary") or {})

    def find(self, sku: str) -> dict:
        for item in self.items:
            if item.get("sku") == sku:
                return item
        raise KeyError(sku)

    def status(self, sku: str, field_name: str) -> FieldStatus:
        return self.statuses.get((sku, field_name), FieldStatus())

    def global_status(self) -> str:
        states = {status.state for status in self.statuses.values()}
        if SAVING in states:
            return SAVING
        if ERROR in states:
            return ERROR
        return SAVED

    # ------------------------------------------------------------------
    # Optimistic edits

    def begin_edit(self, sku: str, field_name: str, value) -> PendingEdit:
        if field_name not in EDITABLE_FIELDS:
            raise ValueError(f"Field is not editable: {field_name}")
        item = self.find(sku)
        pending = PendingEdit(sku=sku, field=field_name, previous=item.get(field_name), value=value)
        item[field_name] = value
        self.statuses[(sku, field_name)] = FieldStatus(SAVING)
        return pending

    def resolve(self, pending: PendingEdit, error: Optional[BaseException] = None) -> None:
        key = (pending.sku, pending.field)
        if error is None:
            self.statuses[key] = FieldStatus(SAVED)
            return
        # The item may have vanished after a reload
        for item in self.items:
            if item.get("sku") == pending.sku:
                item[pending.field] = pending.previous
        self.statuses[key] = FieldStatus(ERROR, str(error) or error.__class__.__name__)

    def commit_edit(self, sku: str, field_name: str, value, write: Writer) -> bool:
        """Apply ``value`` locally, send it with ``write(item, field)`` and reconcile."""
        pending = self.begin_edit(sku, field_name, value)
        try:
            write(self.find(sku), field_name)
        except Exception as exc:
            logger.warning("Saving %s.%s failed: %s", sku, field_name, exc)
            self.resolve(pending, exc)
            return False
        self.resolve(pending)
        return True

    def retry(self, sku: str, field_name: str, write: Writer) -> bool:
        """Re-send the field's current (reverted) value."""
        return self.commit_edit(sku, field_name, self.find(sku).get(field_name), write)

    # ------------------------------------------------------------------

    def view(self, now: Optional[datetime] = None) -> List[Mapping]:
        return derive_view(self.items, self.filters, now)
