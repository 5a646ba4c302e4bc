import logging
import secrets
import time
from typing import Any, List, Mapping

from dashboard.coercion import coerce_text
from dashboard.exceptions import ValidationError
from dashboard.models import Bundle
from dashboard.services.locator import find_row
from dashboard.services.mapper import row_to_bundle
from dashboard.services.writer import coerce_flag, coerce_number
from dashboard.sheets.columns import BUNDLE_COL, BUNDLE_COLUMNS, a1

logger = logging.getLogger(__name__)

LAST_COL = len(BUNDLE_COLUMNS) - 1
# Bundle cells are stored verbatim so dates and flags read back unchanged.
VALUE_INPUT = "RAW"


def generate_bundle_id() -> str:
    return f"BND_{int(time.time() * 1000)}_{secrets.token_hex(3)}"


def ensure_bundles_sheet(client, settings) -> bool:
    """Create the bundles sheet and header row when missing.

    Returns ``True`` when anything had to be written.
    """
    sheet = settings.bundle_sheet
    header_range = a1(sheet, 0, 1, LAST_COL, 1)
    if client.sheet_id(sheet) is None:
        client.add_sheet(sheet)
        client.update_values(header_range, [list(BUNDLE_COLUMNS)], value_input_option=VALUE_INPUT)
        logger.info("Created bundles sheet %s", sheet)
        return True
    header = client.get_values(header_range)
    if not header or not any(cell.strip() for cell in header[0]):
        client.update_values(header_range, [list(BUNDLE_COLUMNS)], value_input_option=VALUE_INPUT)
        logger.info("Backfilled header row on %s", sheet)
        return True
    return False


def serialize_bundle(bundle: Bundle) -> List[Any]:
    data = bundle.to_dict()
    values: List[Any] = []
    for field in BUNDLE_COLUMNS:
        value = data.get(field)
        if field == "skus":
            values.append(",".join(value or []))
        elif field == "discountValue":
            values.append(coerce_number(value))
        elif field == "active":
            values.append(coerce_flag(value))
        else:
            values.append(coerce_text(value))
    return values


def list_bundles(client, settings) -> List[Bundle]:
    ensure_bundles_sheet(client, settings)
    rows = client.get_values(a1(settings.bundle_sheet, 0, 2, LAST_COL))
    bundles = (row_to_bundle(row) for row in rows)
    return [bundle for bundle in bundles if bundle.bundle_id]


def create_bundle(client, settings, payload: Mapping) -> Bundle:
    ensure_bundles_sheet(client, settings)
    bundle = Bundle.model_validate(dict(payload))
    if not bundle.bundle_id.strip():
        bundle.bundle_id = generate_bundle_id()
    client.append_values(
        a1(settings.bundle_sheet, 0, 1, LAST_COL),
        [serialize_bundle(bundle)],
        value_input_option=VALUE_INPUT,
    )
    logger.info("Created bundle %s", bundle.bundle_id)
    return bundle


def _locate_bundle(client, settings, bundle_id) -> int:
    if not coerce_text(bundle_id):
        raise ValidationError("Missing bundleId")
    ensure_bundles_sheet(client, settings)
    return find_row(
        client,
        settings.bundle_sheet,
        BUNDLE_COL["bundleId"],
        bundle_id,
        label="Bundle",
    )


def update_bundle(client, settings, bundle_id, payload: Mapping) -> Bundle:
    """Replace the whole bundle row; the path id wins over any payload id."""
    row_number = _locate_bundle(client, settings, bundle_id)
    bundle = Bundle.model_validate({**dict(payload), "bundleId": coerce_text(bundle_id)})
    client.update_values(
        a1(settings.bundle_sheet, 0, row_number, LAST_COL, row_number),
        [serialize_bundle(bundle)],
        value_input_option=VALUE_INPUT,
    )
    return bundle


def delete_bundle(client, settings, bundle_id) -> dict:
    row_number = _locate_bundle(client, settings, bundle_id)
    client.delete_row(settings.bundle_sheet, row_number)
    logger.info("Deleted bundle %s from row %s", bundle_id, row_number)
    return {"success": True, "bundleId": coerce_text(bundle_id)}
