import logging
from typing import List, Mapping

from dashboard.coercion import coerce_text
from dashboard.exceptions import ValidationError, NotFoundError
from dashboard.models import Inventory, Item
from dashboard.services.locator import find_row
from dashboard.services.mapper import transform_rows_to_inventory, row_to_item
from dashboard.services.writer import serialize_item_row, write_fields
from dashboard.sheets.columns import (
    CLASSIFICATION_FIELDS,
    ITEM_COL,
    ITEM_COLUMNS,
    META_FIELDS,
    a1,
    parse_a1,
)

logger = logging.getLogger(__name__)


def read_item_rows(client, sheet_name: str):
    rows = client.get_values(a1(sheet_name, 0, 1, len(ITEM_COLUMNS) - 1))
    if not rows:
        return [], []
    return rows[0], rows[1:]


def get_inventory_data(client, settings) -> Inventory:
    _, rows = read_item_rows(client, settings.item_sheet)
    return transform_rows_to_inventory(rows)


def get_variants_by_parent_sku(client, settings, parent_sku) -> List[Item]:
    parent = coerce_text(parent_sku)
    if not parent:
        raise ValidationError("Missing parentSku")
    inventory = get_inventory_data(client, settings)
    return [item for item in inventory.items if item.parent_id == parent]


def _locate_sku(client, settings, sku) -> int:
    if not coerce_text(sku):
        raise ValidationError("Missing SKU")
    return find_row(client, settings.item_sheet, ITEM_COL["sku"], sku, label="SKU")


def update_image_url_by_sku(client, settings, sku, image_url) -> dict:
    if not coerce_text(sku):
        raise ValidationError("Missing SKU")
    if not coerce_text(image_url):
        raise ValidationError("Missing imageUrl")
    row_number = _locate_sku(client, settings, sku)
    image_url = coerce_text(image_url)
    write_fields(client, settings.item_sheet, row_number, ("imageUrl",), {"imageUrl": image_url})
    logger.info("Image updated for SKU %s at row %s", coerce_text(sku), row_number)
    return {
        "success": True,
        "sku": coerce_text(sku),
        "row": row_number,
        "imageUrl": image_url,
    }


def update_classification_by_sku(client, settings, sku, category, parent_id) -> dict:
    row_number = _locate_sku(client, settings, sku)
    write_fields(
        client,
        settings.item_sheet,
        row_number,
        CLASSIFICATION_FIELDS,
        {"category": category, "parentId": parent_id},
    )
    return {"success": True, "sku": coerce_text(sku), "row": row_number}


def update_item_meta_by_sku(client, settings, payload: Mapping) -> dict:
    """Overwrite the category..sortOrder block of one item row."""
    sku = payload.get("sku")
    row_number = _locate_sku(client, settings, sku)
    write_fields(client, settings.item_sheet, row_number, META_FIELDS, payload)
    return {"success": True, "sku": coerce_text(sku), "row": row_number}


def create_product(client, settings, payload: Mapping) -> dict:
    name = coerce_text(payload.get("name"))
    sku = coerce_text(payload.get("sku"))
    if not name:
        raise ValidationError("Missing name")
    if not sku:
        raise ValidationError("Missing SKU")
    try:
        find_row(client, settings.item_sheet, ITEM_COL["sku"], sku, label="SKU")
    except NotFoundError:
        pass
    else:
        raise ValidationError(f"SKU already exists: {sku}")

    values = serialize_item_row(payload)
    result = client.append_values(
        a1(settings.item_sheet, 0, 1, len(ITEM_COLUMNS) - 1),
        [values],
    )
    updated_range = (result.get("updates") or {}).get("updatedRange")
    row_number = parse_a1(updated_range)[2] if updated_range else None
    item = row_to_item(values)
    logger.info("Created product %s at row %s", sku, row_number)
    return {
        "success": True,
        "item": item.to_dict() if item is not None else None,
        "row": row_number,
    }
