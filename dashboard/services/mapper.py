"""Row to record mapping for the item and bundle sheets."""

from typing import Iterable, List, Sequence

from dashboard.coercion import parse_bool, parse_money, to_number
from dashboard.models import Bundle, Inventory, Item, Summary
from dashboard.sheets.columns import BUNDLE_COL, ITEM_COL


def _cell(row: Sequence, index: int) -> str:
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index]).strip()


def row_to_item(row: Sequence):
    """Return the typed item for ``row`` or ``None`` when the row is excluded."""
    name = _cell(row, ITEM_COL["name"])
    sku = _cell(row, ITEM_COL["sku"])
    if not name and not sku:
        return None
    status = _cell(row, ITEM_COL["status"])
    if status and status.lower() != "active":
        return None

    qty_cell = _cell(row, ITEM_COL["qtyOnHand"]) or _cell(row, ITEM_COL["stockOnHand"])
    qty_on_hand = to_number(qty_cell)
    reorder_level = to_number(_cell(row, ITEM_COL["reorderLevel"]))

    return Item(
        name=name,
        sku=sku,
        qty_on_hand=qty_on_hand,
        reorder_level=reorder_level,
        stock_on_hand=to_number(_cell(row, ITEM_COL["stockOnHand"])),
        selling_price=parse_money(_cell(row, ITEM_COL["sellingPrice"])),
        purchase_price=parse_money(_cell(row, ITEM_COL["purchasePrice"])),
        unit=_cell(row, ITEM_COL["unit"]),
        status=status,
        reference_id=_cell(row, ITEM_COL["referenceId"]),
        is_low=reorder_level > 0 and qty_on_hand <= reorder_level,
        image_url=_cell(row, ITEM_COL["imageUrl"]),
        category=_cell(row, ITEM_COL["category"]),
        parent_id=_cell(row, ITEM_COL["parentId"]),
        variant_options=_cell(row, ITEM_COL["variantOptions"]),
        promo_price=parse_money(_cell(row, ITEM_COL["promoPrice"])),
        promo_start=_cell(row, ITEM_COL["promoStart"]),
        promo_end=_cell(row, ITEM_COL["promoEnd"]),
        featured=parse_bool(_cell(row, ITEM_COL["featured"]), False),
        visible=parse_bool(_cell(row, ITEM_COL["visible"]), True),
        sort_order=to_number(_cell(row, ITEM_COL["sortOrder"])),
    )


def summarize(items: Iterable[Item]) -> Summary:
    items = list(items)
    return Summary(
        total_items=len(items),
        total_stock_qty=sum(item.qty_on_hand for item in items),
        total_stock_value=sum(item.stock_value for item in items),
        low_stock_count=sum(1 for item in items if item.is_low),
    )


def transform_rows_to_inventory(rows: Iterable[Sequence]) -> Inventory:
    """Map data rows (header excluded) to included items plus their summary."""
    items: List[Item] = []
    for row in rows:
        item = row_to_item(row)
        if item is not None:
            items.append(item)
    return Inventory(items=items, summary=summarize(items))


def row_to_bundle(row: Sequence) -> Bundle:
    return Bundle(
        bundle_id=_cell(row, BUNDLE_COL["bundleId"]),
        title=_cell(row, BUNDLE_COL["title"]),
        description=_cell(row, BUNDLE_COL["description"]),
        skus=_cell(row, BUNDLE_COL["skus"]),
        discount_type=_cell(row, BUNDLE_COL["discountType"]),
        discount_value=to_number(_cell(row, BUNDLE_COL["discountValue"])),
        active=parse_bool(_cell(row, BUNDLE_COL["active"]), True),
        start_date=_cell(row, BUNDLE_COL["startDate"]),
        end_date=_cell(row, BUNDLE_COL["endDate"]),
        image_url=_cell(row, BUNDLE_COL["imageUrl"]),
    )
