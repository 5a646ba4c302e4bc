"""Cell writes for located item rows.

Numeric inputs left empty are written as empty cells rather than ``0`` so the
sheet keeps the difference between "unset" and a real zero.
"""

from typing import Any, List, Mapping, Sequence

from dashboard.coercion import MONEY_JUNK, coerce_text, finite_number, parse_bool, tidy_number
from dashboard.sheets.columns import ITEM_COL, ITEM_COLUMNS, a1

NUMBER_FIELDS = {
    "qtyOnHand",
    "reorderLevel",
    "stockOnHand",
    "sellingPrice",
    "purchasePrice",
    "promoPrice",
    "sortOrder",
}
FLAG_FIELDS = {"featured", "visible"}


def coerce_number(value):
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    text = coerce_text(value)
    if not text:
        return ""
    num = finite_number(MONEY_JUNK.sub("", text))
    return "" if num is None else tidy_number(num)


def coerce_flag(value) -> str:
    if value is None or coerce_text(value) == "":
        return ""
    return "TRUE" if parse_bool(value, False) else "FALSE"


def coerce_field(field: str, value) -> Any:
    if field in NUMBER_FIELDS:
        return coerce_number(value)
    if field in FLAG_FIELDS:
        return coerce_flag(value)
    return coerce_text(value)


def write_fields(client, sheet_name: str, row_number: int, fields: Sequence[str], payload: Mapping) -> List[Any]:
    """Write ``fields`` of ``payload`` into ``row_number`` with one range update.

    ``fields`` must name adjacent columns in sheet order. Absent keys are
    written as empty cells; nothing is merged with the existing row.
    """
    indexes = [ITEM_COL[field] for field in fields]
    if indexes != list(range(indexes[0], indexes[0] + len(indexes))):
        raise ValueError(f"Fields are not contiguous: {', '.join(fields)}")
    values = [coerce_field(field, payload.get(field)) for field in fields]
    range_a1 = a1(sheet_name, indexes[0], row_number, indexes[-1], row_number)
    client.update_values(range_a1, [values])
    return values


def serialize_item_row(payload: Mapping) -> List[Any]:
    return [coerce_field(field, payload.get(field)) for field in ITEM_COLUMNS]
