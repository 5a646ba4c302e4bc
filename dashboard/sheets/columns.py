"""Column layout of the spreadsheet collections.

Every positional lookup into a sheet row goes through the tables in this
module. Bump the schema version when columns are added or reordered.
"""

import re

ITEM_SCHEMA_VERSION = 2
BUNDLE_SCHEMA_VERSION = 1

# Item sheet, 0-based positions (A..T)
ITEM_COLUMNS = (
    "name",
    "qtyOnHand",
    "reorderLevel",
    "stockOnHand",
    "sellingPrice",
    "sku",
    "referenceId",
    "purchasePrice",
    "status",
    "unit",
    "imageUrl",
    "category",
    "parentId",
    "variantOptions",
    "promoPrice",
    "promoStart",
    "promoEnd",
    "featured",
    "visible",
    "sortOrder",
)
ITEM_COL = {name: idx for idx, name in enumerate(ITEM_COLUMNS)}

# Contiguous write groups
CLASSIFICATION_FIELDS = ("category", "parentId")
META_FIELDS = ITEM_COLUMNS[ITEM_COL["category"]:ITEM_COL["sortOrder"] + 1]

BUNDLE_COLUMNS = (
    "bundleId",
    "title",
    "description",
    "skus",
    "discountType",
    "discountValue",
    "active",
    "startDate",
    "endDate",
    "imageUrl",
)
BUNDLE_COL = {name: idx for idx, name in enumerate(BUNDLE_COLUMNS)}

_RANGE_RE = re.compile(
    r"^(?:(?P<sheet>'[^']+'|[^!]+)!)?(?P<c1>[A-Z]+)(?P<r1>\d*)(?::(?P<c2>[A-Z]+)(?P<r2>\d*))?$"
)


def column_letter(index: int) -> str:
    """Return the A1 column letter for a 0-based column index."""
    if index < 0:
        raise ValueError("column index must be >= 0")
    letters = ""
    index += 1
    while index:
        index, rem = divmod(index - 1, 26)
        letters = chr(65 + rem) + letters
    return letters


def column_index(letters: str) -> int:
    value = 0
    for ch in letters.upper():
        value = value * 26 + (ord(ch) - 64)
    return value - 1


def quote_sheet(sheet_name: str) -> str:
    if re.fullmatch(r"[A-Za-z0-9_]+", sheet_name):
        return sheet_name
    return "'" + sheet_name.replace("'", "''") + "'"


def a1(sheet_name, first_col, first_row=None, last_col=None, last_row=None) -> str:
    """Build an A1 range such as ``Sheet!L5:M5`` from 0-based column indexes."""
    start = column_letter(first_col) + ("" if first_row is None else str(first_row))
    ref = start
    if last_col is not None:
        ref += ":" + column_letter(last_col) + ("" if last_row is None else str(last_row))
    return f"{quote_sheet(sheet_name)}!{ref}"


def parse_a1(range_a1: str):
    """Split an A1 range into ``(sheet, first_col, first_row, last_col, last_row)``.

    Columns are 0-based indexes, rows are 1-based sheet rows or ``None`` when
    the range is open-ended.
    """
    match = _RANGE_RE.match(range_a1.strip())
    if not match:
        raise ValueError(f"Unsupported A1 range: {range_a1}")
    sheet = match.group("sheet")
    if sheet and sheet.startswith("'"):
        sheet = sheet[1:-1].replace("''", "'")
    c1 = column_index(match.group("c1"))
    r1 = int(match.group("r1")) if match.group("r1") else None
    c2 = column_index(match.group("c2")) if match.group("c2") else c1
    r2 = int(match.group("r2")) if match.group("r2") else None
    if match.group("c2") is None and r1 is not None:
        r2 = r1
    return sheet, c1, r1, c2, r2
