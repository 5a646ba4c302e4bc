import base64
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault('APP_ENV', 'testing')

from dashboard import create_app  # noqa: E402
from dashboard.config import TestingConfig  # noqa: E402
from dashboard.sheets import SheetSettings  # noqa: E402
from dashboard.sheets.columns import ITEM_COL, ITEM_COLUMNS, column_letter, parse_a1  # noqa: E402

ITEM_HEADER = [
    "Item Name", "Quantity", "Reorder Level", "Stock On Hand", "Selling Price",
    "SKU", "Reference ID", "Purchase Price", "Status", "Unit", "Image URL",
    "Category", "Parent ID", "Variant Options", "Promo Price", "Promo Start",
    "Promo End", "Featured", "Visible", "Sort Order",
]


def item_row(**fields):
    """Build a 20 column item row from camelCase field names."""
    row = [""] * len(ITEM_COLUMNS)
    for name, value in fields.items():
        row[ITEM_COL[name]] = value
    return row


def seed_rows():
    return [
        ITEM_HEADER,
        item_row(
            name="Widget", sku="W-1", qtyOnHand="10", reorderLevel="5", stockOnHand="12",
            sellingPrice="$1,234.50", referenceId="R1", purchasePrice="800", status="Active",
            unit="pcs", category="Tools", sortOrder="2",
        ),
        item_row(
            name="Widget Blue", sku="W-1-B", qtyOnHand="", reorderLevel="4", stockOnHand="3",
            sellingPrice="100", status="", parentId="W-1", variantOptions="Color: Blue",
            promoPrice="90", featured="yes", visible="no",
        ),
        item_row(name="Old Widget", sku="OLD-1", qtyOnHand="7", sellingPrice="5", status="Discontinued"),
        [],
        item_row(name="Gadget", sku="G-1", qtyOnHand="0", reorderLevel="0", sellingPrice="abc", status="ACTIVE"),
    ]


class FakeSheetsClient:
    """In-memory stand-in for ``SheetsClient`` keyed by sheet title."""

    def __init__(self, sheets=None):
        self.sheets = {}
        self.sheet_ids = {}
        self.writes = []
        self.fail_writes = None
        for title, rows in (sheets or {}).items():
            self._create(title, rows)

    def _create(self, title, rows=()):
        self.sheets[title] = [[str(cell) for cell in row] for row in rows]
        self.sheet_ids[title] = len(self.sheet_ids) + 100
        return self.sheet_ids[title]

    def _check_fail(self):
        if self.fail_writes is not None:
            raise self.fail_writes

    def get_values(self, range_a1):
        sheet, c1, r1, c2, r2 = parse_a1(range_a1)
        grid = self.sheets[sheet]
        start = (r1 or 1) - 1
        stop = len(grid) if r2 is None else min(r2, len(grid))
        rows = []
        for row in grid[start:stop]:
            cells = row[c1:c2 + 1]
            while cells and cells[-1] == "":
                cells = cells[:-1]
            rows.append(cells)
        while rows and not rows[-1]:
            rows.pop()
        return rows

    def update_values(self, range_a1, values, *, value_input_option="USER_ENTERED"):
        self._check_fail()
        sheet, c1, r1, _, _ = parse_a1(range_a1)
        grid = self.sheets[sheet]
        self.writes.append((range_a1, values, value_input_option))
        for offset, row_values in enumerate(values):
            index = (r1 or 1) - 1 + offset
            while len(grid) <= index:
                grid.append([])
            row = grid[index]
            needed = c1 + len(row_values)
            if len(row) < needed:
                row.extend([""] * (needed - len(row)))
            for col, value in enumerate(row_values):
                row[c1 + col] = str(value)
        return {"updatedRange": range_a1}

    def append_values(self, range_a1, values, *, value_input_option="USER_ENTERED"):
        self._check_fail()
        sheet, c1, _, c2, _ = parse_a1(range_a1)
        grid = self.sheets[sheet]
        last = len(grid)
        while last and not any(cell.strip() for cell in grid[last - 1]):
            last -= 1
        first_row = last + 1
        del grid[last:]
        target = f"{sheet}!{column_letter(c1)}{first_row}"
        self.update_values(target, values, value_input_option=value_input_option)
        end_row = first_row + len(values) - 1
        return {
            "updates": {
                "updatedRange": f"{sheet}!{column_letter(c1)}{first_row}:{column_letter(c2)}{end_row}"
            }
        }

    def get_metadata(self):
        return {
            "spreadsheetId": "fake",
            "title": "Fake",
            "sheets": [{"sheetId": sid, "title": title} for title, sid in self.sheet_ids.items()],
        }

    def sheet_id(self, title):
        return self.sheet_ids.get(title)

    def add_sheet(self, title):
        return self._create(title)

    def delete_row(self, title, row_number):
        self._check_fail()
        del self.sheets[title][row_number - 1]


@pytest.fixture()
def sheets():
    return FakeSheetsClient({"WebsiteItems": seed_rows()})


@pytest.fixture()
def settings():
    return SheetSettings(item_sheet="WebsiteItems", bundle_sheet="Bundles")


@pytest.fixture()
def app(sheets):
    return create_app(TestingConfig, sheets_client=sheets)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def auth_headers():
    token = base64.b64encode(b"admin:secret").decode()
    return {"Authorization": f"Basic {token}"}
