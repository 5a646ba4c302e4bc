from dashboard.exceptions import NotFoundError
from dashboard.sheets.columns import a1

HEADER_ROWS = 1


def find_row(client, sheet_name: str, key_column: int, key, label: str = "Key") -> int:
    """Return the 1-based sheet row whose ``key_column`` cell equals ``key``.

    Both sides are trimmed before comparing. The first data row is row 2.
    Row numbers are only valid until the sheet is next edited.
    """
    first_row = HEADER_ROWS + 1
    cells = client.get_values(a1(sheet_name, key_column, first_row, key_column))
    target = str(key if key is not None else "").strip()
    for offset, entry in enumerate(cells):
        value = str(entry[0] if entry else "").strip()
        if value == target:
            return offset + first_row
    raise NotFoundError(f"{label} not found in sheet: {key}")
