import pytest

from dashboard.sheets.columns import (
    BUNDLE_COLUMNS,
    ITEM_COL,
    ITEM_COLUMNS,
    META_FIELDS,
    a1,
    column_index,
    column_letter,
    parse_a1,
)


def test_item_layout():
    assert len(ITEM_COLUMNS) == 20
    assert column_letter(ITEM_COL["sku"]) == "F"
    assert column_letter(ITEM_COL["imageUrl"]) == "K"
    assert column_letter(ITEM_COL["category"]) == "L"
    assert column_letter(ITEM_COL["sortOrder"]) == "T"
    assert META_FIELDS[0] == "category"
    assert META_FIELDS[-1] == "sortOrder"
    assert len(BUNDLE_COLUMNS) == 10


@pytest.mark.parametrize("index, letters", [(0, "A"), (25, "Z"), (26, "AA"), (51, "AZ"), (701, "ZZ"), (702, "AAA")])
def test_column_letters_round_trip(index, letters):
    assert column_letter(index) == letters
    assert column_index(letters) == index


def test_a1_quotes_sheet_names_with_spaces():
    assert a1("WebsiteItems", 11, 5, 12, 5) == "WebsiteItems!L5:M5"
    assert a1("Web Items", 0, 1, 19) == "'Web Items'!A1:T"
    assert a1("Bob's", 10, 3) == "'Bob''s'!K3"


def test_parse_a1():
    assert parse_a1("WebsiteItems!A1:T") == ("WebsiteItems", 0, 1, 19, None)
    assert parse_a1("'Web Items'!L5:M5") == ("Web Items", 11, 5, 12, 5)
    assert parse_a1("Bundles!K3") == ("Bundles", 10, 3, 10, 3)
    with pytest.raises(ValueError):
        parse_a1("not a range")
