"""Pure view derivations over the dashboard's local item list.

Items are the camelCase dicts returned by ``GET /api/inventory``. Nothing
here talks to the server; every function returns new lists.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Iterable, List, Mapping, Optional, Tuple

from dashboard.coercion import coerce_text, to_number

DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%d-%b-%Y")
END_OF_DAY = time(23, 59, 59, 999999)


@dataclass
class ViewFilters:
    search: str = ""
    category: str = ""
    main_only: bool = False
    featured_only: bool = False
    visible_only: bool = False
    on_sale_only: bool = False
    sort: str = "manual"


def parse_day(text) -> Optional[date]:
    """Parse a promo date cell; raises ``ValueError`` when it cannot be read."""
    value = coerce_text(text)
    if not value:
        return None
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value[:10] if fmt == "%Y-%m-%d" else value, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Unreadable date: {value}")


def is_on_sale_now(item: Mapping, now: Optional[datetime] = None) -> bool:
    """True when the promo price is positive and ``now`` falls inside the promo window.

    The window opens at 00:00 on the start date and closes at 23:59 on the end
    date; a missing bound is open. An unreadable bound means not on sale.
    """
    if to_number(item.get("promoPrice")) <= 0:
        return False
    now = now or datetime.now()
    try:
        start = parse_day(item.get("promoStart"))
        end = parse_day(item.get("promoEnd"))
    except ValueError:
        return False
    if start is not None and now < datetime.combine(start, time.min):
        return False
    if end is not None and now > datetime.combine(end, END_OF_DAY):
        return False
    return True


def matches_search(item: Mapping, term: str) -> bool:
    term = coerce_text(term).lower()
    if not term:
        return True
    name = coerce_text(item.get("name")).lower()
    sku = coerce_text(item.get("sku")).lower()
    return term in name or term in sku


def stock_value(item: Mapping):
    return to_number(item.get("qtyOnHand")) * to_number(item.get("sellingPrice"))


def filter_items(items: Iterable[Mapping], filters: ViewFilters, now: Optional[datetime] = None) -> List[Mapping]:
    result = []
    for item in items:
        if not matches_search(item, filters.search):
            continue
        if filters.category and coerce_text(item.get("category")) != filters.category:
            continue
        if filters.main_only and coerce_text(item.get("parentId")):
            continue
        if filters.featured_only and not item.get("featured"):
            continue
        if filters.visible_only and not item.get("visible", True):
            continue
        if filters.on_sale_only and not is_on_sale_now(item, now):
            continue
        result.append(item)
    return result


def _manual_key(item: Mapping):
    order = to_number(item.get("sortOrder"))
    # Unset (0) sort orders go after every explicit position
    return (order <= 0, order, coerce_text(item.get("name")).lower())


def sort_items(items: Iterable[Mapping], mode: str = "manual") -> List[Mapping]:
    items = list(items)
    if mode == "name":
        return sorted(items, key=lambda it: coerce_text(it.get("name")).lower())
    if mode == "qty":
        return sorted(items, key=lambda it: to_number(it.get("qtyOnHand")), reverse=True)
    if mode == "value":
        return sorted(items, key=stock_value, reverse=True)
    if mode == "manual":
        return sorted(items, key=_manual_key)
    raise ValueError(f"Unknown sort mode: {mode}")


def derive_view(items: Iterable[Mapping], filters: ViewFilters, now: Optional[datetime] = None) -> List[Mapping]:
    return sort_items(filter_items(items, filters, now), filters.sort)


def category_options(items: Iterable[Mapping]) -> List[str]:
    return sorted({coerce_text(it.get("category")) for it in items} - {""})


# ----------------------------------------------------------------------
# Chart series

def truncate_label(text, max_len: int = 22) -> str:
    value = coerce_text(text)
    return value[: max_len - 1] + "…" if len(value) > max_len else value


def _label(item: Mapping) -> str:
    return truncate_label(item.get("name") or item.get("sku") or "Item")


def status_breakdown(items: Iterable[Mapping]) -> List[Tuple[str, int]]:
    healthy = low = out = 0
    for item in items:
        qty = to_number(item.get("qtyOnHand"))
        reorder = to_number(item.get("reorderLevel"))
        if qty <= 0:
            out += 1
        elif reorder > 0 and qty <= reorder:
            low += 1
        else:
            healthy += 1
    return [("Healthy", healthy), ("Low Stock", low), ("Out of Stock", out)]


def top_by_qty(items: Iterable[Mapping], limit: int = 10) -> List[Tuple[str, float]]:
    ranked = sorted(items, key=lambda it: to_number(it.get("qtyOnHand")), reverse=True)
    return [(_label(it), to_number(it.get("qtyOnHand"))) for it in ranked[:limit]]


def top_by_value(items: Iterable[Mapping], limit: int = 10) -> List[Tuple[str, float]]:
    ranked = sorted(items, key=stock_value, reverse=True)
    return [(_label(it), stock_value(it)) for it in ranked[:limit]]


def reorder_candidates(items: Iterable[Mapping], limit: int = 10) -> List[Tuple[str, float, float]]:
    """Items with a reorder level, closest to running out first."""
    candidates = []
    for item in items:
        reorder = to_number(item.get("reorderLevel"))
        if reorder <= 0:
            continue
        qty = to_number(item.get("qtyOnHand"))
        candidates.append((qty / reorder, _label(item), qty, reorder))
    candidates.sort(key=lambda entry: entry[0])
    return [(label, qty, reorder) for _, label, qty, reorder in candidates[:limit]]
