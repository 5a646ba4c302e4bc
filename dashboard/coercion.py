"""Type coercion shared by the record mapper, the field writer and the models.

Nothing here rejects input: values that cannot be read fall back to a default.
"""

import math
import re

MONEY_JUNK = re.compile(r"[^\d.-]")
TRUE_WORDS = {"true", "1", "yes", "y"}
FALSE_WORDS = {"false", "0", "no", "n"}


def tidy_number(num):
    if isinstance(num, float) and num.is_integer():
        return int(num)
    return num


def finite_number(text: str):
    """Parse ``text`` as a plain decimal, or return ``None``."""
    if "_" in text:
        return None
    try:
        num = float(text)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(num):
        return None
    return num


def parse_money(value):
    """Parse a possibly formatted money cell ("$1,234.50") into a number; junk is 0."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else 0
    if not value:
        return 0
    cleaned = MONEY_JUNK.sub("", str(value))
    if not cleaned:
        return 0
    num = finite_number(cleaned)
    return 0 if num is None else tidy_number(num)


def to_number(value):
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else 0
    text = str(value or "").strip()
    if not text:
        return 0
    num = finite_number(text)
    return 0 if num is None else tidy_number(num)


def parse_bool(value, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value if value is not None else "").strip().lower()
    if text in TRUE_WORDS:
        return True
    if text in FALSE_WORDS:
        return False
    return default


def coerce_text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()
