"""
Best-effort normalisation of listing text.

Both normalisers are total: unparsable input never raises, it degrades to a
default (today's date, a price of 0). The parse_* variants return a
Normalized value that records whether the default was used, so callers can
tell a real "0 won" from "no price found".
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

_DATE_FORMATS = ("%Y.%m.%d", "%Y-%m-%d", "%Y/%m/%d")
# "10.31" style, no year
_MONTH_DAY_RE = re.compile(r"\d{2}\.\d{2}")
_NON_DIGIT_RE = re.compile(r"[^0-9]")
_FREE_MARKERS = ("무료", "free")
# Largest price kept; longer digit runs come from multi-tier lines like "VIP 154,000 / R 132,000"
MAX_PRICE = 2**31 - 1


@dataclass(frozen=True)
class Normalized(Generic[T]):
    value: T
    defaulted: bool = False


def parse_date(text: Optional[str], today: Optional[date] = None) -> Normalized[date]:
    """
    Parse listing date text such as "2025.10.31~2025.11.01" or "10.31".

    Only the part before the first "~" is considered. A bare month/day is
    placed in the year of `today`.
    """
    today = today or date.today()
    if not text:
        return Normalized(today, defaulted=True)

    text = text.split("~", 1)[0].strip()

    for fmt in _DATE_FORMATS:
        try:
            return Normalized(datetime.strptime(text, fmt).date())
        except ValueError:
            continue

    if _MONTH_DAY_RE.fullmatch(text):
        try:
            return Normalized(datetime.strptime(f"{today.year}.{text}", "%Y.%m.%d").date())
        except ValueError:
            pass

    return Normalized(today, defaulted=True)


def normalize_date(text: Optional[str], today: Optional[date] = None) -> date:
    return parse_date(text, today).value


def parse_price(text: Optional[str]) -> Normalized[int]:
    """Parse price text like "12,000원" -> 12000. Free or digit-less text -> 0."""
    if not text:
        return Normalized(0, defaulted=True)

    lowered = text.lower()
    if any(marker in lowered for marker in _FREE_MARKERS):
        return Normalized(0)

    digits = _NON_DIGIT_RE.sub("", text)
    if not digits:
        return Normalized(0, defaulted=True)
    try:
        value = int(digits)
    except ValueError:
        return Normalized(0, defaulted=True)
    if value > MAX_PRICE:
        return Normalized(0, defaulted=True)
    return Normalized(value)


def normalize_price(text: Optional[str]) -> int:
    return parse_price(text).value
