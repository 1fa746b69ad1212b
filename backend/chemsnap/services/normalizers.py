"""Volume/unit, CAS number and expiration date normalizers.

All parsers are total: they return "" (or an empty list) when nothing
matches and never raise on arbitrary text.
"""

import re
from typing import List, Tuple
import logging

logger = logging.getLogger(__name__)


# Number (comma or dot decimal) followed by a volume unit.
# Longer unit spellings come first so "fl oz" wins over "oz" and "mL" over "L".
VOLUME_PATTERN = re.compile(
    r"\b(\d+(?:[.,]\d+)?)\s*"
    r"(fl\.?\s*oz|oz|gal(?:lons?)?|"
    r"(?:µ|μ|Âµ|u)l|"
    r"ml|millilit(?:er|re)s?|"
    r"l|lit(?:er|re)s?)"
    r"(?![a-z])",
    re.IGNORECASE,
)

# CAS Registry Number shape; the check digit is not validated here
CAS_PATTERN = re.compile(r"\b\d{2,7}-\d{2}-\d\b")

_YEAR = r"(20\d{2})"
_MONTH = r"(0?[1-9]|1[0-2])"
_DAY = r"(0?[1-9]|[12]\d|3[01])"

# Tried in order: year-first, month-first, day-first. Month-first wins for
# dates valid in both orders (03/04/2026 is March 4th).
DATE_PATTERNS = [
    ("ymd", re.compile(rf"\b{_YEAR}([-/]){_MONTH}\2{_DAY}\b")),
    ("mdy", re.compile(rf"\b{_MONTH}([-/]){_DAY}\2{_YEAR}\b")),
    ("dmy", re.compile(rf"\b{_DAY}([-/]){_MONTH}\2{_YEAR}\b")),
]

# Canonical spelling per unit family
_UNIT_CANONICAL = [
    (re.compile(r"^(?:µ|μ|âµ|u)l$"), "µL"),
    (re.compile(r"^(?:ml|millilit(?:er|re)s?)$"), "mL"),
    (re.compile(r"^(?:l|lit(?:er|re)s?)$"), "L"),
    (re.compile(r"^fl\.?oz$"), "fl oz"),
    (re.compile(r"^oz$"), "oz"),
    (re.compile(r"^gal(?:lons?)?$"), "gal"),
]


def normalize_unit(raw: str) -> str:
    """Map any casing/spacing of a known unit to its canonical spelling."""
    if not raw:
        return ""
    key = re.sub(r"\s+", "", raw.strip().lower())
    for pattern, canonical in _UNIT_CANONICAL:
        if pattern.match(key):
            return canonical
    return raw.strip()


def normalize_decimal(value: str) -> str:
    """Accept comma decimal separators ("1,5" -> "1.5")."""
    return value.replace(",", ".")


def find_volume_matches(text: str) -> List[Tuple[str, str]]:
    """All (value, unit) pairs in order of appearance, normalized."""
    if not text:
        return []
    return [
        (normalize_decimal(m.group(1)), normalize_unit(m.group(2)))
        for m in VOLUME_PATTERN.finditer(text)
    ]


def parse_volume_and_unit(text: str) -> Tuple[str, str]:
    """First (value, unit) pair in the text, or ("", "")."""
    if not text:
        return "", ""
    match = VOLUME_PATTERN.search(text)
    if not match:
        return "", ""
    return normalize_decimal(match.group(1)), normalize_unit(match.group(2))


def parse_cas(text: str) -> str:
    """First CAS-shaped number in the text, or ""."""
    if not text:
        return ""
    match = CAS_PATTERN.search(text)
    return match.group(0) if match else ""


def cas_checksum_valid(cas: str) -> bool:
    """
    Check the CAS Registry check digit.
    
    The check digit is the sum of the other digits, each weighted by its
    position counted from the right, modulo 10.
    """
    if not cas or not CAS_PATTERN.fullmatch(cas):
        return False
    digits = cas.replace("-", "")
    body, check = digits[:-1], int(digits[-1])
    total = sum(int(d) * i for i, d in enumerate(reversed(body), start=1))
    return total % 10 == check


def parse_expiration(text: str) -> str:
    """
    Find an expiration date and return it as ISO YYYY-MM-DD, or "".
    
    Shapes are tried in a fixed priority order (year-first, month-first,
    day-first) over the whole text; the first shape with a match wins.
    Only 20xx years are recognized.
    """
    if not text:
        return ""
    for shape, pattern in DATE_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        if shape == "ymd":
            year, _, month, day = match.groups()
        elif shape == "mdy":
            month, _, day, year = match.groups()
        else:
            day, _, month, year = match.groups()
        logger.debug(f"Expiration date matched as {shape}: '{match.group(0)}'")
        return f"{year}-{int(month):02d}-{int(day):02d}"
    return ""
