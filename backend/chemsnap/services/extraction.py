"""Field candidate generation from recognized label text.

Each generator takes the raw OCR text and returns a shortlist:
1. Chemical name: every line plus every adjacent line pair, heuristically scored
2. Manufacturer: every line, scored on supplier names, trademarks and suffixes
3. Volume and unit: first-seen value/unit matches over the full text
4. CAS number and expiration date: single-value parsers

Shortlists are deduplicated case-insensitively and capped (6 by default).
"""

import re
from typing import Iterable, List, Optional
from dataclasses import dataclass, field
import logging

from .segmentation import segment_lines
from .normalizers import find_volume_matches, parse_cas, parse_expiration, cas_checksum_valid
from .scoring import score_chemical_name, score_manufacturer, has_letter
from ..models.fields import Candidate, FieldName, FieldSet
from ..config import get_settings

logger = logging.getLogger(__name__)


def _limit(limit: Optional[int]) -> int:
    return get_settings().max_candidates if limit is None else limit


def dedupe_case_insensitive(values: Iterable[str]) -> List[str]:
    """Keep the first occurrence of each value, ignoring case."""
    seen = set()
    unique = []
    for v in values:
        key = v.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(v)
    return unique


def rank_candidates(candidates: List[Candidate], limit: Optional[int] = None) -> List[Candidate]:
    """
    Order scored candidates best-first.

    Only positive scores containing a letter survive. Ties keep the order
    the candidates were generated in (sorted() is stable). The first,
    highest-scoring spelling of a case-insensitive duplicate wins.
    """
    kept = [c for c in candidates if c.score > 0 and has_letter(c.text)]
    ranked = sorted(kept, key=lambda c: c.score, reverse=True)

    seen = set()
    unique = []
    for c in ranked:
        key = c.text.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(c)
    return unique[:_limit(limit)]


# =============================================================================
# VOLUME / UNIT
# =============================================================================

def volume_candidates(text: str, limit: Optional[int] = None) -> List[str]:
    """Container volume values in order of first appearance."""
    values = [value for value, _ in find_volume_matches(text)]
    return dedupe_case_insensitive(values)[:_limit(limit)]


def unit_candidates(text: str, limit: Optional[int] = None) -> List[str]:
    """Canonical volume units in order of first appearance."""
    units = [unit for _, unit in find_volume_matches(text)]
    return dedupe_case_insensitive(units)[:_limit(limit)]


# =============================================================================
# CHEMICAL NAME
# =============================================================================

def _chemical_name_pool(lines: List[str]) -> List[str]:
    """Single lines first, then adjacent pairs (names OCR split over two lines)."""
    pool = list(lines)
    pool.extend(f"{a} {b}" for a, b in zip(lines, lines[1:]))
    return pool


def score_chemical_name_candidates(text: str, limit: Optional[int] = None) -> List[Candidate]:
    lines = segment_lines(text)
    scored = [Candidate(c, score_chemical_name(c)) for c in _chemical_name_pool(lines)]
    ranked = rank_candidates(scored, limit)
    logger.debug(f"Chemical name: {len(ranked)} of {len(scored)} candidates kept")
    return ranked


def chemical_name_candidates(text: str, limit: Optional[int] = None) -> List[str]:
    """Chemical name suggestions, best first."""
    return [c.text for c in score_chemical_name_candidates(text, limit)]


# =============================================================================
# MANUFACTURER
# =============================================================================

def score_manufacturer_candidates(text: str, limit: Optional[int] = None) -> List[Candidate]:
    lines = segment_lines(text)
    scored = [Candidate(line, score_manufacturer(line)) for line in lines]
    ranked = rank_candidates(scored, limit)
    logger.debug(f"Manufacturer: {len(ranked)} of {len(scored)} lines kept")
    return ranked


def manufacturer_candidates(text: str, limit: Optional[int] = None) -> List[str]:
    """Manufacturer suggestions, best first."""
    return [c.text for c in score_manufacturer_candidates(text, limit)]


def fallback_manufacturer(text: str) -> str:
    """
    Weak default when no line scores as a manufacturer.

    Takes the last line that is long enough and has no long digit run
    (suppliers usually sign off at the bottom of the label).
    """
    settings = get_settings()
    digit_run = re.compile(r"\d{%d,}" % settings.manufacturer_fallback_max_digit_run)
    for line in reversed(segment_lines(text)):
        if len(line) > settings.manufacturer_fallback_min_length and not digit_run.search(line):
            return line
    return ""


def best_manufacturer(text: str) -> str:
    """Top-ranked manufacturer, else the fallback line."""
    ranked = manufacturer_candidates(text, limit=1)
    if ranked:
        return ranked[0]
    fallback = fallback_manufacturer(text)
    if fallback:
        logger.debug(f"Manufacturer fallback used: '{fallback}'")
    return fallback


# =============================================================================
# SUGGESTION BUNDLE
# =============================================================================

@dataclass
class LabelSuggestions:
    """Suggestions for every automated field, computed from one OCR text."""
    lines: List[str] = field(default_factory=list)
    chemical_name: List[str] = field(default_factory=list)
    manufacturer: List[str] = field(default_factory=list)
    container_volume: List[str] = field(default_factory=list)
    volume_units: List[str] = field(default_factory=list)
    cas_number: str = ""
    cas_checksum_valid: bool = False
    expiration_date: str = ""

    @property
    def is_empty(self) -> bool:
        return not (
            self.chemical_name or self.manufacturer or self.container_volume
            or self.volume_units or self.cas_number or self.expiration_date
        )


class LabelExtractor:
    """Proposes field values from recognized label text."""

    def __init__(self):
        self.settings = get_settings()

    def suggest(self, text: str, limit: Optional[int] = None) -> LabelSuggestions:
        """
        Compute every shortlist for one OCR text.

        Args:
            text: Recognized label text
            limit: Shortlist cap (defaults to settings.max_candidates)

        Returns:
            LabelSuggestions; empty lists/strings where nothing was found
        """
        if limit is None:
            limit = self.settings.max_candidates
        cas = parse_cas(text)
        suggestions = LabelSuggestions(
            lines=segment_lines(text),
            chemical_name=chemical_name_candidates(text, limit),
            manufacturer=manufacturer_candidates(text, limit),
            container_volume=volume_candidates(text, limit),
            volume_units=unit_candidates(text, limit),
            cas_number=cas,
            cas_checksum_valid=cas_checksum_valid(cas),
            expiration_date=parse_expiration(text),
        )
        if suggestions.is_empty:
            logger.info("No suggestions found in recognized text")
        return suggestions

    def candidates_for(self, name: FieldName, text: str, limit: Optional[int] = None) -> List[Candidate]:
        """
        Ranked candidates for one field.

        Volume, unit, CAS and date candidates carry no heuristic score and
        are returned with score 0 in first-seen order. Fields without
        automated suggestions return an empty list.
        """
        name = FieldName(name)
        if limit is None:
            limit = self.settings.max_candidates
        if name == FieldName.CHEMICAL_NAME:
            return score_chemical_name_candidates(text, limit)
        if name == FieldName.MANUFACTURER:
            return score_manufacturer_candidates(text, limit)
        if name == FieldName.CONTAINER_VOLUME:
            return [Candidate(v) for v in volume_candidates(text, limit)]
        if name == FieldName.VOLUME_UNITS:
            return [Candidate(u) for u in unit_candidates(text, limit)]
        if name == FieldName.CAS_NUMBER:
            cas = parse_cas(text)
            return [Candidate(cas)] if cas else []
        if name == FieldName.EXPIRATION_DATE:
            date = parse_expiration(text)
            return [Candidate(date)] if date else []
        return []

    def best_guesses(self, text: str) -> dict:
        """Single best value per automated field ("" when nothing found)."""
        suggestions = self.suggest(text, limit=1)
        return {
            FieldName.CHEMICAL_NAME: suggestions.chemical_name[0] if suggestions.chemical_name else "",
            FieldName.MANUFACTURER: best_manufacturer(text),
            FieldName.CONTAINER_VOLUME: suggestions.container_volume[0] if suggestions.container_volume else "",
            FieldName.VOLUME_UNITS: suggestions.volume_units[0] if suggestions.volume_units else "",
            FieldName.CAS_NUMBER: suggestions.cas_number,
            FieldName.EXPIRATION_DATE: suggestions.expiration_date,
        }

    def autofill(self, field_set: FieldSet, text: str) -> FieldSet:
        """
        Fill empty fields with the best guess for each.

        Fields that already hold a value are left alone; conflicts go
        through the assignment resolver instead.
        """
        updated = field_set
        filled = []
        for name, value in self.best_guesses(text).items():
            if value and updated.is_empty(name):
                updated = updated.with_value(name, value)
                filled.append(name.value)
        logger.debug(f"Autofill set {len(filled)} fields: {filled}")
        return updated
