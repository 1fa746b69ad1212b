"""Line scorers for chemical-name and manufacturer candidates."""

import re
from typing import Optional

from .vocabulary import (
    CHEMICAL_NAME_WEIGHTS,
    MANUFACTURER_WEIGHTS,
    ChemicalNameWeights,
    ManufacturerWeights,
    STOP_PHRASE_RE,
    GENERIC_WORDS,
    DOMAIN_KEYWORD_RE,
    STRONG_SIGNATURE_RE,
    CONCENTRATION_UNIT_RE,
    RATIO_NOTATION_RE,
    KNOWN_MANUFACTURERS,
    TRADEMARK_GLYPHS,
    CORPORATE_SUFFIX_RE,
    CAMEL_CASE_RE,
)
from ..config import get_settings


def _any_match(patterns, text: str) -> bool:
    return any(p.search(text) for p in patterns)


def has_letter(text: str) -> bool:
    return any(ch.isalpha() for ch in text)


def is_stop_phrase(text: str) -> bool:
    """Storage/hazard/instruction wording or catalog, lot, CAS, pH, SKU markers."""
    return _any_match(STOP_PHRASE_RE, text)


def is_generic_word(text: str) -> bool:
    """True when the whole candidate is a single generic word like "Solution"."""
    return text.strip().strip(".:,;").lower() in GENERIC_WORDS


def has_domain_keyword(text: str) -> bool:
    return DOMAIN_KEYWORD_RE.search(text) is not None


def has_concentration_unit(text: str) -> bool:
    return _any_match(CONCENTRATION_UNIT_RE, text)


def has_ratio_notation(text: str) -> bool:
    return _any_match(RATIO_NOTATION_RE, text)


def has_strong_signature(text: str) -> bool:
    """Standard/TOC naming, a concentration unit or ratio notation."""
    return (
        _any_match(STRONG_SIGNATURE_RE, text)
        or has_concentration_unit(text)
        or has_ratio_notation(text)
    )


def score_chemical_name(
    candidate: str,
    weights: ChemicalNameWeights = CHEMICAL_NAME_WEIGHTS,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> int:
    """
    Score how much a line (or joined line pair) looks like a substance name.

    Scoring components:
    - penalty for administrative text (stop phrases) and lone generic words
    - small bonus for a plausible length, penalty otherwise
    - bonus for a product-name word count
    - bonus for chemistry vocabulary
    - large bonus for strong signatures (standards, concentrations, w/v ratios),
      stacking with extra bonuses for concentration units and ratios
    - penalty for digit-heavy lines
    """
    settings = get_settings()
    if min_length is None:
        min_length = settings.chemical_name_min_length
    if max_length is None:
        max_length = settings.chemical_name_max_length

    text = candidate.strip()
    score = 0

    if is_stop_phrase(text):
        score += weights.stop_phrase
    if is_generic_word(text):
        score += weights.generic_word

    if min_length <= len(text) <= max_length:
        score += weights.good_length
    else:
        score += weights.bad_length

    if weights.min_words <= len(text.split()) <= weights.max_words:
        score += weights.good_word_count

    if has_domain_keyword(text):
        score += weights.domain_keyword

    if has_strong_signature(text):
        score += weights.strong_signature
    if has_concentration_unit(text):
        score += weights.concentration_unit
    if has_ratio_notation(text):
        score += weights.ratio_notation

    digits = sum(ch.isdigit() for ch in text)
    if text and digits > len(text) / 2:
        score += weights.digit_heavy

    return score


def has_known_manufacturer(text: str) -> bool:
    lowered = text.lower()
    return any(name.lower() in lowered for name in KNOWN_MANUFACTURERS)


def has_trademark(text: str) -> bool:
    return any(glyph in text for glyph in TRADEMARK_GLYPHS)


def has_corporate_suffix(text: str) -> bool:
    return CORPORATE_SUFFIX_RE.search(text) is not None


def has_camel_case(text: str) -> bool:
    return CAMEL_CASE_RE.search(text) is not None


def score_manufacturer(
    line: str,
    weights: ManufacturerWeights = MANUFACTURER_WEIGHTS,
) -> int:
    """Score how much a single line looks like a manufacturer/brand line."""
    text = line.strip()
    score = 0

    if has_known_manufacturer(text):
        score += weights.known_manufacturer
    if has_trademark(text):
        score += weights.trademark
    if has_corporate_suffix(text):
        score += weights.corporate_suffix
    if len(re.findall(r"\d", text)) >= weights.digit_threshold:
        score += weights.many_digits
    if has_camel_case(text):
        score += weights.camel_case

    return score
