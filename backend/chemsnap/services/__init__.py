"""Services for label text segmentation, candidate ranking, parsing and assignment."""

from .segmentation import segment_lines
from .normalizers import (
    normalize_unit,
    find_volume_matches,
    parse_volume_and_unit,
    parse_cas,
    cas_checksum_valid,
    parse_expiration,
)
from .extraction import (
    LabelExtractor,
    LabelSuggestions,
    volume_candidates,
    unit_candidates,
    chemical_name_candidates,
    manufacturer_candidates,
    fallback_manufacturer,
    best_manufacturer,
)
from .line_parser import LineParse, parse_line, value_for_destination
from .assignment import (
    AssignmentDecision,
    AssignmentOutcome,
    AssignmentResolver,
    DecisionRequired,
    FixedDecision,
    RequireDecision,
    append_separator,
    assign,
)

__all__ = [
    "segment_lines",
    "normalize_unit",
    "find_volume_matches",
    "parse_volume_and_unit",
    "parse_cas",
    "cas_checksum_valid",
    "parse_expiration",
    "LabelExtractor",
    "LabelSuggestions",
    "volume_candidates",
    "unit_candidates",
    "chemical_name_candidates",
    "manufacturer_candidates",
    "fallback_manufacturer",
    "best_manufacturer",
    "LineParse",
    "parse_line",
    "value_for_destination",
    "AssignmentDecision",
    "AssignmentOutcome",
    "AssignmentResolver",
    "DecisionRequired",
    "FixedDecision",
    "RequireDecision",
    "append_separator",
    "assign",
]
