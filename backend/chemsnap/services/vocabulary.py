"""Vocabularies and weights used to score label lines.

Everything here is data: the scorers in ``scoring`` only combine these
tables, so weights and word lists can be tuned and tested on their own.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class ChemicalNameWeights:
    """Additive weights for chemical-name scoring."""
    stop_phrase: int = -4
    generic_word: int = -2
    good_length: int = 1
    bad_length: int = -2
    good_word_count: int = 2
    domain_keyword: int = 2
    strong_signature: int = 5
    concentration_unit: int = 3
    ratio_notation: int = 2
    digit_heavy: int = -1
    min_words: int = 2
    max_words: int = 8


@dataclass(frozen=True)
class ManufacturerWeights:
    """Additive weights for manufacturer scoring."""
    known_manufacturer: int = 4
    trademark: int = 2
    corporate_suffix: int = 2
    many_digits: int = -1
    camel_case: int = 1
    digit_threshold: int = 4


CHEMICAL_NAME_WEIGHTS = ChemicalNameWeights()
MANUFACTURER_WEIGHTS = ManufacturerWeights()


# Storage, hazard and instructional wording plus catalog/lot/reference markers.
# A line hitting any of these is administrative text, not a substance name.
STOP_PHRASES = [
    r"\bstore\b", r"\bstorage\b", r"\bkeep\b", r"\brefrigerate\b",
    r"\bdanger\b", r"\bwarning\b", r"\bcaution\b", r"\bhazard",
    r"\bflammable\b", r"\bcorrosive\b", r"\btoxic\b", r"\bharmful\b",
    r"\birritant\b", r"\bfatal\b", r"\bavoid\b", r"\bwear\b",
    r"\bwash\b", r"\bdispose\b", r"\bprecautions?\b",
    r"\bdirections?\b", r"\binstructions?\b", r"\bread\s+label\b",
    r"\bfor\s+(?:laboratory|research|professional)\s+use\b",
    r"\bcat(?:alog)?\b\.?", r"\blot\b", r"\bref\b", r"\bcas\b",
    r"\bph\b", r"\bsku\b", r"\bitem\s*(?:no|#)", r"\bp/n\b",
    r"\bbatch\b", r"\bexp(?:iry|iration)?\b", r"\bmfg\b", r"\bmanufactured\b",
]

# A candidate consisting only of one of these words says nothing about the substance
GENERIC_WORDS = {
    "solution", "water", "buffer", "reagent", "standard", "acid", "base",
    "sample", "chemical", "liquid", "powder", "mixture", "solvent",
}

# Chemistry-domain words that make a line look like a product name
DOMAIN_KEYWORDS = [
    "buffer", "acid", "reagent", "ethanol", "methanol", "isopropanol",
    "propanol", "acetone", "sodium", "potassium", "calcium", "magnesium",
    "ammonium", "chloride", "hydroxide", "sulfate", "sulphate", "nitrate",
    "phosphate", "carbonate", "bicarbonate", "acetate", "citrate", "oxide",
    "peroxide", "solution", "standard", "glycerol", "glucose", "tris",
    "edta", "alcohol", "carbon", "solvent", "indicator", "titrant",
    "saline", "chloroform", "hexane", "toluene", "xylene", "benzene",
    "formaldehyde", "iodine", "bromide", "iodide", "hydrochloric",
    "sulfuric", "nitric", "acetic", "phosphoric", "nitrogen", "ethyl",
    "methyl", "amine", "glycol", "hydrogen", "ether", "sulfide",
]

# High-precision signatures of analytical standards and reagents
STRONG_SIGNATURES = [
    r"\btotal\s+organic\s+carbon\b",
    r"\btoc\b",
    r"\b(?:std|standard)\b",
]

# Concentration units: ppm/ppb/ppt and mass or molar per volume
CONCENTRATION_UNITS = [
    r"(?<![a-z])pp[mbt]\b",
    r"(?<![a-z])(?:mg|µg|μg|ug|ng|g)\s*/\s*m?l\b",
    r"(?<![a-z])(?:mg|µg|μg|ug|ng|g)\s*[·.\s]\s*m?l\s*(?:-1|⁻¹)",
    r"(?<![a-z])mol\s*/\s*l\b",
]

# w/w, w/v, v/v ratio notation
RATIO_NOTATION = [
    r"(?<![a-z])[wv]\s*/\s*[wv](?![a-z])",
]

# Known chemical suppliers, matched as case-insensitive substrings
KNOWN_MANUFACTURERS = [
    "Sigma-Aldrich", "Sigma Aldrich", "MilliporeSigma", "Millipore",
    "Fisher Scientific", "Fisher Chemical", "Thermo Fisher", "Thermo Scientific",
    "Merck", "VWR", "Avantor", "J.T. Baker", "JT Baker", "Honeywell",
    "Fluka", "Alfa Aesar", "Acros Organics", "TCI America", "Spectrum Chemical",
    "LabChem", "Ricca Chemical", "Hach", "Aqua Solutions", "Cayman Chemical",
    "Santa Cruz Biotechnology", "Bio-Rad", "Invitrogen", "Macron",
    "Carolina Biological", "Flinn Scientific", "BDH", "Mallinckrodt",
    "Beckman Coulter", "Agilent", "Restek", "Supelco", "GFS Chemicals",
    "Oakwood Chemical", "Strem Chemicals", "Airgas", "Lonza", "Corning",
    "Gibco", "Promega", "Qiagen", "New England Biolabs", "Sigma", "Aldrich",
]

TRADEMARK_GLYPHS = ("®", "™")

CORPORATE_SUFFIXES = ["Inc", "Corp", "Co", "Ltd", "GmbH", "LLC"]


def compile_patterns(patterns) -> list:
    """Compile a pattern table case-insensitively."""
    return [re.compile(p, re.IGNORECASE) for p in patterns]


STOP_PHRASE_RE = compile_patterns(STOP_PHRASES)
STRONG_SIGNATURE_RE = compile_patterns(STRONG_SIGNATURES)
CONCENTRATION_UNIT_RE = compile_patterns(CONCENTRATION_UNITS)
RATIO_NOTATION_RE = compile_patterns(RATIO_NOTATION)
DOMAIN_KEYWORD_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(kw) for kw in DOMAIN_KEYWORDS) + r")",
    re.IGNORECASE,
)
CORPORATE_SUFFIX_RE = re.compile(
    r"\b(?:" + "|".join(CORPORATE_SUFFIXES) + r")\b",
    re.IGNORECASE,
)
# Two capitalized words run together, e.g. "LabChem", "MilliporeSigma"
CAMEL_CASE_RE = re.compile(r"[A-Z][a-z]+[A-Z][a-z]+")
