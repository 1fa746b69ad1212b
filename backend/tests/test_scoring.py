"""Tests for line scorers and their vocabularies."""

import pytest
from chemsnap.services.scoring import (
    score_chemical_name,
    score_manufacturer,
    is_stop_phrase,
    is_generic_word,
    has_domain_keyword,
    has_concentration_unit,
    has_ratio_notation,
    has_strong_signature,
    has_corporate_suffix,
    has_camel_case,
)
from chemsnap.services.vocabulary import ChemicalNameWeights, ManufacturerWeights


class TestVocabulary:
    """Test the individual vocabulary checks."""
    
    @pytest.mark.parametrize("line", [
        "Store at 2-8 C",
        "DANGER: Flammable liquid",
        "Lot: A123",
        "Catalog No. 123",
        "SKU 55",
        "pH 7.0",
        "CAS 7732-18-5",
    ])
    def test_stop_phrases(self, line):
        assert is_stop_phrase(line)
    
    @pytest.mark.parametrize("line", ["Sodium Phosphate", "Hydrochloric Acid 37%", "Acetone"])
    def test_not_stop_phrases(self, line):
        assert not is_stop_phrase(line)
    
    def test_generic_word_only_when_alone(self):
        assert is_generic_word("Solution")
        assert is_generic_word(" water. ")
        assert not is_generic_word("Buffer Solution")
    
    def test_domain_keyword(self):
        assert has_domain_keyword("Sodium Chloride")
        assert has_domain_keyword("Tris-HCl")
        assert not has_domain_keyword("Industries")
    
    def test_concentration_units(self):
        assert has_concentration_unit("2000 ppm")
        assert has_concentration_unit("2000ppb")
        assert has_concentration_unit("1000 mg/L")
        assert has_concentration_unit("10µg/L")
        assert has_concentration_unit("5 mg·L⁻¹")
        assert not has_concentration_unit("500 mL")
    
    def test_ratio_notation(self):
        assert has_ratio_notation("10% w/v")
        assert has_ratio_notation("70% V/V")
        assert not has_ratio_notation("now/via")
    
    def test_strong_signature(self):
        assert has_strong_signature("Total Organic Carbon")
        assert has_strong_signature("TOC Std")
        assert has_strong_signature("Ethanol 70% v/v")
        assert not has_strong_signature("Acetone")
    
    def test_corporate_suffix_whole_word(self):
        assert has_corporate_suffix("Acme Co.")
        assert has_corporate_suffix("Reagents GmbH")
        assert not has_corporate_suffix("Cobalt Chloride")
    
    def test_camel_case(self):
        assert has_camel_case("LabChem")
        assert not has_camel_case("Labchem")
        assert not has_camel_case("500 mL")


class TestChemicalNameScore:
    """Test chemical-name scoring weights."""
    
    def test_strong_standard_line(self):
        """Test strong signature stacks with concentration and ratio bonuses."""
        # length +1, words +2, keyword +2, strong +5, concentration +3, ratio +2
        assert score_chemical_name("Total Organic Carbon Std 2000 ppm w/w") == 15
    
    def test_plain_product_name(self):
        # length +1, words +2, keyword +2
        assert score_chemical_name("Aqua Solutions") == 5
        assert score_chemical_name("Sodium Chloride Solution") == 5
    
    def test_generic_word_penalty(self):
        assert score_chemical_name("Solution") == 1
        assert score_chemical_name("Water") == -1
    
    def test_stop_phrase_penalty(self):
        assert score_chemical_name("Store at room temperature") < 0
    
    def test_digit_heavy_penalty(self):
        # stop -4, length +1, words +2, digits -1
        assert score_chemical_name("CAS 7732-18-5") == -2
    
    def test_length_bounds(self):
        assert score_chemical_name("ab") == -2
        assert score_chemical_name("x" * 71) == -2
    
    def test_custom_weights(self):
        """Test weights are data and can be tuned."""
        weights = ChemicalNameWeights(domain_keyword=0)
        assert score_chemical_name("Aqua Solutions", weights=weights) == 3


class TestManufacturerScore:
    """Test manufacturer scoring weights."""
    
    def test_known_manufacturer(self):
        assert score_manufacturer("Aqua Solutions") == 4
        assert score_manufacturer("sigma-aldrich") == 4
    
    def test_trademark_stacks(self):
        assert score_manufacturer("Sigma-Aldrich®") == 6
    
    def test_camel_case_bonus(self):
        assert score_manufacturer("LabChem") == 5
    
    def test_corporate_suffix(self):
        assert score_manufacturer("Acme Reagents Inc.") == 2
    
    def test_digit_penalty(self):
        assert score_manufacturer("Lot 20240915") == -1
        assert score_manufacturer("500 mL") == 0
    
    def test_custom_weights(self):
        weights = ManufacturerWeights(known_manufacturer=10)
        assert score_manufacturer("Aqua Solutions", weights=weights) == 10
