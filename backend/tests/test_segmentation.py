"""Tests for line segmentation."""

from chemsnap.services.segmentation import segment_lines


class TestSegmentLines:
    """Test splitting OCR text into lines."""
    
    def test_strips_and_drops_empty_lines(self):
        """Test trimming, carriage returns and blank lines."""
        text = "  Acetone \r\n\n   \r\n ACS Reagent\n"
        assert segment_lines(text) == ["Acetone", "ACS Reagent"]
    
    def test_preserves_order(self):
        """Test top-to-bottom order is kept."""
        assert segment_lines("c\nb\na") == ["c", "b", "a"]
    
    def test_empty_input(self):
        """Test empty and whitespace-only text."""
        assert segment_lines("") == []
        assert segment_lines(" \n\r\n\t") == []
    
    def test_idempotent_on_own_output(self):
        """Test re-segmenting the joined output gives the same lines."""
        lines = segment_lines(" Ethanol 200 Proof \r\n\nFisher Chemical\n 4 L ")
        assert segment_lines("\n".join(lines)) == lines
