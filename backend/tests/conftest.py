"""Shared test fixtures."""

import pytest


SAMPLE_LABEL = "Total Organic Carbon Std 2000 ppm w/w\nAqua Solutions\n500 mL"


@pytest.fixture
def sample_label():
    """OCR text of a TOC calibration standard label."""
    return SAMPLE_LABEL
