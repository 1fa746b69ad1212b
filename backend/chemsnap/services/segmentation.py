"""Split recognized label text into reading-order lines."""

from typing import List


def segment_lines(text: str) -> List[str]:
    """
    Split OCR text into trimmed, non-empty lines.
    
    Line order follows the label top to bottom and is kept as-is;
    later heuristics rely on it.
    """
    if not text:
        return []
    text = text.replace("\r", "")
    return [line.strip() for line in text.split("\n") if line.strip()]
