"""Tap-to-assign path: parse one OCR line and route it to a field."""

from dataclasses import dataclass

from .normalizers import parse_volume_and_unit, parse_cas, parse_expiration
from ..models.fields import FieldName, TAP_DESTINATIONS


@dataclass
class LineParse:
    """Everything a single line yields for the line-level destinations."""
    line: str
    container_volume: str = ""
    volume_units: str = ""
    cas_number: str = ""
    expiration_date: str = ""


def parse_line(line: str) -> LineParse:
    text = (line or "").strip()
    value, unit = parse_volume_and_unit(text)
    return LineParse(
        line=text,
        container_volume=value,
        volume_units=unit,
        cas_number=parse_cas(text),
        expiration_date=parse_expiration(text),
    )


def value_for_destination(line: str, destination: FieldName) -> str:
    """
    The value a tapped line contributes to one destination field.
    
    Name-like destinations take the whole line. Parsed destinations take
    the parsed value, or the whole line when the line does not parse,
    since the user picked this line on purpose.
    """
    destination = FieldName(destination)
    if destination not in TAP_DESTINATIONS:
        raise ValueError(f"{destination.value} is not a line destination")
    
    parsed = parse_line(line)
    by_field = {
        FieldName.CHEMICAL_NAME: parsed.line,
        FieldName.MANUFACTURER: parsed.line,
        FieldName.CONTAINER_VOLUME: parsed.container_volume,
        FieldName.VOLUME_UNITS: parsed.volume_units,
        FieldName.CAS_NUMBER: parsed.cas_number,
        FieldName.EXPIRATION_DATE: parsed.expiration_date,
    }
    return by_field[destination] or parsed.line
