"""Inventory record fields and ranked candidates."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Mapping, Optional


class FieldName(str, Enum):
    """Fields of a chemical inventory record."""
    CHEMICAL_NAME = "chemicalName"
    CONTAINER_VOLUME = "containerVolume"
    VOLUME_UNITS = "volumeUnits"
    QUANTITY = "quantity"
    MANUFACTURER = "manufacturer"
    CAS_NUMBER = "casNumber"
    HAZARD_WARNING = "hazardWarning"
    EXPIRATION_DATE = "expirationDate"
    NOTES = "notes"
    ROOM_NUMBER = "roomNumber"
    LOCATION = "location"


# Fields with automated suggestions; also the destinations a tapped OCR line can go to
SUGGESTIBLE_FIELDS = (
    FieldName.CHEMICAL_NAME,
    FieldName.MANUFACTURER,
    FieldName.CONTAINER_VOLUME,
    FieldName.VOLUME_UNITS,
    FieldName.CAS_NUMBER,
    FieldName.EXPIRATION_DATE,
)
TAP_DESTINATIONS = SUGGESTIBLE_FIELDS


@dataclass(frozen=True)
class Candidate:
    """A proposed value for a field with its plausibility score."""
    text: str
    score: int = 0


@dataclass(frozen=True)
class FieldSet:
    """
    The inventory record under construction.
    
    Every field is always present and always a string; an empty string
    means unset. Treat instances as values: use ``with_value`` to derive
    an updated record.
    """
    values: Dict[FieldName, str] = field(
        default_factory=lambda: {name: "" for name in FieldName}
    )
    
    @classmethod
    def empty(cls) -> "FieldSet":
        return cls()
    
    @classmethod
    def from_mapping(cls, data: Optional[Mapping]) -> "FieldSet":
        """Build a FieldSet from a (possibly partial) mapping; None becomes ""."""
        values = {name: "" for name in FieldName}
        for key, value in (data or {}).items():
            values[FieldName(key)] = "" if value is None else str(value)
        return cls(values=values)
    
    def get(self, name: FieldName) -> str:
        return self.values.get(FieldName(name), "")
    
    def is_empty(self, name: FieldName) -> bool:
        return not self.get(name).strip()
    
    def with_value(self, name: FieldName, value: str) -> "FieldSet":
        updated = dict(self.values)
        updated[FieldName(name)] = value
        return FieldSet(values=updated)
    
    def as_dict(self) -> Dict[str, str]:
        return {name.value: self.values.get(name, "") for name in FieldName}
    
    def __iter__(self) -> Iterator[FieldName]:
        return iter(FieldName)


class AssignmentDecision(str, Enum):
    """User choice when the target field already has a value."""
    REPLACE = "replace"
    APPEND = "append"
    CANCEL = "cancel"
