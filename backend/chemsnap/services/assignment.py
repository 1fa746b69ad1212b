"""Assignment resolver: write a chosen candidate into a field.

An empty field is set directly. A field that already holds a value is
never overwritten silently: a decision provider is asked once whether to
replace it, append to it, or cancel.
"""

from dataclasses import dataclass
from typing import Callable, Optional
import logging

from ..models.fields import AssignmentDecision, FieldName, FieldSet

logger = logging.getLogger(__name__)


# (field, current value, candidate) -> decision
DecisionProvider = Callable[[FieldName, str, str], AssignmentDecision]

VOLUME_SEPARATOR = ", "
DEFAULT_SEPARATOR = " | "
_VOLUME_FIELDS = {FieldName.CONTAINER_VOLUME, FieldName.VOLUME_UNITS}


class DecisionRequired(Exception):
    """Raised when a conflicting assignment arrives without a decision."""
    
    def __init__(self, field: FieldName, current: str, candidate: str):
        self.field = field
        self.current = current
        self.candidate = candidate
        super().__init__(
            f"{field.value} already holds '{current}'; replace, append or cancel?"
        )


class FixedDecision:
    """Decision provider that always answers the same way."""
    
    def __init__(self, decision: AssignmentDecision):
        self.decision = AssignmentDecision(decision)
    
    def __call__(self, field: FieldName, current: str, candidate: str) -> AssignmentDecision:
        return self.decision


class RequireDecision:
    """Decision provider for callers that must go back and ask the user."""
    
    def __call__(self, field: FieldName, current: str, candidate: str) -> AssignmentDecision:
        raise DecisionRequired(field, current, candidate)


@dataclass
class AssignmentOutcome:
    """Result of one assignment."""
    field_set: FieldSet
    field: FieldName
    decision: Optional[AssignmentDecision]  # None when no decision was needed
    applied: bool


def append_separator(field: FieldName) -> str:
    """", " between volume values/units, " | " for everything else."""
    return VOLUME_SEPARATOR if FieldName(field) in _VOLUME_FIELDS else DEFAULT_SEPARATOR


def assign(
    field_set: FieldSet,
    field: FieldName,
    candidate: str,
    decide: DecisionProvider,
) -> AssignmentOutcome:
    """
    Write ``candidate`` into ``field``.
    
    Args:
        field_set: Current record (not modified)
        field: Target field
        candidate: Value to write
        decide: Asked once, only if the field already holds a value
        
    Returns:
        AssignmentOutcome with the resulting record
    """
    field = FieldName(field)
    candidate = (candidate or "").strip()
    current = field_set.get(field)
    
    if not candidate:
        logger.debug(f"Ignoring blank candidate for {field.value}")
        return AssignmentOutcome(field_set, field, None, applied=False)
    
    if not current.strip():
        return AssignmentOutcome(field_set.with_value(field, candidate), field, None, applied=True)
    
    decision = AssignmentDecision(decide(field, current, candidate))
    if decision == AssignmentDecision.REPLACE:
        updated = field_set.with_value(field, candidate)
    elif decision == AssignmentDecision.APPEND:
        updated = field_set.with_value(field, current + append_separator(field) + candidate)
    else:
        logger.debug(f"Assignment to {field.value} cancelled")
        return AssignmentOutcome(field_set, field, decision, applied=False)
    
    logger.debug(f"{decision.value} on {field.value}")
    return AssignmentOutcome(updated, field, decision, applied=True)


class AssignmentResolver:
    """Assignment bound to one decision provider (e.g. a UI prompt)."""
    
    def __init__(self, decide: Optional[DecisionProvider] = None):
        self.decide = decide or RequireDecision()
    
    def assign(self, field_set: FieldSet, field: FieldName, candidate: str) -> AssignmentOutcome:
        return assign(field_set, field, candidate, self.decide)
