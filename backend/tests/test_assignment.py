"""Tests for the assignment resolver."""

import pytest
from chemsnap.services.assignment import (
    AssignmentResolver,
    DecisionRequired,
    FixedDecision,
    RequireDecision,
    append_separator,
    assign,
)
from chemsnap.models.fields import AssignmentDecision, FieldName, FieldSet


class RecordingDecision:
    """Decision provider that records each call."""
    
    def __init__(self, decision):
        self.decision = decision
        self.calls = []
    
    def __call__(self, field, current, candidate):
        self.calls.append((field, current, candidate))
        return self.decision


@pytest.fixture
def filled():
    """Record with a chemical name and a volume already entered."""
    return (
        FieldSet.empty()
        .with_value(FieldName.CHEMICAL_NAME, "Acetone")
        .with_value(FieldName.CONTAINER_VOLUME, "500")
    )


class TestFieldSet:
    """Test the record value type."""
    
    def test_empty_has_every_field(self):
        values = FieldSet.empty().as_dict()
        assert set(values) == {name.value for name in FieldName}
        assert all(v == "" for v in values.values())
    
    def test_from_mapping_replaces_none(self):
        field_set = FieldSet.from_mapping({"chemicalName": None, "notes": "shelf 3"})
        assert field_set.get(FieldName.CHEMICAL_NAME) == ""
        assert field_set.get(FieldName.NOTES) == "shelf 3"
    
    def test_from_mapping_rejects_unknown_field(self):
        with pytest.raises(ValueError):
            FieldSet.from_mapping({"colour": "red"})


class TestAssign:
    """Test set / replace / append / cancel."""
    
    def test_empty_field_set_without_asking(self):
        decide = RecordingDecision(AssignmentDecision.CANCEL)
        outcome = assign(FieldSet.empty(), FieldName.MANUFACTURER, "Aqua Solutions", decide)
        
        assert outcome.applied
        assert outcome.decision is None
        assert outcome.field_set.get(FieldName.MANUFACTURER) == "Aqua Solutions"
        assert decide.calls == []
    
    def test_whitespace_value_counts_as_empty(self):
        field_set = FieldSet.empty().with_value(FieldName.NOTES, "   ")
        outcome = assign(field_set, FieldName.NOTES, "fridge", RequireDecision())
        assert outcome.field_set.get(FieldName.NOTES) == "fridge"
    
    def test_replace(self, filled):
        decide = RecordingDecision(AssignmentDecision.REPLACE)
        outcome = assign(filled, FieldName.CHEMICAL_NAME, "Acetone, ACS Reagent", decide)
        
        assert outcome.applied
        assert outcome.decision == AssignmentDecision.REPLACE
        assert outcome.field_set.get(FieldName.CHEMICAL_NAME) == "Acetone, ACS Reagent"
        assert decide.calls == [(FieldName.CHEMICAL_NAME, "Acetone", "Acetone, ACS Reagent")]
    
    def test_append_uses_pipe_separator(self, filled):
        outcome = assign(filled, FieldName.CHEMICAL_NAME, "HPLC grade", FixedDecision(AssignmentDecision.APPEND))
        assert outcome.field_set.get(FieldName.CHEMICAL_NAME) == "Acetone | HPLC grade"
    
    def test_append_volume_uses_comma_separator(self, filled):
        outcome = assign(filled, FieldName.CONTAINER_VOLUME, "1", FixedDecision(AssignmentDecision.APPEND))
        assert outcome.field_set.get(FieldName.CONTAINER_VOLUME) == "500, 1"
    
    def test_cancel_leaves_field_unchanged(self, filled):
        outcome = assign(filled, FieldName.CHEMICAL_NAME, "Ethanol", FixedDecision(AssignmentDecision.CANCEL))
        assert not outcome.applied
        assert outcome.decision == AssignmentDecision.CANCEL
        assert outcome.field_set.as_dict() == filled.as_dict()
    
    def test_input_not_mutated(self, filled):
        assign(filled, FieldName.CHEMICAL_NAME, "Ethanol", FixedDecision(AssignmentDecision.REPLACE))
        assert filled.get(FieldName.CHEMICAL_NAME) == "Acetone"
    
    def test_blank_candidate_is_ignored(self, filled):
        decide = RecordingDecision(AssignmentDecision.REPLACE)
        outcome = assign(filled, FieldName.CHEMICAL_NAME, "  ", decide)
        assert not outcome.applied
        assert outcome.field_set.get(FieldName.CHEMICAL_NAME) == "Acetone"
        assert decide.calls == []
    
    def test_conflict_requires_decision(self, filled):
        with pytest.raises(DecisionRequired) as exc_info:
            assign(filled, FieldName.CHEMICAL_NAME, "Ethanol", RequireDecision())
        
        assert exc_info.value.field == FieldName.CHEMICAL_NAME
        assert exc_info.value.current == "Acetone"
        assert exc_info.value.candidate == "Ethanol"


class TestResolver:
    """Test the resolver bound to a provider."""
    
    def test_default_provider_requires_decision(self, filled):
        resolver = AssignmentResolver()
        with pytest.raises(DecisionRequired):
            resolver.assign(filled, FieldName.CHEMICAL_NAME, "Ethanol")
    
    def test_asks_once_per_assignment(self, filled):
        decide = RecordingDecision(AssignmentDecision.APPEND)
        resolver = AssignmentResolver(decide)
        outcome = resolver.assign(filled, FieldName.CHEMICAL_NAME, "Ethanol")
        
        assert len(decide.calls) == 1
        assert outcome.field_set.get(FieldName.CHEMICAL_NAME) == "Acetone | Ethanol"
    
    def test_separators(self):
        assert append_separator(FieldName.CONTAINER_VOLUME) == ", "
        assert append_separator(FieldName.VOLUME_UNITS) == ", "
        assert append_separator(FieldName.CAS_NUMBER) == " | "
        assert append_separator(FieldName.NOTES) == " | "
