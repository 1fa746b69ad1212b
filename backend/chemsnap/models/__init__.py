"""Field model and pydantic request/response schemas."""

from .fields import (
    FieldName,
    FieldSet,
    Candidate,
    AssignmentDecision,
    SUGGESTIBLE_FIELDS,
    TAP_DESTINATIONS,
)
from .schemas import (
    TextRequest,
    LineRequest,
    CandidateModel,
    SuggestionsResponse,
    FieldCandidatesResponse,
    LineParseResponse,
    AssignRequest,
    AssignLineRequest,
    AutofillRequest,
    AssignmentResponse,
    FieldSetResponse,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "FieldName",
    "FieldSet",
    "Candidate",
    "AssignmentDecision",
    "SUGGESTIBLE_FIELDS",
    "TAP_DESTINATIONS",
    "TextRequest",
    "LineRequest",
    "CandidateModel",
    "SuggestionsResponse",
    "FieldCandidatesResponse",
    "LineParseResponse",
    "AssignRequest",
    "AssignLineRequest",
    "AutofillRequest",
    "AssignmentResponse",
    "FieldSetResponse",
    "ErrorResponse",
    "HealthResponse",
]
