"""API route definitions."""

from fastapi import APIRouter, HTTPException, Path
import logging

from ..models import (
    FieldName,
    FieldSet,
    SUGGESTIBLE_FIELDS,
    TAP_DESTINATIONS,
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
from ..services import (
    LabelExtractor,
    AssignmentResolver,
    DecisionRequired,
    FixedDecision,
    RequireDecision,
    parse_line,
    value_for_destination,
)
from ..config import get_settings
from .. import __version__

logger = logging.getLogger(__name__)
router = APIRouter()

# Initialize services
label_extractor = LabelExtractor()

NO_SUGGESTIONS = "No suggestions found"


def _check_text_length(text: str) -> None:
    settings = get_settings()
    if len(text) > settings.max_text_length:
        raise HTTPException(
            status_code=413,
            detail=f"Recognized text exceeds {settings.max_text_length} characters"
        )


def _resolve(fields: dict, field: FieldName, candidate: str, decision) -> AssignmentResponse:
    """Run one assignment; a conflict without a decision is reported, not applied."""
    field_set = FieldSet.from_mapping(fields)
    resolver = AssignmentResolver(FixedDecision(decision) if decision else RequireDecision())

    try:
        outcome = resolver.assign(field_set, field, candidate)
    except DecisionRequired as e:
        return AssignmentResponse(
            success=True,
            fields=field_set.as_dict(),
            applied=False,
            needs_decision=True,
            current_value=e.current,
            message=str(e),
        )

    return AssignmentResponse(
        success=True,
        fields=outcome.field_set.as_dict(),
        applied=outcome.applied,
        decision=outcome.decision.value if outcome.decision else None,
        current_value=field_set.get(field),
    )


@router.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check API health."""
    return HealthResponse(status="healthy", version=__version__)


@router.post("/suggestions", response_model=SuggestionsResponse, tags=["Suggestions"])
async def suggest_fields(request: TextRequest):
    """
    Suggest values for every automated field from recognized label text.

    Each list is ranked best-first, unique ignoring case, and capped.
    """
    _check_text_length(request.text)
    suggestions = label_extractor.suggest(request.text, request.limit)

    return SuggestionsResponse(
        lines=suggestions.lines,
        chemical_name=suggestions.chemical_name,
        manufacturer=suggestions.manufacturer,
        container_volume=suggestions.container_volume,
        volume_units=suggestions.volume_units,
        cas_number=suggestions.cas_number,
        cas_checksum_valid=suggestions.cas_checksum_valid,
        expiration_date=suggestions.expiration_date,
        message=NO_SUGGESTIONS if suggestions.is_empty else None,
    )


@router.post(
    "/suggestions/{field}",
    response_model=FieldCandidatesResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Field has no automated suggestions"},
    },
    tags=["Suggestions"]
)
async def suggest_field(request: TextRequest, field: FieldName = Path(..., description="Target field")):
    """Ranked candidates, with scores, for a single field."""
    if field not in SUGGESTIBLE_FIELDS:
        raise HTTPException(status_code=400, detail=f"{field.value} has no automated suggestions")
    _check_text_length(request.text)

    candidates = label_extractor.candidates_for(field, request.text, request.limit)
    return FieldCandidatesResponse(
        field=field,
        candidates=[CandidateModel(text=c.text, score=c.score) for c in candidates],
        message=None if candidates else NO_SUGGESTIONS,
    )


@router.post("/lines/parse", response_model=LineParseResponse, tags=["Lines"])
async def parse_single_line(request: LineRequest):
    """Parse volume/unit, CAS number and expiration date out of one OCR line."""
    _check_text_length(request.line)
    parsed = parse_line(request.line)
    return LineParseResponse(
        line=parsed.line,
        container_volume=parsed.container_volume,
        volume_units=parsed.volume_units,
        cas_number=parsed.cas_number,
        expiration_date=parsed.expiration_date,
    )


@router.post("/assign", response_model=AssignmentResponse, tags=["Assignment"])
async def assign_candidate(request: AssignRequest):
    """
    Write a chosen candidate into a field.

    Empty fields are set directly. If the field already has a value the
    request must carry a decision (replace, append or cancel); without one
    the record comes back unchanged with ``needs_decision`` set.
    """
    return _resolve(request.fields, request.field, request.candidate, request.decision)


@router.post(
    "/assign/line",
    response_model=AssignmentResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Field is not a line destination"},
    },
    tags=["Assignment"]
)
async def assign_line(request: AssignLineRequest):
    """Route one tapped OCR line into a field, parsing it for that field first."""
    if request.field not in TAP_DESTINATIONS:
        raise HTTPException(status_code=400, detail=f"{request.field.value} is not a line destination")
    _check_text_length(request.line)

    candidate = value_for_destination(request.line, request.field)
    return _resolve(request.fields, request.field, candidate, request.decision)


@router.post("/autofill", response_model=FieldSetResponse, tags=["Assignment"])
async def autofill_fields(request: AutofillRequest):
    """Fill the record's empty fields with the best suggestion for each."""
    _check_text_length(request.text)
    field_set = FieldSet.from_mapping(request.fields)
    updated = label_extractor.autofill(field_set, request.text)

    filled = [
        name.value for name in FieldName
        if updated.get(name) != field_set.get(name)
    ]
    logger.info(f"Autofill filled {len(filled)} fields")
    return FieldSetResponse(success=True, fields=updated.as_dict(), filled=filled)
