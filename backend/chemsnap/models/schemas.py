"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Optional

from .fields import AssignmentDecision, FieldName


class TextRequest(BaseModel):
    """Recognized label text from the OCR collaborator."""
    text: str = Field(..., description="Raw OCR text for one photograph")
    limit: Optional[int] = Field(None, ge=1, le=50, description="Shortlist size (default 6)")
    
    class Config:
        json_schema_extra = {
            "example": {
                "text": "Total Organic Carbon Std 2000 ppm w/w\nAqua Solutions\n500 mL",
            }
        }


class LineRequest(BaseModel):
    """A single OCR line selected by the user."""
    line: str


class CandidateModel(BaseModel):
    """A proposed field value."""
    text: str
    score: int = 0


class SuggestionsResponse(BaseModel):
    """Ranked suggestions for every automated field."""
    lines: list[str]
    chemical_name: list[str]
    manufacturer: list[str]
    container_volume: list[str]
    volume_units: list[str]
    cas_number: str = ""
    cas_checksum_valid: bool = False
    expiration_date: str = ""
    message: Optional[str] = None


class FieldCandidatesResponse(BaseModel):
    """Ranked candidates for one field."""
    field: FieldName
    candidates: list[CandidateModel]
    message: Optional[str] = None


class LineParseResponse(BaseModel):
    """Values parsed from a single OCR line."""
    line: str
    container_volume: str = ""
    volume_units: str = ""
    cas_number: str = ""
    expiration_date: str = ""


class AssignRequest(BaseModel):
    """Write a chosen candidate into a field of the client's record."""
    fields: dict[FieldName, Optional[str]] = Field(default_factory=dict)
    field: FieldName
    candidate: str
    decision: Optional[AssignmentDecision] = Field(
        None, description="Required when the field already has a value"
    )
    
    class Config:
        json_schema_extra = {
            "example": {
                "fields": {"chemicalName": "Acetone"},
                "field": "chemicalName",
                "candidate": "Acetone, ACS Reagent",
                "decision": "append",
            }
        }


class AssignLineRequest(BaseModel):
    """Route one tapped OCR line into a field."""
    fields: dict[FieldName, Optional[str]] = Field(default_factory=dict)
    field: FieldName
    line: str
    decision: Optional[AssignmentDecision] = None


class AutofillRequest(BaseModel):
    """Fill empty fields of the client's record from OCR text."""
    fields: dict[FieldName, Optional[str]] = Field(default_factory=dict)
    text: str


class AssignmentResponse(BaseModel):
    """Outcome of an assignment."""
    success: bool
    fields: dict[str, str]
    applied: bool = False
    needs_decision: bool = False
    decision: Optional[str] = None
    current_value: Optional[str] = None
    message: Optional[str] = None


class FieldSetResponse(BaseModel):
    """A full record after autofill."""
    success: bool
    fields: dict[str, str]
    filled: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Standard error response."""
    success: bool = False
    error: str
    detail: Optional[str] = None
    
    class Config:
        json_schema_extra = {
            "example": {
                "success": False,
                "error": "Invalid field",
                "detail": "quantity has no automated suggestions"
            }
        }


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
