from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class AnalyzeRequest(BaseModel):
    """Page markup plus the selector that failed on it"""
    html: str
    selector: str = Field(..., min_length=1)


class CandidateResponse(BaseModel):
    """A ranked replacement selector"""
    model_config = ConfigDict(populate_by_name=True)

    selector: str
    confidence: float
    element_count: int = Field(..., alias="elementCount")


class SelectorMappingResponse(BaseModel):
    """A stored selector replacement"""
    original_selector: str
    replacement_selector: str
    version: Optional[str] = None
    confidence: float = 1.0
    created_at: str


class ErrorResponse(BaseModel):
    error: str
