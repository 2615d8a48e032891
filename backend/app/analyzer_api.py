"""
Selector Analyzer API

HTTP endpoints around the analyzer core:
- POST /api/analyze    rank replacement selectors for a failed one
- GET  /api/mappings   stored replacements, optionally for one version

Settings and the mapping store live on `app.state`, set by main.create_app.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from analyzer import MappingStore, MappingStoreError, analyze_html
from analyzer_models import AnalyzeRequest, CandidateResponse, ErrorResponse, SelectorMappingResponse

# Configure logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api", tags=["Selector Analyzer"])


def get_mapping_store(request: Request) -> MappingStore:
    """Get the app's mapping store, created from its settings on first use"""
    store = getattr(request.app.state, "mapping_store", None)
    if store is None:
        store = MappingStore(mappings_dir=request.app.state.settings.mappings_dir)
        request.app.state.mapping_store = store
    return store


@router.post(
    "/analyze",
    response_model=List[CandidateResponse],
    responses={413: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
def analyze_selector(request: AnalyzeRequest):
    """Propose alternatives for a selector that no longer matches"""
    try:
        alternatives = analyze_html(request.html, request.selector)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to get alternatives"})

    return [
        CandidateResponse(
            selector=c.selector,
            confidence=c.confidence,
            element_count=c.element_count
        )
        for c in alternatives
    ]


@router.get(
    "/mappings",
    response_model=List[SelectorMappingResponse],
    responses={500: {"model": ErrorResponse}}
)
def list_mappings(
    version: Optional[str] = None,
    store: MappingStore = Depends(get_mapping_store)
):
    """Stored selector replacements, filtered by version when given"""
    try:
        mappings = store.get_mappings(version)
    except MappingStoreError as e:
        logger.error(f"Error: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to retrieve mappings"})

    return [SelectorMappingResponse(**m.to_dict()) for m in mappings]
