# src/routers/metadata.py
# Responsibility: Handles metadata extraction endpoints. Validates input and formats output.

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, HttpUrl

from src.config.settings import settings
from src.services.metadata_service import MetadataResult, MetadataService, get_metadata_service

router = APIRouter(
    prefix="/metadata",
    tags=["Metadata"]
)

# --- Pydantic Models ---
class ExtractRequest(BaseModel):
    html: str
    url: Optional[str] = None

# --- Endpoints ---
@router.post("/extract", response_model=MetadataResult)
def extract_endpoint(
    req: ExtractRequest,
    service: MetadataService = Depends(get_metadata_service)
):
    """
    Extracts schema.org article metadata from an HTML document supplied by the caller.
    """
    if len(req.html) > settings.EXTRACTOR.MAX_HTML_CHARS:
        raise HTTPException(status_code=413, detail="HTML document too large")

    return service.extract(req.html, url=req.url or "")

@router.get("", response_model=MetadataResult)
def fetch_endpoint(
    url: HttpUrl = Query(..., description="Page to fetch and analyze"),
    service: MetadataService = Depends(get_metadata_service)
):
    """
    Fetches a page and extracts its schema.org article metadata.
    """
    result = service.fetch_and_extract(str(url))
    if result is None:
        raise HTTPException(status_code=502, detail="Could not fetch an HTML document from url")
    return result
