"""Pydantic response schemas for the FastAPI endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class FileOutcomeResponse(BaseModel):
    """Outcome for a single uploaded document."""

    filename: str
    success: bool
    page_count: int = 0
    processed_at: datetime
    error: str | None = None


class OcrBatchResponse(BaseModel):
    """Response schema for an OCR request over one or more uploads."""

    success: bool
    total_documents: int
    successful: int
    failed: int
    files: list[FileOutcomeResponse]
    result: dict[str, Any]
    processing_time_ms: float


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    provider: str
    api_key_configured: bool
