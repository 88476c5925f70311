"""Result models shared by the OCR backend, aggregator, and writer.

Pages and results accept arbitrary extra fields so vendor-specific keys
returned by the OCR service (markdown, images, dimensions, usage info)
are carried through to the JSON output untouched.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OcrPage(BaseModel):
    """A single page of extracted content."""

    model_config = ConfigDict(extra="allow")

    index: int = Field(ge=0)
    text: str | None = None


class OcrResult(BaseModel):
    """Page-oriented OCR output for one document or a combined batch."""

    model_config = ConfigDict(extra="allow")

    pages: list[OcrPage] = Field(default_factory=list)
    metadata: dict[str, Any] | None = None

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible dict containing only fields that were set."""
        return self.model_dump(mode="json", exclude_unset=True)

    def to_json(self) -> str:
        """Render the result as two-space indented JSON."""
        data = self.to_dict()
        data.setdefault("pages", [])
        return json.dumps(data, indent=2, ensure_ascii=False)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OcrSuccess:
    """Outcome for a document the backend processed successfully."""

    file_path: str
    result: OcrResult
    processed_at: datetime = field(default_factory=_utcnow)

    ok = True


@dataclass(frozen=True)
class OcrFailure:
    """Outcome for a document that could not be read or processed."""

    file_path: str
    error: Exception
    processed_at: datetime = field(default_factory=_utcnow)

    ok = False

    @property
    def result(self) -> OcrResult:
        """Empty placeholder result for a failed document."""
        return OcrResult(pages=[])


ProcessedFile = OcrSuccess | OcrFailure


@dataclass
class PipelineSummary:
    """Counts and output locations for one completed batch run."""

    total: int
    successful: int
    failed: int
    individual_outputs: list[str] = field(default_factory=list)
    combined_output: str | None = None
