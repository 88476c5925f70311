"""FastAPI application exposing the OCR pipeline over HTTP.

Uploaded PDFs are processed one after another with the same failure
isolation and page renumbering as the command-line batch run.
"""

import time
from typing import Annotated

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware

from pdf_ocr import __version__
from pdf_ocr.container import Container
from pdf_ocr.exceptions import ConfigurationError
from pdf_ocr.models import OcrSuccess
from pdf_ocr.ocr.document_processor import DocumentProcessor
from pdf_ocr.output.aggregator import ResultAggregator
from pdf_ocr.utils.config import API_KEY_ENV, EnvConfig, load_config
from pdf_ocr.utils.logger import get_logger

from .schemas import FileOutcomeResponse, HealthResponse, OcrBatchResponse

logger = get_logger(__name__)

app = FastAPI(
    title="PDF OCR API",
    description="Extract page-oriented text from PDF documents with Mistral AI OCR",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_ALLOWED_CONTENT_TYPES = {"application/pdf", "application/octet-stream"}


def _get_components() -> tuple[DocumentProcessor, ResultAggregator]:
    """Initialize and return the processing components.

    Raises:
        ConfigurationError: If the OCR backend credentials are missing.
    """
    container = Container(load_config())
    return container.get_document_processor(), container.get_result_aggregator()


def _get_provider_name() -> str:
    return Container(load_config()).get_provider_name()


def _is_pdf(upload: UploadFile) -> bool:
    if upload.content_type and upload.content_type not in _ALLOWED_CONTENT_TYPES:
        return False
    return (upload.filename or "").lower().endswith(".pdf")


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Return service health and whether credentials are configured."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        provider=_get_provider_name(),
        api_key_configured=EnvConfig().has(API_KEY_ENV),
    )


@app.post("/ocr", response_model=OcrBatchResponse)
async def process_documents(
    files: Annotated[list[UploadFile], File(...)],
) -> OcrBatchResponse:
    """Run OCR over uploaded PDFs and return the combined result.

    Args:
        files: One or more uploaded PDF documents.

    Returns:
        Per-file outcomes and the combined result of the successful files.
    """
    start_time = time.time()

    rejected = [f.filename or "unknown" for f in files if not _is_pdf(f)]
    if rejected:
        raise HTTPException(
            status_code=400,
            detail=f"Only PDF files are supported: {', '.join(rejected)}",
        )

    try:
        processor, aggregator = _get_components()
    except ConfigurationError as exc:
        logger.error("OCR backend is not configured: %s", exc)
        raise HTTPException(status_code=503, detail=str(exc)) from exc

    outcomes = []
    for upload in files:
        content = await upload.read()
        outcomes.append(
            await processor.process_content(upload.filename or "document.pdf", content)
        )

    successes = [item for item in outcomes if isinstance(item, OcrSuccess)]
    if not successes:
        raise HTTPException(status_code=502, detail="All files failed to process")

    combined = aggregator.combine_results([item.result for item in successes])

    return OcrBatchResponse(
        success=True,
        total_documents=len(outcomes),
        successful=len(successes),
        failed=len(outcomes) - len(successes),
        files=[
            FileOutcomeResponse(
                filename=item.file_path,
                success=item.ok,
                page_count=item.result.page_count,
                processed_at=item.processed_at,
                error=None if item.ok else str(item.error),
            )
            for item in outcomes
        ],
        result=combined.to_dict(),
        processing_time_ms=(time.time() - start_time) * 1000,
    )
