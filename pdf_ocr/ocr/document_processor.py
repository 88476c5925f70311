"""Per-document OCR processing with failure isolation.

Drives an OCR backend over a list of PDF files one at a time. A file that
cannot be read or processed produces an :class:`OcrFailure` outcome
instead of aborting the batch.
"""

from datetime import datetime, timezone

from pdf_ocr.files.file_service import FileService
from pdf_ocr.models import OcrFailure, OcrSuccess, ProcessedFile
from pdf_ocr.utils.logger import get_logger

from .base import OcrProvider

logger = get_logger(__name__)


class DocumentProcessor:
    """Sequential document processing pipeline.

    Args:
        ocr_provider: Backend that extracts pages from document bytes.
        file_service: Filesystem collaborator used to read documents.
    """

    def __init__(self, ocr_provider: OcrProvider, file_service: FileService) -> None:
        self.ocr_provider = ocr_provider
        self.file_service = file_service

    async def process_files(self, file_paths: list[str]) -> list[ProcessedFile]:
        """Process documents strictly in order.

        Args:
            file_paths: Paths of the documents to process.

        Returns:
            One outcome per input path, in input order.
        """
        results: list[ProcessedFile] = []
        for file_path in file_paths:
            logger.info("Processing %s...", file_path)
            results.append(await self.process_file(file_path))
        return results

    async def process_file(self, file_path: str) -> ProcessedFile:
        """Read one document and run it through the OCR backend.

        Args:
            file_path: Path of the document.

        Returns:
            :class:`OcrSuccess` with the backend result, or
            :class:`OcrFailure` carrying the error that stopped it.
        """
        processed_at = datetime.now(timezone.utc)

        try:
            content = await self.file_service.read_file(file_path)
            file_name = self.file_service.get_file_name(file_path)
            result = await self.ocr_provider.process_file(content, file_name)
        except Exception as exc:
            logger.error("Error processing file %s: %s", file_path, exc)
            return OcrFailure(file_path=file_path, error=exc, processed_at=processed_at)

        logger.info("Processed %d page(s) from %s", result.page_count, file_path)
        return OcrSuccess(file_path=file_path, result=result, processed_at=processed_at)

    async def process_content(self, file_name: str, content: bytes) -> ProcessedFile:
        """Run document bytes that are already in memory, such as an upload."""
        processed_at = datetime.now(timezone.utc)

        try:
            result = await self.ocr_provider.process_file(content, file_name)
        except Exception as exc:
            logger.error("Error processing upload %s: %s", file_name, exc)
            return OcrFailure(file_path=file_name, error=exc, processed_at=processed_at)

        return OcrSuccess(file_path=file_name, result=result, processed_at=processed_at)
