"""Persistence of individual and combined OCR results as JSON files."""

import re
from pathlib import Path

from pdf_ocr.files.file_service import FileService
from pdf_ocr.models import OcrResult, OcrSuccess
from pdf_ocr.utils.logger import get_logger

logger = get_logger(__name__)

INDIVIDUAL_PREFIX = "ocr_"
_PDF_SUFFIX = re.compile(r"\.pdf$", re.IGNORECASE)


class ResultWriter:
    """Writes OCR results under an output directory.

    Args:
        file_service: Filesystem collaborator used for all writes.
    """

    def __init__(self, file_service: FileService) -> None:
        self.file_service = file_service

    @staticmethod
    def individual_file_name(file_name: str) -> str:
        """Return the output name for a source document.

        Only a trailing ``.pdf`` (any case) is removed, so
        ``my.doc.v2.pdf`` becomes ``ocr_my.doc.v2.json``.
        """
        return f"{INDIVIDUAL_PREFIX}{_PDF_SUFFIX.sub('', file_name)}.json"

    async def write_individual_result(
        self, processed: OcrSuccess, output_dir: str | Path
    ) -> Path:
        """Write one document's result as ``ocr_<name>.json``.

        Args:
            processed: Successful outcome for the document.
            output_dir: Directory to write into; created if missing.

        Returns:
            Path of the written file.
        """
        file_name = self.file_service.get_file_name(processed.file_path)
        output_path = Path(output_dir) / self.individual_file_name(file_name)
        await self._write(processed.result, output_path)
        logger.info("Individual result saved to %s", output_path)
        return output_path

    async def write_combined_result(
        self, result: OcrResult, file_name: str, output_dir: str | Path
    ) -> Path:
        """Write the combined batch result under ``file_name``."""
        output_path = Path(output_dir) / file_name
        await self._write(result, output_path)
        logger.info("Combined result saved to %s", output_path)
        return output_path

    async def _write(self, result: OcrResult, output_path: Path) -> None:
        await self.file_service.ensure_directory(output_path.parent)
        await self.file_service.write_file(output_path, result.to_json())
