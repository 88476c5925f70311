"""Interface every OCR backend implements."""

from abc import ABC, abstractmethod

from pdf_ocr.models import OcrResult


class OcrProvider(ABC):
    """Turns raw document bytes into a page-oriented OCR result."""

    @abstractmethod
    async def process_file(self, content: bytes, file_name: str) -> OcrResult:
        """Run OCR over one document.

        Args:
            content: Raw file bytes.
            file_name: Base name of the document, used for the upload.

        Returns:
            The extracted pages and any backend metadata.

        Raises:
            OcrProviderError: If any step of the backend call fails.
        """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Human-readable backend name."""
