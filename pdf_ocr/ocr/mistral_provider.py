"""Mistral AI OCR backend using httpx.

A document goes through three REST calls: upload the file with
``purpose=ocr``, request a signed download URL for it, then ask the OCR
endpoint to process that URL.
"""

from typing import Any

import httpx
from pydantic import ValidationError

from pdf_ocr.exceptions import ConfigurationError, OcrProviderError
from pdf_ocr.models import OcrResult
from pdf_ocr.ocr.base import OcrProvider
from pdf_ocr.utils.config import API_KEY_ENV, EnvConfig, OCRConfig
from pdf_ocr.utils.logger import get_logger

logger = get_logger(__name__)


class MistralOcrProvider(OcrProvider):
    """OCR backend backed by the Mistral AI document OCR API.

    Args:
        api_key: Mistral API key.
        model: OCR model identifier.
        base_url: API root, without a trailing slash.
        timeout_s: Per-request timeout in seconds.
        signed_url_expiry_hours: Lifetime of the signed document URL.
        transport: Optional httpx transport, used to stub the API in tests.

    Raises:
        ConfigurationError: If ``api_key`` is empty.
    """

    PROVIDER_NAME = "Mistral AI OCR"

    def __init__(
        self,
        api_key: str,
        model: str = "mistral-ocr-latest",
        base_url: str = "https://api.mistral.ai/v1",
        timeout_s: float = 120.0,
        signed_url_expiry_hours: int = 24,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError(f"Required configuration '{API_KEY_ENV}' is not set")
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.signed_url_expiry_hours = signed_url_expiry_hours
        self._transport = transport
        self._headers = {"Authorization": f"Bearer {api_key}"}

    @classmethod
    def from_config(
        cls, env: EnvConfig, ocr_config: OCRConfig | None = None
    ) -> "MistralOcrProvider":
        """Build a provider from environment credentials and OCR settings."""
        ocr_config = ocr_config or OCRConfig()
        return cls(
            api_key=env.get_required(API_KEY_ENV),
            model=ocr_config.model,
            base_url=ocr_config.api_base,
            timeout_s=ocr_config.timeout_s,
            signed_url_expiry_hours=ocr_config.signed_url_expiry_hours,
        )

    @property
    def provider_name(self) -> str:
        return self.PROVIDER_NAME

    async def process_file(self, content: bytes, file_name: str) -> OcrResult:
        """Upload a document and return its OCR result.

        Raises:
            OcrProviderError: If the upload, URL signing, or OCR call fails,
                or the response cannot be parsed.
        """
        async with httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._headers,
            timeout=self.timeout_s,
            transport=self._transport,
        ) as client:
            try:
                file_id = await self._upload(client, content, file_name)
                signed_url = await self._get_signed_url(client, file_id)
                payload = await self._run_ocr(client, signed_url)
                result = OcrResult.model_validate(payload)
            except (httpx.HTTPError, KeyError, TypeError, ValueError, ValidationError) as exc:
                raise OcrProviderError(
                    f"OCR processing failed for file {file_name}: {exc}"
                ) from exc

        logger.info("Extracted %d page(s) from %s", result.page_count, file_name)
        return result

    async def _upload(
        self, client: httpx.AsyncClient, content: bytes, file_name: str
    ) -> str:
        response = await client.post(
            "/files",
            files={"file": (file_name, content, "application/pdf")},
            data={"purpose": "ocr"},
        )
        response.raise_for_status()
        file_id = response.json()["id"]
        logger.debug("Uploaded %s as file %s", file_name, file_id)
        return file_id

    async def _get_signed_url(self, client: httpx.AsyncClient, file_id: str) -> str:
        response = await client.get(
            f"/files/{file_id}/url",
            params={"expiry": self.signed_url_expiry_hours},
        )
        response.raise_for_status()
        return response.json()["url"]

    async def _run_ocr(self, client: httpx.AsyncClient, document_url: str) -> Any:
        response = await client.post(
            "/ocr",
            json={
                "model": self.model,
                "document": {"type": "document_url", "document_url": document_url},
            },
        )
        response.raise_for_status()
        return response.json()
