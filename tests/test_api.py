"""Tests for the FastAPI REST endpoints."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from pdf_ocr.api.app import app
from pdf_ocr.exceptions import ConfigurationError
from pdf_ocr.files.file_service import FileService
from pdf_ocr.ocr.document_processor import DocumentProcessor
from pdf_ocr.output.aggregator import ResultAggregator


@pytest.fixture
def client() -> TestClient:
    """Create a FastAPI test client."""
    return TestClient(app)


def _pdf(name: str) -> tuple[str, tuple[str, bytes, str]]:
    return ("files", (name, b"%PDF-1.4 " + name.encode(), "application/pdf"))


class TestHealthEndpoint:
    """Tests for the /health endpoint."""

    def test_health_reports_key(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MISTRAL_API_KEY", "test-key")
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["provider"] == "Mistral AI OCR"
        assert data["api_key_configured"] is True

    def test_health_without_credentials(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MISTRAL_API_KEY", "")
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["provider"] == "Mistral AI OCR"
        assert data["api_key_configured"] is False

    def test_health_reports_backend_name(self, client: TestClient) -> None:
        with patch("pdf_ocr.api.app._get_provider_name", return_value="Fake OCR"):
            response = client.get("/health")
        assert response.json()["provider"] == "Fake OCR"


class TestOcrEndpoint:
    """Tests for the /ocr endpoint."""

    def test_combines_uploads(self, client: TestClient, provider_factory) -> None:
        processor = DocumentProcessor(provider_factory(pages_per_file=2), FileService())
        with patch(
            "pdf_ocr.api.app._get_components",
            return_value=(processor, ResultAggregator()),
        ):
            response = client.post("/ocr", files=[_pdf("a.pdf"), _pdf("b.pdf")])

        assert response.status_code == 200
        data = response.json()
        assert data["successful"] == 2
        assert data["failed"] == 0
        assert [p["index"] for p in data["result"]["pages"]] == [0, 1, 2, 3]
        assert [f["filename"] for f in data["files"]] == ["a.pdf", "b.pdf"]

    def test_partial_failure(self, client: TestClient, provider_factory) -> None:
        processor = DocumentProcessor(provider_factory(failing={"b.pdf"}), FileService())
        with patch(
            "pdf_ocr.api.app._get_components",
            return_value=(processor, ResultAggregator()),
        ):
            response = client.post("/ocr", files=[_pdf("a.pdf"), _pdf("b.pdf")])

        assert response.status_code == 200
        data = response.json()
        assert data["failed"] == 1
        assert data["files"][1]["success"] is False
        assert "boom" in data["files"][1]["error"]
        assert len(data["result"]["pages"]) == 1

    def test_all_failed(self, client: TestClient, provider_factory) -> None:
        processor = DocumentProcessor(provider_factory(failing={"a.pdf"}), FileService())
        with patch(
            "pdf_ocr.api.app._get_components",
            return_value=(processor, ResultAggregator()),
        ):
            response = client.post("/ocr", files=[_pdf("a.pdf")])

        assert response.status_code == 502

    def test_rejects_non_pdf(self, client: TestClient) -> None:
        response = client.post(
            "/ocr", files=[("files", ("notes.txt", b"hello", "text/plain"))]
        )
        assert response.status_code == 400
        assert "notes.txt" in response.json()["detail"]

    def test_missing_credentials(self, client: TestClient) -> None:
        with patch(
            "pdf_ocr.api.app._get_components",
            side_effect=ConfigurationError("Required configuration 'MISTRAL_API_KEY' is not set"),
        ):
            response = client.post("/ocr", files=[_pdf("a.pdf")])

        assert response.status_code == 503
