"""Shared test fixtures for the PDF OCR test suite."""

from pathlib import Path

import pytest

from pdf_ocr.exceptions import OcrProviderError
from pdf_ocr.models import OcrPage, OcrResult
from pdf_ocr.ocr.base import OcrProvider


class FakeOcrProvider(OcrProvider):
    """In-memory OCR backend returning one page per call.

    Names listed in ``failing`` raise :class:`OcrProviderError`.
    """

    def __init__(self, failing: set[str] | None = None, pages_per_file: int = 1) -> None:
        self.failing = failing or set()
        self.pages_per_file = pages_per_file
        self.calls: list[tuple[bytes, str]] = []

    @property
    def provider_name(self) -> str:
        return "Fake OCR"

    async def process_file(self, content: bytes, file_name: str) -> OcrResult:
        self.calls.append((content, file_name))
        if file_name in self.failing:
            raise OcrProviderError(f"OCR processing failed for file {file_name}: boom")
        return OcrResult(
            pages=[
                OcrPage(index=i, text=f"{file_name} page {i + 1}")
                for i in range(self.pages_per_file)
            ]
        )


@pytest.fixture
def fake_provider() -> FakeOcrProvider:
    """Return an OCR backend that succeeds for every file."""
    return FakeOcrProvider()


@pytest.fixture
def two_page_result() -> OcrResult:
    """Create a two-page result indexed from zero."""
    return OcrResult(
        pages=[OcrPage(index=0, text="Page 1"), OcrPage(index=1, text="Page 2")]
    )


@pytest.fixture
def pdf_dir(tmp_path: Path) -> Path:
    """Create a directory with a few small PDF-like files."""
    for name in ("b.pdf", "a.pdf", "C.PDF"):
        (tmp_path / name).write_bytes(b"%PDF-1.4 " + name.encode())
    (tmp_path / "notes.txt").write_text("not a pdf")
    return tmp_path


@pytest.fixture
def provider_factory() -> type[FakeOcrProvider]:
    """Return the fake backend class for tests that configure failures."""
    return FakeOcrProvider


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent
