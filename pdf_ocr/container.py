"""Lazy wiring of the pipeline components.

Each getter builds its component on first use and returns the same
instance afterwards. Components can also be constructed directly with
their collaborators, which is what the tests do.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from pdf_ocr.files.file_service import FileService
from pdf_ocr.files.pattern_matcher import PatternMatcher
from pdf_ocr.ocr.base import OcrProvider
from pdf_ocr.ocr.document_processor import DocumentProcessor
from pdf_ocr.ocr.mistral_provider import MistralOcrProvider
from pdf_ocr.output.aggregator import ResultAggregator
from pdf_ocr.output.writer import ResultWriter
from pdf_ocr.pipeline.orchestrator import OcrOrchestrator
from pdf_ocr.utils.config import AppConfig, EnvConfig

T = TypeVar("T")


class Container:
    """Builds and caches one instance of each pipeline component.

    Args:
        config: Application configuration. Defaults to built-in settings.
        env: Environment-backed credentials. Created on first use if omitted.
    """

    def __init__(
        self, config: AppConfig | None = None, env: EnvConfig | None = None
    ) -> None:
        self.config = config or AppConfig()
        self._instances: dict[str, Any] = {}
        if env is not None:
            self._instances["env"] = env

    def get_env(self) -> EnvConfig:
        return self._singleton("env", EnvConfig)

    def get_file_service(self) -> FileService:
        return self._singleton("file_service", FileService)

    def get_ocr_provider(self) -> OcrProvider:
        """Return the Mistral backend.

        Raises:
            ConfigurationError: If ``MISTRAL_API_KEY`` is not set.
        """
        return self._singleton(
            "ocr_provider",
            lambda: MistralOcrProvider.from_config(self.get_env(), self.config.ocr),
        )

    def get_provider_name(self) -> str:
        """Return the OCR backend name without requiring credentials."""
        provider = self._instances.get("ocr_provider")
        if provider is not None:
            return provider.provider_name
        return MistralOcrProvider.PROVIDER_NAME

    def get_pattern_matcher(self) -> PatternMatcher:
        return self._singleton(
            "pattern_matcher", lambda: PatternMatcher(self.get_file_service())
        )

    def get_document_processor(self) -> DocumentProcessor:
        return self._singleton(
            "document_processor",
            lambda: DocumentProcessor(self.get_ocr_provider(), self.get_file_service()),
        )

    def get_result_aggregator(self) -> ResultAggregator:
        return self._singleton("result_aggregator", ResultAggregator)

    def get_result_writer(self) -> ResultWriter:
        return self._singleton(
            "result_writer", lambda: ResultWriter(self.get_file_service())
        )

    def get_orchestrator(self) -> OcrOrchestrator:
        return self._singleton(
            "orchestrator",
            lambda: OcrOrchestrator(
                self.get_document_processor(),
                self.get_result_aggregator(),
                self.get_result_writer(),
            ),
        )

    def _singleton(self, key: str, factory: Callable[[], T]) -> T:
        if key not in self._instances:
            self._instances[key] = factory()
        return self._instances[key]
