"""End-to-end batch OCR run.

Validates the input list, processes every document, aggregates the
successful results, and writes individual plus combined JSON outputs.
"""

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, Field

from pdf_ocr.exceptions import AllFilesFailedError, NoInputFilesError
from pdf_ocr.models import OcrSuccess, PipelineSummary
from pdf_ocr.ocr.document_processor import DocumentProcessor
from pdf_ocr.output.aggregator import ResultAggregator
from pdf_ocr.output.writer import ResultWriter
from pdf_ocr.utils.logger import get_logger

logger = get_logger(__name__)


class PipelineState(StrEnum):
    """Stages of a single orchestrator run."""

    IDLE = "idle"
    VALIDATING = "validating"
    PROCESSING = "processing"
    AGGREGATING = "aggregating"
    WRITING = "writing"
    DONE = "done"
    ABORTED = "aborted"


class OrchestratorOptions(BaseModel):
    """Per-run options for :class:`OcrOrchestrator`."""

    output_dir: Path = Field(default_factory=Path.cwd)
    combined_output_file: str = "result.json"
    single_file_mode: bool = False


class OcrOrchestrator:
    """Composes processing, aggregation, and writing into one batch run.

    Individual document failures are tolerated; the run aborts only when
    there is nothing to process or every document failed, and in both
    cases no output is written.

    Args:
        document_processor: Runs OCR over each file.
        result_aggregator: Combines successful results.
        result_writer: Persists individual and combined results.
    """

    def __init__(
        self,
        document_processor: DocumentProcessor,
        result_aggregator: ResultAggregator,
        result_writer: ResultWriter,
    ) -> None:
        self.document_processor = document_processor
        self.result_aggregator = result_aggregator
        self.result_writer = result_writer
        self.state = PipelineState.IDLE

    async def process_files(
        self,
        file_paths: list[str],
        options: OrchestratorOptions | None = None,
    ) -> PipelineSummary:
        """Run the full pipeline over ``file_paths``.

        Args:
            file_paths: Documents to process, in order.
            options: Output location, combined file name, and single-file mode.

        Returns:
            Counts of processed documents and the paths written.

        Raises:
            NoInputFilesError: If ``file_paths`` is empty.
            AllFilesFailedError: If no document was processed successfully.
            FileServiceError: If writing an output file fails.
        """
        options = options or OrchestratorOptions()
        self.state = PipelineState.IDLE

        self._transition(PipelineState.VALIDATING)
        if not file_paths:
            self._transition(PipelineState.ABORTED)
            raise NoInputFilesError("No PDF files provided for processing")

        self._transition(PipelineState.PROCESSING)
        files_to_process = file_paths[:1] if options.single_file_mode else file_paths
        processed = await self.document_processor.process_files(files_to_process)

        successes = [item for item in processed if isinstance(item, OcrSuccess)]
        if not successes:
            self._transition(PipelineState.ABORTED)
            raise AllFilesFailedError("All files failed to process")

        combined = None
        if len(successes) > 1:
            self._transition(PipelineState.AGGREGATING)
            combined = self.result_aggregator.combine_results(
                [item.result for item in successes]
            )

        self._transition(PipelineState.WRITING)
        summary = PipelineSummary(
            total=len(processed),
            successful=len(successes),
            failed=len(processed) - len(successes),
        )
        written: dict[str, str] = {}
        for item in successes:
            path = await self.result_writer.write_individual_result(
                item, options.output_dir
            )
            if str(path) in written:
                logger.warning(
                    "Result for %s overwrote %s written for %s",
                    item.file_path,
                    path,
                    written[str(path)],
                )
            written[str(path)] = item.file_path
            summary.individual_outputs.append(str(path))

        if combined is not None:
            path = await self.result_writer.write_combined_result(
                combined, options.combined_output_file, options.output_dir
            )
            summary.combined_output = str(path)

        self._transition(PipelineState.DONE)
        logger.info("All files processed successfully!")
        logger.info(
            "Processed %d file(s): %d succeeded, %d failed",
            summary.total,
            summary.successful,
            summary.failed,
        )
        return summary

    def _transition(self, state: PipelineState) -> None:
        logger.debug("Pipeline state %s -> %s", self.state, state)
        self.state = state
