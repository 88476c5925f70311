"""Merging of per-document OCR results into one combined result."""

from pdf_ocr.models import OcrResult
from pdf_ocr.utils.logger import get_logger

logger = get_logger(__name__)


class ResultAggregator:
    """Concatenates OCR results and renumbers their page indices.

    Pages of the first result keep their indices. Every later result's
    pages are shifted by the number of pages accumulated before it, so a
    batch of documents that each start at index 0 becomes one contiguous
    sequence.

    Metadata is shallow-merged, later keys winning, but only while the
    accumulated result already carries metadata: if the first result has
    none, metadata from later results is dropped.
    """

    def combine_results(self, results: list[OcrResult]) -> OcrResult:
        """Combine results in order.

        Args:
            results: Per-document OCR results.

        Returns:
            An empty result for no input, the input itself for a single
            result, otherwise a new combined result. Inputs are not modified.
        """
        if not results:
            return OcrResult(pages=[])

        if len(results) == 1:
            return results[0]

        first = results[0]
        pages = list(first.pages)
        metadata = dict(first.metadata) if first.metadata is not None else None
        offset = len(pages)

        for result in results[1:]:
            pages.extend(
                page.model_copy(update={"index": page.index + offset})
                for page in result.pages
            )
            offset += len(result.pages)

            if result.metadata is not None and metadata is not None:
                metadata = {**metadata, **result.metadata}

        update: dict = {"pages": pages}
        if metadata is not None:
            update["metadata"] = metadata
        combined = first.model_copy(update=update)

        logger.info(
            "Combined %d results into %d pages", len(results), combined.page_count
        )
        return combined
