"""Tests for combining per-document OCR results."""

from pdf_ocr.models import OcrPage, OcrResult
from pdf_ocr.output.aggregator import ResultAggregator


def _result(*indices: int, metadata: dict | None = None, **extra) -> OcrResult:
    pages = [OcrPage(index=i, text=f"p{i}") for i in indices]
    if metadata is None:
        return OcrResult(pages=pages, **extra)
    return OcrResult(pages=pages, metadata=metadata, **extra)


class TestCombineResults:
    """Tests for page concatenation and renumbering."""

    def test_no_results(self) -> None:
        combined = ResultAggregator().combine_results([])
        assert combined == OcrResult(pages=[])
        assert combined.to_dict() == {"pages": []}

    def test_single_result_unchanged(self) -> None:
        single = _result(3, 4)
        assert ResultAggregator().combine_results([single]) is single

    def test_two_documents_renumbered(self) -> None:
        combined = ResultAggregator().combine_results([_result(0, 1), _result(0, 1)])
        assert [p.index for p in combined.pages] == [0, 1, 2, 3]
        assert [p.text for p in combined.pages] == ["p0", "p1", "p0", "p1"]

    def test_offset_accumulates_per_source(self) -> None:
        combined = ResultAggregator().combine_results(
            [_result(0), _result(0, 1, 2), _result(), _result(0, 1)]
        )
        assert [p.index for p in combined.pages] == [0, 1, 2, 3, 4, 5]

    def test_first_result_indices_preserved(self) -> None:
        combined = ResultAggregator().combine_results([_result(5, 6), _result(0)])
        assert [p.index for p in combined.pages] == [5, 6, 2]

    def test_page_count_is_sum_of_inputs(self) -> None:
        inputs = [_result(0, 1, 2), _result(0), _result(0, 1)]
        combined = ResultAggregator().combine_results(inputs)
        assert combined.page_count == sum(r.page_count for r in inputs)

    def test_inputs_not_mutated(self) -> None:
        first, second = _result(0), _result(0)
        ResultAggregator().combine_results([first, second])
        assert [p.index for p in first.pages] == [0]
        assert [p.index for p in second.pages] == [0]

    def test_page_extra_fields_survive(self) -> None:
        second = OcrResult(pages=[OcrPage(index=0, markdown="# B")])
        combined = ResultAggregator().combine_results([_result(0), second])
        assert combined.pages[1].index == 1
        assert combined.pages[1].markdown == "# B"

    def test_first_result_extra_fields_kept(self) -> None:
        combined = ResultAggregator().combine_results(
            [_result(0, model="mistral-ocr-latest"), _result(0, model="other")]
        )
        assert combined.model == "mistral-ocr-latest"


class TestMetadataMerge:
    """Tests for the metadata merge rules."""

    def test_later_keys_win(self) -> None:
        combined = ResultAggregator().combine_results(
            [
                _result(0, metadata={"source": "file1", "pages": 1}),
                _result(0, metadata={"source": "file2", "totalPages": 2}),
            ]
        )
        assert combined.metadata == {"source": "file2", "pages": 1, "totalPages": 2}

    def test_dropped_when_first_has_none(self) -> None:
        combined = ResultAggregator().combine_results(
            [_result(0), _result(0, metadata={"source": "file2"})]
        )
        assert combined.metadata is None
        assert "metadata" not in combined.to_dict()

    def test_kept_when_later_has_none(self) -> None:
        combined = ResultAggregator().combine_results(
            [_result(0, metadata={"source": "file1"}), _result(0)]
        )
        assert combined.metadata == {"source": "file1"}

    def test_first_metadata_not_mutated(self) -> None:
        meta = {"source": "file1"}
        ResultAggregator().combine_results(
            [_result(0, metadata=meta), _result(0, metadata={"source": "file2"})]
        )
        assert meta == {"source": "file1"}
