"""Exception hierarchy for the PDF OCR pipeline."""


class PdfOcrError(Exception):
    """Base exception for the PDF OCR pipeline."""


class ConfigurationError(PdfOcrError):
    """Raised when required configuration or credentials are missing."""


class FileServiceError(PdfOcrError):
    """Raised when reading, writing, or creating a path fails."""


class OcrProviderError(PdfOcrError):
    """Raised when the OCR backend fails to upload, sign, or process a file."""


class PipelineError(PdfOcrError):
    """Raised when a batch run must abort before writing any output."""


class NoInputFilesError(PipelineError):
    """Raised when the pipeline is started with an empty file list."""


class AllFilesFailedError(PipelineError):
    """Raised when every document in a batch failed to process."""
