"""Command-line interface for batch PDF OCR.

Expands file paths and glob patterns into PDF documents, sends them
through Mistral AI OCR, and writes ``ocr_<name>.json`` per document plus
a combined result when more than one document succeeds.
"""

import argparse
import asyncio
import sys
from pathlib import Path

from pdf_ocr.container import Container
from pdf_ocr.exceptions import PdfOcrError
from pdf_ocr.models import PipelineSummary
from pdf_ocr.pipeline.orchestrator import OrchestratorOptions
from pdf_ocr.utils.config import API_KEY_ENV, AppConfig, EnvConfig, load_config
from pdf_ocr.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

_EPILOG = f"""\
Environment variables:
  {API_KEY_ENV}         Required API key for Mistral AI (may be set in .env)

Examples:
  pdf-ocr sample.pdf
  pdf-ocr --output results.json "docs/*.pdf"
  pdf-ocr -o custom.json file1.pdf file2.pdf
"""


async def process_ocr(
    pdf_files: list[str],
    output_dir: Path | None = None,
    combined_output_file: str = "result.json",
    single_file_mode: bool = False,
    config: AppConfig | None = None,
) -> PipelineSummary:
    """Run the OCR pipeline over already-resolved PDF paths.

    Args:
        pdf_files: PDF paths to process, in order.
        output_dir: Output directory. Defaults to the working directory.
        combined_output_file: File name of the combined result.
        single_file_mode: Process only the first file.
        config: Application configuration for the OCR backend.

    Returns:
        Summary of the completed run.

    Raises:
        ConfigurationError: If the API key is not configured.
        PipelineError: If there is nothing to process or all files failed.
    """
    container = Container(config)
    options = OrchestratorOptions(
        output_dir=output_dir or Path.cwd(),
        combined_output_file=combined_output_file,
        single_file_mode=single_file_mode,
    )
    return await container.get_orchestrator().process_files(pdf_files, options)


async def run(args: argparse.Namespace, config: AppConfig) -> PipelineSummary | None:
    """Resolve patterns and run the pipeline for parsed CLI arguments.

    Returns:
        The run summary, or ``None`` if no PDF files matched.
    """
    container = Container(config)
    files = await container.get_pattern_matcher().expand_patterns(args.files)
    if not files:
        return None

    print(f"Found {len(files)} PDF file(s) to process.")
    output = config.output
    options = OrchestratorOptions(
        output_dir=Path(output.output_dir) if output.output_dir else Path.cwd(),
        combined_output_file=output.combined_output_file,
        single_file_mode=output.single_file_mode,
    )
    return await container.get_orchestrator().process_files(files, options)


def _print_summary(summary: PipelineSummary) -> None:
    """Print batch processing summary to stdout."""
    print(f"\n{'=' * 50}")
    print("OCR Processing Complete")
    print(f"{'=' * 50}")
    print(f"Total:      {summary.total}")
    print(f"Successful: {summary.successful}")
    print(f"Failed:     {summary.failed}")
    if summary.combined_output:
        print(f"Combined:   {summary.combined_output}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdf-ocr",
        description="Process PDF files using the Mistral AI OCR API.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "files",
        nargs="*",
        help='PDF file(s) to process. Supports glob patterns like "*.pdf"',
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output_file",
        help="Output file name for the combined result (default: result.json)",
    )
    parser.add_argument(
        "-d",
        "--output-dir",
        type=Path,
        help="Directory for all output files (default: current directory)",
    )
    parser.add_argument(
        "--single",
        action="store_true",
        help="Process only the first matching file",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="YAML configuration file (default: configs/config.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def _apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    output = config.output.model_copy()
    if args.output_file:
        output.combined_output_file = args.output_file
    if args.output_dir:
        output.output_dir = str(args.output_dir)
    if args.single:
        output.single_file_mode = True
    return config.model_copy(update={"output": output})


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the OCR pipeline.

    Args:
        argv: Command-line arguments (defaults to sys.argv).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = _apply_overrides(load_config(args.config), args)
    setup_logging("DEBUG" if args.verbose else config.log_level)

    if not args.files:
        print(
            "Error: No input files specified. Please provide at least one PDF "
            "file or pattern.\nUse --help for usage information.",
            file=sys.stderr,
        )
        sys.exit(1)

    if not EnvConfig().has(API_KEY_ENV):
        print(
            f"Error: {API_KEY_ENV} environment variable is not set.\n"
            "Please set the API key in your .env file or environment variables.",
            file=sys.stderr,
        )
        sys.exit(1)

    try:
        summary = asyncio.run(run(args, config))
    except PdfOcrError as exc:
        logger.error("OCR run failed: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if summary is None:
        print("Error: No PDF files found matching the provided patterns.", file=sys.stderr)
        sys.exit(1)

    _print_summary(summary)


if __name__ == "__main__":
    main()
