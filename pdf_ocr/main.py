"""Entry point for the PDF OCR API server.

Bind address comes from the ``api`` section of the configuration file and
can be overridden on the command line::

    pdf-ocr-server --host 0.0.0.0 --port 9000
"""

import argparse
from pathlib import Path

import uvicorn

from pdf_ocr.api.app import app
from pdf_ocr.utils.config import load_config
from pdf_ocr.utils.logger import setup_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdf-ocr-server",
        description="Serve the PDF OCR pipeline over HTTP.",
    )
    parser.add_argument("-c", "--config", type=Path, default=None, help="YAML config file")
    parser.add_argument("--host", default=None, help="Interface to bind")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Start the FastAPI application under uvicorn."""
    args = _build_parser().parse_args(argv)
    config = load_config(args.config)
    setup_logging(config.log_level)

    host = args.host or config.api.host
    port = args.port if args.port is not None else config.api.port
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
