"""PDF OCR batch processor.

Sends PDF documents through the Mistral AI OCR service and writes
per-document and combined page-oriented JSON results.
"""

__version__ = "1.0.0"
