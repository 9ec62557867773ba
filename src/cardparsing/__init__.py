"""
Card Parsing - Convert credit card statement PDFs into ledger CSV.

This package extracts statement text with pdftotext, recognizes each
issuer's transaction lines (including records wrapped across lines), and
writes Date/Description/Amount rows for bookkeeping imports.
"""

from .issuers import ISSUER_FORMATS, DateStyle, IssuerFormat, get_issuer
from .models import Statement, Transaction
from .output_formatter import CSVFormatter, SummaryFormatter
from .parser import StatementParser
from .pdf_loader import (
    DueDateNotFoundError,
    ExtractionError,
    ExtractionTimeoutError,
    PDFTextLoader,
    StatementLoadError,
)
from .recognizer import LineItemRecognizer

__version__ = "0.1.0"
__all__ = [
    "CSVFormatter",
    "DateStyle",
    "DueDateNotFoundError",
    "ExtractionError",
    "ExtractionTimeoutError",
    "ISSUER_FORMATS",
    "IssuerFormat",
    "LineItemRecognizer",
    "PDFTextLoader",
    "Statement",
    "StatementLoadError",
    "StatementParser",
    "SummaryFormatter",
    "Transaction",
    "get_issuer",
]
