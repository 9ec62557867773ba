"""
Main parser class that orchestrates the conversion process.
"""

import logging
from pathlib import Path
from typing import TextIO

from .issuers import ISSUER_FORMATS, IssuerFormat, get_issuer
from .models import Statement, Transaction
from .output_formatter import CSVFormatter, SummaryFormatter
from .pdf_loader import DEFAULT_PDFTOTEXT, DEFAULT_TIMEOUT, PDFTextLoader
from .recognizer import LineItemRecognizer

logger = logging.getLogger(__name__)


class StatementParser:
    """Main parser class for card statements."""

    def __init__(
        self,
        pdftotext: str = DEFAULT_PDFTOTEXT,
        timeout: float | None = DEFAULT_TIMEOUT,
        issuer: str | None = None,
        delimiter: str = ",",
    ):
        issuers = (get_issuer(issuer),) if issuer else ISSUER_FORMATS
        self.loader = PDFTextLoader(pdftotext, timeout, issuers)
        self.csv_formatter = CSVFormatter(delimiter)
        self.summary_formatter = SummaryFormatter()

    def parse_file(self, file_path: str | Path) -> Statement:
        """
        Convert one statement PDF into its line items.

        Args:
            file_path: Path to the PDF file

        Returns:
            Statement object

        Raises:
            StatementLoadError: If the text cannot be extracted or has no due date
        """
        loaded = self.loader.load(file_path)
        candidates = loaded.candidates or ((loaded.issuer, loaded.year),)
        # Issuers sharing a due-date anchor: keep the first that recognizes rows
        for issuer, year in candidates:
            line_items = LineItemRecognizer(issuer).scan(loaded.text, year)
            if line_items:
                break
            logger.debug(f"No {issuer.display_name} transactions in {loaded.path}")
        else:
            issuer, year = candidates[0]
        return self._build_statement(loaded.path, issuer, line_items)

    def parse_text(
        self,
        text: str,
        year: str,
        issuer: IssuerFormat,
        path: str = "<text>",
    ) -> Statement:
        """Recognize line items in already extracted statement text."""
        line_items = LineItemRecognizer(issuer).scan(text, year)
        return self._build_statement(path, issuer, line_items)

    def _build_statement(
        self,
        path: str,
        issuer: IssuerFormat,
        line_items: list[Transaction],
    ) -> Statement:
        if not line_items:
            logger.warning(f"No transactions recognized in {path}")
        else:
            logger.info(f"Recognized {len(line_items)} transactions in {path}")
        return Statement(path=path, issuer=issuer.name, line_items=tuple(line_items))

    def write_header(self, stream: TextIO) -> None:
        self.csv_formatter.write_header(stream)

    def write_statement(self, statement: Statement, stream: TextIO) -> int:
        return self.csv_formatter.write_statement(statement, stream)

    def format_csv(self, statements: list[Statement]) -> str:
        """Format statements as ledger CSV."""
        return self.csv_formatter.format_csv(statements)

    def format_summary(self, statements: list[Statement]) -> str:
        """Format summary information."""
        return self.summary_formatter.format_summary(statements)
