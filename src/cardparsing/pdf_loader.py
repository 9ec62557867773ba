"""
Statement text loading via pdftotext.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from .issuers import ISSUER_FORMATS, IssuerFormat

logger = logging.getLogger(__name__)

DEFAULT_PDFTOTEXT = "pdftotext"
DEFAULT_TIMEOUT = 60.0


class StatementLoadError(Exception):
    """Exception raised when a statement document cannot be loaded."""

    def __init__(self, message: str, path: str | Path):
        super().__init__(message)
        self.path = str(path)


class ExtractionError(StatementLoadError):
    """Exception raised when text extraction fails for a document."""


class ExtractionTimeoutError(ExtractionError):
    """Exception raised when text extraction does not finish in time."""


class DueDateNotFoundError(StatementLoadError):
    """Exception raised when no due-date anchor matches the statement text."""


@dataclass(frozen=True)
class LoadedStatement:
    """Extracted statement text with the issuer and year it was matched to."""

    path: str
    text: str
    year: str
    issuer: IssuerFormat
    candidates: tuple[tuple[IssuerFormat, str], ...] = ()


def extract_text(
    path: str | Path,
    executable: str = DEFAULT_PDFTOTEXT,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> tuple[str, int]:
    """
    Run pdftotext on a document and capture the linearized text.

    Args:
        path: Path to the PDF file
        executable: pdftotext executable name or path
        timeout: Seconds to wait before giving up

    Returns:
        Tuple of extracted text and the tool's exit status
    """
    command = [executable, "-raw", str(path), "-"]
    logger.debug(f"Running {' '.join(command)}")
    try:
        completed = subprocess.run(
            command,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        raise ExtractionTimeoutError(
            f"{executable}: timed out after {timeout} seconds on {path}",
            path,
        ) from e
    except FileNotFoundError as e:
        raise ExtractionError(f"{executable} not found", path) from e

    if completed.stderr:
        logger.debug(f"{executable} stderr: {completed.stderr.strip()}")
    return completed.stdout, completed.returncode


class PDFTextLoader:
    """Loads statement text and locates its due-date anchor."""

    def __init__(
        self,
        executable: str = DEFAULT_PDFTOTEXT,
        timeout: float | None = DEFAULT_TIMEOUT,
        issuers: tuple[IssuerFormat, ...] = ISSUER_FORMATS,
    ):
        self.executable = executable
        self.timeout = timeout
        self.issuers = issuers

    def load(self, path: str | Path) -> LoadedStatement:
        """
        Extract a document's text and recover its statement year.

        Args:
            path: Path to the PDF file

        Returns:
            LoadedStatement object

        Raises:
            ExtractionError: If pdftotext fails, times out or is missing
            DueDateNotFoundError: If no issuer's due-date anchor matches
        """
        text, status = extract_text(path, self.executable, self.timeout)
        if status != 0:
            raise ExtractionError(
                f"{self.executable}: failed to parse {path} (exit code {status})",
                path,
            )

        candidates = self.match_due_dates(text)
        if not candidates:
            raise DueDateNotFoundError(
                f"parse error: could not match due date in {path}",
                path,
            )

        issuer, year = candidates[0]
        logger.info(f"Loaded {path} as {issuer.display_name} statement ({year})")
        return LoadedStatement(
            path=str(path),
            text=text,
            year=year,
            issuer=issuer,
            candidates=tuple(candidates),
        )

    def match_due_dates(self, text: str) -> list[tuple[IssuerFormat, str]]:
        """Return every issuer whose due-date anchor matches, in fallback order.

        Several issuers can share an anchor wording, so callers that need a
        single issuer take the first entry.
        """
        candidates = []
        for issuer in self.issuers:
            match = issuer.due_date_pattern.search(text)
            if match:
                logger.debug(
                    f"Matched {issuer.display_name} due date '{match.group(0)}'",
                )
                candidates.append((issuer, match.group("year")))
        return candidates

    def match_due_date(self, text: str) -> tuple[IssuerFormat, str] | None:
        """Return the first issuer whose due-date anchor matches, with its year."""
        candidates = self.match_due_dates(text)
        return candidates[0] if candidates else None
